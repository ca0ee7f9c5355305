# src/rename_errors.py


class RenameImagesError(Exception):
    """所有可預期錯誤的基底類別；訊息會直接顯示給使用者。"""


class UserCancelled(RenameImagesError):
    """使用者取消輸入或拒絕確認：靜默中止。"""


class NoInput(RenameImagesError):
    """沒有可處理的內容（沒有筆記、不是 .md、找不到圖片、無需轉換）。"""


class ReferenceUnresolvable(RenameImagesError):
    """連結中的圖片名稱找不到對應檔案。單張略過，不中止整批。"""

    def __init__(self, name):
        super().__init__(f"圖片不存在: {name}")
        self.name = name


class TargetCollision(RenameImagesError):
    """目標檔名已存在。單張略過，不中止整批。"""

    def __init__(self, path):
        super().__init__(f"目標檔案已存在: {path}")
        self.path = path


class PersistenceFailure(RenameImagesError):
    """寫回筆記失敗，整個操作視為失敗。"""

    def __init__(self, path, cause):
        super().__init__(f"無法寫入 {path}: {cause}")
        self.path = path
        self.cause = cause
