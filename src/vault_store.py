# src/vault_store.py

from __future__ import annotations

import os
from datetime import datetime
from typing import Optional
from urllib.parse import unquote

from image_rename_utils.get_safe_path import get_safe_path, to_vault_relative
from rename_errors import TargetCollision
from settings_store import SETTINGS_DIR_NAME


class VaultStore:
    """以本機資料夾作為 vault：讀寫筆記、解析圖片連結、重新命名檔案。"""

    def __init__(self, vault_path):
        self.vault_path = os.path.abspath(vault_path)

    def relpath(self, path) -> str:
        return to_vault_relative(path, self.vault_path)

    def read(self, note_path) -> str:
        with open(get_safe_path(note_path), "r", encoding="utf-8") as f:
            return f.read()

    def write(self, note_path, text: str) -> None:
        """寫回筆記並保留原本的存取/修改時間，檔名日期才不會因改寫而變動。"""
        p = get_safe_path(note_path)
        st = os.stat(p) if os.path.exists(p) else None
        with open(p, "w", encoding="utf-8") as f:
            f.write(text)
        if st is not None:
            os.utime(p, ns=(st.st_atime_ns, st.st_mtime_ns))

    def exists(self, path) -> bool:
        return os.path.exists(get_safe_path(path))

    def note_timestamp(self, note_path) -> datetime:
        """筆記建立時間；系統不提供建立時間時改用修改時間。"""
        st = os.stat(get_safe_path(note_path))
        ts = getattr(st, "st_birthtime", None) or st.st_mtime
        return datetime.fromtimestamp(ts)

    def resolve_reference(self, name: str, relative_to) -> Optional[str]:
        """
        找出連結名稱對應的檔案，回傳絕對路徑或 None：
        1. 相對於筆記所在資料夾
        2. 相對於 vault 根目錄
        （以上兩步也會以 URL 解碼後的名稱再試一次）
        3. 在整個 vault 中以檔名搜尋，取層級最淺者
        """
        s = (name or "").strip().replace("\\", "/")
        if not s:
            return None

        note_dir = os.path.dirname(os.path.abspath(relative_to))
        for candidate_name in dict.fromkeys((s, unquote(s))):
            for base in (note_dir, self.vault_path):
                candidate = os.path.normpath(os.path.join(base, candidate_name))
                if os.path.isfile(get_safe_path(candidate)):
                    return candidate

        basename = os.path.basename(unquote(s))
        if not basename:
            return None
        matches = []
        for root, dirs, files in os.walk(self.vault_path):
            dirs[:] = [d for d in dirs if d != SETTINGS_DIR_NAME]
            if basename in files:
                matches.append(os.path.join(root, basename))
        if not matches:
            return None
        return min(matches, key=lambda p: (self.relpath(p).count("/"), p))

    def rename(self, path, new_path) -> str:
        """重新命名單一檔案；目標已存在時拋出 TargetCollision。"""
        if self.exists(new_path):
            raise TargetCollision(self.relpath(new_path))
        os.rename(get_safe_path(path), get_safe_path(new_path))
        return new_path
