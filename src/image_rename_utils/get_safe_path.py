# src/image_rename_utils/get_safe_path.py

import os


def get_safe_path(path) -> str:
    r"""在 Windows 上為路徑加上長路徑前綴 `\\?\`，其他系統原樣回傳。

    - 已帶有前綴（含 UNC 形式）的路徑不會重複加上。
    - 接受 str 或 Path。
    """
    if path is None:
        return ""

    s = os.fspath(path)
    if os.name != "nt":
        return s

    s = s.replace("/", "\\")
    if s.startswith("\\\\?\\"):
        return s

    s_abs = os.path.abspath(s)
    if s_abs.startswith("\\\\"):  # UNC：\\server\share\path
        return "\\\\?\\UNC\\" + s_abs.lstrip("\\")
    return "\\\\?\\" + s_abs


def to_vault_relative(path, vault_path) -> str:
    """回傳相對於 vault 根目錄、以 / 分隔的路徑（log 與提示訊息用）。"""
    try:
        return os.path.relpath(path, vault_path).replace("\\", "/")
    except ValueError:
        # Windows 上不同磁碟機無法取相對路徑
        return os.fspath(path).replace("\\", "/")
