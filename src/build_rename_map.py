# src/build_rename_map.py

from __future__ import annotations

from typing import Dict, Iterable

from generate_image_name import generate_image_name, get_extension, is_canonical_name


def build_rename_map(references: Iterable[str], prefix: str, date_str: str, settings, log=None) -> Dict[str, str]:
    """
    依文件中出現順序為每張圖片產生新檔名。

    Args:
        references: extract_image_references() 的結果（已去重、保序）
        prefix (str): 本次使用的前綴（使用者輸入，或設定中的預設值）
        date_str (str): format_date() 的結果，不含日期時為空字串
        settings (RenameSettings): 取 start_index 與 pad_length
        log (callable): 可選，記錄略過的檔名

    Returns:
        Dict[str, str]: 舊名 → 新名；已是標準名稱者不列入
    """
    rename_map: Dict[str, str] = {}
    index = settings.start_index

    for old_name in references:
        if old_name in rename_map:
            continue
        if is_canonical_name(old_name, prefix, date_str, settings.pad_length):
            if log:
                log(f"☑️ 已是標準名稱，略過：{old_name}")
            continue

        # 序號單調遞增，同一次執行內新名稱不會重複
        rename_map[old_name] = generate_image_name(
            date_str, index, get_extension(old_name), prefix, settings.pad_length
        )
        index += 1

    return rename_map
