# src/rename_images_in_note.py

from __future__ import annotations

import os
from dataclasses import dataclass, field
from typing import Dict, List, Optional

from build_rename_map import build_rename_map
from extract_image_references import extract_image_references
from generate_image_name import format_date
from rename_errors import NoInput, PersistenceFailure, ReferenceUnresolvable, TargetCollision, UserCancelled
from rewrite_image_links import rewrite_image_links


@dataclass
class RenameResult:
    rename_map: Dict[str, str]
    renamed: Dict[str, str] = field(default_factory=dict)
    skipped: List[str] = field(default_factory=list)
    content_changed: bool = False


def check_note(note_path, store):
    if not note_path or not store.exists(note_path):
        raise NoInput("請先指定一個存在的筆記")
    if os.path.splitext(note_path)[1].lower() != ".md":
        raise NoInput("只支援 Markdown 檔案")


def rename_image_files(rename_map: Dict[str, str], note_path, store, log) -> Dict[str, str]:
    """
    逐一重新命名圖片檔案，新檔案留在原本的資料夾。
    單張失敗只記錄並略過，不中止其他圖片。

    Returns:
        Dict[str, str]: 實際重新命名成功的 舊名 → 新名
    """
    # 先解析全部連結再改名：同一檔案的不同寫法（例如空白與 %20）必須指向同一個新名
    resolved = {old_name: store.resolve_reference(old_name, note_path) for old_name in rename_map}

    renamed = {}
    renamed_paths = {}
    failed_paths = set()
    for old_name, new_name in rename_map.items():
        old_path = resolved[old_name]
        if old_path in renamed_paths:
            renamed[old_name] = renamed_paths[old_path]
            log.log(f"🔗 {old_name} 與已改名的檔案相同 → {renamed[old_name]}")
            continue
        if old_path is not None and old_path in failed_paths:
            log.warn(f"同一檔案已改名失敗，略過：{old_name}")
            continue
        try:
            if old_path is None:
                raise ReferenceUnresolvable(old_name)
            new_path = os.path.join(os.path.dirname(old_path), new_name)
            store.rename(old_path, new_path)
        except (ReferenceUnresolvable, TargetCollision) as e:
            log.warn(str(e))
            failed_paths.add(old_path)
            continue
        except OSError as e:
            log.error(f"重新命名失敗 {old_name} → {new_name}: {e}")
            failed_paths.add(old_path)
            continue

        renamed[old_name] = new_name
        renamed_paths[old_path] = new_name
        log.log(f"🔁 重新命名: {store.relpath(old_path)} → {store.relpath(new_path)}")
    return renamed


def rename_images_in_note(note_path, store, ui, settings, log, prefix: Optional[str] = None) -> RenameResult:
    """
    重新命名筆記中引用的所有圖片，並同步更新筆記內的連結。

    Args:
        note_path (str): 筆記的完整路徑
        store (VaultStore): 讀寫筆記、解析連結、重新命名檔案
        ui (ConsoleUI): 詢問前綴、確認、通知
        settings (RenameSettings): 目前設定
        log (Logger): 記錄每一步
        prefix (str): 已知前綴時不再詢問

    Returns:
        RenameResult
    """
    check_note(note_path, store)
    log.log(f"📄 筆記：{store.relpath(note_path)}")

    content = store.read(note_path)
    references = extract_image_references(content)
    if not references:
        raise NoInput("未找到圖片連結")
    log.log(f"🔍 找到 {len(references)} 個圖片連結")

    if not prefix:
        prefix = ui.prompt_text("輸入圖片前綴（例如: zd, img, pic）", default=settings.prefix)
    if not prefix:
        raise UserCancelled()

    date_str = format_date(store.note_timestamp(note_path), settings.use_date, settings.date_format)
    rename_map = build_rename_map(references, prefix, date_str, settings, log=log)
    if not rename_map:
        raise NoInput("沒有需要重新命名的圖片")

    for old_name, new_name in rename_map.items():
        log.log(f"  {old_name} → {new_name}")
    if not ui.confirm(f"找到 {len(rename_map)} 個圖片需要重新命名，是否繼續？"):
        raise UserCancelled()

    result = RenameResult(rename_map=rename_map)
    result.renamed = rename_image_files(rename_map, note_path, store, log)
    result.skipped = [name for name in rename_map if name not in result.renamed]
    if not result.renamed:
        raise NoInput("沒有圖片被重新命名")

    # 只改寫實際改名成功的連結，略過的圖片仍指向原檔
    new_content = rewrite_image_links(content, result.renamed, settings.link_format, log=log)
    if new_content is not content:
        try:
            store.write(note_path, new_content)
        except OSError as e:
            raise PersistenceFailure(store.relpath(note_path), e) from e
        result.content_changed = True

    message = f"成功重新命名 {len(result.renamed)} 個圖片檔案"
    if result.skipped:
        message += f"（略過 {len(result.skipped)} 個）"
    ui.notify(message)
    return result
