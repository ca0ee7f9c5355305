# src/settings_store.py

from __future__ import annotations

import os
from dataclasses import asdict, dataclass, fields, replace

import yaml

from generate_image_name import DATE_FORMAT_MMDD, DATE_FORMATS
from image_rename_utils.get_safe_path import get_safe_path
from rewrite_image_links import LINK_FORMAT_WIKI, LINK_FORMATS

SETTINGS_DIR_NAME = ".rename_linked_images"
SETTINGS_FILENAME = "settings.yaml"

TRUE_WORDS = {"1", "true", "yes", "y", "on"}
FALSE_WORDS = {"0", "false", "no", "n", "off"}


@dataclass(frozen=True)
class RenameSettings:
    """整個工具共用的設定；啟動時載入一次，透過 update_setting 修改後立即存檔。"""
    prefix: str = "zd"
    use_date: bool = True
    date_format: str = DATE_FORMAT_MMDD
    start_index: int = 1
    pad_length: int = 3
    link_format: str = LINK_FORMAT_WIKI

    @staticmethod
    def from_dict(d: dict) -> "RenameSettings":
        """以預設值為底，覆蓋 d 中已知的欄位；未知欄位忽略。"""
        known = {f.name for f in fields(RenameSettings)}
        values = {k: v for k, v in (d or {}).items() if k in known}
        settings = RenameSettings()
        for key, value in values.items():
            settings = update_setting(settings, key, value)
        return settings

    def to_dict(self) -> dict:
        return asdict(self)


def default_settings_path(vault_path: str) -> str:
    return os.path.join(vault_path, SETTINGS_DIR_NAME, SETTINGS_FILENAME)


def _parse_bool(key, value):
    if isinstance(value, bool):
        return value
    word = str(value).strip().lower()
    if word in TRUE_WORDS:
        return True
    if word in FALSE_WORDS:
        return False
    raise ValueError(f"{key} 必須是 true/false，收到 {value!r}")


def _parse_int(key, value, minimum):
    if isinstance(value, bool):
        raise ValueError(f"{key} 必須是整數，收到 {value!r}")
    try:
        number = int(str(value).strip())
    except ValueError:
        raise ValueError(f"{key} 必須是整數，收到 {value!r}") from None
    if number < minimum:
        raise ValueError(f"{key} 不可小於 {minimum}，收到 {number}")
    return number


def _parse_choice(key, value, choices):
    text = str(value).strip()
    if text not in choices:
        raise ValueError(f"{key} 必須是 {' / '.join(choices)} 之一，收到 {value!r}")
    return text


def update_setting(settings: RenameSettings, key: str, value) -> RenameSettings:
    """解析並驗證單一欄位，回傳新的 RenameSettings（原物件不變）。"""
    if key == "prefix":
        parsed = str(value).strip()
    elif key == "use_date":
        parsed = _parse_bool(key, value)
    elif key == "date_format":
        parsed = _parse_choice(key, value, DATE_FORMATS)
    elif key == "start_index":
        parsed = _parse_int(key, value, 0)
    elif key == "pad_length":
        parsed = _parse_int(key, value, 1)
    elif key == "link_format":
        parsed = _parse_choice(key, value, LINK_FORMATS)
    else:
        known = ", ".join(f.name for f in fields(RenameSettings))
        raise ValueError(f"未知的設定項目 {key!r}（可用：{known}）")
    return replace(settings, **{key: parsed})


def load_settings(settings_path: str) -> RenameSettings:
    """讀取 YAML 設定檔；檔案不存在時回傳預設值。格式錯誤時拋出例外。"""
    p = get_safe_path(settings_path)
    if not os.path.exists(p):
        return RenameSettings()

    with open(p, "r", encoding="utf-8") as f:
        raw = yaml.safe_load(f) or {}
    if not isinstance(raw, dict):
        raise ValueError(f"設定檔格式錯誤（應為 key: value）：{settings_path}")
    return RenameSettings.from_dict(raw)


def save_settings(settings: RenameSettings, settings_path: str) -> str:
    p = get_safe_path(settings_path)
    settings_dir = os.path.dirname(p)
    if settings_dir:
        os.makedirs(settings_dir, exist_ok=True)
    with open(p, "w", encoding="utf-8") as f:
        yaml.dump(settings.to_dict(), f, allow_unicode=True, sort_keys=False)
    return settings_path
