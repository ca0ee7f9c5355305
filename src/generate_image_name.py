# src/generate_image_name.py

from __future__ import annotations

import re
from datetime import datetime
from typing import Optional

DATE_FORMAT_MMDD = "MMDD"
DATE_FORMAT_DDMM = "DDMM"
DATE_FORMAT_YYMMDD = "YYMMDD"
DATE_FORMATS = (DATE_FORMAT_MMDD, DATE_FORMAT_DDMM, DATE_FORMAT_YYMMDD)

DEFAULT_EXTENSION = ".png"


def format_date(when: datetime, use_date: bool = True, date_format: str = DATE_FORMAT_MMDD) -> str:
    """依設定把日期轉為檔名用字串；未知格式一律退回 MMDD。"""
    if not use_date:
        return ""

    month = f"{when.month:02d}"
    day = f"{when.day:02d}"
    if date_format == DATE_FORMAT_DDMM:
        return day + month
    if date_format == DATE_FORMAT_YYMMDD:
        return f"{when.year % 100:02d}" + month + day
    return month + day


def get_extension(raw_name: str) -> str:
    """取最後一個 . 之後（含 .）的副檔名，沒有 . 時預設 .png。"""
    dot = raw_name.rfind(".")
    if dot == -1:
        return DEFAULT_EXTENSION
    return raw_name[dot:]


def generate_image_name(date_str: str, index: int, extension: str, prefix: str, pad_length: int = 3) -> str:
    # 補零只是最小寬度，序號位數超過 pad_length 時不截斷
    padded_index = str(index).zfill(pad_length)
    return f"{prefix}{date_str}-{padded_index}{extension}"


def canonical_name_pattern(prefix: str, date_str: str, pad_length: int) -> re.Pattern:
    return re.compile(rf"{re.escape(prefix)}{re.escape(date_str)}-[0-9]{{{pad_length}}}\.\w+")


def is_canonical_name(name: str, prefix: str, date_str: str, pad_length: int) -> bool:
    """name 是否已符合 <prefix><date>-<剛好 pad_length 位數字>.<ext>。"""
    return canonical_name_pattern(prefix, date_str, pad_length).fullmatch(name) is not None


def generate_example(settings, now: Optional[datetime] = None) -> str:
    """設定預覽：以目前設定與今天日期產生第一張圖的檔名。"""
    date_str = format_date(now or datetime.now(), settings.use_date, settings.date_format)
    return generate_image_name(
        date_str,
        settings.start_index,
        DEFAULT_EXTENSION,
        settings.prefix,
        settings.pad_length,
    )
