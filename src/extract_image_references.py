# src/extract_image_references.py

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Iterator, List

# ![[name]]、![[name|alt]]、![[name#anchor|alt]]：name 不含 ] | #
WIKI_EMBED_RE = re.compile(r"!\[\[([^\]|#]+)(#[^\]|]*)?(?:\|([^\]]*))?\]\]")
# ![alt](name)：name 不含空白與右括號
MARKDOWN_EMBED_RE = re.compile(r"!\[([^\]]*)\]\(([^\s)]+)\)")


@dataclass(frozen=True)
class ImageReference:
    """文件中一處圖片嵌入。raw_name 是去重的依據（完全相同字串才算同一張）。"""
    raw_name: str


def iter_image_embeds(content: str) -> Iterator[ImageReference]:
    """依序產生所有嵌入：先掃完 wiki 形式，再掃 markdown 形式。"""
    for match in WIKI_EMBED_RE.finditer(content):
        name = match.group(1).strip()
        if name:
            yield ImageReference(name)

    for match in MARKDOWN_EMBED_RE.finditer(content):
        yield ImageReference(match.group(2).strip())


def extract_image_references(content: str) -> List[str]:
    """回傳不重複的圖片名稱，依第一次出現的順序（wiki 先於 markdown）。"""
    names: List[str] = []
    seen = set()
    for ref in iter_image_embeds(content):
        if ref.raw_name in seen:
            continue
        seen.add(ref.raw_name)
        names.append(ref.raw_name)
    return names
