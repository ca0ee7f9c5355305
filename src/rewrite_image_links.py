# src/rewrite_image_links.py

import re
from typing import Dict

LINK_FORMAT_WIKI = "wiki"
LINK_FORMAT_MARKDOWN = "markdown"
LINK_FORMATS = (LINK_FORMAT_WIKI, LINK_FORMAT_MARKDOWN)


def format_wiki_embed(name, alt=None, anchor=None):
    anchor = anchor or ""
    return f"![[{name}{anchor}|{alt}]]" if alt else f"![[{name}{anchor}]]"


def format_markdown_embed(name, alt=None):
    return f"![{alt or ''}]({name})"


def build_embed_pattern(names):
    """把舊檔名（已跳脫）組成同時比對兩種嵌入語法的單一 pattern。"""
    # 長的名字放前面，避免 a.png 先吃掉 a.png.png 的前段
    alternatives = "|".join(re.escape(n) for n in sorted(names, key=len, reverse=True))
    return re.compile(
        rf"(?P<wiki>!\[\[\s*(?P<wiki_name>{alternatives})\s*(?P<anchor>#[^\]|]*)?(?:\|(?P<wiki_alt>[^\]]*))?\]\])"
        rf"|(?P<markdown>!\[(?P<md_alt>[^\]]*)\]\((?P<md_name>{alternatives})\))"
    )


def rewrite_image_links(content: str, rename_map: Dict[str, str], link_format: str = LINK_FORMAT_WIKI, log=None) -> str:
    """
    依 rename_map 改寫文件中所有圖片嵌入（wiki 與 markdown 兩種語法、全部出現處）。

    - wiki 嵌入保持 wiki 語法，保留 #anchor 與 |alt
    - markdown 嵌入依 link_format 輸出：wiki 時 alt 變成 |alt；markdown 時只換檔名
    - 不在 rename_map 內的嵌入一字不改

    沒有任何替換時回傳原本的 content 物件，呼叫端可直接比較是否需要寫回。
    """
    if not rename_map:
        return content

    pattern = build_embed_pattern(rename_map.keys())

    def replace(match):
        if match.group("wiki"):
            old_name = match.group("wiki_name")
            new_name = rename_map[old_name]
            replacement = format_wiki_embed(new_name, match.group("wiki_alt"), match.group("anchor"))
        else:
            old_name = match.group("md_name")
            new_name = rename_map[old_name]
            alt = match.group("md_alt")
            if link_format == LINK_FORMAT_MARKDOWN:
                replacement = format_markdown_embed(new_name, alt)
            else:
                replacement = format_wiki_embed(new_name, alt)

        if log:
            log(f"🔁 改寫: {match.group(0)} → {replacement}")
        return replacement

    new_content, count = pattern.subn(replace, content)
    if count == 0:
        return content
    if log:
        log(f"✅ 共改寫 {count} 處圖片連結")
    return new_content
