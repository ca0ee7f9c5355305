# src/convert_link_syntax.py

from extract_image_references import MARKDOWN_EMBED_RE, WIKI_EMBED_RE
from rewrite_image_links import format_markdown_embed, format_wiki_embed


def _to_markdown_target(name: str) -> str:
    # markdown 連結目標不能含空白，改寫成 %20 才能被再次解析
    return name.strip().replace(" ", "%20")


def _to_wiki_name(target: str) -> str:
    # 只還原 %20；其他跳脫（%7C、%5D、%23…）解碼後會破壞 wiki 語法，保留原樣
    return target.replace("%20", " ")


def wiki_to_markdown(content: str, log=None) -> str:
    """![[name]] / ![[name|alt]] → ![alt](name)；#anchor 接在目標後面。"""
    def replace(match):
        if not match.group(1).strip():
            return match.group(0)
        target = _to_markdown_target(match.group(1)) + (match.group(2) or "")
        replacement = format_markdown_embed(target, match.group(3))
        if log:
            log(f"🔁 轉換: {match.group(0)} → {replacement}")
        return replacement

    return WIKI_EMBED_RE.sub(replace, content)


def markdown_to_wiki(content: str, log=None) -> str:
    """![alt](name) → ![[name]]（alt 為空）或 ![[name|alt]]。"""
    def replace(match):
        replacement = format_wiki_embed(_to_wiki_name(match.group(2)), match.group(1))
        if log:
            log(f"🔁 轉換: {match.group(0)} → {replacement}")
        return replacement

    return MARKDOWN_EMBED_RE.sub(replace, content)
