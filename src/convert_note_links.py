# src/convert_note_links.py

from convert_link_syntax import markdown_to_wiki, wiki_to_markdown
from rename_errors import NoInput, PersistenceFailure
from rename_images_in_note import check_note

TO_MARKDOWN = "to-markdown"
TO_WIKI = "to-wiki"

CONVERTERS = {
    TO_MARKDOWN: (wiki_to_markdown, "Markdown"),
    TO_WIKI: (markdown_to_wiki, "Wiki"),
}


def convert_note_links(note_path, store, ui, direction, log):
    """把筆記中的圖片嵌入全部轉成另一種語法。沒有可轉換的內容時拋出 NoInput。"""
    check_note(note_path, store)
    convert, label = CONVERTERS[direction]

    content = store.read(note_path)
    new_content = convert(content, log=log)
    if new_content == content:
        raise NoInput(f"沒有需要轉換成 {label} 格式的圖片連結")

    try:
        store.write(note_path, new_content)
    except OSError as e:
        raise PersistenceFailure(store.relpath(note_path), e) from e

    ui.notify(f"已將 {store.relpath(note_path)} 的圖片連結轉換為 {label} 格式")
    return new_content
