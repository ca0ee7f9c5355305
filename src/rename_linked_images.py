# src/rename_linked_images.py

import argparse
import os
import sys

import yaml

from console_ui import ConsoleUI
from convert_note_links import TO_MARKDOWN, TO_WIKI, convert_note_links
from generate_image_name import generate_example
from image_rename_utils.logger import Logger
from rename_errors import NoInput, RenameImagesError, UserCancelled
from rename_images_in_note import rename_images_in_note
from settings_store import SETTINGS_DIR_NAME, default_settings_path, load_settings, save_settings, update_setting
from vault_store import VaultStore


def run_command(step_func, *args, ui, log, name=None):
    """
    執行單一指令並統一處理錯誤：
    - UserCancelled：靜默結束
    - NoInput：顯示一則訊息後結束
    - 其他失敗：顯示錯誤訊息，回傳 1
    """
    log.log(f"🚀 執行指令：{name}")
    status = 0
    try:
        step_func(*args)
        log.log(f"✅ {name} 完成")
    except UserCancelled:
        log.log("🛑 使用者取消。")
    except NoInput as e:
        ui.notify(str(e))
    except (RenameImagesError, OSError, ValueError, yaml.YAMLError) as e:
        ui.notify(f"❌ {name} 失敗: {e}")
        status = 1
    finally:
        saved = log.save()
        if saved and log.verbose:
            print(f"📄 Log 儲存於 {saved}")
    return status


def resolve_note_path(vault_path, note):
    if os.path.isabs(note) or os.path.exists(note):
        return os.path.abspath(note)
    return os.path.join(vault_path, note)


def show_settings(settings, settings_path):
    print(f"⚙️ 設定檔：{settings_path}\n")
    print(yaml.dump(settings.to_dict(), allow_unicode=True, sort_keys=False).rstrip())
    print(f"\n🖼️ 檔名示例：{generate_example(settings)}")


def configure(args, settings, settings_path):
    if args.config_action == "set":
        settings = update_setting(settings, args.key, args.value)
        save_settings(settings, settings_path)
        print(f"✅ 已更新 {args.key} = {getattr(settings, args.key)!r}")
        show_settings(settings, settings_path)
    elif args.config_action == "example":
        print(generate_example(settings))
    else:
        show_settings(settings, settings_path)
    return settings


def build_parser():
    parser = argparse.ArgumentParser(
        prog="rename-linked-images",
        description="重新命名筆記中引用的圖片，並同步更新 ![[...]] 與 ![](...) 連結",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  rename-linked-images --vault ~/Notes rename Daily/2025-11-28.md
  rename-linked-images --vault ~/Notes rename note.md --prefix img -y
  rename-linked-images --vault ~/Notes to-markdown note.md
  rename-linked-images --vault ~/Notes config set date_format YYMMDD
""",
    )
    parser.add_argument("--vault", default=os.getcwd(), help="Vault 根目錄（預設：目前目錄）")
    parser.add_argument("--config", help="設定檔路徑（預設：<vault>/.rename_linked_images/settings.yaml）")
    parser.add_argument("--log", help="log 檔路徑（預設：<vault>/.rename_linked_images/<指令>.log）")
    parser.add_argument("-y", "--yes", action="store_true", help="不詢問，直接確認")
    parser.add_argument("-v", "--verbose", action="store_true", help="印出詳細 log")

    sub = parser.add_subparsers(dest="command", required=True)

    rename = sub.add_parser("rename", help="重新命名筆記中的圖片並更新連結")
    rename.add_argument("note", help="筆記路徑（.md）")
    rename.add_argument("--prefix", help="圖片前綴；未指定時會詢問，預設值取自設定")

    to_markdown = sub.add_parser(TO_MARKDOWN, help="把 ![[...]] 轉為 ![](...)")
    to_markdown.add_argument("note")
    to_wiki = sub.add_parser(TO_WIKI, help="把 ![](...) 轉為 ![[...]]")
    to_wiki.add_argument("note")

    config = sub.add_parser("config", help="查看或修改設定")
    config_sub = config.add_subparsers(dest="config_action")
    config_sub.add_parser("show", help="顯示目前設定")
    config_sub.add_parser("example", help="顯示依目前設定產生的檔名示例")
    config_set = config_sub.add_parser("set", help="修改單一設定並存檔")
    config_set.add_argument("key", help="prefix / use_date / date_format / start_index / pad_length / link_format")
    config_set.add_argument("value")

    return parser


def main(argv=None):
    args = build_parser().parse_args(argv)
    vault_path = os.path.abspath(os.path.expanduser(args.vault))
    settings_path = args.config or default_settings_path(vault_path)
    log_path = args.log or os.path.join(vault_path, SETTINGS_DIR_NAME, f"{args.command}.log")

    log = Logger(log_path, verbose=args.verbose, title=f"🖼️ {args.command} Log")
    ui = ConsoleUI(assume_yes=args.yes, logger=log)

    try:
        settings = load_settings(settings_path)
    except (OSError, ValueError, yaml.YAMLError) as e:
        print(f"❌ 無法讀取設定檔 {settings_path}: {e}", file=sys.stderr)
        return 1

    if args.command == "config":
        return run_command(configure, args, settings, settings_path, ui=ui, log=log, name="config")

    store = VaultStore(vault_path)
    note_path = resolve_note_path(vault_path, args.note)

    if args.command == "rename":
        return run_command(
            rename_images_in_note, note_path, store, ui, settings, log, args.prefix,
            ui=ui, log=log, name="rename",
        )
    return run_command(convert_note_links, note_path, store, ui, args.command, log, ui=ui, log=log, name=args.command)


if __name__ == "__main__":
    sys.exit(main())
