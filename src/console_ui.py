# src/console_ui.py

from typing import Optional


class ConsoleUI:
    """命令列版的使用者互動：輸入文字、確認、通知。"""

    def __init__(self, assume_yes=False, logger=None):
        self.assume_yes = assume_yes
        self.logger = logger

    def prompt_text(self, title: str, default: Optional[str] = None) -> Optional[str]:
        """
        詢問一段文字。直接按 Enter 使用 default；輸入 q 或 EOF / Ctrl+C 視為取消，回傳 None。
        """
        hint = f" [{default}]" if default else ""
        while True:
            try:
                value = input(f"✏️ {title}{hint}：").strip()
            except (EOFError, KeyboardInterrupt):
                print()
                return None

            if value.lower() == "q":
                return None
            if value:
                return value
            if default:
                return default
            print("⚠️ 請輸入內容，或輸入 q 取消。")

    def confirm(self, message: str) -> bool:
        if self.assume_yes:
            self.notify(f"{message}（--yes：自動確認）")
            return True
        try:
            answer = input(f"❓ {message} [y/N]：").strip().lower()
        except (EOFError, KeyboardInterrupt):
            print()
            return False
        return answer in ("y", "yes")

    def notify(self, message: str) -> None:
        if self.logger:
            self.logger.log(f"📣 {message}")
            if self.logger.verbose:
                return
        print(message)
