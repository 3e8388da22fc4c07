import os
from rich.console import Console
from rich.markup import escape

# Writes to whatever sys.stderr is at print time.
err_console = Console(stderr=True, highlight=False)

_debug = os.environ.get("AUTOTOUCH_DEBUG", "") not in ("", "0")


def set_debug(enabled: bool) -> None:
    global _debug
    _debug = enabled


def display_text(text: str) -> str:
    """``text`` with surrogate-escaped (non UTF-8) bytes shown as U+FFFD."""
    return text.encode("utf-8", "surrogateescape").decode("utf-8", "replace")


def error(message: str) -> None:
    err_console.print(f"[red]Error:[/] {escape(display_text(message))}", soft_wrap=True)


def debug(message: str) -> None:
    if _debug:
        err_console.print(f"[dim]{escape(display_text(message))}[/]", soft_wrap=True)
