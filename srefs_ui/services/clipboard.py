from __future__ import annotations
from typing import Optional, Protocol

import pyperclip

from srefs_ui.utils.errors import ClipboardWriteFailure
from srefs_ui.utils.logging import logger
from srefs_ui.utils.typing import CopyResult


class Clipboard(Protocol):
    def write(self, text: str) -> CopyResult: ...


class PyperclipClipboard:
    """System clipboard through pyperclip.

    This is the clipboard of the machine running the Streamlit server, not the
    visitor's browser. Headless deployments should set SREFS_CLIPBOARD=memory.
    """

    def _copy(self, text: str) -> None:
        try:
            pyperclip.copy(text)
        except pyperclip.PyperclipException as e:
            raise ClipboardWriteFailure(str(e) or "no clipboard mechanism available") from e

    def write(self, text: str) -> CopyResult:
        try:
            self._copy(text)
            return CopyResult(True)
        except ClipboardWriteFailure as e:
            return CopyResult(False, f"Failed to copy to clipboard: {e}")
        except Exception as e:
            logger.debug("clipboard: unexpected %s from pyperclip", type(e).__name__)
            return CopyResult(False, f"Failed to copy to clipboard: {e}")


class MemoryClipboard:
    def __init__(self) -> None:
        self.value: Optional[str] = None

    def write(self, text: str) -> CopyResult:
        self.value = text
        return CopyResult(True)


def create_clipboard(backend: str) -> Clipboard:
    if backend == "memory":
        return MemoryClipboard()
    return PyperclipClipboard()
