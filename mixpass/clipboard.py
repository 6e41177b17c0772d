"""
Clipboard helpers.

copy_to_clipboard() tries the Qt application clipboard first and falls back
to the platform's clipboard command. Failures are logged and reported as a
False outcome, never raised.
"""

from __future__ import annotations

import logging
import platform
import shutil
import subprocess
from dataclasses import dataclass, field
from typing import Callable, List, Optional

logger = logging.getLogger(__name__)

ClipboardWriter = Callable[[str], bool]


@dataclass(frozen=True)
class CopyOutcome:
    copied: bool
    # "qt", "system" or None when nothing succeeded
    method: Optional[str] = None

    def __bool__(self) -> bool:
        return self.copied


def qt_clipboard_write(text: str) -> bool:
    """
    Write through the running Qt application's clipboard.

    Needs a QGuiApplication instance; without one there is no clipboard.
    """
    from PySide6.QtGui import QGuiApplication

    app = QGuiApplication.instance()
    if app is None:
        return False

    clipboard = QGuiApplication.clipboard()
    clipboard.setText(text)
    return clipboard.text() == text


def system_clipboard_command(system: Optional[str] = None) -> Optional[List[str]]:
    """
    Return the command that reads stdin into the clipboard, or None.
    """
    system = system or platform.system()
    if system == "Darwin":
        return ["pbcopy"]
    if system == "Windows":
        return ["clip"]
    if system == "Linux":
        if shutil.which("xclip"):
            return ["xclip", "-selection", "clipboard"]
        if shutil.which("xsel"):
            return ["xsel", "--clipboard", "--input"]
    return None


def system_clipboard_write(text: str) -> bool:
    cmd = system_clipboard_command()
    if cmd is None:
        logger.info("No clipboard command available on %s", platform.system())
        return False

    subprocess.run(cmd, input=text, text=True, check=True, timeout=5)
    return True


@dataclass
class ClipboardCopier:
    """
    Ordered list of clipboard mechanisms, tried until one succeeds.
    """

    mechanisms: List[tuple[str, ClipboardWriter]] = field(
        default_factory=lambda: [
            ("qt", qt_clipboard_write),
            ("system", system_clipboard_write),
        ]
    )

    def copy(self, text: str) -> CopyOutcome:
        if not text:
            return CopyOutcome(False)

        for name, write in self.mechanisms:
            try:
                if write(text):
                    logger.debug("Copied %d chars via %s clipboard", len(text), name)
                    return CopyOutcome(True, name)
            except Exception as exc:  # noqa: BLE001
                logger.warning("Clipboard copy via %s failed: %s", name, exc)
                continue
            logger.debug("Clipboard mechanism %s declined", name)

        logger.warning("Could not copy to clipboard")
        return CopyOutcome(False)


def copy_to_clipboard(text: str, copier: ClipboardCopier | None = None) -> bool:
    return (copier or ClipboardCopier()).copy(text).copied
