from __future__ import annotations

import os
import sys

from note_aggregator.core.errors import ClipboardWriteFailure
from note_aggregator.logging_setup import log


# On X11 the clipboard contents are served by the process that set them.
# Once this process exits the text survives only if a clipboard manager
# (or another app) has taken it over; without one the clipboard ends up
# empty and no error is reported. Use --stdout or --output on such setups.
def _has_display() -> bool:
    if not sys.platform.startswith("linux"):
        return True
    return bool(
        os.environ.get("DISPLAY")
        or os.environ.get("WAYLAND_DISPLAY")
        or os.environ.get("QT_QPA_PLATFORM")
    )


def _gui_app():
    from PySide6.QtGui import QGuiApplication

    app = QGuiApplication.instance()
    if app is None:
        app = QGuiApplication([])
    return app


def set_clipboard_text(text: str) -> None:
    """
    Put `text` on the system clipboard through Qt.
    Raises ClipboardWriteFailure when there is no usable clipboard.
    """
    if not _has_display():
        raise ClipboardWriteFailure("No display available for the clipboard.")

    try:
        app = _gui_app()
        clipboard = app.clipboard()
        clipboard.setText(text)
        # let the platform plugin take ownership before we return
        app.processEvents()
    except ClipboardWriteFailure:
        raise
    except Exception as exc:
        log.exception("Clipboard write failed")
        raise ClipboardWriteFailure(f"Failed to write to the clipboard: {exc}") from exc

    log.debug("Clipboard updated: chars=%d", len(text))


async def write_clipboard_text(text: str) -> None:
    # Qt objects live on the thread that created the application
    set_clipboard_text(text)
