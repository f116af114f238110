"""
System clipboard writer for the terminal app.

Pipes text to the first platform clipboard tool found on PATH.
"""

from __future__ import annotations

import logging
import shutil
import subprocess
from typing import Optional

logger = logging.getLogger(__name__)

# Tried in order; first one installed wins.
CLIPBOARD_COMMANDS: tuple[tuple[str, ...], ...] = (
    ("pbcopy",),
    ("wl-copy",),
    ("xclip", "-selection", "clipboard"),
    ("xsel", "--clipboard", "--input"),
    ("clip",),
)


class ClipboardUnavailable(RuntimeError):
    """No clipboard tool could take the text."""


def find_clipboard_command() -> Optional[tuple[str, ...]]:
    """Return the first clipboard command available on PATH, or None."""
    for cmd in CLIPBOARD_COMMANDS:
        if shutil.which(cmd[0]):
            return cmd
    return None


def system_clipboard(text: str, timeout: float = 5.0) -> None:
    """Copy text to the system clipboard."""
    cmd = find_clipboard_command()
    if cmd is None:
        raise ClipboardUnavailable(
            "No clipboard tool found. Install one of: "
            + ", ".join(c[0] for c in CLIPBOARD_COMMANDS)
        )

    logger.debug("Copying %d characters with %s", len(text), cmd[0])
    try:
        subprocess.run(cmd, input=text.encode("utf-8"), check=True,
                       capture_output=True, timeout=timeout)
    except (OSError, subprocess.SubprocessError) as e:
        raise ClipboardUnavailable(f"{cmd[0]} failed: {e}") from e
