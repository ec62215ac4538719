"""File naming and saving utilities."""

from pathlib import Path

from ..config import SAFE_FILENAME_CHARS
from ..logging_setup import log


def sanitize_txt(*texts: str) -> list[str]:
    """
    Make each of *texts* safe to use as a file or directory name.

    Slashes and backslashes become '-'; anything outside letters, digits
    and ``-_.() `` is dropped.  Returns one result per input, in order.
    """
    sanitized = []
    for text in texts:
        text = str(text).replace("/", "-").replace("\\", "-")
        sanitized.append("".join(c for c in text if c in SAFE_FILENAME_CHARS))
    return sanitized


def save_text(local_path: Path, text: str) -> None:
    """Write *text* as UTF-8 (no BOM) to *local_path*, creating parents."""
    data = text.encode("utf-8")
    local_path.parent.mkdir(parents=True, exist_ok=True)
    local_path.write_bytes(data)
    log.debug("[SAVE] %s (%d bytes)", local_path, len(data))

