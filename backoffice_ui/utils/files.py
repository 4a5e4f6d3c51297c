"""Filesystem helpers for uploads and downloads."""

from __future__ import annotations

import itertools
import logging
import os
import time
from pathlib import Path

from PIL import Image, ImageDraw

logger = logging.getLogger("backoffice-ui.files")

POLL_INTERVAL_S = 0.1


def generate_image(path: str | os.PathLike, width: int = 200, height: int = 200) -> str:
    """Write a placeholder PNG at *path* and return its absolute path."""
    target = Path(path).expanduser().resolve()
    target.parent.mkdir(parents=True, exist_ok=True)

    image = Image.new("RGB", (width, height), color=(37, 185, 215))
    draw = ImageDraw.Draw(image)
    draw.rectangle((0, 0, width - 1, height - 1), outline=(54, 54, 54))
    draw.line((0, 0, width - 1, height - 1), fill=(54, 54, 54))
    image.save(target, format="PNG")

    logger.debug("Generated %dx%d image at %s", width, height, target)
    return str(target)


def does_file_exist(path: str | os.PathLike, timeout_ms: int = 5000) -> bool:
    """Poll until *path* exists or *timeout_ms* elapses."""
    target = Path(path)
    deadline = time.monotonic() + timeout_ms / 1000
    while True:
        if target.exists():
            return True
        if time.monotonic() >= deadline:
            return target.exists()
        time.sleep(POLL_INTERVAL_S)


def unique_path(directory: Path, filename: str) -> Path:
    """Return *directory*/*filename*, suffixed with ``-1``, ``-2``... while taken."""
    target = directory / filename
    stem, suffix = target.stem, target.suffix
    counter = itertools.count(1)
    while target.exists():
        target = directory / f"{stem}-{next(counter)}{suffix}"
    return target


def delete_file(path: str | os.PathLike) -> None:
    """Remove *path* if present."""
    try:
        Path(path).unlink()
    except FileNotFoundError:
        logger.debug("Nothing to delete at %s", path)
