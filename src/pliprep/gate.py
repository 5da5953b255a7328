"""Input file gate. Only recognized source files reach the tokenizer."""

from __future__ import annotations

from collections.abc import Iterable
from pathlib import Path

from pliprep.errors import SourceFileError, UnsupportedFileError
from pliprep.logger import get_logger
from pliprep.report import split_lines

log = get_logger(__name__)

SOURCE_EXTENSIONS: tuple[str, ...] = (".pp", ".pli")


def normalize_extensions(extensions: Iterable[str]) -> tuple[str, ...]:
    """Lower-case extensions and make sure each has a leading dot."""
    result = []
    for ext in extensions:
        ext = ext.strip().lower()
        if not ext:
            continue
        if not ext.startswith("."):
            ext = "." + ext
        result.append(ext)
    return tuple(result)


def is_source_file(path: Path, extensions: Iterable[str] = SOURCE_EXTENSIONS) -> bool:
    """Return True if ``path`` ends in one of ``extensions`` (case-insensitive)."""
    return path.suffix.lower() in normalize_extensions(extensions)


def check_source_file(path: Path, extensions: Iterable[str] = SOURCE_EXTENSIONS) -> Path:
    """Accept ``path`` or raise.

    Raises UnsupportedFileError (after logging a warning) for an unknown
    extension, and SourceFileError when the file does not exist.
    """
    allowed = normalize_extensions(extensions)
    if not is_source_file(path, allowed):
        log.warning("rejecting %s: extension must be one of %s", path, ", ".join(allowed))
        raise UnsupportedFileError(path, allowed)
    if not path.is_file():
        raise SourceFileError(path, "no such file")
    return path


def read_source_lines(path: Path) -> list[str]:
    """Read an accepted file and return its lines without line endings."""
    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise SourceFileError(path, str(exc)) from exc
    return split_lines(text)
