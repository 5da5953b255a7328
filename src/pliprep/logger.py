"""Namespaced logging for pliprep.

Every module asks for its logger through :func:`get_logger` so that a single
handler on the ``pliprep`` logger controls all output.
"""

from __future__ import annotations

import logging
from typing import TextIO

_ROOT = "pliprep"
_FORMAT = "%(levelname)s %(name)s: %(message)s"


def get_logger(name: str) -> logging.Logger:
    """Get a logger for the given name, prefixed with ``pliprep.``.

    Example:
        >>> get_logger("gate").name
        'pliprep.gate'
    """
    if not (name == _ROOT or name.startswith(f"{_ROOT}.")):
        name = f"{_ROOT}.{name}"
    return logging.getLogger(name)


def configure_logging(level: int, stream: TextIO | None = None) -> logging.Handler:
    """Attach a single stream handler to the ``pliprep`` logger.

    Repeated calls replace the previously installed handler rather than
    stacking a new one.
    """
    root = logging.getLogger(_ROOT)
    previous_level = root.level
    for handler in list(root.handlers):
        if getattr(handler, "_pliprep", False):
            previous_level = getattr(handler, "_previous_level", previous_level)
            root.removeHandler(handler)

    handler = logging.StreamHandler(stream)
    handler.setFormatter(logging.Formatter(_FORMAT))
    handler._pliprep = True  # type: ignore[attr-defined]
    handler._previous_level = previous_level  # type: ignore[attr-defined]
    root.addHandler(handler)
    root.setLevel(level)
    return handler


def reset_logging(handler: logging.Handler) -> None:
    """Detach a handler installed by :func:`configure_logging`.

    The ``pliprep`` logger gets back the level it had before that call.
    """
    root = logging.getLogger(_ROOT)
    root.removeHandler(handler)
    root.setLevel(getattr(handler, "_previous_level", logging.NOTSET))
    handler.close()
