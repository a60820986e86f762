"""Text helpers: trimming and composite key splitting."""

import logging

logger = logging.getLogger(__name__)


def trim(text: str) -> str:
    """Strip surrounding spaces and tabs, then one trailing newline."""
    text = text.strip(" \t")
    if text.endswith("\n"):
        text = text[:-1]
    return text


def split_header(key: str) -> tuple[str, str]:
    """Split a composite key into ``(section, key)`` at the first dot.

    The key part keeps any further dots. A composite key with no dot is
    malformed: the whole input becomes the section and the key is empty.
    This is logged as a warning and callers carry on with the empty key.
    """
    section, dot, rest = key.partition(".")
    if not dot:
        logger.warning("Corrupted header %r: no '.' separator", key)
    return section, rest
