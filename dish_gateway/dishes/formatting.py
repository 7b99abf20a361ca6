from __future__ import annotations

import re

_LINE_BREAKS = re.compile(r"\r\n|\n|\r")
# Anything that is not a letter, digit or plain space. \w also matches "_".
_NOT_ALNUM_OR_SPACE = re.compile(r"[^\w ]|_")
_SPACES = re.compile(r" {2,}")


def strip_line_breaks(text: str, replacement: str = "") -> str:
    return _LINE_BREAKS.sub(replacement, text)


def sanitize_dish_name(text: str) -> str:
    """Reduce a model reply to letters, digits and spaces.

    Lossy and idempotent: running it on its own output changes nothing.
    """
    return _NOT_ALNUM_OR_SPACE.sub("", strip_line_breaks(text)).strip()


def format_recipe(text: str) -> str:
    """Flatten a multi-line recipe onto one line."""
    return _SPACES.sub(" ", strip_line_breaks(text, " ")).strip()
