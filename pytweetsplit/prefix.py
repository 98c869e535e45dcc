"""Post prefix helpers.

A thread of more than one post marks each post with ``(n/d)``: ``n`` is the
1-based post index and ``d`` the number of posts, both without leading zeros.
"""

from __future__ import annotations

import re
from collections.abc import Iterable

from .constants import WORD_SEPARATOR
from .types import Post

PREFIX_REGEX = re.compile(r"^\((?P<n>[1-9]\d*)/(?P<d>[1-9]\d*)\)")


def format_prefix(n: int, d: int) -> str:
    return f"({n}/{d})"


def prefix_size(n: int, denom: int) -> int:
    """Length of the ``(n/d)`` prefix when ``denom`` digits are reserved for d."""
    return len("(") + len(str(n)) + len("/") + denom + len(")")


def strip_prefix(text: str) -> tuple[int | None, int | None, str]:
    """Split a post into ``(n, d, body)``.

    Returns ``(None, None, text)`` when the post carries no prefix.
    """
    match = PREFIX_REGEX.match(text)
    if match is None:
        return None, None, text
    return int(match.group("n")), int(match.group("d")), text[match.end() :]


def reconstruct(posts: Iterable[Post]) -> str:
    """Rejoin post bodies into the word sequence they were cut from.

    A separator goes between two posts unless the first one ends with a
    mid-word break.
    """
    parts: list[str] = []
    pending_separator = False
    for post in posts:
        if pending_separator:
            parts.append(WORD_SEPARATOR)
        parts.append(post.body)
        pending_separator = not post.breaks_word
    return "".join(parts)
