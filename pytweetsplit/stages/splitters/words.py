from __future__ import annotations

from ...constants import WORD_SEPARATOR
from ...types import Word


def pull_word(text: str, pos: int, max_len: int | None = None) -> Word | None:
    """Return the next word at or after ``pos``, or None when none is left.

    Runs of separators (leading, trailing or repeated) are skipped, so an
    empty word is never returned. Only ``" "`` separates words.

    With ``max_len`` set, at most ``max_len + 1`` characters of the word are
    scanned. A longer word comes back cut to that length, with ``next_pos``
    pointing inside it; callers only need to know it exceeds ``max_len``.

    Examples:
        >>> pull_word("hello world", 0)
        Word(text='hello', start=0, next_pos=6)
        >>> pull_word("hello world", 6)
        Word(text='world', start=6, next_pos=11)
        >>> pull_word("hello   ", 5) is None
        True
        >>> pull_word("abcdefgh ij", 0, max_len=3)
        Word(text='abcd', start=0, next_pos=4)
    """
    if not 0 <= pos <= len(text):
        raise ValueError(f"Position {pos} is outside text of length {len(text)}")

    start = pos
    while start < len(text) and text[start] == WORD_SEPARATOR:
        start += 1
    if start == len(text):
        return None

    if max_len is None:
        stop = len(text)
    else:
        stop = min(len(text), start + max_len + 1)
    end = text.find(WORD_SEPARATOR, start, stop)
    if end == -1:
        return Word(text=text[start:stop], start=start, next_pos=stop)
    return Word(text=text[start:end], start=start, next_pos=end + 1)
