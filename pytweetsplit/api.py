from __future__ import annotations

from .constants import MAX_POST_LENGTH
from .pipeline import ThreadPipeline
from .pipeline_config import PipelineConfig


def split(text: str, limit: int = MAX_POST_LENGTH) -> list[str]:
    """Split ``text`` into posts of at most ``limit`` characters.

    Line breaks are stripped first. A single post is returned bare; when
    more are needed each one starts with ``(n/d)``.

    Raises:
        ConfigurationError: If ``limit`` is too small to hold a prefix and
            at least one character of text.
    """
    cfg = PipelineConfig(limit=limit)
    return ThreadPipeline(cfg).run(text).texts
