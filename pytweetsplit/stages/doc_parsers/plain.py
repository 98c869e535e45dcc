from __future__ import annotations

import logging
import re
from typing import TYPE_CHECKING

from ...constants import WORD_SEPARATOR
from ..protocols import DocumentResult

if TYPE_CHECKING:
    from ...pipeline_config import PipelineConfig
    from ...types import Trace

logger = logging.getLogger(__name__)

LINE_BREAK_REGEX = re.compile(r"\r\n|\r|\n")


class PlainTextDocumentParser:
    """Collapse raw text into one logical line."""

    def parse(self, text: str, cfg: PipelineConfig, trace: Trace) -> DocumentResult:
        _ = trace
        if cfg.newlines == "space":
            clean_text = LINE_BREAK_REGEX.sub(WORD_SEPARATOR, text)
        else:
            clean_text = LINE_BREAK_REGEX.sub("", text)
        logger.debug(
            "Normalized %d chars to %d chars (newlines=%s)",
            len(text),
            len(clean_text),
            cfg.newlines,
        )
        return DocumentResult(clean_text=clean_text)
