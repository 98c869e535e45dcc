from __future__ import annotations

import logging
from dataclasses import replace
from typing import Any

from .pipeline_config import PipelineConfig
from .runtime.tracing import trace_timing
from .stages.doc_parsers.plain import PlainTextDocumentParser
from .stages.protocols import DocumentParser, Splitter
from .stages.splitters.packing import PackingSplitter
from .types import ThreadResult, Trace

logger = logging.getLogger(__name__)


class ThreadPipeline:
    def __init__(
        self,
        config: PipelineConfig | None = None,
        *,
        doc_parser: DocumentParser | None = None,
        splitter: Splitter | None = None,
    ) -> None:
        self.config = config or PipelineConfig()
        self.doc_parser = doc_parser or PlainTextDocumentParser()
        self.splitter = splitter or PackingSplitter()

    def run(self, text: str, **overrides: Any) -> ThreadResult:
        cfg = replace(self.config, **overrides) if overrides else self.config
        trace = Trace()

        with trace_timing(trace, "parse", "normalize"):
            logger.debug("Parsing document")
            doc = self.doc_parser.parse(text, cfg, trace)
            trace.warnings.extend(doc.warnings)
        trace.clean_text = doc.clean_text

        with trace_timing(trace, "split", "split") as details:
            logger.debug(
                "Splitting %d chars into posts of at most %d chars",
                len(doc.clean_text),
                cfg.limit,
            )
            posts = self.splitter.split(doc, cfg, trace)
            details["posts"] = len(posts)

        return ThreadResult(
            posts=posts,
            clean_text=doc.clean_text,
            trace=trace if cfg.return_trace else None,
        )

    def __call__(self, text: str, **overrides: Any) -> ThreadResult:
        return self.run(text, **overrides)
