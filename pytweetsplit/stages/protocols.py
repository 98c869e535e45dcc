from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Protocol

from ..types import Post, Trace

if TYPE_CHECKING:
    from ..pipeline_config import PipelineConfig


@dataclass
class DocumentResult:
    clean_text: str
    warnings: list[str] = field(default_factory=list)


class DocumentParser(Protocol):
    def parse(self, text: str, cfg: PipelineConfig, trace: Trace) -> DocumentResult: ...


class Splitter(Protocol):
    def split(
        self, doc: DocumentResult, cfg: PipelineConfig, trace: Trace
    ) -> list[Post]: ...
