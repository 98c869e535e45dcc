"""pytweetsplit - split text into numbered, length-limited posts."""

from .api import split
from .errors import ConfigurationError
from .pipeline import ThreadPipeline
from .pipeline_config import PipelineConfig
from .types import Post, ThreadResult

# Version info
try:
    from ._version import __version__, __version_tuple__
except ImportError:
    __version__ = "0.0.0"
    __version_tuple__ = (0, 0, 0)

__all__ = [
    "__version__",
    "ConfigurationError",
    "PipelineConfig",
    "Post",
    "ThreadPipeline",
    "ThreadResult",
    "split",
]
