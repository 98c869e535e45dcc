"""Constants for pytweetsplit - default configuration and program metadata."""

# Program metadata
PROGRAM_NAME = "pytweetsplit"

# Splitting constants
MAX_POST_LENGTH = 140
WORD_SEPARATOR = " "

# Default configuration, read by PipelineConfig for its field defaults
# Structure: {"limit": 140, "newlines": "strip", "return_trace": False}
DEFAULT_CONFIG = {
    # Hard maximum length of every post, prefix included
    "limit": MAX_POST_LENGTH,
    # Options: strip (drop line breaks), space (turn them into separators)
    "newlines": "strip",
    # Whether ThreadPipeline.run() returns its Trace
    "return_trace": False,
}
