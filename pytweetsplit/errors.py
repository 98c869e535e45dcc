from __future__ import annotations


class ConfigurationError(ValueError):
    """The post length limit cannot host a prefix plus one body character."""
