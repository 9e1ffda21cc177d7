"""
Configuration for field metadata lookup and tag list parsing.
"""

from dataclasses import dataclass


@dataclass
class ReflectConfig:
    """Configuration for where field metadata lives and how tag lists are spelled."""

    tag_metadata_key: str = "tag"  # Metadata entry holding the raw struct tag
    exported_metadata_key: str = "exported"  # Explicit visibility override
    list_open: str = "["
    list_close: str = "]"
    list_separator: str = ","
    quote_char: str = "'"

    def __post_init__(self):
        for name in ("list_open", "list_close", "list_separator", "quote_char"):
            if not getattr(self, name):
                raise ValueError(f"ReflectConfig.{name} must be a non-empty string")

    @classmethod
    def from_dict(cls, config: dict | None = None) -> "ReflectConfig":
        """Factory method to create config from dict with defaults."""
        if config is None:
            config = {}
        return cls(**config)


DEFAULT_CONFIG = ReflectConfig()
