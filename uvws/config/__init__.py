"""Settings dataclass and TOML loading for uvws."""

from .settings import ResolveConfig, OutputFormat

__all__ = ["ResolveConfig", "OutputFormat"]
