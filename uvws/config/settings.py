from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import List, Optional
import structlog

log = structlog.get_logger(__name__)

DEFAULT_CONFIG_FILENAME = "pyproject.toml"
DEFAULT_WORKSPACE_MARKER = "[tool.uv.workspace]"
DEFAULT_CONSOLE_SHOW_SUMMARY = False

class OutputFormat(Enum):
    # defines how the computed extra paths are printed.
    LINES = "lines"
    JSON = "json"
    PYRIGHT = "pyright"

    @classmethod
    def from_string(cls, s: Optional[str]) -> Optional["OutputFormat"]:
        if not s:
            return None
        try:
            return cls(s.lower())
        except ValueError:
            log.warning("invalid_output_format_string", input_string=s)
            return None

DEFAULT_OUTPUT_FORMAT = OutputFormat.LINES

@dataclass
class ResolveConfig:
    # holds all configuration parameters for a single resolution run.
    member_root: Optional[Path] = None
    config_filename: str = DEFAULT_CONFIG_FILENAME
    marker: str = DEFAULT_WORKSPACE_MARKER
    apply_excludes: bool = False
    absolute_paths: bool = False
    existing_extra_paths: List[str] = field(default_factory=list)
    output_format: OutputFormat = DEFAULT_OUTPUT_FORMAT
    output_file: Optional[Path] = None
    console_show_summary: bool = DEFAULT_CONSOLE_SHOW_SUMMARY

    def __post_init__(self):
        # defaults the member root to the working directory.
        if self.member_root is None:
            self.member_root = Path.cwd()
        self.member_root = Path(self.member_root)
