# uvws/core/workspace/root_locator.py
import os
from dataclasses import dataclass
from pathlib import Path
from typing import List, Optional

import structlog

from uvws.config.settings import DEFAULT_CONFIG_FILENAME, DEFAULT_WORKSPACE_MARKER
from uvws.util import PathLike, normalize_dir, strip_utf8_bom

log = structlog.get_logger(__name__)

@dataclass(frozen=True)
class WorkspaceRoot:
    # a directory whose configuration file carries the workspace marker.
    path: Path
    config_text: str

def candidate_directories(start_path: PathLike) -> List[Path]:
    # the start directory followed by each ancestor, ending at the filesystem root.
    start = Path(normalize_dir(start_path))
    return [start, *start.parents]

def _read_config_text(config_path: Path) -> Optional[str]:
    # unreadable or vanished files count as absent.
    try:
        return strip_utf8_bom(config_path.read_text(encoding="utf-8", errors="replace"))
    except OSError as e:
        log.debug("config_read_failed", path=str(config_path), error=str(e))
        return None

def find_workspace_root(
    start_path: PathLike,
    config_filename: str = DEFAULT_CONFIG_FILENAME,
    marker: str = DEFAULT_WORKSPACE_MARKER,
) -> Optional[WorkspaceRoot]:
    """
    Walks from start_path up to the filesystem root and returns the first
    directory whose config_filename contains the marker text, or None.

    A config file without the marker does not stop the search.
    """
    for directory in candidate_directories(start_path):
        config_path = directory / config_filename
        if not os.path.isfile(config_path):
            continue
        content = _read_config_text(config_path)
        if content is None:
            continue
        if marker in content:
            log.debug("workspace_root_found", root=str(directory), config_file=config_filename)
            return WorkspaceRoot(path=directory, config_text=content)
        log.debug("config_without_workspace_marker", path=str(config_path))

    log.debug("workspace_root_not_found", start_path=str(start_path))
    return None
