# uvws/core/workspace/pattern_matching.py
from pathlib import Path
from typing import List, Optional

import pathspec
import structlog

log = structlog.get_logger(__name__)

def compile_glob_patterns_to_spec(glob_patterns: List[str]) -> Optional[pathspec.PathSpec]:
    # compiles a list of glob patterns into a pathspec object for matching.
    if not glob_patterns:
        return None
    try:
        return pathspec.PathSpec.from_lines(pathspec.patterns.GitWildMatchPattern, glob_patterns)
    except Exception as e:
        # a broken exclude list must not break resolution.
        log.warning("failed_to_compile_glob_patterns", patterns=glob_patterns, error=str(e))
        return None

def is_directory_excluded(directory: Path, root: Path, exclude_spec: Optional[pathspec.PathSpec]) -> bool:
    # matches the root-relative posix path, with a trailing slash so dir-only patterns apply.
    if exclude_spec is None:
        return False
    try:
        rel = directory.relative_to(root)
    except ValueError:
        return False
    return exclude_spec.match_file(rel.as_posix() + "/")
