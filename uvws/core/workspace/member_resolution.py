# uvws/core/workspace/member_resolution.py
import glob
import os
from pathlib import Path
from typing import Iterable, List, Optional, Set

import structlog

from uvws.core.workspace.pattern_matching import compile_glob_patterns_to_spec, is_directory_excluded
from uvws.util import PathLike, normalize_dir

log = structlog.get_logger(__name__)

def resolve_member_paths(
    root_path: PathLike,
    patterns: Iterable[str],
    exclude_patterns: Optional[List[str]] = None,
) -> List[Path]:
    """
    Expands each member glob under root_path into existing directories.

    Non-directories are skipped, as are directories already collected by an
    earlier pattern; the first occurrence keeps its place. Order follows the
    patterns, then the order glob lists the filesystem in. Directories matching
    one of exclude_patterns are left out.
    """
    root = Path(normalize_dir(root_path))
    exclude_spec = compile_glob_patterns_to_spec(exclude_patterns or [])

    members: List[Path] = []
    seen: Set[str] = set()

    for pattern in patterns:
        # root_dir keeps glob metacharacters in the root path literal.
        matches = glob.glob(pattern, root_dir=str(root), recursive=True)
        if not matches:
            log.debug("member_pattern_matched_nothing", pattern=pattern, root=str(root))
            continue

        for match in matches:
            normalized = normalize_dir(os.path.join(root, match))
            if normalized in seen:
                continue
            if not os.path.isdir(normalized):
                log.debug("member_match_not_a_directory", path=normalized)
                continue
            member = Path(normalized)
            if is_directory_excluded(member, root, exclude_spec):
                log.debug("member_excluded", path=normalized)
                continue
            seen.add(normalized)
            members.append(member)

    log.debug("member_paths_resolved", root=str(root), count=len(members))
    return members
