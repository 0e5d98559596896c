# uvws/core/pipeline.py
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional

import structlog

from uvws.config.settings import ResolveConfig
from uvws.core.workspace import (
    extract_exclude_patterns,
    extract_member_patterns,
    find_workspace_root,
    relative_path,
    resolve_member_paths,
)
from uvws.util import PathLike, normalize_dir

log = structlog.get_logger(__name__)

@dataclass
class WorkspaceResolution:
    # everything learned while resolving one member root.
    member_root: Path
    workspace_root: Optional[Path] = None
    member_patterns: List[str] = field(default_factory=list)
    exclude_patterns: List[str] = field(default_factory=list)
    members: List[Path] = field(default_factory=list)
    extra_paths: List[str] = field(default_factory=list)

    @property
    def found(self) -> bool:
        return self.workspace_root is not None

def resolve_workspace(member_root: PathLike, config: Optional[ResolveConfig] = None) -> WorkspaceResolution:
    """
    Runs locator, extractor, resolver and relative path computation for
    member_root. Every not-found condition ends in an empty extra_paths list.
    """
    config = config or ResolveConfig(member_root=Path(member_root))
    normalized_member_root = normalize_dir(member_root)
    resolution = WorkspaceResolution(member_root=Path(normalized_member_root))

    workspace = find_workspace_root(member_root, config.config_filename, config.marker)
    if workspace is None:
        log.info("no_workspace_root_found", member_root=normalized_member_root)
        return resolution
    resolution.workspace_root = workspace.path

    resolution.member_patterns = extract_member_patterns(workspace.config_text)
    if not resolution.member_patterns:
        log.info("workspace_declares_no_members", workspace_root=str(workspace.path))
        return resolution

    if config.apply_excludes:
        resolution.exclude_patterns = extract_exclude_patterns(workspace.config_text, config.marker)

    resolution.members = resolve_member_paths(
        workspace.path, resolution.member_patterns, resolution.exclude_patterns
    )

    for member_path in resolution.members:
        if str(member_path) == normalized_member_root:
            continue
        if config.absolute_paths:
            resolution.extra_paths.append(str(member_path))
        else:
            resolution.extra_paths.append(relative_path(normalized_member_root, member_path))

    log.info(
        "workspace_resolved",
        workspace_root=str(workspace.path),
        members=len(resolution.members),
        extra_paths=len(resolution.extra_paths),
    )
    return resolution

def get_workspace_extra_paths(member_root: PathLike, config: Optional[ResolveConfig] = None) -> List[str]:
    # relative paths from member_root to every other member of its workspace.
    return resolve_workspace(member_root, config).extra_paths
