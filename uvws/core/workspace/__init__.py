# uvws/core/workspace/__init__.py
"""
Workspace resolution for uvws.

Locates the workspace root above a member directory, reads the member globs
from its configuration, expands them into directories and expresses each one
relative to the member.
"""
from .root_locator import WorkspaceRoot, find_workspace_root
from .member_patterns import extract_member_patterns, extract_exclude_patterns
from .member_resolution import resolve_member_paths
from .relative_paths import relative_path

__all__ = [
    "WorkspaceRoot",
    "find_workspace_root",
    "extract_member_patterns",
    "extract_exclude_patterns",
    "resolve_member_paths",
    "relative_path",
]
