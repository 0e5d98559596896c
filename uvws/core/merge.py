# uvws/core/merge.py
"""
Folding computed extra paths into a pyright-style ``extraPaths`` setting.
"""
from typing import Any, Dict, Iterable, List, Optional

def merge_extra_paths(existing: Optional[Iterable[str]], new: Iterable[str]) -> List[str]:
    # existing entries first, then each new entry not yet present.
    merged: List[str] = list(existing or [])
    for path in new:
        if path not in merged:
            merged.append(path)
    return merged

def _analysis_block(extra_paths: List[str]) -> Dict[str, Any]:
    return {"python": {"analysis": {"extraPaths": list(extra_paths)}}}

def build_pyright_payload(extra_paths: List[str], existing: Optional[List[str]] = None) -> Dict[str, Any]:
    """
    Builds the settings and initializationOptions a pyright client would be
    started with. Both carry the same merged list.
    """
    all_paths = merge_extra_paths(existing, extra_paths)
    return {
        "settings": _analysis_block(all_paths),
        "initializationOptions": _analysis_block(all_paths),
    }
