# uvws/core/workspace/member_patterns.py
"""
Pulls glob lists out of a workspace configuration with plain regular
expressions. This is not a TOML parser: only a ``key = [ ... ]`` array is
located, and the quoted strings inside it are collected.
"""
import re
from typing import List

import structlog

from uvws.config.settings import DEFAULT_WORKSPACE_MARKER

log = structlog.get_logger(__name__)

_DOUBLE_QUOTED = re.compile(r'"([^"]+)"')
_SINGLE_QUOTED = re.compile(r"'([^']+)'")
_TABLE_HEADER = re.compile(r"^[ \t]*\[\[?[^\]\n]*\]\]?[ \t]*(#.*)?$", re.MULTILINE)

def _array_pattern(key: str) -> "re.Pattern[str]":
    return re.compile(re.escape(key) + r"\s*=\s*\[([^\]]+)\]")

def extract_array_strings(config_text: str, key: str) -> List[str]:
    """
    Returns the quoted strings of the first ``key = [...]`` array in the text.

    Double-quoted literals come first, then single-quoted ones, each in source
    order. An array mixing both quote styles therefore does not keep its
    declaration order. A missing or empty array yields [].
    """
    match = _array_pattern(key).search(config_text)
    if not match:
        log.debug("array_key_not_found", key=key)
        return []

    array_body = match.group(1)
    values = _DOUBLE_QUOTED.findall(array_body)
    values.extend(_SINGLE_QUOTED.findall(array_body))
    log.debug("array_key_extracted", key=key, count=len(values))
    return values

def extract_member_patterns(config_text: str) -> List[str]:
    # glob patterns of the workspace members, as declared.
    return extract_array_strings(config_text, "members")

def workspace_section(config_text: str, marker: str = DEFAULT_WORKSPACE_MARKER) -> str:
    # text after the marker up to the next table header.
    start = config_text.find(marker)
    if start < 0:
        return ""
    body_start = start + len(marker)
    next_header = _TABLE_HEADER.search(config_text, body_start)
    body_end = next_header.start() if next_header else len(config_text)
    return config_text[body_start:body_end]

def extract_exclude_patterns(config_text: str, marker: str = DEFAULT_WORKSPACE_MARKER) -> List[str]:
    # only the workspace table is searched, other tools use "exclude" too.
    return extract_array_strings(workspace_section(config_text, marker), "exclude")
