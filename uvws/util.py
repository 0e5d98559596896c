import os
from pathlib import Path
from typing import Union

import structlog

log = structlog.get_logger(__name__)
utf8_bom = "\ufeff"

PathLike = Union[str, Path]

def strip_utf8_bom(text: str) -> str:
    # removes a leading utf-8 byte order mark from decoded text if present.
    if text.startswith(utf8_bom):
        return text[len(utf8_bom):]
    return text

def normalize_dir(path: PathLike) -> str:
    # absolute, '..'-collapsed, no trailing separator. symlinks are left alone.
    return os.path.abspath(os.fspath(path))
