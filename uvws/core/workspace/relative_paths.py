# uvws/core/workspace/relative_paths.py
import os
from pathlib import PurePath
from typing import List

from uvws.util import PathLike, normalize_dir

def relative_path(from_dir: PathLike, to_dir: PathLike) -> str:
    """
    Returns the path that leads from from_dir to to_dir: one ``..`` per
    segment of from_dir past the shared leading segments, then the remaining
    segments of to_dir. Equal directories give an empty string.

    Only the leading segments are compared, stopping at the first mismatch.
    The filesystem is never consulted.
    """
    from_parts = PurePath(normalize_dir(from_dir)).parts
    to_parts = PurePath(normalize_dir(to_dir)).parts

    common_len = 0
    for from_part, to_part in zip(from_parts, to_parts):
        if from_part != to_part:
            break
        common_len += 1

    rel_parts: List[str] = [os.pardir] * (len(from_parts) - common_len)
    rel_parts.extend(to_parts[common_len:])
    return os.sep.join(rel_parts)
