# uvws/core/output.py
from pathlib import Path
from typing import Optional

import click
import structlog

from uvws.exceptions import OutputError

log = structlog.get_logger(__name__)

def write_output(text_content: str, output_file: Optional[Path] = None):
    """
    Sends rendered paths to output_file, or to stdout when none is given.
    Files are written as utf-8 with '\\n' line endings on every platform so
    they can be checked into a repository.
    """
    if output_file is None:
        log.debug("writing_output_to_stdout", chars=len(text_content))
        click.echo(text_content, nl=False)
        return

    log.info("writing_output_to_file", path=str(output_file))
    try:
        output_file.write_text(text_content, encoding="utf-8", newline="\n")
    except OSError as e:
        raise OutputError(f"failed to write to file '{output_file}': {e}") from e
