"""Writers for the GitHub Actions output file."""

import logging
import uuid
from pathlib import Path
from typing import Union

from changegate.models import DetectionResult

logger = logging.getLogger(__name__)

CHANGED_KEY = "changed"
FILES_KEY = "changed_files"
COUNT_KEY = "changed_count"


def format_bool(value: bool) -> str:
    return "true" if value else "false"


def format_multiline(key: str, lines) -> str:
    """Render a multi-line output using the ``key<<DELIM`` syntax.

    Example:
        changed_files<<ghadelimiter_1a2b...
        server/main.go
        ghadelimiter_1a2b...
    """
    delimiter = f"ghadelimiter_{uuid.uuid4().hex}"
    body = "".join(f"{line}\n" for line in lines)
    return f"{key}<<{delimiter}\n{body}{delimiter}\n"


def write_outputs(
    output_path: Union[str, Path],
    result: DetectionResult,
    include_files: bool = False,
) -> None:
    """Append the detection result to the output file.

    Args:
        output_path: Path from ``GITHUB_OUTPUT``.
        result: Result to report.
        include_files: Also write the matched files and their count.
    """
    chunks = [f"{CHANGED_KEY}={format_bool(result.matched)}\n"]
    if include_files:
        chunks.append(format_multiline(FILES_KEY, result.matched_files))
        chunks.append(f"{COUNT_KEY}={len(result.matched_files)}\n")

    with open(output_path, "a", encoding="utf-8") as f:
        f.write("".join(chunks))

    logger.debug(f"Wrote {len(chunks)} output(s) to {output_path}")
