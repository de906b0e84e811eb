"""Match a pull request's or push's changed files against a pattern."""

import logging
import re
from typing import Iterable, List, Pattern

from changegate.errors import FetchError, PatternError
from changegate.models import DetectionResult, EventContext, EventType
from changegate.utils.github import FetchResult, GitHubClient

logger = logging.getLogger(__name__)

DEFAULT_PATTERN = ".*"


def compile_pattern(pattern: str) -> Pattern[str]:
    """Compile the caller's regular expression.

    Raises:
        PatternError: If the expression is invalid.
    """
    try:
        return re.compile(pattern)
    except re.error as e:
        raise PatternError(f"Invalid pattern {pattern!r}: {e}") from e


def count_files(files: Iterable[str]) -> int:
    """Number of entries in a listing; an empty listing is zero."""
    return sum(1 for _ in files)


def filter_files(files: Iterable[str], pattern: Pattern[str]) -> List[str]:
    """Return the non-blank paths matching ``pattern``, in listing order."""
    return [path for path in files if path and pattern.search(path)]


class ChangeDetector:
    """Decides whether an event touched any file matching a pattern.

    Args:
        context: Validated event context.
        client: GitHub client used to fetch the changed-file listing.
    """

    def __init__(self, context: EventContext, client: GitHubClient):
        self.context = context
        self.client = client

    def fetch(self) -> FetchResult:
        ctx = self.context
        if ctx.event_type is EventType.PULL_REQUEST:
            logger.info("📥 Detected pull_request event")
            logger.info(f"Fetching files from PR #{ctx.pr_number}...")
            return self.client.list_pull_request_files(ctx.repository, ctx.pr_number)

        logger.info("📤 Detected push event")
        logger.info(f"Fetching files from commits {ctx.before_sha}..{ctx.after_sha}...")
        return self.client.compare_files(ctx.repository, ctx.before_sha, ctx.after_sha)

    def detect(self, pattern: str = DEFAULT_PATTERN) -> DetectionResult:
        """Fetch the changed files and match them against ``pattern``.

        Args:
            pattern: Regular expression tested with ``re.search``.

        Returns:
            DetectionResult with matches in listing order.

        Raises:
            PatternError: If the pattern does not compile. No fetch is made.
            FetchError: If the listing could not be retrieved.
        """
        compiled = compile_pattern(pattern)
        logger.info(f"🔍 Checking for files matching pattern: {pattern}")

        fetched = self.fetch()
        if not fetched.ok:
            what = (
                "PR files"
                if self.context.event_type is EventType.PULL_REQUEST
                else "commit comparison"
            )
            raise FetchError(f"Error fetching {what}", payload=fetched.error)

        file_count = count_files(fetched.files)
        logger.info(f"Found {file_count} changed file(s)")

        matched_files = filter_files(fetched.files, compiled)
        for path in matched_files:
            logger.info(f"  ✅ {path}")

        result = DetectionResult(
            pattern=pattern,
            matched_files=tuple(matched_files),
            file_count=file_count,
        )
        if result.matched:
            logger.info("✅ Files match pattern - build should run")
        else:
            logger.info("⏭️  No files match pattern - build can be skipped")
        return result
