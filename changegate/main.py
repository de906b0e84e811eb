"""CLI for gating CI steps on changed files."""

import logging
import sys

import click

from changegate import __version__
from changegate.config import create_settings
from changegate.core.detector import DEFAULT_PATTERN, ChangeDetector
from changegate.errors import ChangeGateError, FetchError
from changegate.logging import configure_logging
from changegate.models import EventContext
from changegate.utils.github import GitHubClient
from changegate.utils.output import write_outputs

configure_logging()

logger = logging.getLogger(__name__)


@click.command()
@click.version_option(version=__version__)
@click.argument("pattern", default=DEFAULT_PATTERN, required=False)
@click.option(
    "--files-output",
    is_flag=True,
    help="Also write changed_files and changed_count to GITHUB_OUTPUT.",
)
def main(pattern: str, files_output: bool):
    """Check whether files changed in this PR or push match PATTERN.

    Writes changed=true or changed=false to $GITHUB_OUTPUT. PATTERN is a
    regular expression searched in each path and defaults to matching
    everything.

    Example: changegate '^(proto/|server/golang/)'
    """
    try:
        settings = create_settings()
        logging.getLogger().setLevel(settings.log_level)
        context = EventContext.from_settings(settings)

        with GitHubClient(
            token=settings.github_token,
            base_url=settings.github_api_url,
            timeout=settings.http_timeout,
        ) as client:
            result = ChangeDetector(context, client).detect(pattern)
    except FetchError as e:
        logger.error(f"❌ {e}:")
        logger.error(e.payload)
        sys.exit(1)
    except ChangeGateError as e:
        logger.error(f"❌ Error: {e}")
        sys.exit(1)

    try:
        write_outputs(context.output_path, result, include_files=files_output)
    except OSError as e:
        logger.error(f"❌ Error writing {context.output_path}: {e}")
        sys.exit(1)

    for path in result.matched_files:
        click.echo(path)


if __name__ == "__main__":
    main()
