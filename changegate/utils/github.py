"""GitHub API utilities for changegate."""

import logging
from dataclasses import dataclass, field
from typing import Any, List, Optional

import httpx

logger = logging.getLogger(__name__)

GITHUB_API = "https://api.github.com"
PER_PAGE = 100


@dataclass
class FetchResult:
    """Changed-file listing, or the raw error that prevented fetching it."""

    files: List[str] = field(default_factory=list)
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.error is None


def _describe_response(resp: httpx.Response) -> str:
    body = resp.text.strip()
    return f"HTTP {resp.status_code} from {resp.request.url}: {body}"


def _filenames(entries: Any) -> List[str]:
    """Pull ``filename`` out of each file entry of an API payload.

    Raises:
        TypeError: If the payload is not a list of objects.
        KeyError: If an entry lacks a filename.
    """
    if not isinstance(entries, list):
        raise TypeError(f"expected a list of files, got {type(entries).__name__}")
    return [entry["filename"] for entry in entries]


class GitHubClient:
    """Read-only client for the two changed-file endpoints.

    Failures are returned as ``FetchResult.error`` rather than raised, so the
    caller decides how to report them.
    """

    def __init__(
        self,
        token: Optional[str] = None,
        base_url: str = GITHUB_API,
        timeout: float = 30.0,
        transport: Optional[httpx.BaseTransport] = None,
    ):
        headers = {
            "Accept": "application/vnd.github+json",
            "X-GitHub-Api-Version": "2022-11-28",
        }
        if token:
            headers["Authorization"] = f"Bearer {token}"

        self._client = httpx.Client(
            base_url=base_url,
            headers=headers,
            timeout=httpx.Timeout(timeout),
            transport=transport,
        )

    def close(self) -> None:
        self._client.close()

    def __enter__(self) -> "GitHubClient":
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.close()

    def list_pull_request_files(self, repository: str, pr_number: str) -> FetchResult:
        """Fetch every file changed in a pull request, following pagination.

        Args:
            repository: Repository in ``owner/name`` form.
            pr_number: Pull request number.

        Returns:
            FetchResult with filenames in API order.
        """
        url: Optional[str] = f"/repos/{repository}/pulls/{pr_number}/files"
        params: Optional[dict] = {"per_page": PER_PAGE}
        files: List[str] = []
        page = 0

        try:
            while url:
                resp = self._client.get(url, params=params)
                if resp.is_error:
                    return FetchResult(error=_describe_response(resp))

                files.extend(_filenames(resp.json()))
                page += 1

                # The next link already carries the query string.
                url = resp.links.get("next", {}).get("url")
                params = None
        except httpx.HTTPError as e:
            return FetchResult(error=f"{type(e).__name__}: {e}")
        except (ValueError, TypeError, KeyError) as e:
            return FetchResult(error=f"Malformed pull request files payload: {e!r}")

        logger.debug(f"Fetched {len(files)} files over {page} page(s)")
        return FetchResult(files=files)

    def compare_files(self, repository: str, before: str, after: str) -> FetchResult:
        """Fetch the files changed between two commits.

        Args:
            repository: Repository in ``owner/name`` form.
            before: Base commit SHA.
            after: Head commit SHA.

        Returns:
            FetchResult with filenames in API order.
        """
        url = f"/repos/{repository}/compare/{before}...{after}"

        try:
            resp = self._client.get(url)
            if resp.is_error:
                return FetchResult(error=_describe_response(resp))
            payload = resp.json()
            if not isinstance(payload, dict):
                raise TypeError(f"expected an object, got {type(payload).__name__}")
            files = _filenames(payload.get("files", []))
        except httpx.HTTPError as e:
            return FetchResult(error=f"{type(e).__name__}: {e}")
        except (ValueError, TypeError, KeyError) as e:
            return FetchResult(error=f"Malformed compare payload: {e!r}")

        return FetchResult(files=files)
