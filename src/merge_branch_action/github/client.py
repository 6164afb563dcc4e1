"""GitHub REST implementation of the repository API client."""

from __future__ import annotations

import logging
import ssl
from typing import Any
from urllib.parse import quote

import httpx
import truststore

from merge_branch_action.errors import (
    ApiConnectionError,
    GitHubApiError,
    MergeRejectedError,
    RepositoryNotFoundError,
)
from merge_branch_action.merge.models import Branch, Commit, RepositoryReference

logger = logging.getLogger(__name__)

DEFAULT_API_URL = "https://api.github.com"
DEFAULT_TIMEOUT_SECONDS = 10.0
API_VERSION = "2022-11-28"
PAGE_SIZE = 100

_MERGE_REJECTIONS = {
    403: "Merge forbidden by the repository",
    404: "Merge base or head does not exist",
    409: "Merge conflict",
    422: "Merge request rejected as invalid",
}


def _error_detail(response: httpx.Response) -> str:
    try:
        payload = response.json()
    except ValueError:
        return response.text.strip()
    if isinstance(payload, dict) and payload.get("message"):
        return str(payload["message"])
    return ""


class GitHubClient:
    """Authenticated GitHub API handle.

    Usable as a context manager; the underlying ``httpx.Client`` is closed on
    exit unless it was supplied by the caller.
    """

    def __init__(
        self,
        api_url: str,
        token: str,
        *,
        timeout: float = DEFAULT_TIMEOUT_SECONDS,
        http_client: httpx.Client | None = None,
    ) -> None:
        self.api_url = (api_url or DEFAULT_API_URL).rstrip("/")
        self._owns_http_client = http_client is None
        if http_client is None:
            ssl_context = truststore.SSLContext(ssl.PROTOCOL_TLS_CLIENT)
            http_client = httpx.Client(verify=ssl_context, timeout=timeout)
        http_client.headers.update(
            {
                "Accept": "application/vnd.github+json",
                "Authorization": f"Bearer {token}",
                "X-GitHub-Api-Version": API_VERSION,
            }
        )
        self._http = http_client

    def close(self) -> None:
        if self._owns_http_client:
            self._http.close()

    def __enter__(self) -> "GitHubClient":
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()
        return False

    def request(self, method: str, path_or_url: str, **kwargs: Any) -> httpx.Response:
        """Send a request, mapping transport and auth failures to ApiConnectionError."""
        url = path_or_url if path_or_url.startswith(("http://", "https://")) else f"{self.api_url}{path_or_url}"
        try:
            response = self._http.request(method, url, **kwargs)
        except httpx.RequestError as exc:
            raise ApiConnectionError(f"Cannot reach GitHub API at {self.api_url}: {exc}") from exc

        logger.debug("%s %s -> %s", method, url, response.status_code)
        if response.status_code == 401:
            raise ApiConnectionError("GitHub API rejected the token (401 Bad credentials)")
        return response

    def connect(self) -> None:
        """Check that ``api_url`` points at a GitHub API root."""
        logger.debug("github api url connection: check.")
        response = self.request("GET", "/")
        try:
            payload = response.json() if response.status_code == 200 else None
        except ValueError:
            payload = None
        if not isinstance(payload, dict) or "current_user_url" not in payload:
            raise ApiConnectionError(
                f"{self.api_url} is not a valid GitHub API URL (HTTP {response.status_code})"
            )
        logger.debug("github api url connection: ok.")

    def get_repository(self, full_name: str) -> "GitHubRepository":
        response = self.request("GET", f"/repos/{full_name}")
        if response.status_code == 404:
            raise RepositoryNotFoundError(full_name)
        if response.status_code != 200:
            raise GitHubApiError(
                f"Cannot read repository {full_name}: HTTP {response.status_code} {_error_detail(response)}".rstrip(),
                response.status_code,
            )
        payload = response.json()
        return GitHubRepository(self, full_name=str(payload.get("full_name") or full_name))


class GitHubRepository:
    """Repository-scoped operations used by the resolver and the orchestrator."""

    def __init__(self, client: GitHubClient, full_name: str) -> None:
        self.client = client
        self.full_name = full_name

    def _path(self, suffix: str) -> str:
        return f"/repos/{self.full_name}/{suffix}"

    def list_references(self) -> list[RepositoryReference]:
        references: list[RepositoryReference] = []
        url: str | None = self._path("git/refs")
        params: dict[str, Any] | None = {"per_page": PAGE_SIZE}
        while url:
            response = self.client.request("GET", url, params=params)
            if response.status_code == 409:
                # Empty repository: git data API has nothing to list.
                return references
            if response.status_code != 200:
                raise GitHubApiError(
                    f"Cannot list references of {self.full_name}: HTTP {response.status_code}",
                    response.status_code,
                )
            for item in response.json():
                references.append(
                    RepositoryReference(ref=item["ref"], sha=(item.get("object") or {}).get("sha", ""))
                )
            url = response.links.get("next", {}).get("url")
            # The next link already carries the query string.
            params = None

        logger.debug("Listed %d references of %s", len(references), self.full_name)
        return references

    def get_branch(self, name: str) -> Branch | None:
        response = self.client.request("GET", self._path(f"branches/{quote(name, safe='/')}"))
        if response.status_code == 404:
            return None
        if response.status_code != 200:
            raise GitHubApiError(
                f"Cannot read branch {name} of {self.full_name}: HTTP {response.status_code}",
                response.status_code,
            )
        payload = response.json()
        return Branch(name=payload["name"], sha=payload["commit"]["sha"])

    def merge(self, target_branch: str, source_ref: str, message: str | None = None) -> Commit | None:
        body: dict[str, str] = {"base": target_branch, "head": source_ref}
        if message is not None:
            body["commit_message"] = message

        response = self.client.request("POST", self._path("merges"), json=body)
        if response.status_code == 204:
            return None
        if response.status_code == 201:
            return Commit(sha=response.json()["sha"])
        if response.status_code in _MERGE_REJECTIONS:
            detail = _error_detail(response)
            reason = _MERGE_REJECTIONS[response.status_code]
            raise MergeRejectedError(
                f"{reason} merging {source_ref} into {target_branch}" + (f": {detail}" if detail else ""),
                response.status_code,
            )
        raise GitHubApiError(
            f"Unexpected response merging {source_ref} into {target_branch}: HTTP {response.status_code}",
            response.status_code,
        )
