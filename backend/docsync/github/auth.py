"""
DocSync — GitHub API authentication helpers.

A personal access token is optional; without one every request is sent
unauthenticated and is subject to the anonymous rate limit.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class GitHubCredentials:
    token: str = ""

    def as_headers(self) -> dict[str, str]:
        """Return the headers sent with every GitHub API request."""
        headers = {
            "Accept": "application/vnd.github+json",
            "X-GitHub-Api-Version": "2022-11-28",
            "User-Agent": "docsync",
        }
        if self.token:
            headers["Authorization"] = f"Bearer {self.token}"
        return headers
