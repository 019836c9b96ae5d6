"""Repository data models."""

import re

from pydantic import BaseModel, ConfigDict

GITHUB_URL_PATTERN = re.compile(
    r"^https?://(?:www\.)?github\.com/([^/\s]+)/([^/\s?#]+?)(?:\.git)?/?$",
    re.IGNORECASE,
)

DEFAULT_BRANCH = "main"


class RepositoryReference(BaseModel):
    """A GitHub repository URL and the owner/name parsed from it.

    ``owner`` and ``name`` are ``None`` when the URL does not look like a
    GitHub repository URL; callers skip remote lookups in that case.
    """

    model_config = ConfigDict(frozen=True)

    url: str
    owner: str | None = None
    name: str | None = None

    @classmethod
    def parse(cls, url: str) -> "RepositoryReference":
        match = GITHUB_URL_PATTERN.match(url.strip())
        if not match:
            return cls(url=url)
        return cls(url=url, owner=match.group(1), name=match.group(2))

    @property
    def is_resolved(self) -> bool:
        return self.owner is not None and self.name is not None

    @property
    def repo_name(self) -> str:
        """Repository name, falling back to the last URL segment."""
        if self.name:
            return self.name
        last_segment = self.url.rstrip("/").split("/")[-1]
        return re.sub(r"\.git$", "", last_segment)


class InspectionResult(BaseModel):
    """What was found in a repository at its default branch."""

    branch: str = DEFAULT_BRANCH
    has_dockerfile: bool = False
    has_package_json: bool = False
    has_requirements_txt: bool = False
