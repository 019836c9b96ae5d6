"""Repository inspection against GitHub.

Resolves the default branch and probes for the marker files that decide
how a repository is deployed. Every lookup degrades to a safe default
instead of raising: an unknown branch becomes ``main`` and an unreachable
file counts as absent.
"""

import asyncio

import httpx

from deployer.models.repository import (
    DEFAULT_BRANCH,
    InspectionResult,
    RepositoryReference,
)
from deployer.utils.logging import get_logger

logger = get_logger(__name__)


class RepositoryInspector:
    """Read-only GitHub lookups for a single repository."""

    def __init__(
        self,
        client: httpx.AsyncClient,
        api_url: str = "https://api.github.com",
        raw_url: str = "https://raw.githubusercontent.com",
    ):
        self.client = client
        self.api_url = api_url.rstrip("/")
        self.raw_url = raw_url.rstrip("/")

    async def inspect(self, repo: RepositoryReference) -> InspectionResult:
        """Resolve the default branch, then check all marker files."""
        if not repo.is_resolved:
            logger.warning("inspector.unparsed_url", url=repo.url)
            return InspectionResult()

        branch = await self.default_branch(repo)
        has_dockerfile, has_package_json, has_requirements_txt = await asyncio.gather(
            self.file_exists(repo, branch, "Dockerfile"),
            self.file_exists(repo, branch, "package.json"),
            self.file_exists(repo, branch, "requirements.txt"),
        )

        result = InspectionResult(
            branch=branch,
            has_dockerfile=has_dockerfile,
            has_package_json=has_package_json,
            has_requirements_txt=has_requirements_txt,
        )
        logger.info(
            "inspector.completed",
            repo=f"{repo.owner}/{repo.name}",
            **result.model_dump(),
        )
        return result

    async def default_branch(self, repo: RepositoryReference) -> str:
        """Get the default branch from the repository metadata."""
        url = f"{self.api_url}/repos/{repo.owner}/{repo.name}"
        try:
            response = await self.client.get(
                url, headers={"Accept": "application/vnd.github+json"}
            )
            if response.status_code != 200:
                logger.warning(
                    "inspector.branch_lookup_failed",
                    url=url,
                    status_code=response.status_code,
                )
                return DEFAULT_BRANCH
            branch = response.json().get("default_branch")
        except (httpx.HTTPError, ValueError, AttributeError) as e:
            logger.warning("inspector.branch_lookup_failed", url=url, error=str(e))
            return DEFAULT_BRANCH

        if not isinstance(branch, str) or not branch:
            return DEFAULT_BRANCH
        return branch

    async def file_exists(
        self, repo: RepositoryReference, branch: str, path: str
    ) -> bool:
        """Check whether ``path`` exists at the root of ``branch``."""
        url = f"{self.raw_url}/{repo.owner}/{repo.name}/{branch}/{path}"
        try:
            response = await self.client.get(url)
        except httpx.HTTPError as e:
            logger.warning("inspector.file_probe_failed", url=url, error=str(e))
            return False
        return response.status_code == 200
