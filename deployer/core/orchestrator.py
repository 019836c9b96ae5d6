"""Deployment orchestrator.

Handles one ``/deploy`` request end to end:

1. validating - check the repository URL
2. building - inspect the repository and build the Render payload
3. submitted - create the service on Render
"""

from typing import Any

from deployer.core.exceptions import InvalidRepositoryUrlError, SubmissionError
from deployer.models.deployment import DeploymentOutcome
from deployer.models.repository import RepositoryReference
from deployer.services.inspector import RepositoryInspector
from deployer.services.payload_builder import PayloadBuilder
from deployer.services.submitter import DeploymentSubmitter
from deployer.utils.logging import get_logger


class DeploymentOrchestrator:
    """Runs the validate, build and submit steps in order."""

    def __init__(
        self,
        inspector: RepositoryInspector,
        builder: PayloadBuilder,
        submitter: DeploymentSubmitter,
        web_prefix: str = "https://github.com/",
    ):
        self.inspector = inspector
        self.builder = builder
        self.submitter = submitter
        self.web_prefix = web_prefix
        self.logger = get_logger("orchestrator")

    def validate(self, repo_url: Any) -> RepositoryReference:
        """Reject anything that is not a GitHub web URL."""
        if not isinstance(repo_url, str) or not repo_url.startswith(self.web_prefix):
            self.logger.info("orchestrator.invalid_url", repo_url=repo_url)
            raise InvalidRepositoryUrlError(repo_url)
        return RepositoryReference.parse(repo_url)

    async def deploy(self, repo_url: Any, env_vars: Any = None) -> DeploymentOutcome:
        """Deploy a repository, returning the successful outcome.

        Raises:
            InvalidRepositoryUrlError: URL missing or not on GitHub.
            UnsupportedRepoTypeError: No Dockerfile, package.json or requirements.txt.
            SubmissionError: Render rejected the request or was unreachable.
        """
        repo = self.validate(repo_url)
        self.submitter.ensure_configured()
        self.logger.info("orchestrator.started", repo_url=repo.url)

        inspection = await self.inspector.inspect(repo)
        payload = self.builder.build(repo, inspection, env_vars)

        outcome = await self.submitter.submit(payload)
        if not outcome.success:
            raise SubmissionError(outcome.details)

        self.logger.info(
            "orchestrator.completed",
            service_id=outcome.service_id,
            service_name=outcome.service_name,
        )
        return outcome
