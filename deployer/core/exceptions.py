"""Custom exceptions for Repo Deployer."""

from typing import Any

MARKER_FILES = ("Dockerfile", "package.json", "requirements.txt")


class DeployerError(Exception):
    """Base exception for Repo Deployer."""

    status_code: int = 500

    def __init__(self, message: str, details: Any = None):
        self.message = message
        self.details = details
        super().__init__(message)


class ConfigurationError(DeployerError):
    """Required configuration is missing or invalid."""

    pass


class ClientInputError(DeployerError):
    """The request cannot be served as given."""

    status_code = 400


class InvalidRepositoryUrlError(ClientInputError):
    """Repository URL is missing or not a GitHub URL."""

    def __init__(self, repo_url: Any = None):
        super().__init__("Invalid GitHub URL", {"repoUrl": repo_url})


class UnsupportedRepoTypeError(ClientInputError):
    """Repository has none of the recognized marker files."""

    def __init__(self, repo_url: str):
        super().__init__(
            "Unsupported repository type: expected one of "
            + ", ".join(MARKER_FILES),
            {"repoUrl": repo_url, "markers": list(MARKER_FILES)},
        )


class SubmissionError(DeployerError):
    """Render rejected the service or could not be reached."""

    def __init__(self, details: Any = None):
        super().__init__("Deployment failed", details)
