"""Core functionality for Repo Deployer."""

from deployer.core.exceptions import (
    ClientInputError,
    ConfigurationError,
    DeployerError,
    InvalidRepositoryUrlError,
    SubmissionError,
    UnsupportedRepoTypeError,
)

__all__ = [
    "DeployerError",
    "ConfigurationError",
    "ClientInputError",
    "InvalidRepositoryUrlError",
    "UnsupportedRepoTypeError",
    "SubmissionError",
]
