"""Data models for Repo Deployer."""

from deployer.models.deployment import (
    DeploymentOutcome,
    DeploymentPayload,
    DeployRequest,
    DeployResponse,
    EnvVar,
    RuntimeConfig,
)
from deployer.models.repository import InspectionResult, RepositoryReference

__all__ = [
    # Repository models
    "RepositoryReference",
    "InspectionResult",
    # Deployment models
    "RuntimeConfig",
    "EnvVar",
    "DeploymentPayload",
    "DeploymentOutcome",
    "DeployRequest",
    "DeployResponse",
]
