"""Services for the deployer application."""

from deployer.services.inspector import RepositoryInspector
from deployer.services.payload_builder import (
    STRATEGIES,
    PayloadBuilder,
    normalize_env_vars,
    select_runtime,
)
from deployer.services.submitter import DeploymentSubmitter

__all__ = [
    "RepositoryInspector",
    "PayloadBuilder",
    "STRATEGIES",
    "normalize_env_vars",
    "select_runtime",
    "DeploymentSubmitter",
]
