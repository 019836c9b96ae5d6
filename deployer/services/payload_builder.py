"""Deployment payload construction.

Strategy selection walks ``STRATEGIES`` in order and takes the first
runtime whose marker file is present, so a Dockerfile always wins over
``package.json``, which wins over ``requirements.txt``.
"""

import random
from collections.abc import Mapping, Sequence
from typing import Any, Callable

from deployer.core.exceptions import UnsupportedRepoTypeError
from deployer.models.deployment import DeploymentPayload, EnvVar, RuntimeConfig
from deployer.models.repository import InspectionResult, RepositoryReference
from deployer.utils.logging import get_logger

logger = get_logger(__name__)

# Service names carry a random suffix with no uniqueness guarantee
SERVICE_SUFFIX_RANGE = 99999

DOCKER = RuntimeConfig(kind="docker")
NODE = RuntimeConfig(
    kind="node",
    runtime="node",
    build_command="npm install",
    start_command="npm start",
)
PYTHON = RuntimeConfig(
    kind="python",
    runtime="python",
    build_command="pip install -r requirements.txt",
    start_command="python app.py",
)

STRATEGIES: tuple[tuple[Callable[[InspectionResult], bool], RuntimeConfig], ...] = (
    (lambda inspection: inspection.has_dockerfile, DOCKER),
    (lambda inspection: inspection.has_package_json, NODE),
    (lambda inspection: inspection.has_requirements_txt, PYTHON),
)


def select_runtime(inspection: InspectionResult) -> RuntimeConfig | None:
    """Return the first runtime whose marker was found, if any."""
    for matches, runtime in STRATEGIES:
        if matches(inspection):
            return runtime
    return None


def normalize_env_vars(raw: Any) -> list[EnvVar] | None:
    """Copy ``key``/``value`` from each entry, dropping any other fields.

    Anything that is not a list of mappings is treated as no variables.
    """
    if raw is None or isinstance(raw, (str, bytes)) or not isinstance(raw, Sequence):
        return None

    env_vars = [
        EnvVar(key=item.get("key"), value=item.get("value"))
        for item in raw
        if isinstance(item, Mapping)
    ]
    return env_vars


class PayloadBuilder:
    """Builds the Render service-creation request for a repository."""

    def __init__(
        self,
        plan: str | None = "starter",
        owner_id: str | None = None,
        rng: random.Random | None = None,
    ):
        self.plan = plan
        self.owner_id = owner_id
        self.rng = rng or random.Random()

    def service_name(self, repo: RepositoryReference) -> str:
        return f"app-{self.rng.randrange(SERVICE_SUFFIX_RANGE)}-{repo.repo_name}"

    def build(
        self,
        repo: RepositoryReference,
        inspection: InspectionResult,
        env_vars: Any = None,
    ) -> DeploymentPayload:
        """Build the payload or raise ``UnsupportedRepoTypeError``."""
        runtime = select_runtime(inspection)
        if runtime is None:
            raise UnsupportedRepoTypeError(repo.url)

        payload = DeploymentPayload(
            name=self.service_name(repo),
            repo=repo.url,
            branch=inspection.branch,
            plan=self.plan,
            owner_id=self.owner_id,
            env=runtime.runtime,
            build_command=runtime.build_command,
            start_command=runtime.start_command,
            env_vars=normalize_env_vars(env_vars),
            runtime_kind=runtime.kind,
        )
        logger.info(
            "payload.built",
            service_name=payload.name,
            runtime=runtime.kind,
            branch=payload.branch,
            env_var_count=len(payload.env_vars or []),
        )
        return payload
