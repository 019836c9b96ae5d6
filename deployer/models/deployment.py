"""Deployment data models."""

from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """Model serialized with camelCase keys."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class RuntimeConfig(BaseModel):
    """How Render should build and run a service."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["docker", "node", "python"]
    runtime: str | None = None
    build_command: str | None = None
    start_command: str | None = None


class EnvVar(CamelModel):
    """An environment variable passed to the service."""

    key: Any
    value: Any = None


class DeploymentPayload(CamelModel):
    """Request body for Render's service-creation endpoint."""

    type: str = "web_service"
    name: str
    repo: str
    branch: str
    plan: str | None = None
    owner_id: str | None = None
    env: str | None = None
    build_command: str | None = None
    start_command: str | None = None
    env_vars: list[EnvVar] | None = None

    # Not sent to Render; kept for logging and tests
    runtime_kind: Literal["docker", "node", "python"] = Field(exclude=True)

    def to_request_body(self) -> dict[str, Any]:
        """Serialize for the Render API."""
        body = self.model_dump(by_alias=True, exclude_none=True)
        # Env var entries always carry both fields, even when null
        if self.env_vars is not None:
            body["envVars"] = [env_var.model_dump() for env_var in self.env_vars]
        return body


class DeploymentOutcome(BaseModel):
    """Result of submitting a deployment."""

    success: bool
    service_id: str | None = None
    service_name: str | None = None
    dashboard_link: str | None = None

    error: str | None = None
    details: Any = None


class DeployRequest(CamelModel):
    """Body of ``POST /deploy``.

    ``env_vars`` is accepted as anything; malformed values are ignored.
    """

    repo_url: str | None = None
    env_vars: Any = None


class DeployResponse(CamelModel):
    """Successful response of ``POST /deploy``."""

    message: str = "Deployment started!"
    service_id: str | None = None
    service_name: str | None = None
    dashboard_link: str | None = None
