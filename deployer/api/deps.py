"""Dependency injection for API endpoints."""

from typing import Annotated, AsyncIterator

import httpx
from fastapi import Depends

from deployer.config import Settings, get_settings
from deployer.core.orchestrator import DeploymentOrchestrator
from deployer.services.inspector import RepositoryInspector
from deployer.services.payload_builder import PayloadBuilder
from deployer.services.submitter import DeploymentSubmitter


async def get_http_client(
    settings: Annotated[Settings, Depends(get_settings)],
) -> AsyncIterator[httpx.AsyncClient]:
    """Outbound HTTP client, closed when the request finishes."""
    async with httpx.AsyncClient(timeout=settings.http_timeout) as client:
        yield client


async def get_orchestrator(
    settings: Annotated[Settings, Depends(get_settings)],
    client: Annotated[httpx.AsyncClient, Depends(get_http_client)],
) -> DeploymentOrchestrator:
    """Wire the deployment components from settings."""
    return DeploymentOrchestrator(
        inspector=RepositoryInspector(
            client,
            api_url=settings.github_api_url,
            raw_url=settings.github_raw_url,
        ),
        builder=PayloadBuilder(
            plan=settings.render_plan,
            owner_id=settings.render_owner_id,
        ),
        submitter=DeploymentSubmitter(
            client,
            api_key=settings.render_api_key,
            api_url=settings.render_api_url,
            dashboard_url=settings.render_dashboard_url,
        ),
        web_prefix=settings.github_web_prefix,
    )


# Type aliases for cleaner signatures
SettingsDep = Annotated[Settings, Depends(get_settings)]
OrchestratorDep = Annotated[DeploymentOrchestrator, Depends(get_orchestrator)]
