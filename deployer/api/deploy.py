"""Deployment endpoint."""

from fastapi import APIRouter

from deployer.api.deps import OrchestratorDep
from deployer.models.deployment import DeployRequest, DeployResponse

router = APIRouter()


@router.post("/deploy", response_model=DeployResponse)
async def deploy(request: DeployRequest, orchestrator: OrchestratorDep) -> DeployResponse:
    """Create a Render web service from a GitHub repository.

    Errors are rendered by the application's exception handlers:
    400 for a bad URL or unsupported repository, 500 when Render fails.
    """
    outcome = await orchestrator.deploy(request.repo_url, request.env_vars)
    return DeployResponse(
        service_id=outcome.service_id,
        service_name=outcome.service_name,
        dashboard_link=outcome.dashboard_link,
    )
