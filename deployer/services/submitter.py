"""Submits service-creation requests to Render."""

import httpx

from deployer.core.exceptions import ConfigurationError
from deployer.models.deployment import DeploymentOutcome, DeploymentPayload
from deployer.utils.logging import get_logger

logger = get_logger(__name__)


class DeploymentSubmitter:
    """Creates a Render web service from a payload. Failures are not retried."""

    def __init__(
        self,
        client: httpx.AsyncClient,
        api_key: str,
        api_url: str = "https://api.render.com/v1/services",
        dashboard_url: str = "https://dashboard.render.com/web/{service_id}",
    ):
        self.client = client
        self.api_key = api_key
        self.api_url = api_url
        self.dashboard_url = dashboard_url

    def ensure_configured(self) -> None:
        """Raise ``ConfigurationError`` when no Render API key was given."""
        if not self.api_key:
            raise ConfigurationError(
                "RENDER_API_KEY is not set",
                {"setting": "render_api_key"},
            )

    async def submit(self, payload: DeploymentPayload) -> DeploymentOutcome:
        """Send the payload and map Render's answer to an outcome."""
        self.ensure_configured()
        try:
            response = await self.client.post(
                self.api_url,
                json=payload.to_request_body(),
                headers={
                    "Authorization": f"Bearer {self.api_key}",
                    "Content-Type": "application/json",
                },
            )
        except httpx.HTTPError as e:
            logger.error("submitter.failed", service_name=payload.name, error=str(e))
            return DeploymentOutcome(
                success=False,
                error="Deployment failed",
                details=str(e) or type(e).__name__,
            )

        if not response.is_success:
            details = self._response_detail(response)
            logger.error(
                "submitter.failed",
                service_name=payload.name,
                status_code=response.status_code,
                details=details,
            )
            return DeploymentOutcome(
                success=False,
                error="Deployment failed",
                details=details,
            )

        try:
            service = response.json()
        except ValueError:
            service = {}
        # Newer Render responses wrap the service under a "service" key
        if isinstance(service, dict) and isinstance(service.get("service"), dict):
            service = service["service"]
        if not isinstance(service, dict):
            service = {}

        service_id = service.get("id")
        dashboard_link = None
        if service_id:
            dashboard_link = self.dashboard_url.format(service_id=service_id)
        else:
            logger.warning(
                "submitter.missing_service_id",
                status_code=response.status_code,
                body=service,
            )

        outcome = DeploymentOutcome(
            success=True,
            service_id=service_id,
            service_name=service.get("name"),
            dashboard_link=dashboard_link,
        )
        logger.info(
            "submitter.created",
            service_id=outcome.service_id,
            service_name=outcome.service_name,
        )
        return outcome

    @staticmethod
    def _response_detail(response: httpx.Response):
        try:
            return response.json()
        except ValueError:
            return response.text
