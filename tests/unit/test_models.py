"""Unit tests for data models."""

import pytest

from deployer.models.deployment import DeploymentPayload, DeployRequest, EnvVar
from deployer.models.repository import InspectionResult, RepositoryReference


class TestRepositoryReference:
    """Tests for GitHub URL parsing."""

    @pytest.mark.parametrize(
        "url",
        [
            "https://github.com/octo/hello",
            "https://github.com/octo/hello.git",
            "https://github.com/octo/hello/",
            "https://GitHub.com/octo/hello",
            "https://www.github.com/octo/hello",
        ],
    )
    def test_parse_variants(self, url: str):
        repo = RepositoryReference.parse(url)
        assert repo.owner == "octo"
        assert repo.name == "hello"
        assert repo.is_resolved

    def test_parse_keeps_original_url(self):
        repo = RepositoryReference.parse("https://github.com/octo/hello.git")
        assert repo.url == "https://github.com/octo/hello.git"

    def test_unparseable_url(self):
        repo = RepositoryReference.parse("https://github.com/just-a-user")
        assert repo.owner is None
        assert repo.name is None
        assert not repo.is_resolved

    def test_repo_name_falls_back_to_last_segment(self):
        repo = RepositoryReference.parse("https://github.com/octo/hello/tree/dev.git")
        assert not repo.is_resolved
        assert repo.repo_name == "dev"

    def test_reference_is_immutable(self):
        repo = RepositoryReference.parse("https://github.com/octo/hello")
        with pytest.raises(ValueError):
            repo.name = "other"


class TestDeploymentModels:
    """Tests for payload and request models."""

    def test_inspection_defaults(self):
        result = InspectionResult()
        assert result.branch == "main"
        assert not any(
            [result.has_dockerfile, result.has_package_json, result.has_requirements_txt]
        )

    def test_payload_serializes_camel_case_without_nones(self):
        payload = DeploymentPayload(
            name="app-1-hello",
            repo="https://github.com/octo/hello",
            branch="main",
            plan="starter",
            env="node",
            build_command="npm install",
            start_command="npm start",
            env_vars=[EnvVar(key="A", value="1")],
            runtime_kind="node",
        )

        body = payload.to_request_body()

        assert body == {
            "type": "web_service",
            "name": "app-1-hello",
            "repo": "https://github.com/octo/hello",
            "branch": "main",
            "plan": "starter",
            "env": "node",
            "buildCommand": "npm install",
            "startCommand": "npm start",
            "envVars": [{"key": "A", "value": "1"}],
        }

    def test_deploy_request_accepts_camel_case(self):
        request = DeployRequest.model_validate(
            {"repoUrl": "https://github.com/octo/hello", "envVars": "junk"}
        )
        assert request.repo_url == "https://github.com/octo/hello"
        assert request.env_vars == "junk"

    def test_deploy_request_repo_url_optional(self):
        assert DeployRequest.model_validate({}).repo_url is None
