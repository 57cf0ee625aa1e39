"""Shared pytest fixtures."""

from collections.abc import Callable
from typing import Any
from unittest.mock import MagicMock

import pytest


def _project_dict(name: str, annotations: dict[str, str] | None = None) -> dict[str, Any]:
    return {
        "apiVersion": "project.openshift.io/v1",
        "kind": "Project",
        "metadata": {
            "name": name,
            "uid": f"uid-{name}",
            "annotations": annotations or {},
        },
        "status": {"phase": "Active"},
    }


@pytest.fixture
def mock_k8s() -> MagicMock:
    """Create a connected mock K8sClient."""
    mock = MagicMock()
    mock.is_connected = True
    mock.host = "https://api.example.com:6443"
    return mock


@pytest.fixture(autouse=True)
def _isolate_env(monkeypatch: pytest.MonkeyPatch, tmp_path: Any) -> None:
    """Keep the user's kubeconfig and settings out of tests."""
    monkeypatch.delenv("KUBECONFIG", raising=False)
    for var in (
        "OC_PROJECTS_KUBECONFIG_PATH",
        "OC_PROJECTS_KUBECONFIG_CONTEXT",
        "OC_PROJECTS_COMMAND_NAME",
        "OC_PROJECTS_LOG_LEVEL",
    ):
        monkeypatch.delenv(var, raising=False)
    monkeypatch.chdir(tmp_path)


@pytest.fixture
def project_dict() -> Callable[..., dict[str, Any]]:
    """Factory for Projects as returned by the custom objects API."""
    return _project_dict
