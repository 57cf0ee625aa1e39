"""Kubernetes client wrapper for project and namespace reads."""

from __future__ import annotations

import logging
import os
from typing import Any

from kubernetes import client as k8s_client  # type: ignore[import-untyped]
from kubernetes import config as k8s_config  # type: ignore[import-untyped]
from kubernetes.config.config_exception import ConfigException  # type: ignore[import-untyped]

from oc_projects.config import ProjectsConfig, get_config
from oc_projects.utils.errors import ConfigurationError

logger = logging.getLogger(__name__)

PROJECT_GROUP = "project.openshift.io"
PROJECT_VERSION = "v1"
PROJECT_PLURAL = "projects"


class K8sClient:
    """Thin client over the core and custom objects APIs.

    Projects are read through the OpenShift ``project.openshift.io/v1``
    API, which only returns projects the caller may see. Namespace reads
    are the fallback for clusters without that API.
    """

    def __init__(self, config: ProjectsConfig | None = None) -> None:
        self._config = config or get_config()
        self._api_client: k8s_client.ApiClient | None = None
        self._core_v1: k8s_client.CoreV1Api | None = None
        self._custom_objects: k8s_client.CustomObjectsApi | None = None
        self._host = ""

    def connect(self) -> None:
        """Build API clients from the kubeconfig.

        Raises:
            ConfigurationError: If the kubeconfig cannot be loaded.
        """
        paths = self._config.effective_kubeconfig_paths
        client_config = k8s_client.Configuration()
        try:
            k8s_config.load_kube_config(
                config_file=os.pathsep.join(str(p) for p in paths),
                context=self._config.kubeconfig_context,
                client_configuration=client_config,
            )
        except (ConfigException, OSError) as e:
            raise ConfigurationError(f"Failed to load kubeconfig: {e}") from e

        self._host = client_config.host
        self._api_client = k8s_client.ApiClient(client_config)
        self._core_v1 = k8s_client.CoreV1Api(self._api_client)
        self._custom_objects = k8s_client.CustomObjectsApi(self._api_client)
        logger.debug(f"Connected to {self._host}")

    @property
    def is_connected(self) -> bool:
        return self._api_client is not None

    @property
    def host(self) -> str:
        """API server URL of the selected cluster."""
        return self._host

    @property
    def core_v1(self) -> k8s_client.CoreV1Api:
        if self._core_v1 is None:
            raise RuntimeError("K8s client not connected. Call connect() first.")
        return self._core_v1

    @property
    def custom_objects(self) -> k8s_client.CustomObjectsApi:
        if self._custom_objects is None:
            raise RuntimeError("K8s client not connected. Call connect() first.")
        return self._custom_objects

    # --- Project operations ---

    def get_project(self, name: str) -> dict[str, Any]:
        return self.custom_objects.get_cluster_custom_object(
            PROJECT_GROUP, PROJECT_VERSION, PROJECT_PLURAL, name
        )

    def list_projects(self) -> list[dict[str, Any]]:
        response = self.custom_objects.list_cluster_custom_object(
            PROJECT_GROUP, PROJECT_VERSION, PROJECT_PLURAL
        )
        return list(response.get("items") or [])

    # --- Namespace operations ---

    def get_namespace(self, name: str) -> Any:
        return self.core_v1.read_namespace(name)

    def list_namespaces(self) -> list[Any]:
        return list(self.core_v1.list_namespace().items or [])
