"""The projects command: show the current project and list accessible ones."""

from __future__ import annotations

import logging
import sys
from collections.abc import Sequence
from typing import TextIO

from oc_projects.clients.base import K8sClient
from oc_projects.clients.session import load_session_config
from oc_projects.config import ProjectsConfig, get_config
from oc_projects.domains.projects.client import ProjectClient
from oc_projects.domains.projects.context import resolve_context
from oc_projects.domains.projects.formatter import format_projects
from oc_projects.utils.errors import ValidationError

logger = logging.getLogger(__name__)


class ProjectsCommand:
    """Display information about the current project and existing projects on the server."""

    def __init__(
        self,
        config: ProjectsConfig | None = None,
        k8s: K8sClient | None = None,
        out: TextIO | None = None,
    ) -> None:
        self._config = config or get_config()
        self._k8s = k8s
        self._out = out

    @property
    def config(self) -> ProjectsConfig:
        return self._config

    @staticmethod
    def validate(args: Sequence[str]) -> None:
        """Reject positional arguments.

        Raises:
            ValidationError: If any arguments were passed.
        """
        if len(args) > 0:
            raise ValidationError("no arguments should be passed")

    def _client(self) -> K8sClient:
        if self._k8s is None or not self._k8s.is_connected:
            self._k8s = K8sClient(self._config)
            self._k8s.connect()
        return self._k8s

    def run(self, short: bool = False) -> None:
        """List all projects the user can access and report the current one.

        The listing is written before any current project access error is
        raised, so the user still sees what they can switch to.

        Raises:
            ConfigurationError: If the kubeconfig cannot be loaded.
            EnumerationError: If the projects cannot be listed.
            ProjectAccessError: If the current project is not accessible.
        """
        session = load_session_config(self._config)
        k8s = self._client()
        resolved = resolve_context(session)

        projects_client = ProjectClient(k8s)
        selection = projects_client.confirm_project_access(resolved.current_project)
        projects = projects_client.list_projects()
        logger.debug(f"Found {len(projects)} projects, current project '{resolved.current_project}'")

        report = format_projects(
            projects,
            selection,
            short=short,
            command_name=self._config.command_name,
            server_host=k8s.host,
            context_name=resolved.context_name,
            nickname=resolved.nickname,
        )

        out = self._out or sys.stdout
        if report.text:
            out.write(report.text + "\n")
            out.flush()

        if report.error is not None:
            raise report.error
