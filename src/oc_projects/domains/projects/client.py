"""Project (namespace) client operations."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from kubernetes.client import ApiException  # type: ignore[import-untyped]
from urllib3.exceptions import HTTPError

from oc_projects.domains.projects.models import Project, ProjectAccess, Selection
from oc_projects.utils.errors import (
    EnumerationError,
    ProjectAccessError,
    ProjectForbiddenError,
    ProjectNotFoundError,
)

if TYPE_CHECKING:
    from oc_projects.clients.base import K8sClient

logger = logging.getLogger(__name__)


def _is_not_found_or_forbidden(e: ApiException | HTTPError) -> bool:
    return isinstance(e, ApiException) and (e.status == 404 or e.status == 403)


def classify_access_error(name: str, e: ApiException | HTTPError) -> ProjectAccessError:
    """Wrap an API or transport failure for the named project in the matching access error."""
    if not isinstance(e, ApiException):
        return ProjectAccessError(name, f'unable to reach server for project "{name}": {e}')
    if e.status == 403:
        reason = e.reason or "Forbidden"
        return ProjectForbiddenError(
            name, f'projects.project.openshift.io "{name}" is forbidden: {reason}'
        )
    if e.status == 404:
        return ProjectNotFoundError(name, f'projects.project.openshift.io "{name}" not found')
    return ProjectAccessError(name, f'unable to get project "{name}": {e}')


def _access_for(error: ProjectAccessError) -> ProjectAccess:
    if isinstance(error, ProjectForbiddenError):
        return ProjectAccess.FORBIDDEN
    if isinstance(error, ProjectNotFoundError):
        return ProjectAccess.NOT_FOUND
    return ProjectAccess.OTHER_ERROR


class ProjectClient:
    """Client for project listing and access checks."""

    def __init__(self, k8s: K8sClient) -> None:
        self._k8s = k8s

    def confirm_project_access(self, name: str) -> Selection:
        """Check that the named project exists and is reachable by the caller.

        The project is fetched through the Projects API. A 404 or 403 there
        is not conclusive (the API may be absent, or the caller may only have
        namespace rights), so the namespace of the same name is tried before
        reporting the project error. A single attempt is made.

        An empty name means no project is selected and nothing is checked.
        """
        if not name:
            return Selection()

        try:
            self._k8s.get_project(name)
            return Selection(current_project=name, exists=True, access=ProjectAccess.ACCESSIBLE)
        except (ApiException, HTTPError) as e:
            project_error = e

        if _is_not_found_or_forbidden(project_error):
            try:
                self._k8s.get_namespace(name)
                logger.debug(
                    f"Project API returned {project_error.status} for '{name}', "
                    "namespace is readable"
                )
                return Selection(current_project=name, exists=True, access=ProjectAccess.ACCESSIBLE)
            except (ApiException, HTTPError) as e:
                logger.debug(f"Namespace fallback for '{name}' failed: {e}")

        error = classify_access_error(name, project_error)
        error.__cause__ = project_error
        access = _access_for(error)
        logger.debug(f"Current project '{name}' is not accessible: {access.value}")
        return Selection(current_project=name, exists=False, access=access, error=error)

    def list_projects(self) -> list[Project]:
        """List every project the caller can see, sorted by name.

        Uses the OpenShift Projects API, which returns only user-accessible
        projects. On plain Kubernetes that endpoint is missing (404) or
        forbidden (403), so namespaces are listed instead.

        Raises:
            EnumerationError: If neither listing succeeds.
        """
        try:
            projects = [Project.from_project(p) for p in self._k8s.list_projects()]
        except HTTPError as e:
            raise EnumerationError(f"Failed to list projects: {e}") from e
        except ApiException as e:
            if not _is_not_found_or_forbidden(e):
                raise EnumerationError(f"Failed to list projects: {e}") from e
            logger.debug(f"Projects API unavailable ({e.status}), listing namespaces instead")
            projects = self._list_namespaces_as_projects()

        return sorted(projects, key=lambda p: p.name)

    def _list_namespaces_as_projects(self) -> list[Project]:
        try:
            namespaces = self._k8s.list_namespaces()
        except (ApiException, HTTPError) as e:
            raise EnumerationError(f"Failed to list namespaces: {e}") from e
        return [Project.from_namespace(ns) for ns in namespaces]
