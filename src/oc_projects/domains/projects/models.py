"""Models for projects, session contexts and the current project selection."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any

from pydantic import BaseModel, Field

from oc_projects.models.common import ResourceMetadata
from oc_projects.utils.annotations import OpenShiftAnnotations
from oc_projects.utils.errors import ProjectAccessError

PROJECT_API_VERSION = "project.openshift.io/v1"


class Project(BaseModel):
    """OpenShift project (or plain namespace) visible to the caller."""

    metadata: ResourceMetadata
    display_name: str | None = Field(None, description="Display name from annotations")

    @property
    def name(self) -> str:
        return self.metadata.name

    @property
    def has_distinct_display_name(self) -> bool:
        """True when the display name is set and differs from the name."""
        return bool(self.display_name) and self.display_name != self.name

    @classmethod
    def from_project(cls, project: dict[str, Any]) -> Project:
        """Create from a project.openshift.io/v1 Project as returned by the custom objects API."""
        metadata = ResourceMetadata.from_k8s_metadata(
            project.get("metadata") or {},
            kind="Project",
            api_version=PROJECT_API_VERSION,
        )
        return cls._from_metadata(metadata)

    @classmethod
    def from_namespace(cls, namespace: Any) -> Project:
        """Create from a core v1 Namespace.

        Namespaces carry the same annotations as the projects that wrap
        them, so they convert losslessly for listing purposes.
        """
        metadata = ResourceMetadata.from_k8s_metadata(
            namespace.metadata,
            kind="Namespace",
            api_version="v1",
        )
        return cls._from_metadata(metadata)

    @classmethod
    def _from_metadata(cls, metadata: ResourceMetadata) -> Project:
        return cls(
            metadata=metadata,
            display_name=OpenShiftAnnotations.display_name(metadata.annotations),
        )


class ProjectAccess(str, Enum):
    """Outcome of confirming access to the current project."""

    ACCESSIBLE = "Accessible"
    FORBIDDEN = "Forbidden"
    NOT_FOUND = "NotFound"
    OTHER_ERROR = "OtherError"


@dataclass(frozen=True)
class SessionContext:
    """A named kubeconfig context."""

    name: str
    namespace: str = ""
    cluster: str = ""
    auth_info: str = ""


@dataclass(frozen=True)
class SessionConfig:
    """Raw kubeconfig session state: the context table and the selected context."""

    current_context: str = ""
    contexts: dict[str, SessionContext] = field(default_factory=dict)

    @property
    def active_context(self) -> SessionContext | None:
        return self.contexts.get(self.current_context)


@dataclass(frozen=True)
class ResolvedContext:
    """Current project and context naming derived from the session."""

    current_project: str = ""
    context_name: str = ""
    nickname: str = ""


@dataclass(frozen=True)
class Selection:
    """Whether the current project was confirmed accessible."""

    current_project: str = ""
    exists: bool = False
    access: ProjectAccess | None = None
    error: ProjectAccessError | None = None

    @property
    def is_forbidden(self) -> bool:
        return self.access == ProjectAccess.FORBIDDEN


@dataclass(frozen=True)
class ProjectsReport:
    """Rendered projects output and the error to return after printing it."""

    text: str
    error: ProjectAccessError | None = None
