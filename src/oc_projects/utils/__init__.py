"""Utility functions and helpers for oc-projects."""

from oc_projects.utils.annotations import OpenShiftAnnotations
from oc_projects.utils.errors import (
    ConfigurationError,
    EnumerationError,
    OCProjectsError,
    ProjectAccessError,
    ProjectForbiddenError,
    ProjectNotFoundError,
    ValidationError,
)

__all__ = [
    # Errors
    "OCProjectsError",
    "ValidationError",
    "ConfigurationError",
    "EnumerationError",
    "ProjectAccessError",
    "ProjectForbiddenError",
    "ProjectNotFoundError",
    # Annotations
    "OpenShiftAnnotations",
]
