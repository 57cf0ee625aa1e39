"""Exception hierarchy for oc-projects."""


class OCProjectsError(Exception):
    """Base error for all oc-projects failures."""

    pass


class ValidationError(OCProjectsError):
    """Invalid command invocation, raised before any cluster access."""

    pass


class ConfigurationError(OCProjectsError):
    """The kubeconfig session state could not be loaded."""

    pass


class EnumerationError(OCProjectsError):
    """Listing the visible projects failed as a whole."""

    pass


class ProjectAccessError(OCProjectsError):
    """The current project could not be confirmed as accessible."""

    def __init__(self, name: str, message: str | None = None) -> None:
        self.name = name
        super().__init__(message or f"unable to access project '{name}'")


class ProjectForbiddenError(ProjectAccessError):
    """The caller lacks rights to view the project."""

    def __init__(self, name: str, message: str | None = None) -> None:
        super().__init__(name, message or f"project '{name}' is forbidden for the current user")


class ProjectNotFoundError(ProjectAccessError):
    """The current project no longer exists."""

    def __init__(self, name: str, message: str | None = None) -> None:
        super().__init__(name, message or f"project '{name}' not found")
