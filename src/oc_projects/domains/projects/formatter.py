"""Render the human-readable projects summary."""

from __future__ import annotations

from collections.abc import Sequence

from oc_projects.domains.projects.models import Project, ProjectsReport, Selection
from oc_projects.utils.annotations import OpenShiftAnnotations

NO_PROJECTS_MESSAGE = (
    "You are not a member of any projects. You can request a project to be created "
    "with the 'new-project' command."
)

CURRENT_MARKER = "  * "
PLAIN_MARKER = "    "


def quote(value: str) -> str:
    """Double-quote a value, escaping backslashes and double quotes."""
    escaped = value.replace("\\", "\\\\").replace('"', '\\"')
    return f'"{escaped}"'


def display_name_and_name(project: Project) -> str:
    """Return "DisplayName (name)", or just the name when there is no distinct display name.

    Only the openshift.io display name annotation counts here; the legacy
    key is used for list entries alone.
    """
    display_name = project.metadata.annotations.get(OpenShiftAnnotations.DISPLAY_NAME)
    if display_name and display_name != project.name:
        return f"{display_name} ({project.name})"
    return project.name


def _render_listing(
    projects: Sequence[Project],
    selection: Selection,
    short: bool,
    command_name: str,
) -> str:
    if short:
        return "\n".join(p.name for p in projects)

    lines = [
        "You have access to the following projects and can switch between them "
        f"with '{command_name} project <projectname>':",
        "",
    ]
    for project in projects:
        marker = PLAIN_MARKER
        if selection.exists and project.name == selection.current_project:
            marker = CURRENT_MARKER
        if project.has_distinct_display_name:
            lines.append(f"{marker}{project.name} - {project.display_name}")
        else:
            lines.append(f"{marker}{project.name}")
    return "\n".join(lines)


def format_projects(
    projects: Sequence[Project],
    selection: Selection,
    *,
    short: bool = False,
    command_name: str = "oc",
    server_host: str = "",
    context_name: str = "",
    nickname: str = "",
) -> ProjectsReport:
    """Render the projects summary for the given selection.

    The output shape depends on how many projects there are and on short
    mode. In verbose mode a non-empty listing is followed by a footer naming
    the current project, or, when the current project could not be
    confirmed, by the access error that the caller must return after
    printing the text.

    Args:
        projects: Visible projects; rendered in ascending name order.
        selection: Result of the current project access check.
        short: Emit bare project names only.
        command_name: Parent command used in the switching hint.
        server_host: API server URL shown in the footer.
        context_name: Name of the active kubeconfig context.
        nickname: Generated nickname of the active context.

    Returns:
        ProjectsReport with the text (without trailing newline) and the
        error to propagate, if any.
    """
    projects = sorted(projects, key=lambda p: p.name)

    if not projects:
        return ProjectsReport(text="" if short else NO_PROJECTS_MESSAGE)

    if len(projects) == 1:
        if short:
            text = projects[0].name
        else:
            text = (
                "You have one project on this server: "
                f"{quote(display_name_and_name(projects[0]))}."
            )
    else:
        text = _render_listing(projects, selection, short, command_name)

    if short:
        return ProjectsReport(text=text)

    if not selection.exists:
        if selection.is_forbidden:
            text += (
                f"\nYou do not have rights to view project {quote(selection.current_project)}. "
                "Please switch to an existing one."
            )
        return ProjectsReport(text=text, error=selection.error)

    # Generated contexts get the short form; their names mean nothing to the user
    if context_name == nickname:
        footer = f"Using project {quote(selection.current_project)} on server {quote(server_host)}."
    else:
        footer = (
            f"Using project {quote(selection.current_project)} from context named "
            f"{quote(context_name)} on server {quote(server_host)}."
        )
    return ProjectsReport(text=f"{text}\n\n{footer}")
