"""Resolve the current project from kubeconfig session state."""

from __future__ import annotations

import logging

from oc_projects.domains.projects.models import ResolvedContext, SessionConfig

logger = logging.getLogger(__name__)


def get_context_nickname(namespace: str, cluster: str, auth_info: str) -> str:
    """Return the context name `oc login` would generate for these fields.

    Generated user entries are named ``user/cluster``; only the user part
    is kept.
    """
    user = auth_info.split("/", 1)[0]
    return f"{namespace}/{cluster}/{user}"


def resolve_context(session: SessionConfig | None) -> ResolvedContext:
    """Extract the current project and context nickname from the session.

    A missing session, or a current-context that names no context, yields an
    empty current project.
    """
    if session is None:
        return ResolvedContext()

    context = session.active_context
    if context is None:
        logger.debug(f"No active context found for current-context '{session.current_context}'")
        return ResolvedContext(context_name=session.current_context)

    return ResolvedContext(
        current_project=context.namespace,
        context_name=session.current_context,
        nickname=get_context_nickname(context.namespace, context.cluster, context.auth_info),
    )
