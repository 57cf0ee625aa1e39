"""Load raw kubeconfig session state.

The kubeconfig files are read without resolving credentials or contacting
the cluster. When several files are listed in $KUBECONFIG they are merged
the way kubectl merges them: the first file to set current-context wins,
and the first definition of a context name wins.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

import yaml

from oc_projects.config import ProjectsConfig
from oc_projects.domains.projects.models import SessionConfig, SessionContext
from oc_projects.utils.errors import ConfigurationError

logger = logging.getLogger(__name__)


def _read_kubeconfig(path: Path) -> dict[str, Any]:
    try:
        data = yaml.safe_load(path.read_text(encoding="utf-8"))
    except yaml.YAMLError as e:
        raise ConfigurationError(f"Failed to parse kubeconfig {path}: {e}") from e
    except OSError as e:
        raise ConfigurationError(f"Failed to read kubeconfig {path}: {e}") from e

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ConfigurationError(f"Invalid kubeconfig {path}: expected a mapping")
    return data


def _parse_contexts(data: dict[str, Any], path: Path) -> dict[str, SessionContext]:
    contexts: dict[str, SessionContext] = {}
    for entry in data.get("contexts") or []:
        if not isinstance(entry, dict) or not entry.get("name"):
            raise ConfigurationError(f"Invalid kubeconfig {path}: context entry without a name")
        body = entry.get("context") or {}
        if not isinstance(body, dict):
            raise ConfigurationError(
                f"Invalid kubeconfig {path}: context '{entry['name']}' is not a mapping"
            )
        contexts[entry["name"]] = SessionContext(
            name=entry["name"],
            namespace=body.get("namespace") or "",
            cluster=body.get("cluster") or "",
            auth_info=body.get("user") or "",
        )
    return contexts


def load_session_config(config: ProjectsConfig) -> SessionConfig:
    """Read and merge the kubeconfig files selected by the configuration.

    Missing files from $KUBECONFIG are skipped, but an explicitly
    configured kubeconfig path must exist.

    Raises:
        ConfigurationError: If a kubeconfig file cannot be read or parsed.
    """
    current_context = ""
    contexts: dict[str, SessionContext] = {}

    for path in config.effective_kubeconfig_paths:
        if not path.exists():
            if config.kubeconfig_path is not None:
                raise ConfigurationError(f"Kubeconfig {path} does not exist")
            logger.debug(f"Skipping missing kubeconfig {path}")
            continue

        data = _read_kubeconfig(path)
        if not current_context:
            current_context = data.get("current-context") or ""
        for name, context in _parse_contexts(data, path).items():
            contexts.setdefault(name, context)

    if config.kubeconfig_context:
        current_context = config.kubeconfig_context

    logger.debug(f"Loaded {len(contexts)} contexts, current context '{current_context}'")
    return SessionConfig(current_context=current_context, contexts=contexts)
