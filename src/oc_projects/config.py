"""Configuration for oc-projects."""

from __future__ import annotations

import os
from enum import Enum
from functools import lru_cache
from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_KUBECONFIG = Path.home() / ".kube" / "config"


class LogLevel(str, Enum):
    """Logging level."""

    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"


class ProjectsConfig(BaseSettings):
    """Configuration for the projects command.

    Loaded from environment variables with OC_PROJECTS_ prefix
    or from a .env file. Command line flags take precedence.
    """

    model_config = SettingsConfigDict(
        env_prefix="OC_PROJECTS_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    kubeconfig_path: Path | None = Field(
        default=None,
        description="Path to kubeconfig file (default: $KUBECONFIG or ~/.kube/config)",
    )
    kubeconfig_context: str | None = Field(
        default=None,
        description="Kubeconfig context to use instead of current-context",
    )
    command_name: str = Field(
        default="oc",
        description="Parent command name used in the project switching hint",
    )
    log_level: LogLevel = Field(
        default=LogLevel.WARNING,
        description="Logging level",
    )

    @property
    def effective_kubeconfig_paths(self) -> list[Path]:
        """Kubeconfig files to read, in merge precedence order.

        An explicit path wins; otherwise every entry of $KUBECONFIG is used,
        falling back to ~/.kube/config.
        """
        if self.kubeconfig_path is not None:
            return [self.kubeconfig_path.expanduser()]

        env_value = os.environ.get("KUBECONFIG", "")
        paths = [Path(p).expanduser() for p in env_value.split(os.pathsep) if p]
        return paths or [DEFAULT_KUBECONFIG]


@lru_cache
def get_config() -> ProjectsConfig:
    """Get the configuration built from the environment."""
    return ProjectsConfig()
