"""Entry point for the oc-projects command."""

import argparse
import logging
import sys
from typing import Any

from oc_projects import __version__
from oc_projects.config import LogLevel, ProjectsConfig
from oc_projects.utils.errors import OCProjectsError


def setup_logging(level: LogLevel) -> None:
    """Configure logging for the command."""
    logging.basicConfig(
        level=level.value,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        handlers=[logging.StreamHandler(sys.stderr)],
    )


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        prog="oc-projects",
        description=(
            "Display information about the current active project and existing "
            "projects on the server."
        ),
    )

    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )

    parser.add_argument(
        "-q",
        "--short",
        action="store_true",
        default=False,
        help="If true, display only the project names",
    )

    # Connection options
    parser.add_argument(
        "--kubeconfig",
        default=None,
        help="Path to kubeconfig file",
    )
    parser.add_argument(
        "--context",
        default=None,
        help="Kubeconfig context to use",
    )

    # Logging
    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        default=None,
        help="Logging level (default: WARNING)",
    )

    # Collected only so they can be rejected with a clear message
    parser.add_argument("args", nargs="*", help=argparse.SUPPRESS)

    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    """Main entry point."""
    args = parse_args(argv)

    # Build config from args, falling back to environment/defaults
    config_kwargs: dict[str, Any] = {}

    if args.kubeconfig:
        config_kwargs["kubeconfig_path"] = args.kubeconfig

    if args.context:
        config_kwargs["kubeconfig_context"] = args.context

    if args.log_level:
        config_kwargs["log_level"] = LogLevel(args.log_level)

    config = ProjectsConfig(**config_kwargs)

    setup_logging(config.log_level)
    logger = logging.getLogger(__name__)

    from oc_projects.domains.projects.command import ProjectsCommand

    command = ProjectsCommand(config)
    try:
        command.validate(args.args)
        command.run(short=args.short)
    except OCProjectsError as e:
        logger.debug(f"Command failed: {e!r}")
        print(f"error: {e}", file=sys.stderr)
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
