"""Command-line interface for kubealloc."""

from __future__ import annotations

import argparse
import asyncio
import logging
import sys

from pydantic import ValidationError
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape

from kubealloc import __version__
from kubealloc.constants.defaults import (
    MAX_CONCURRENT_FETCHES_DEFAULT,
    NODE_SELECTOR_DEFAULT,
    OUTPUT_FORMAT_DEFAULT,
)
from kubealloc.constants.enums import OutputFormat
from kubealloc.constants.timeouts import CLUSTER_REQUEST_TIMEOUT
from kubealloc.controllers.cluster.controller import AllocatedResourcesController
from kubealloc.errors import ConfigError, KubeAllocError
from kubealloc.models.state.options import AllocatedResourcesOptions
from kubealloc.utils.report_renderer import render_report

logger = logging.getLogger(__name__)


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser."""
    parser = argparse.ArgumentParser(
        prog="kubealloc",
        description="Report allocated CPU, memory and pod capacity across Kubernetes nodes",
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"kubealloc {__version__}",
    )
    parser.add_argument(
        "-l",
        "--selector",
        default=NODE_SELECTOR_DEFAULT,
        help=(
            "Selector (label query) to filter nodes on, supports '=', '==' and '!=' "
            f"(e.g. -l key1=value1,key2=value2; default: {NODE_SELECTOR_DEFAULT})"
        ),
    )
    parser.add_argument(
        "-g",
        "--group-by-instance-type",
        action="store_true",
        help="Return totals grouped by the instance type",
    )
    parser.add_argument(
        "-d",
        "--node-details",
        action="store_true",
        help="Return per-node details",
    )
    parser.add_argument(
        "-o",
        "--output",
        choices=[fmt.value for fmt in OutputFormat],
        default=OUTPUT_FORMAT_DEFAULT,
        help=f"Output format (default: {OUTPUT_FORMAT_DEFAULT})",
    )
    parser.add_argument(
        "--context",
        help="kubeconfig context to use (default: current context)",
    )
    parser.add_argument(
        "--kubeconfig",
        help="Path to the kubeconfig file (default: kubectl's own resolution)",
    )
    parser.add_argument(
        "--request-timeout",
        default=CLUSTER_REQUEST_TIMEOUT,
        help=(
            "kubectl request timeout as a duration, e.g. 30s, 1m30s or 500ms "
            f"(default: {CLUSTER_REQUEST_TIMEOUT})"
        ),
    )
    parser.add_argument(
        "--max-concurrent",
        type=int,
        default=MAX_CONCURRENT_FETCHES_DEFAULT,
        help=(
            "Maximum concurrent per-node pod fetches "
            f"(default: {MAX_CONCURRENT_FETCHES_DEFAULT})"
        ),
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Enable debug logging on stderr",
    )
    return parser


def configure_logging(verbose: bool, console: Console) -> None:
    """Send log records to stderr through rich."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=console, show_path=verbose)],
        force=True,
    )


def build_options(args: argparse.Namespace) -> AllocatedResourcesOptions:
    """Turn parsed arguments into immutable report options.

    Raises:
        ConfigError: If an option fails validation.
    """
    try:
        return AllocatedResourcesOptions(
            label_selector=args.selector,
            group_by_instance_type=args.group_by_instance_type,
            include_node_details=args.node_details,
            output_format=OutputFormat(args.output),
            context=args.context,
            kubeconfig=args.kubeconfig,
            request_timeout=args.request_timeout,
            max_concurrent_fetches=args.max_concurrent,
        )
    except ValidationError as exc:
        problems = "; ".join(
            f"{'.'.join(str(part) for part in error['loc'])}: {error['msg']}"
            for error in exc.errors()
        )
        raise ConfigError(f"invalid options: {problems}") from exc


def run(options: AllocatedResourcesOptions) -> str:
    """Build and render the report for ``options``.

    The cluster connection is checked before any inventory is listed, so an
    unreachable API server is reported once with kubectl's own reason.
    """
    controller = AllocatedResourcesController(options)
    metrics = asyncio.run(controller.build_report())
    return render_report(metrics, options.output_format)


def main(argv: list[str] | None = None) -> int:
    """Main entry point.

    Returns:
        Exit code: 0 on success, 1 on any kubealloc error.
    """
    parser = create_parser()
    args = parser.parse_args(argv)

    stderr_console = Console(stderr=True)
    configure_logging(args.verbose, stderr_console)

    try:
        options = build_options(args)
        report = run(options)
    except KubeAllocError as exc:
        logger.debug("Report generation failed", exc_info=True)
        stderr_console.print(f"[bold red]error:[/bold red] {escape(str(exc))}", highlight=False)
        return 1

    sys.stdout.write(report if report.endswith("\n") else report + "\n")
    return 0


if __name__ == "__main__":
    sys.exit(main())
