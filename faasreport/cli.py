"""faasreport command-line interface.

Exposes:
    cli -- Click command entry point (registered as ``faasreport`` script).
"""

from __future__ import annotations

import asyncio

import click

from faasreport.app import FatalError, ReportApp
from faasreport.config import load_config
from faasreport.models.config import DEFAULT_KUBECONFIG, DEFAULT_NAMESPACE
from faasreport.observability.logging import get_logger, setup_logging


@click.command(context_settings={"help_option_names": ["-h", "--help"]})
@click.option(
    "--kubeconfig",
    default=None,
    help=f"Path to KUBECONFIG (default: $FAASREPORT_KUBECONFIG or {DEFAULT_KUBECONFIG}); "
    "$HOME and ~ are expanded. Falls back to in-cluster config when the file is missing.",
)
@click.option(
    "--openfaas-namespace",
    "namespace",
    default=None,
    help=f"Namespace for the OpenFaaS installation (default: $FAASREPORT_NAMESPACE or {DEFAULT_NAMESPACE}).",
)
@click.option(
    "--log-level",
    type=click.Choice(["debug", "info", "warning", "error"], case_sensitive=False),
    default=None,
    help="Diagnostic log level on stderr (default: $FAASREPORT_LOG_LEVEL or warning).",
)
@click.version_option(package_name="faasreport")
def cli(kubeconfig: str | None, namespace: str | None, log_level: str | None) -> None:
    """Print a diagnostic report for an OpenFaaS installation."""
    try:
        config = load_config(kubeconfig=kubeconfig, namespace=namespace, log_level=log_level)
    except ValueError as exc:
        raise click.BadParameter(str(exc)) from exc

    setup_logging(config.log.level)
    log = get_logger("cli")

    try:
        report = asyncio.run(ReportApp(config).run())
    except FatalError as exc:
        log.debug("fatal error", stage=exc.stage, error=str(exc.cause))
        raise click.ClickException(str(exc)) from exc

    click.echo(report, nl=False)
