"""Entry point for `python -m faasreport`.

Usage:
    python -m faasreport --kubeconfig ~/.kube/config
"""

from __future__ import annotations

from faasreport.cli import cli

cli(prog_name="faasreport")
