#!/usr/bin/env python3
"""
VCSA Health Probe - Main entry point.

Checks the appliance health resources and reports a Nagios-style result:
a severity line, one line per checked subsystem, and a matching exit code.
"""

from __future__ import annotations

import argparse
import sys
from typing import List, Optional

from ..collectors.base import ConfigError, ProbeError
from ..collectors.vapi import VAPICollector
from ..data.models import ALL_ENDPOINTS, ENDPOINTS, ProbeOutcome
from .config import ProbeConfig

SUBCOMMAND_CHOICES = "|".join([ALL_ENDPOINTS] + [ep.name for ep in ENDPOINTS])


def _log(msg: str, verbose: bool) -> None:
    """Diagnostics go to stderr; stdout carries the check result."""
    if verbose:
        print(msg, file=sys.stderr, flush=True)


class ProbeArgumentParser(argparse.ArgumentParser):
    """Argument parser that reports usage errors as UNKNOWN."""

    def error(self, message):
        raise ConfigError(message)


def run_probe(config: ProbeConfig, verbose: bool = False) -> ProbeOutcome:
    """Query the appliance and evaluate the overall status.

    Raises:
        CollectorError: If authentication or any health request fails.
    """
    with VAPICollector(
        host=config.host,
        username=config.username,
        password=config.password,
        verbose=verbose,
    ) as collector:
        report = collector.collect(config.subcommand)

    _log(f"[probe] overall status: {report.overall_status!r}", verbose)
    return ProbeOutcome.from_report(report)


def parse_args(argv: Optional[List[str]] = None):
    parser = ProbeArgumentParser(
        prog="vcsa-health",
        description="Health check for the vCenter Server Appliance REST API",
    )

    parser.add_argument("--host", default="", help="IP or FQDN of VMware VCSA")
    parser.add_argument("--username", default="", help="authorized user account name")
    parser.add_argument("--password", default="", help="password in plain text")
    parser.add_argument(
        "--subcommand",
        default=ALL_ENDPOINTS,
        help=f"subcommand you want to execute <{SUBCOMMAND_CHOICES}> (default: %(default)s)",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        default=False,
        help="Print diagnostics to stderr",
    )

    return parser.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> int:
    """Entry point for the vcsa-health command.

    Prints the check result and returns the exit code.
    """
    verbose = False
    try:
        args = parse_args(argv)
        verbose = args.verbose
        config = ProbeConfig.from_args(args)
        _log(f"[config] Loaded: {config.to_dict()}", verbose)
        config.validate()
        outcome = run_probe(config, verbose=verbose)
    except ProbeError as e:
        outcome = ProbeOutcome.unknown(str(e))

    _log(f"[probe] {outcome.severity.value} (exit {outcome.exit_code})", verbose)
    print(outcome.render(), flush=True)
    return outcome.exit_code


if __name__ == "__main__":
    sys.exit(main())
