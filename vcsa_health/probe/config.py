"""Configuration for the appliance health probe.

Built once per run from the parsed command line and passed explicitly to
the collector. No file or environment variable is consulted.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict

from ..collectors.base import ConfigError
from ..data.models import ALL_ENDPOINTS


@dataclass
class ProbeConfig:
    """Main configuration container."""

    host: str = ""
    username: str = ""
    password: str = ""
    subcommand: str = ALL_ENDPOINTS

    @classmethod
    def from_args(cls, args) -> "ProbeConfig":
        """Create config from an argparse namespace."""
        return cls(
            host=args.host,
            username=args.username,
            password=args.password,
            subcommand=args.subcommand,
        )

    def validate(self) -> None:
        """Check required inputs.

        Raises:
            ConfigError: Naming the first missing input.
        """
        if not self.host:
            raise ConfigError("--host must be set")
        if not self.username:
            raise ConfigError("--username must be set")
        if not self.password:
            raise ConfigError("--password must be set")
        if not self.subcommand:
            raise ConfigError("--subcommand can't be empty")

    def to_dict(self) -> Dict[str, Any]:
        """Convert config to dictionary, with the password masked."""
        return {
            "host": self.host,
            "username": self.username,
            "password": "***" if self.password else "",
            "subcommand": self.subcommand,
        }
