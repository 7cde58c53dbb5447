"""Server configuration from flags, environment and defaults."""

from __future__ import annotations

import argparse
import os
import sys
from dataclasses import dataclass, field
from typing import Mapping, Optional, Sequence

DEFAULT_DSN = "host=localhost user=user password=password dbname=gophkeeper sslmode=disable"


@dataclass
class StoreConfig:
    """Storage settings."""

    db_dsn: str = ""


@dataclass
class LoggerConfig:
    """Logger settings."""

    log_level: str = ""


@dataclass
class ServiceConfig:
    """Service settings."""


@dataclass
class ServerConfig:
    """Network server settings."""


@dataclass
class Config:
    """Complete server configuration."""

    grpc_server: ServerConfig = field(default_factory=ServerConfig)
    service: ServiceConfig = field(default_factory=ServiceConfig)
    store: StoreConfig = field(default_factory=StoreConfig)
    logger: LoggerConfig = field(default_factory=LoggerConfig)


def get_config(
    argv: Optional[Sequence[str]] = None, environ: Optional[Mapping[str, str]] = None
) -> Config:
    """Build the configuration: the -d flag, then DATABASE_URI, then the default."""
    if argv is None:
        argv = sys.argv[1:]
    if environ is None:
        environ = os.environ

    parser = argparse.ArgumentParser(add_help=False)
    parser.add_argument("-d", dest="dsn", default="", help="database dsn")
    args, _ = parser.parse_known_args(list(argv))

    config = Config()
    config.store.db_dsn = args.dsn
    env_dsn = environ.get("DATABASE_URI", "")
    if env_dsn:
        config.store.db_dsn = env_dsn
    if not config.store.db_dsn:
        config.store.db_dsn = DEFAULT_DSN
    return config