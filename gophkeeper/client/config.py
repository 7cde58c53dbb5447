"""Client configuration."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass
class CacheConfig:
    """Cache settings: directory for the cache files and validity in days."""

    file_repo: str = ""
    valid_period: int = 0


@dataclass
class ServiceConfig:
    """Service settings."""


@dataclass
class ClientConfig:
    """Remote client settings."""


@dataclass
class Config:
    """Complete client configuration."""

    grpc_client: ClientConfig = field(default_factory=ClientConfig)
    service: ServiceConfig = field(default_factory=ServiceConfig)
    cache: CacheConfig = field(default_factory=CacheConfig)


def get_config() -> Config:
    """Build the client configuration with its defaults applied."""
    config = Config()
    if config.cache.valid_period == 0:
        config.cache.valid_period = 1
    return config