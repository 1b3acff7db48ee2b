"""Where: src/phishnet/config/client_config.py
What: Client configuration model, builders and TOML loader.
Why: Validate construction settings once, whether passed in code or read from a file.
"""

from __future__ import annotations

import math
import tomllib
from collections.abc import Mapping
from dataclasses import dataclass, fields, replace
from pathlib import Path
from typing import Any, Final, cast

from phishnet.config.settings import BASE_URL, DEFAULT_QUERY_RATE

_CLIENT_TABLE: Final[str] = "client"


class ClientConfigError(Exception):
    """Base exception for client configuration errors."""


class ClientConfigParseError(ClientConfigError):
    """Raised when the TOML document cannot be parsed."""


class ClientConfigValidationError(ClientConfigError):
    """Raised when configuration values are missing or invalid."""


@dataclass(frozen=True, slots=True)
class ClientConfig:
    """Settings fixed at client construction.

    Attributes:
        api_key: Credential appended to every request as ``apikey``.
        query_rate: Minimum seconds between two requests.
        timeout: Seconds bounding each HTTP call; ``None`` waits indefinitely.
        base_url: Root URL that endpoint paths are appended to.
    """

    api_key: str
    query_rate: float = DEFAULT_QUERY_RATE
    timeout: float | None = None
    base_url: str = BASE_URL

    def __post_init__(self) -> None:
        if not isinstance(self.api_key, str) or not self.api_key.strip():
            raise ClientConfigValidationError("api_key must be a non-empty string")
        if isinstance(self.query_rate, bool) or not isinstance(self.query_rate, (int, float)):
            raise ClientConfigValidationError("query_rate must be a number of seconds")
        if not math.isfinite(self.query_rate) or self.query_rate <= 0:
            raise ClientConfigValidationError(
                f"query_rate must be a positive finite number, got {self.query_rate!r}"
            )
        if self.timeout is not None:
            if isinstance(self.timeout, bool) or not isinstance(self.timeout, (int, float)):
                raise ClientConfigValidationError("timeout must be a number of seconds")
            if not math.isfinite(self.timeout) or self.timeout <= 0:
                raise ClientConfigValidationError(
                    f"timeout must be a positive finite number, got {self.timeout!r}"
                )
        if not isinstance(self.base_url, str) or not self.base_url.strip():
            raise ClientConfigValidationError("base_url must be a non-empty string")

    def with_query_rate(self, seconds: float) -> ClientConfig:
        """Return a copy pacing requests ``seconds`` apart."""
        return replace(self, query_rate=seconds)

    def with_timeout(self, seconds: float | None) -> ClientConfig:
        """Return a copy bounding each HTTP call to ``seconds``."""
        return replace(self, timeout=seconds)

    def with_base_url(self, url: str) -> ClientConfig:
        """Return a copy sending requests to ``url`` instead of the public API."""
        return replace(self, base_url=url)


def load_client_config(path: Path | str) -> ClientConfig:
    """Load a ``ClientConfig`` from the ``[client]`` table of a TOML file.

    Example::

        [client]
        api_key = "ABCDEF"
        query_rate = 0.5
        timeout = 10

    Args:
        path: TOML file to read.

    Returns:
        ClientConfig: Validated configuration.

    Raises:
        ClientConfigParseError: If the file cannot be read or parsed.
        ClientConfigValidationError: If the table is missing or holds bad values.
    """
    source = Path(path).expanduser()
    try:
        with source.open("rb") as handle:
            document = tomllib.load(handle)
    except tomllib.TOMLDecodeError as exc:
        raise ClientConfigParseError(f"Invalid TOML in {source}: {exc}") from exc
    except OSError as exc:
        raise ClientConfigParseError(f"Unable to read {source}: {exc}") from exc

    return client_config_from_mapping(document.get(_CLIENT_TABLE), source=str(source))


def client_config_from_mapping(table: object, *, source: str = "<mapping>") -> ClientConfig:
    """Build a ``ClientConfig`` from an already parsed mapping."""

    if not isinstance(table, Mapping):
        raise ClientConfigValidationError(f"{source}: missing [{_CLIENT_TABLE}] table")

    values = cast(Mapping[str, Any], table)
    allowed = {f.name for f in fields(ClientConfig)}
    unknown = sorted(set(values) - allowed)
    if unknown:
        raise ClientConfigValidationError(
            f"{source}: unknown [{_CLIENT_TABLE}] keys: {', '.join(unknown)}"
        )
    if "api_key" not in values:
        raise ClientConfigValidationError(f"{source}: api_key is required")

    try:
        return ClientConfig(**dict(values))
    except ClientConfigValidationError as exc:
        raise ClientConfigValidationError(f"{source}: {exc}") from exc


__all__ = [
    "ClientConfig",
    "ClientConfigError",
    "ClientConfigParseError",
    "ClientConfigValidationError",
    "client_config_from_mapping",
    "load_client_config",
]
