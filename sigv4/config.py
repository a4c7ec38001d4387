# Copyright (c) 2026 Pyry Haulos
#
# This software is released under the MIT License.
# https://opensource.org/licenses/MIT

"""Client configuration.

Configuration is loaded from a YAML file.  The default location follows
the XDG Base Directory Specification:

    ``$XDG_CONFIG_HOME/sigv4/sigv4.yaml``
    (typically ``~/.config/sigv4/sigv4.yaml``)

``!env`` tags resolve values from environment variables.  Example::

    region: us-east-2
    endpoint: https://logs.us-east-2.amazonaws.com
    timeout: 30
    credentials:
      access_key_id: !env AWS_ACCESS_KEY_ID
      secret_access_key: !env AWS_SECRET_ACCESS_KEY

When the ``credentials`` section is omitted, the two ``AWS_*`` variables
above are read.
"""

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any, TypeVar, overload

import yaml
from platformdirs import user_config_path

from sigv4.dotenv_loader import load_dotenv_once
from sigv4.logging import get_logger
from sigv4.signing.signer import Credentials


logger = get_logger(__name__)

#: Application name for XDG path resolution.
_APP_NAME = "sigv4"

_DEFAULT_TIMEOUT_SECONDS = 30


def get_config_path() -> Path:
    """Return the default config file path.

    Returns:
        ``$XDG_CONFIG_HOME/sigv4/sigv4.yaml``.
    """
    return user_config_path(_APP_NAME) / "sigv4.yaml"


class ConfigError(Exception):
    """Base exception for configuration errors."""


# ---------------------------------------------------------------------------
# YAML tag placeholders
# ---------------------------------------------------------------------------


class _EnvVar:
    """Placeholder for an unresolved ``!env VAR_NAME`` tag."""

    def __init__(self, var_name: str) -> None:
        self.var_name = var_name


def _env_constructor(loader: yaml.SafeLoader, node: yaml.Node) -> _EnvVar:
    """Handle ``!env VAR_NAME`` in YAML."""
    value = loader.construct_scalar(node)  # type: ignore[arg-type]
    return _EnvVar(str(value))


def _make_loader() -> type[yaml.SafeLoader]:
    """Create a YAML loader that understands ``!env``."""

    class EnvLoader(yaml.SafeLoader):
        pass

    EnvLoader.add_constructor("!env", _env_constructor)
    return EnvLoader


# ---------------------------------------------------------------------------
# Value resolution
# ---------------------------------------------------------------------------


def _raw_resolve(value: object) -> str | None:
    """Resolve an ``_EnvVar`` to its string value, or stringify literals.

    Returns None if the value is None or the env var is unset or empty.
    """
    if isinstance(value, _EnvVar):
        raw = os.environ.get(value.var_name)
        if not raw:
            return None
        return raw
    if value is None:
        return None
    return str(value)


_MISSING = object()

T = TypeVar("T")


@overload
def _resolve(value: object, coerce: type[T], *, default: T) -> T: ...


@overload
def _resolve(value: object, coerce: type[T], *, required: str) -> T: ...


@overload
def _resolve(value: object, coerce: type[T]) -> T | None: ...


def _resolve(
    value: object,
    coerce: type[Any],
    *,
    default: object = _MISSING,
    required: str = "",
) -> Any:
    """Resolve a YAML value, handling ``!env`` tags and type coercion.

    Args:
        value: Raw value from YAML (may be ``_EnvVar``, None, or a
            literal already parsed by PyYAML).
        coerce: Target type (``str`` or ``int``).
        default: Default when value is absent.
        required: Human-readable field name.  When set, raises
            ``ConfigError`` if the value is absent.

    Returns:
        The resolved, coerced value, or None when optional and absent.

    Raises:
        ConfigError: If a required value is absent or coercion fails.
    """
    if (
        not isinstance(value, _EnvVar)
        and value is not None
        and isinstance(value, coerce)
        and not isinstance(value, bool)
    ):
        return value

    resolved = _raw_resolve(value)

    if resolved is None:
        if required:
            if isinstance(value, _EnvVar):
                raise ConfigError(
                    f"Required config '{required}': environment variable "
                    f"'{value.var_name}' is not set"
                )
            raise ConfigError(f"Required config '{required}' is missing")
        if default is not _MISSING:
            return default
        return None

    try:
        return coerce(resolved)
    except ValueError as e:
        raise ConfigError(
            f"Cannot convert {resolved!r} to {coerce.__name__}"
        ) from e


# ---------------------------------------------------------------------------
# Client configuration
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class ClientConfig:
    """Settings for a signing API client.

    Attributes:
        region: Region name, e.g. ``us-east-2``.
        credentials: Access key pair (auto-redacted in logs).
        endpoint: Base URL override.  None means derive the host from
            the region.
        timeout_seconds: Socket timeout for each request.
    """

    region: str
    credentials: Credentials
    endpoint: str | None = None
    timeout_seconds: int = _DEFAULT_TIMEOUT_SECONDS

    def __post_init__(self) -> None:
        """Validate configuration.

        Raises:
            ConfigError: If configuration is invalid.
        """
        if not self.region:
            raise ConfigError("Config 'region' cannot be empty")
        if self.timeout_seconds < 1:
            raise ConfigError(
                f"Timeout must be >= 1s: {self.timeout_seconds}"
            )
        if self.endpoint is not None and not self.endpoint.startswith(
            ("https://", "http://")
        ):
            raise ConfigError(
                f"Endpoint must be an http(s) URL: {self.endpoint}"
            )

        logger.info(
            "Client config loaded: region=%s, endpoint=%s, timeout=%ds",
            self.region,
            self.endpoint or "(default)",
            self.timeout_seconds,
        )

    @classmethod
    def from_yaml(cls, config_path: Path | None = None) -> "ClientConfig":
        """Load configuration from a YAML file.

        Values tagged with ``!env VAR_NAME`` are resolved from the
        environment at load time.  ``.env`` files beside the config and
        in the working directory are loaded first.

        Args:
            config_path: Path to YAML config file.  Defaults to
                ``~/.config/sigv4/sigv4.yaml`` (XDG).

        Returns:
            ClientConfig instance.

        Raises:
            ConfigError: If the file is missing or required values are absent.
        """
        if config_path is None:
            config_path = get_config_path()

        load_dotenv_once(config_path.parent)

        if not config_path.exists():
            raise ConfigError(f"Config file not found: {config_path}")

        with open(config_path) as f:
            raw = yaml.load(f, Loader=_make_loader())

        if not isinstance(raw, dict):
            raise ConfigError(
                f"Config file must be a YAML mapping: {config_path}"
            )

        return cls._from_raw(raw)

    @classmethod
    def _from_raw(cls, raw: dict) -> "ClientConfig":
        """Build config from parsed (but unresolved) YAML dict."""
        creds = raw.get("credentials") or {}
        if not isinstance(creds, dict):
            raise ConfigError("'credentials' must be a YAML mapping")

        credentials = Credentials(
            access_key_id=_resolve(
                creds.get("access_key_id", _EnvVar("AWS_ACCESS_KEY_ID")),
                str,
                required="credentials.access_key_id",
            ),
            secret_access_key=_resolve(
                creds.get(
                    "secret_access_key", _EnvVar("AWS_SECRET_ACCESS_KEY")
                ),
                str,
                required="credentials.secret_access_key",
            ),
        )

        return cls(
            region=_resolve(raw.get("region"), str, required="region"),
            credentials=credentials,
            endpoint=_resolve(raw.get("endpoint"), str),
            timeout_seconds=_resolve(
                raw.get("timeout"), int, default=_DEFAULT_TIMEOUT_SECONDS
            ),
        )
