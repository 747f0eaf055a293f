"""Configuration loading and management for next-dehydrate.

Configuration sources are merged in priority order:
    1. Defaults (defined in DehydrateConfig)
    2. Global config (~/.next-dehydrate.toml)
    3. Project config (./next-dehydrate.toml)
    4. Explicit config file
    5. Environment variables (NEXT_DEHYDRATE_* prefix)
    6. CLI overrides (passed as kwargs)

Example:
    >>> config = load_config(verbose=True, workers=4)
    >>> config.verbosity
    'verbose'
    >>> config.workers
    4
"""

from __future__ import annotations

import os
import tomllib
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Literal, Optional, get_type_hints

from .exceptions import DehydrateError, InvalidConfigError

Verbosity = Literal["quiet", "normal", "verbose"]

DEFAULT_SERVER_PORT = 3000
DEFAULT_HOST = "127.0.0.1"

_ENV_PREFIX = "NEXT_DEHYDRATE_"
_CONFIG_NAME = "next-dehydrate.toml"


@dataclass(frozen=True)
class DehydrateConfig:
    """Configuration for a dehydration run.

    Attributes:
        Output control:
            verbosity: Logging verbosity level
            minify: Minify rewritten HTML documents before writing
            out_dir: Write results here instead of rewriting the build in place

        Performance tuning:
            workers: Number of parallel page workers (None = auto-detect)

        Source resolution:
            alias_prefixes: Import prefixes resolved against the source root
            source_extensions: Recognised source extensions, in resolution order

        Preview server:
            serve: Start the preview server after processing
            host: Interface the preview server binds to
            port: Port for the preview server
    """

    # Output control
    verbosity: Verbosity = "normal"
    minify: bool = True
    out_dir: Optional[str] = None

    # Performance tuning
    workers: Optional[int] = None

    # Source resolution
    alias_prefixes: tuple[str, ...] = ("@/",)
    source_extensions: tuple[str, ...] = (".tsx", ".ts", ".jsx", ".js")

    # Preview server
    serve: bool = False
    host: str = DEFAULT_HOST
    port: int = DEFAULT_SERVER_PORT

    def __post_init__(self) -> None:
        """Validate configuration after initialization."""
        if self.verbosity not in ("quiet", "normal", "verbose"):
            raise ValueError("verbosity must be one of quiet, normal, verbose")

        if self.workers is not None and self.workers < 1:
            raise ValueError("workers must be at least 1")

        if not 0 < self.port < 65536:
            raise ValueError("port must be between 1 and 65535")

        if not self.source_extensions:
            raise ValueError("source_extensions must not be empty")
        for ext in self.source_extensions:
            if not ext.startswith("."):
                raise ValueError(f"source extension must start with '.': {ext!r}")

        for prefix in self.alias_prefixes:
            if not prefix.endswith("/"):
                raise ValueError(f"alias prefix must end with '/': {prefix!r}")

    @property
    def verbose(self) -> bool:
        return self.verbosity == "verbose"

    @property
    def quiet(self) -> bool:
        return self.verbosity == "quiet"


def load_config(config_file: Optional[Path] = None, **overrides) -> DehydrateConfig:
    """Load configuration with auto-discovery and merging.

    Args:
        config_file: Optional explicit config file path
        **overrides: Direct overrides (typically from CLI flags). ``None``
            values are ignored so unset CLI options keep lower-priority values.

    Returns:
        Validated DehydrateConfig instance

    Raises:
        DehydrateError: If a config file is invalid or missing
    """
    merged: dict[str, Any] = {}

    global_config = Path.home() / f".{_CONFIG_NAME}"
    if global_config.exists():
        try:
            merged.update(_load_toml_file(global_config))
        except Exception as e:
            raise DehydrateError(f"Invalid global config '{global_config}': {e}")

    project_config = Path.cwd() / _CONFIG_NAME
    if project_config.exists():
        try:
            merged.update(_load_toml_file(project_config))
        except Exception as e:
            raise DehydrateError(f"Invalid project config '{project_config}': {e}")

    if config_file is not None:
        if not config_file.exists():
            raise DehydrateError(f"Config file not found: {config_file}")
        try:
            merged.update(_load_toml_file(config_file))
        except Exception as e:
            raise DehydrateError(f"Invalid config file '{config_file}': {e}")

    merged.update(_load_env_vars())

    if "verbose" in overrides:
        if overrides["verbose"]:
            overrides["verbosity"] = "verbose"
        del overrides["verbose"]
    if "quiet" in overrides:
        if overrides["quiet"]:
            overrides["verbosity"] = "quiet"
        del overrides["quiet"]

    merged.update({k: v for k, v in overrides.items() if v is not None})

    # TOML arrays arrive as lists
    for key in ("alias_prefixes", "source_extensions"):
        if isinstance(merged.get(key), list):
            merged[key] = tuple(merged[key])

    try:
        return DehydrateConfig(**merged)
    except (TypeError, ValueError) as e:
        raise DehydrateError(f"Invalid configuration: {e}")


def _load_env_vars() -> dict[str, Any]:
    """Load configuration from NEXT_DEHYDRATE_* environment variables.

    Supported environment variables:
        NEXT_DEHYDRATE_VERBOSITY: quiet/normal/verbose
        NEXT_DEHYDRATE_MINIFY: bool (true/false/1/0)
        NEXT_DEHYDRATE_OUT_DIR: str
        NEXT_DEHYDRATE_WORKERS: int
        NEXT_DEHYDRATE_SERVE: bool
        NEXT_DEHYDRATE_HOST: str
        NEXT_DEHYDRATE_PORT: int
    """
    type_hints = get_type_hints(DehydrateConfig)

    result: dict[str, Any] = {}

    for field_name in DehydrateConfig.__dataclass_fields__:
        env_key = f"{_ENV_PREFIX}{field_name.upper()}"
        env_value = os.environ.get(env_key)

        if env_value is None:
            continue

        type_hint = type_hints.get(field_name)
        if type_hint is None:
            continue

        try:
            parsed = _parse_env_value(env_value, type_hint)
            if parsed is not None:
                result[field_name] = parsed
        except ValueError as e:
            raise InvalidConfigError(env_key, env_value, str(e))

    return result


def _parse_env_value(value: str, type_hint: Any) -> Any:
    """Parse environment variable string to the correct type.

    Returns None for types that cannot be expressed as a single string
    (tuples such as alias_prefixes).

    Raises:
        ValueError: If value can't be parsed to expected type
    """
    origin = getattr(type_hint, "__origin__", None)

    # Optional[X] is Union[X, None]
    args = getattr(type_hint, "__args__", ())
    if type(None) in args:
        non_none_types = [t for t in args if t is not type(None)]
        if non_none_types:
            type_hint = non_none_types[0]
            origin = getattr(type_hint, "__origin__", None)

    if origin is tuple or type_hint is tuple:
        return None

    if type_hint is bool:
        lower = value.lower()
        if lower in ("true", "1", "yes", "on"):
            return True
        elif lower in ("false", "0", "no", "off"):
            return False
        else:
            raise ValueError(f"expected true/false, got '{value}'")

    if type_hint is int:
        return int(value)

    if type_hint is str or origin is Literal:
        return value

    return None


def _load_toml_file(path: Path) -> dict:
    """Load a TOML file and return the parsed dict."""
    with open(path, "rb") as f:
        return tomllib.load(f)
