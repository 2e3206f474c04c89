"""
TOML-based config file loading for md2vim.

Searches for `.md2vim.toml`, `md2vim.toml`, or `pyproject.toml [tool.md2vim]`
walking up from the current directory. Config values are merged with CLI flags
using three-way precedence: explicit CLI flags > config file > built-in defaults.
"""

from __future__ import annotations

import sys
from dataclasses import dataclass, fields
from pathlib import Path
from typing import Any, TypeVar, cast

if sys.version_info >= (3, 11):
    import tomllib  # pyright: ignore[reportUnreachable]
else:
    import tomli as tomllib  # type: ignore[no-redef]  # pyright: ignore[reportUnreachable]


@dataclass
class Md2VimConfig:
    """
    Parsed config from a TOML file. Fields are `None` when not set in the config,
    allowing the merge logic to distinguish "not configured" from "explicitly set
    to default value".
    """

    cols: int | None = None
    tabs: int | None = None
    notoc: bool | None = None
    norules: bool | None = None
    pascal: bool | None = None
    desc: str | None = None


# Config file search order (first match wins within each directory level)
_CONFIG_FILENAMES = [".md2vim.toml", "md2vim.toml", "pyproject.toml"]

# Mapping from TOML kebab-case or long keys to field names
_KEY_ALIASES: dict[str, str] = {
    "columns": "cols",
    "tab-width": "tabs",
    "no-toc": "notoc",
    "no-rules": "norules",
    "description": "desc",
}

_VALID_FIELDS = {f.name for f in fields(Md2VimConfig)}


def find_config_file(start_dir: Path) -> Path | None:
    """
    Walk up from `start_dir` looking for a config file. Returns the first
    found, or `None`. Search order per directory: `.md2vim.toml` >
    `md2vim.toml` > `pyproject.toml` (only if it has `[tool.md2vim]`).
    """
    current = start_dir.resolve()
    while True:
        for filename in _CONFIG_FILENAMES:
            candidate = current / filename
            if candidate.is_file():
                if filename == "pyproject.toml":
                    if _pyproject_has_md2vim_section(candidate):
                        return candidate
                else:
                    return candidate
        parent = current.parent
        if parent == current:
            break
        current = parent
    return None


def _pyproject_has_md2vim_section(path: Path) -> bool:
    """Check if a pyproject.toml has a [tool.md2vim] section."""
    try:
        data = tomllib.loads(path.read_text())
        return "md2vim" in data.get("tool", {})
    except (tomllib.TOMLDecodeError, OSError):
        return False


def load_config(config_path: Path) -> Md2VimConfig:
    """
    Load a `Md2VimConfig` from a TOML file, extracting `[tool.md2vim]` from a
    `pyproject.toml`. A file that is not valid TOML is reported on stderr and
    treated as empty.
    """
    try:
        data = tomllib.loads(config_path.read_text())
    except tomllib.TOMLDecodeError as e:
        print(f"Warning: ignoring invalid config file {config_path}: {e}", file=sys.stderr)
        return Md2VimConfig()

    if config_path.name == "pyproject.toml":
        data = data.get("tool", {}).get("md2vim", {})

    return _parse_config_data(data)


def _parse_config_data(data: dict[str, Any]) -> Md2VimConfig:
    """Parse a flat or sectioned TOML dict into Md2VimConfig."""
    # Flatten sections such as [layout] into the top level
    flat: dict[str, Any] = {}
    for key, value in data.items():
        if isinstance(value, dict):
            for sub_key, sub_value in cast(dict[str, Any], value).items():
                flat[sub_key] = sub_value
        else:
            flat[key] = value

    mapped: dict[str, Any] = {}
    for key, value in flat.items():
        name = _KEY_ALIASES.get(key, key.replace("-", "_"))
        if name in _VALID_FIELDS:
            mapped[name] = value
        else:
            print(f"Warning: unrecognized config key `{key}`", file=sys.stderr)

    config = Md2VimConfig(**mapped)
    _check_types(config)
    return config


def _check_types(config: Md2VimConfig) -> None:
    expected: dict[str, type] = {
        "cols": int,
        "tabs": int,
        "notoc": bool,
        "norules": bool,
        "pascal": bool,
        "desc": str,
    }
    for name, kind in expected.items():
        value = getattr(config, name)
        # bool is a subclass of int, so reject it explicitly for numeric fields
        if value is not None and (
            not isinstance(value, kind) or (kind is int and isinstance(value, bool))
        ):
            raise ValueError(f"Config value `{name}` must be of type {kind.__name__}: {value!r}")


_T = TypeVar("_T")


def merge_cli_with_config(
    cli_opts: _T,
    config: Md2VimConfig | None,
    explicit_flags: set[str],
) -> _T:
    """
    Merge CLI options with config file settings.

    Precedence: explicit CLI flags > config file > built-in defaults.
    """
    if config is None:
        return cli_opts

    for cfg_field in fields(Md2VimConfig):
        cfg_value = getattr(config, cfg_field.name)
        if cfg_value is None:
            continue  # Not set in config

        if cfg_field.name in explicit_flags:
            continue

        if hasattr(cli_opts, cfg_field.name):
            setattr(cli_opts, cfg_field.name, cfg_value)

    return cli_opts
