"""Load and validate layout configuration files."""

from __future__ import annotations

import json
import shlex
from pathlib import Path
from typing import Any

try:
    import tomllib
except ModuleNotFoundError:  # pragma: no cover
    import tomli as tomllib  # type: ignore

import yaml
from jsonschema import Draft202012Validator

from simple_clangd_gen.config.schema import CONFIG_SCHEMA
from simple_clangd_gen.constants import JSON_SUFFIXES, TOML_SUFFIXES, YAML_SUFFIXES
from simple_clangd_gen.errors import (
    InvalidConfigFormatError,
    InvalidConfigSchemaError,
    MissingConfigFileError,
    UnsupportedConfigFormatError,
)
from simple_clangd_gen.models import BranchRule, Configuration

_VALIDATOR = Draft202012Validator(CONFIG_SCHEMA)


def _schema_error_message(error: Any) -> str:
    path = ".".join([str(part) for part in error.path])
    return f"{error.message} at {path}" if path else str(error.message)


def _read_payload(path: Path) -> Any:
    suffix = path.suffix.lower()
    if suffix not in YAML_SUFFIXES + JSON_SUFFIXES + TOML_SUFFIXES:
        raise UnsupportedConfigFormatError(path)
    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise InvalidConfigFormatError(path, str(exc)) from exc

    try:
        if suffix in YAML_SUFFIXES:
            return yaml.safe_load(text)
        if suffix in JSON_SUFFIXES:
            return json.loads(text)
        return tomllib.loads(text)
    except (yaml.YAMLError, json.JSONDecodeError, tomllib.TOMLDecodeError) as exc:
        raise InvalidConfigFormatError(path, str(exc)) from exc


def _check_flags(flags: Any, path: Path, location: str) -> None:
    if not flags:
        return
    try:
        shlex.split(flags)
    except ValueError as exc:
        raise InvalidConfigSchemaError(path, f"{location} compile_flags: {exc}") from exc


def _to_branch(index: int, raw: dict[str, Any], path: Path) -> BranchRule:
    mask = raw.get("mask")
    tool = raw.get("tool")
    if (mask is None) == (tool is None):
        state = "both" if mask is not None else "neither"
        raise InvalidConfigSchemaError(
            path,
            f"branch #{index} '{raw['branch']}' must set exactly one of "
            f"'mask' or 'tool' ({state} given)",
        )
    _check_flags(raw.get("compile_flags"), path, f"branch #{index} '{raw['branch']}'")
    for pattern in mask or ():
        if Path(pattern).is_absolute():
            raise InvalidConfigSchemaError(
                path,
                f"branch #{index} '{raw['branch']}' mask '{pattern}' must be "
                "relative to the branch directory",
            )
    return BranchRule(
        branch=raw["branch"],
        compile_flags=raw.get("compile_flags"),
        include_paths=tuple(raw.get("include_paths") or ()),
        mask=tuple(mask) if mask is not None else None,
        tool=tool,
        compiler=raw.get("compiler"),
    )


def parse_config(payload: Any, path: Path) -> Configuration:
    """Validate a decoded payload and build the configuration tree.

    ``path`` is only used for error messages and ``Configuration.source_path``.
    """
    if not isinstance(payload, dict):
        raise InvalidConfigSchemaError(path, "must be a mapping at the top level")
    error = next(iter(_VALIDATOR.iter_errors(payload)), None)
    if error is not None:
        raise InvalidConfigSchemaError(path, _schema_error_message(error))

    _check_flags(payload.get("compile_flags"), path, "top-level")

    branches = tuple(
        _to_branch(index, raw, path) for index, raw in enumerate(payload["branches"])
    )
    return Configuration(
        compile_flags=payload.get("compile_flags") or "",
        include_paths=tuple(payload.get("include_paths") or ()),
        branches=branches,
        compiler=payload.get("compiler"),
        source_path=path,
    )


def load_config(path: Path) -> Configuration:
    if not path.is_file():
        raise MissingConfigFileError(path)
    return parse_config(_read_payload(path), path)
