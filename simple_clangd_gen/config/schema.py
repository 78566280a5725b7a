from typing import Any, Final


_STRING_LIST: Final[dict[str, Any]] = {
    "type": ["array", "null"],
    "items": {"type": "string"},
}

BRANCH_SCHEMA: Final[dict[str, Any]] = {
    "type": "object",
    "properties": {
        "branch": {"type": "string", "minLength": 1},
        "compile_flags": {"type": ["string", "null"]},
        "include_paths": _STRING_LIST,
        "mask": {
            "type": ["array", "null"],
            "items": {"type": "string", "minLength": 1},
            "minItems": 1,
        },
        "tool": {"type": ["string", "null"], "pattern": r"\S"},
        "compiler": {"type": ["string", "null"], "minLength": 1},
    },
    "required": ["branch"],
    "additionalProperties": False,
}

CONFIG_SCHEMA: Final[dict[str, Any]] = {
    "$schema": "https://json-schema.org/draft/2020-12/schema",
    "title": "simple-clangd-gen layout",
    "type": "object",
    "properties": {
        "compile_flags": {"type": ["string", "null"]},
        "include_paths": _STRING_LIST,
        "compiler": {"type": ["string", "null"], "minLength": 1},
        "branches": {"type": "array", "items": BRANCH_SCHEMA},
    },
    "required": ["branches"],
    "additionalProperties": False,
}
