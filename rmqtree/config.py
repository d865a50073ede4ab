from __future__ import generator_stop

import os.path
from typing import Any, Dict, Optional

import toml
from jsonschema import ValidationError, validate

CONFIG_FILENAME = "rmqtree.toml"

DEFAULTS: Dict[str, Any] = {
    "initial_size": 4,
    "prompt": "> ",
}

CONFIG_SCHEMA: Dict[str, Any] = {
    "type": "object",
    "properties": {
        "shell": {
            "type": "object",
            "properties": {
                "initial_size": {"type": "integer", "minimum": 1},
                "prompt": {"type": "string"},
            },
            "additionalProperties": False,
        },
    },
}


def read_toml(path: str) -> Any:
    with open(path, encoding="utf-8") as fr:
        return toml.load(fr)


def load_config(path: Optional[str] = None) -> Dict[str, Any]:

    """Loads the `[shell]` table of a TOML configuration file merged over `DEFAULTS`.
    If `path` is None, `rmqtree.toml` is looked up in the working directory.
    An explicitly given file must exist, a missing default file results in the defaults.
    Raises `ValueError` if the file doesn't match `CONFIG_SCHEMA`.
    """

    config = dict(DEFAULTS)

    if path is None:
        if not os.path.isfile(CONFIG_FILENAME):
            return config
        path = CONFIG_FILENAME

    obj = read_toml(path)

    try:
        validate(obj, CONFIG_SCHEMA)
    except ValidationError as e:
        raise ValueError(f"Invalid configuration {path}: {e.message}") from e

    config.update(obj.get("shell", {}))
    return config
