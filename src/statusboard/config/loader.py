"""Locate, read and validate .statusboard.yaml."""

from __future__ import annotations

import logging
import os
import re
from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from statusboard.config.models import StatusboardConfig

logger = logging.getLogger(__name__)

CONFIG_FILENAME = ".statusboard.yaml"

# ${NAME} or ${NAME:-default}
_ENV_REF = re.compile(r"\$\{(?P<name>[A-Za-z_][A-Za-z0-9_]*)(?::-(?P<default>[^}]*))?\}")


def _substitute(match: re.Match[str]) -> str:
    default = match.group("default")
    fallback = match.group(0) if default is None else default
    return os.environ.get(match.group("name"), fallback)


def expand_env(data: Any) -> Any:
    """Substitute environment references in every string of a parsed YAML tree.

    Unset variables without a default are left as written.
    """
    if isinstance(data, dict):
        return {key: expand_env(value) for key, value in data.items()}
    if isinstance(data, list):
        return [expand_env(item) for item in data]
    if isinstance(data, str):
        return _ENV_REF.sub(_substitute, data)
    return data


def find_config_file(start: Path | None = None) -> Path | None:
    """Nearest .statusboard.yaml in *start* (default cwd) or its parents."""
    here = (start or Path.cwd()).resolve()
    candidates = (directory / CONFIG_FILENAME for directory in (here, *here.parents))
    return next((c for c in candidates if c.is_file()), None)


def _describe(exc: ValidationError) -> str:
    return "; ".join(
        f"{'.'.join(str(part) for part in err['loc'])}: {err['msg']}" for err in exc.errors()
    )


def load_config(path: Path | None = None) -> StatusboardConfig:
    """Load .statusboard.yaml with env references expanded and the subdomain normalized."""
    config_path = path or find_config_file()
    if config_path is None or not config_path.is_file():
        raise FileNotFoundError(
            f"Could not find {CONFIG_FILENAME}. Create one from .statusboard.yaml.example or specify a path."
        )

    raw = yaml.safe_load(config_path.read_text(encoding="utf-8"))
    if raw is None:
        raw = {}
    if not isinstance(raw, dict):
        raise ValueError(f"Invalid configuration in {config_path}: top level must be a mapping")

    try:
        config = StatusboardConfig.model_validate(expand_env(raw))
    except ValidationError as exc:
        raise ValueError(f"Invalid configuration in {config_path}: {_describe(exc)}") from exc

    if not config.pagerduty.subdomain:
        logger.warning("%s sets no pagerduty.subdomain; links need one per run", config_path)
    return config
