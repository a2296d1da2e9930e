from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Any, Dict, Mapping, Optional

import yaml
from dotenv import dotenv_values

from asset_loader.config.models import ConfigLoadRequest, LoaderSettings

logger = logging.getLogger(__name__)


def _override_values(env_prefix: str, dotenv_path: Optional[str]) -> Dict[str, str]:
    """
    Collect ``<prefix>SECTION__KEY`` overrides keyed by dotted path.

    Process environment wins over the ``.env`` file; neither is written back.
    """
    merged: Dict[str, Optional[str]] = {}
    if dotenv_path is not None and Path(dotenv_path).exists():
        merged.update(dotenv_values(dotenv_path))
    merged.update(os.environ)

    overrides: Dict[str, str] = {}
    for name, value in merged.items():
        if not name.startswith(env_prefix) or value is None:
            continue
        segments = [part.lower() for part in name[len(env_prefix) :].split("__") if part]
        if not segments:
            raise ValueError(f"Invalid environment variable override name: {name}")
        overrides[".".join(segments)] = value
    return overrides


def _set_path(settings: Dict[str, Any], dotted: str, value: str) -> None:
    *parents, leaf = dotted.split(".")
    node: Any = settings
    for segment in parents:
        node = node.get(segment) if isinstance(node, Mapping) else None
        if not isinstance(node, dict):
            raise KeyError(f"Unknown settings key path: {dotted}")
    if leaf not in node:
        raise KeyError(f"Unknown settings key path: {dotted}")
    node[leaf] = value


class YamlConfigLoader:
    """Loads LoaderSettings from a YAML file plus environment overrides."""

    async def load(self, request: ConfigLoadRequest = ConfigLoadRequest()) -> LoaderSettings:
        yaml_path = Path(request.yaml_path)
        if not yaml_path.exists():
            raise FileNotFoundError(f"Settings file not found: {yaml_path}")

        data = yaml.safe_load(yaml_path.read_text(encoding="utf-8")) or {}
        if not isinstance(data, dict):
            raise ValueError(f"Top-level YAML must be a mapping, got: {type(data).__name__}")

        overrides = _override_values(request.env_prefix, request.dotenv_path)
        for dotted, value in sorted(overrides.items()):
            _set_path(data, dotted, value)

        settings = LoaderSettings.model_validate(data)
        logger.debug("Loader settings loaded. path=%s overrides=%s", yaml_path, sorted(overrides))
        return settings
