from __future__ import annotations

from asset_loader.config.defaults import DEFAULT_CONFIGURATION
from asset_loader.config.loader import YamlConfigLoader
from asset_loader.config.models import (
    AssetConfiguration,
    AssetSourceSet,
    CdnPolicy,
    ConfigLoadRequest,
    LoaderSettings,
)
from asset_loader.config.provider import ConfigProvider

__all__ = [
    "AssetConfiguration",
    "AssetSourceSet",
    "CdnPolicy",
    "ConfigLoadRequest",
    "ConfigProvider",
    "DEFAULT_CONFIGURATION",
    "LoaderSettings",
    "YamlConfigLoader",
]
