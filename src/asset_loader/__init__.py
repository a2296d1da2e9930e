"""Remote asset loading with retry, fallback URLs and an in-memory TTL cache."""

from __future__ import annotations

from typing import TYPE_CHECKING

from asset_loader.errors import (
    AssetLoadError,
    AssetLoaderError,
    AssetNotFoundError,
    NetworkError,
    NotConfiguredError,
)

if TYPE_CHECKING:
    from asset_loader.assets import AssetCache, AssetFetcher
    from asset_loader.config import ConfigProvider
    from asset_loader.factory import create_asset_fetcher, load_asset_fetcher

__all__ = [
    "AssetCache",
    "AssetFetcher",
    "AssetLoadError",
    "AssetLoaderError",
    "AssetNotFoundError",
    "ConfigProvider",
    "NetworkError",
    "NotConfiguredError",
    "create_asset_fetcher",
    "load_asset_fetcher",
]


def __getattr__(name: str):
    if name == "AssetCache":
        from asset_loader.assets import AssetCache as _AssetCache

        return _AssetCache
    if name == "AssetFetcher":
        from asset_loader.assets import AssetFetcher as _AssetFetcher

        return _AssetFetcher
    if name == "ConfigProvider":
        from asset_loader.config import ConfigProvider as _ConfigProvider

        return _ConfigProvider
    if name == "create_asset_fetcher":
        from asset_loader.factory import create_asset_fetcher as _create_asset_fetcher

        return _create_asset_fetcher
    if name == "load_asset_fetcher":
        from asset_loader.factory import load_asset_fetcher as _load_asset_fetcher

        return _load_asset_fetcher
    raise AttributeError(name)
