from __future__ import annotations

from typing import Sequence


class AssetLoaderError(Exception):
    """Base class for all asset loader errors."""


class NotConfiguredError(AssetLoaderError):
    def __init__(self) -> None:
        super().__init__("Asset config not loaded. Call resolve_config() first.")


class AssetNotFoundError(AssetLoaderError):
    def __init__(self, asset_name: str, kind: str) -> None:
        self.asset_name = asset_name
        self.kind = kind
        super().__init__(f"{kind.upper()} asset '{asset_name}' not found in config")


class AssetLoadError(AssetLoaderError):
    """Every candidate URL for an asset was exhausted without a 2xx response."""

    def __init__(self, asset_name: str, urls: Sequence[str] = ()) -> None:
        self.asset_name = asset_name
        self.urls = tuple(urls)
        super().__init__(f"Failed to load asset: {asset_name}")


class NetworkError(AssetLoaderError):
    """A single GET failed before a response status was available."""

    def __init__(self, url: str, message: str = "") -> None:
        self.url = url
        super().__init__(message or f"Network error for {url}")


__all__ = [
    "AssetLoadError",
    "AssetLoaderError",
    "AssetNotFoundError",
    "NetworkError",
    "NotConfiguredError",
]
