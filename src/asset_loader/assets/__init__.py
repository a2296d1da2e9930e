from __future__ import annotations

from asset_loader.assets.cache import AssetCache, CacheEntry, CacheInfo
from asset_loader.assets.fetcher import AssetFetcher

__all__ = ["AssetCache", "AssetFetcher", "CacheEntry", "CacheInfo"]
