from __future__ import annotations

import asyncio
import logging
from typing import Awaitable, Callable, List, Optional

from asset_loader.assets.cache import AssetCache, CacheInfo
from asset_loader.config.defaults import DEFAULT_RETRY_ATTEMPTS, DEFAULT_RETRY_DELAY_MS
from asset_loader.config.models import AssetConfiguration, AssetKind
from asset_loader.config.provider import ConfigProvider
from asset_loader.errors import AssetLoadError, AssetNotFoundError, NetworkError, NotConfiguredError
from asset_loader.transport.interfaces import HttpTransport

logger = logging.getLogger(__name__)


def cache_key(kind: str, asset_name: str) -> str:
    return f"{kind}_{asset_name}"


class AssetFetcher:
    """
    Loads named assets through the TTL cache, retrying each candidate URL with linear
    backoff before falling back to the next one.

    Concurrent loads of the same uncached asset are not coalesced; each performs its own
    network attempts and the last one to finish wins the cache slot.
    """

    def __init__(
        self,
        *,
        provider: ConfigProvider,
        transport: HttpTransport,
        cache: AssetCache,
        sleep: Callable[[float], Awaitable[None]] = asyncio.sleep,
    ) -> None:
        self._provider = provider
        self._transport = transport
        self._cache = cache
        self._sleep = sleep

    @property
    def provider(self) -> ConfigProvider:
        return self._provider

    def _require_config(self) -> AssetConfiguration:
        config = self._provider.active
        if config is None:
            raise NotConfiguredError()
        return config

    async def load_css(self, asset_name: str) -> str:
        return await self.load_asset(asset_name, kind="css")

    async def load_html(self, asset_name: str) -> str:
        return await self.load_asset(asset_name, kind="html")

    async def load_asset(self, asset_name: str, kind: AssetKind = "css") -> str:
        config = self._require_config()
        sources = config.find_asset(kind, asset_name)
        if sources is None:
            raise AssetNotFoundError(asset_name, kind)

        key = cache_key(kind, asset_name)
        cached = self._cache.get_fresh(key, config.cdn_policy.cache_duration_ms)
        if cached is not None:
            logger.debug("Using cached asset. key=%s", key)
            return cached

        urls = sources.candidate_urls(config.cdn_policy.primary_host)
        content: Optional[str] = None
        for index, url in enumerate(urls):
            if index > 0:
                logger.info("Trying fallback URL for asset. key=%s url=%s", key, url)
            content = await self.fetch_with_retry(url)
            if content:
                break
            if content is not None:
                logger.warning("Asset source returned an empty body. key=%s url=%s", key, url)

        # An empty body is not content: it neither ends the fallback nor gets cached.
        if not content:
            logger.error("Failed to load asset from every source. key=%s urls=%s", key, urls)
            raise AssetLoadError(asset_name, urls)

        self._cache.put(key, content)
        logger.info("External asset loaded. key=%s size=%d", key, len(content))
        return content

    async def fetch_with_retry(
        self,
        url: str,
        *,
        attempts: Optional[int] = None,
        delay_ms: Optional[int] = None,
    ) -> Optional[str]:
        """
        GET ``url`` up to ``attempts`` times, sleeping ``delay_ms * (i + 1)`` after the
        i-th failed attempt. Returns the body of the first 2xx response, or None once
        every attempt has failed.
        """
        policy = self._provider.active.cdn_policy if self._provider.active else None
        if attempts is None:
            attempts = policy.retry_attempts if policy else DEFAULT_RETRY_ATTEMPTS
        if delay_ms is None:
            delay_ms = policy.retry_delay_ms if policy else DEFAULT_RETRY_DELAY_MS

        for attempt in range(attempts):
            logger.debug("Fetching asset. url=%s attempt=%s/%s", url, attempt + 1, attempts)
            try:
                response = await self._transport.get(url)
                if response.ok:
                    return response.text
                logger.warning("Asset request failed. url=%s status=%s attempt=%s", url, response.status, attempt + 1)
            except NetworkError as e:
                logger.warning("Asset request encountered a network error. url=%s error=%s attempt=%s", url, e, attempt + 1)

            if attempt < attempts - 1:
                await self._sleep(delay_ms * (attempt + 1) / 1000)

        return None

    def clear_cache(self) -> None:
        self._cache.clear()
        logger.info("Asset cache cleared.")

    def cache_info(self) -> List[CacheInfo]:
        return self._cache.snapshot()
