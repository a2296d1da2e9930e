from __future__ import annotations

import logging
from typing import Optional

from asset_loader.assets import AssetCache, AssetFetcher
from asset_loader.config.loader import YamlConfigLoader
from asset_loader.config.models import ConfigLoadRequest, LoaderSettings
from asset_loader.config.provider import ConfigProvider
from asset_loader.logging import init_logging
from asset_loader.transport.impl import AiohttpTransport
from asset_loader.transport.interfaces import HttpTransport

logger = logging.getLogger(__name__)


def create_asset_fetcher(
    settings: LoaderSettings,
    *,
    transport: Optional[HttpTransport] = None,
    cache: Optional[AssetCache] = None,
) -> AssetFetcher:
    """
    Wire a ConfigProvider and an AssetFetcher that share one transport.

    The provider is reachable as ``fetcher.provider``; callers still resolve the
    configuration themselves before loading assets.
    """
    if transport is None:
        transport = AiohttpTransport(settings.http)
    provider = ConfigProvider(transport, config_url=settings.config_url)
    logger.debug("Asset fetcher created. config_url=%s", settings.config_url)
    return AssetFetcher(
        provider=provider,
        transport=transport,
        cache=cache if cache is not None else AssetCache(),
    )


async def load_asset_fetcher(
    request: ConfigLoadRequest = ConfigLoadRequest(),
    *,
    transport: Optional[HttpTransport] = None,
    resolve: bool = True,
) -> AssetFetcher:
    """
    Load settings from disk, set up logging, and build a fetcher.

    With ``resolve`` the remote asset configuration is resolved before returning, so
    the fetcher is ready for ``load_css``.
    """
    settings = await YamlConfigLoader().load(request)
    init_logging(settings.logging)
    logger.info("Starting asset loader. config_url=%s", settings.config_url)

    fetcher = create_asset_fetcher(settings, transport=transport)
    if resolve:
        await fetcher.provider.resolve_config()
    return fetcher
