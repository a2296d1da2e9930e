from __future__ import annotations

import logging
from typing import Optional

from pydantic import ValidationError

from asset_loader.config.defaults import DEFAULT_CONFIGURATION
from asset_loader.config.models import AssetConfiguration, RemoteVersion
from asset_loader.errors import NetworkError
from asset_loader.transport.interfaces import HttpTransport

logger = logging.getLogger(__name__)


class ConfigProvider:
    """
    Resolves the active asset configuration, remote first with an embedded default.

    Neither resolution nor the update check raise: failures degrade to the default
    configuration and to ``False`` respectively.
    """

    def __init__(
        self,
        transport: HttpTransport,
        *,
        config_url: Optional[str] = None,
        default: AssetConfiguration = DEFAULT_CONFIGURATION,
    ) -> None:
        self._transport = transport
        self._config_url = config_url
        self._default = default
        self._active: Optional[AssetConfiguration] = None

    @property
    def active(self) -> Optional[AssetConfiguration]:
        return self._active

    async def resolve_config(self, url: Optional[str] = None) -> AssetConfiguration:
        """Fetch and activate the configuration at ``url``; calling again reloads it."""
        url = url or self._config_url
        config = await self._fetch_config(url) if url else None
        if config is None:
            config = self._default
            logger.warning("Using default asset config. url=%s version=%s", url, config.version)
        else:
            logger.info("External asset config loaded. url=%s version=%s", url, config.version)
        self._active = config
        return config

    async def _fetch_config(self, url: str) -> Optional[AssetConfiguration]:
        try:
            response = await self._transport.get(url)
        except NetworkError as e:
            logger.warning("Failed to load external asset config. url=%s error=%s", url, e)
            return None
        if not response.ok:
            logger.warning("Failed to load external asset config. url=%s status=%s", url, response.status)
            return None
        try:
            return AssetConfiguration.model_validate(response.json())
        except (ValueError, ValidationError) as e:
            logger.warning("External asset config is invalid. url=%s error=%s", url, e)
            return None

    async def check_for_updates(self) -> bool:
        """Return True iff the remote config version differs from the active one."""
        active = self._active
        if active is None or not active.update_check_url:
            return False

        url = active.update_check_url
        try:
            response = await self._transport.get(url)
            if not response.ok:
                logger.warning("Update check failed. url=%s status=%s", url, response.status)
                return False
            latest = RemoteVersion.model_validate(response.json())
        except (NetworkError, ValueError, ValidationError) as e:
            logger.warning("Update check failed. url=%s error=%s", url, e)
            return False

        has_update = latest.version != active.version
        logger.info(
            "Update check completed. url=%s active_version=%s remote_version=%s has_update=%s",
            url,
            active.version,
            latest.version,
            has_update,
        )
        return has_update
