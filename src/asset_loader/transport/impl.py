from __future__ import annotations

import asyncio
import logging

import aiohttp

from asset_loader.config.models import HttpSettings
from asset_loader.errors import NetworkError
from asset_loader.transport.interfaces import HttpResponse, HttpTransport

logger = logging.getLogger(__name__)


class AiohttpTransport(HttpTransport):
    def __init__(self, settings: HttpSettings = HttpSettings()) -> None:
        self._settings = settings

    async def get(self, url: str) -> HttpResponse:
        logger.debug("transport.get_start url=%s", url)
        timeout = aiohttp.ClientTimeout(total=self._settings.request_timeout_seconds)
        try:
            async with aiohttp.ClientSession(timeout=timeout) as session:
                async with session.get(url) as response:
                    text = await response.text()
                    logger.debug("transport.get_done url=%s status=%s size=%d", url, response.status, len(text))
                    return HttpResponse(url=url, status=response.status, text=text)
        except asyncio.TimeoutError as e:
            raise NetworkError(url, f"Request timed out for {url}") from e
        except (aiohttp.ClientError, UnicodeDecodeError) as e:
            raise NetworkError(url, f"{type(e).__name__}: {e}") from e
