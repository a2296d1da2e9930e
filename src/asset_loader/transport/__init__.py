from __future__ import annotations

from asset_loader.transport.interfaces import HttpResponse, HttpTransport
from asset_loader.transport.impl import AiohttpTransport
from asset_loader.transport.mock import ScriptedTransport

__all__ = ["AiohttpTransport", "HttpResponse", "HttpTransport", "ScriptedTransport"]
