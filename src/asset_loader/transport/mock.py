from __future__ import annotations

import asyncio
from collections import defaultdict, deque
from dataclasses import dataclass, field
from typing import Deque, Dict, List, Union

from asset_loader.errors import NetworkError
from asset_loader.transport.interfaces import HttpResponse, HttpTransport

ScriptedReply = Union[int, str, HttpResponse, NetworkError]


@dataclass(slots=True)
class ScriptedTransport(HttpTransport):
    """
    A deterministic transport for tests and offline runs.

    Replies are queued per URL and consumed in order. The last queued reply for a URL
    is repeated once the queue drains. A bare int is a status with an empty body, a
    bare str is a 200 with that body, and a NetworkError instance is raised.
    URLs with no script raise NetworkError.
    """

    replies: Dict[str, Deque[ScriptedReply]] = field(default_factory=lambda: defaultdict(deque))
    calls: List[str] = field(default_factory=list)

    def script(self, url: str, *replies: ScriptedReply) -> "ScriptedTransport":
        self.replies[url].extend(replies)
        return self

    def calls_for(self, url: str) -> int:
        return sum(1 for called in self.calls if called == url)

    async def get(self, url: str) -> HttpResponse:
        self.calls.append(url)
        # Yield like a real request so concurrent callers interleave.
        await asyncio.sleep(0)
        queue = self.replies.get(url)
        if not queue:
            raise NetworkError(url, f"No scripted reply for {url}")
        reply = queue.popleft() if len(queue) > 1 else queue[0]

        if isinstance(reply, NetworkError):
            raise reply
        if isinstance(reply, HttpResponse):
            return reply
        if isinstance(reply, int):
            return HttpResponse(url=url, status=reply, text="")
        return HttpResponse(url=url, status=200, text=reply)
