from __future__ import annotations

import json
from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True, slots=True)
class HttpResponse:
    url: str
    status: int
    text: str

    @property
    def ok(self) -> bool:
        return 200 <= self.status < 300

    def json(self) -> Any:
        """Decode the body as JSON. Raises ValueError on malformed input."""
        return json.loads(self.text)


class HttpTransport:
    async def get(self, url: str) -> HttpResponse:
        """
        Issue a GET request and return the response, whatever its status.

        Raises NetworkError when no response could be obtained (connection failure,
        timeout, undecodable body).
        """
        raise NotImplementedError
