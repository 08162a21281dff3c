from __future__ import annotations
import json
from typing import Any, Dict, List


class StubResponse:
    def __init__(self, status_code: int = 200, body: Any = None, text: str | None = None):
        self.status_code = status_code
        if text is None:
            text = json.dumps(body) if body is not None else ''
        self.text = text
        self.content = text.encode('utf-8')

    def json(self) -> Any:
        return json.loads(self.text)


class StubSession:
    """Records requests and replays queued responses; the last entry repeats."""

    def __init__(self, responses: List[Any]):
        self._queue = list(responses)
        self.calls: List[Dict[str, Any]] = []
        self.closed = False

    def request(self, method: str, url: str, **kwargs: Any) -> StubResponse:
        self.calls.append({'method': method, 'url': url, **kwargs})
        item = self._queue.pop(0) if len(self._queue) > 1 else self._queue[0]
        if isinstance(item, Exception):
            raise item
        return item

    def close(self) -> None:
        self.closed = True
