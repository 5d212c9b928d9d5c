from contextlib import contextmanager
from typing import Any, Dict, List, Optional


class SpyRenderer:
    def __init__(self):
        self.messages: List[Dict[str, Any]] = []

    def render(self, message: str, level: str) -> None:
        # The spy logic acts on record(), but satisfies the interface.
        pass

    def record(self, level: str, msg_id: str, params: Dict[str, Any]):
        self.messages.append({"level": level, "id": msg_id, "params": params})


class SpyBus:
    def __init__(self):
        self._spy_renderer = SpyRenderer()

    @contextmanager
    def patch(self, monkeypatch: Any):
        # Lazy import so that collecting tests does not load domstub.
        import domstub.common

        real_bus = domstub.common.bus

        def intercept_render(level: str, msg_id: str, **kwargs: Any) -> None:
            self._spy_renderer.record(level, msg_id, kwargs)

        monkeypatch.setattr(real_bus, "_render", intercept_render)
        monkeypatch.setattr(real_bus, "_renderer", self._spy_renderer)

        yield self

    def get_messages(self) -> List[Dict[str, Any]]:
        return self._spy_renderer.messages

    def ids(self) -> List[str]:
        return [m["id"] for m in self.get_messages()]

    def assert_id_called(self, msg_id: str, level: Optional[str] = None):
        for msg in self.get_messages():
            if msg["id"] == msg_id and (level is None or msg["level"] == level):
                return

        raise AssertionError(
            f"Message with ID '{msg_id}' was not sent.\nCaptured IDs: {self.ids()}"
        )
