from typing import Any, Optional

from .protocols import Renderer
from .store import MessageStore

# "progress" marks lines that are always shown, whatever the loglevel.
LEVELS = {
    "debug": 10,
    "info": 20,
    "success": 25,
    "warning": 30,
    "error": 40,
    "progress": 50,
}


class MessageBus:
    def __init__(self, store: MessageStore):
        self._store = store
        self._renderer: Optional[Renderer] = None

    @property
    def store(self) -> MessageStore:
        return self._store

    def set_renderer(self, renderer: Optional[Renderer]) -> None:
        self._renderer = renderer

    def render_to_string(self, msg_id: str, **kwargs: Any) -> str:
        return self._store.get(msg_id, **kwargs)

    def _render(self, level: str, msg_id: str, **kwargs: Any) -> None:
        if not self._renderer:
            return
        message = self.render_to_string(msg_id, **kwargs)
        self._renderer.render(message, level)

    def debug(self, msg_id: str, **kwargs: Any) -> None:
        self._render("debug", msg_id, **kwargs)

    def info(self, msg_id: str, **kwargs: Any) -> None:
        self._render("info", msg_id, **kwargs)

    def success(self, msg_id: str, **kwargs: Any) -> None:
        self._render("success", msg_id, **kwargs)

    def warning(self, msg_id: str, **kwargs: Any) -> None:
        self._render("warning", msg_id, **kwargs)

    def error(self, msg_id: str, **kwargs: Any) -> None:
        self._render("error", msg_id, **kwargs)

    def progress(self, msg_id: str, **kwargs: Any) -> None:
        self._render("progress", msg_id, **kwargs)
