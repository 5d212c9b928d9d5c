from pathlib import Path

from .messaging import MessageBus, MessageStore
from .rendering import CliRenderer

_assets_root = Path(__file__).parent / "assets"

# Global feedback bus. Progress lines go to stdout even when used as a library.
bus = MessageBus(store=MessageStore(roots=[_assets_root]))
bus.set_renderer(CliRenderer())

__all__ = ["bus", "CliRenderer"]
