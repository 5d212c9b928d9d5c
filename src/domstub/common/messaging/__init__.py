from .bus import MessageBus, LEVELS
from .store import MessageStore
from . import protocols

__all__ = ["MessageBus", "MessageStore", "LEVELS", "protocols"]
