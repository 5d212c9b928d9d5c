from typing import Protocol

from .models import InterfaceDef


class InterfaceSourceProtocol(Protocol):
    def resolve(self, name: str) -> InterfaceDef: ...
