from .models import TypeRef, MethodDef, InterfaceDef
from .protocols import InterfaceSourceProtocol
from .exceptions import (
    DomStubError,
    InterfaceNotFoundError,
    ManifestError,
    ConfigError,
)

__all__ = [
    "TypeRef",
    "MethodDef",
    "InterfaceDef",
    "InterfaceSourceProtocol",
    "DomStubError",
    "InterfaceNotFoundError",
    "ManifestError",
    "ConfigError",
]
