from .core import DomStubApp

__all__ = ["DomStubApp"]
