from .manifest import ManifestInterfaceSource, default_manifest_path
from .python import GriffeInterfaceSource

__all__ = [
    "ManifestInterfaceSource",
    "GriffeInterfaceSource",
    "default_manifest_path",
]
