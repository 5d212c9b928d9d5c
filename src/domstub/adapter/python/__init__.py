from .griffe_source import GriffeInterfaceSource, annotation_simple_name

__all__ = ["GriffeInterfaceSource", "annotation_simple_name"]
