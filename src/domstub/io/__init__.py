from .stub_generator import (
    DOM_INTERFACES,
    StubGenerator,
    StubOptions,
    simple_type_name,
)

__all__ = ["DOM_INTERFACES", "StubGenerator", "StubOptions", "simple_type_name"]
