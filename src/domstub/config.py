from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional

try:
    import tomllib
except ImportError:
    import tomli as tomllib

from domstub.io import DOM_INTERFACES, StubOptions
from domstub.spec import ConfigError

DEFAULT_OUTPUT = "dom.kt"


@dataclass
class DomStubConfig:
    output: str = DEFAULT_OUTPUT
    manifest: Optional[str] = None
    source: Optional[str] = None
    package: str = StubOptions.package
    marker: str = StubOptions.marker
    interfaces: List[str] = field(default_factory=lambda: list(DOM_INTERFACES))

    def stub_options(self) -> StubOptions:
        return StubOptions(package=self.package, marker=self.marker)


def _expect(table: Dict[str, Any], key: str, kind: type, default: Any) -> Any:
    value = table.get(key, default)
    if value is not default and not isinstance(value, kind):
        raise ConfigError(f"'{key}' must be of type {kind.__name__}")
    return value


def load_config_from_path(root_path: Path) -> DomStubConfig:
    """
    Reads the [tool.domstub] table from root_path/pyproject.toml.
    A missing file or table yields the defaults.
    """
    pyproject_path = root_path / "pyproject.toml"
    if not pyproject_path.is_file():
        return DomStubConfig()

    try:
        with pyproject_path.open("rb") as f:
            data = tomllib.load(f)
    except tomllib.TOMLDecodeError as e:
        raise ConfigError(f"Could not parse {pyproject_path}: {e}") from e

    table = data.get("tool", {}).get("domstub", {})
    if not isinstance(table, dict):
        raise ConfigError("[tool.domstub] must be a table")

    defaults = DomStubConfig()
    config = DomStubConfig(
        output=_expect(table, "output", str, defaults.output),
        manifest=_expect(table, "manifest", str, None),
        source=_expect(table, "source", str, None),
        package=_expect(table, "package", str, defaults.package),
        marker=_expect(table, "marker", str, defaults.marker),
        interfaces=list(_expect(table, "interfaces", list, defaults.interfaces)),
    )

    if config.manifest and config.source:
        raise ConfigError("Set either 'manifest' or 'source', not both")
    if not all(isinstance(name, str) for name in config.interfaces):
        raise ConfigError("'interfaces' must be a list of strings")

    return config
