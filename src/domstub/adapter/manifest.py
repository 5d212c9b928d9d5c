from pathlib import Path
from typing import Any, Dict, List, Optional

import yaml

from domstub.spec import (
    InterfaceDef,
    InterfaceNotFoundError,
    ManifestError,
    MethodDef,
    TypeRef,
)

_MANIFESTS_ROOT = Path(__file__).parent / "manifests"


def default_manifest_path() -> Path:
    return _MANIFESTS_ROOT / "w3c_dom.yaml"


class ManifestInterfaceSource:
    """
    Serves interface descriptors from a static YAML manifest.

    The manifest is parsed eagerly so that a malformed file fails before
    any output is produced.
    """

    def __init__(self, path: Optional[Path] = None):
        self.path = Path(path) if path else default_manifest_path()
        self._interfaces: Dict[str, InterfaceDef] = {}
        self._load()

    @property
    def names(self) -> List[str]:
        return list(self._interfaces)

    def resolve(self, name: str) -> InterfaceDef:
        try:
            return self._interfaces[name]
        except KeyError:
            raise InterfaceNotFoundError(name, origin=str(self.path)) from None

    def _load(self) -> None:
        try:
            with self.path.open("r", encoding="utf-8") as f:
                data = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise ManifestError(f"Could not parse manifest {self.path}: {e}") from e

        if not isinstance(data, dict) or not isinstance(
            data.get("interfaces"), list
        ):
            raise ManifestError(
                f"Manifest {self.path} must contain an 'interfaces' list"
            )

        for entry in data["interfaces"]:
            iface = self._parse_interface(entry)
            if iface.name in self._interfaces:
                raise ManifestError(
                    f"Duplicate interface '{iface.name}' in {self.path}"
                )
            self._interfaces[iface.name] = iface

    def _parse_interface(self, entry: Any) -> InterfaceDef:
        if not isinstance(entry, dict) or not isinstance(entry.get("name"), str):
            raise ManifestError(f"Interface entry without a name in {self.path}")

        name = entry["name"]
        extends = entry.get("extends") or []
        if not isinstance(extends, list):
            raise ManifestError(f"'extends' of {name} must be a list")

        methods = [
            self._parse_method(name, m) for m in entry.get("methods") or []
        ]
        return InterfaceDef(
            name=name,
            interfaces=[str(e) for e in extends],
            methods=methods,
        )

    def _parse_method(self, owner: str, entry: Any) -> MethodDef:
        if not isinstance(entry, dict) or not isinstance(entry.get("name"), str):
            raise ManifestError(f"Method entry without a name in {owner}")

        params = entry.get("params") or []
        if not isinstance(params, list):
            raise ManifestError(f"'params' of {owner}.{entry['name']} must be a list")

        return MethodDef(
            name=entry["name"],
            parameters=[self._type_ref(p) for p in params],
            returns=self._type_ref(entry.get("returns")),
        )

    @staticmethod
    def _type_ref(raw: Any) -> TypeRef:
        if raw is None:
            return TypeRef()
        return TypeRef(name=str(raw))
