import ast
from pathlib import Path
from typing import Any, Dict, List, Optional

import griffe

from domstub.spec import (
    InterfaceDef,
    InterfaceNotFoundError,
    ManifestError,
    MethodDef,
    TypeRef,
)

# Bases that mark a class as an interface rather than naming a super-interface.
IGNORED_BASES = {"Protocol", "ABC", "Generic", "object"}


def annotation_simple_name(annotation: Any) -> Optional[str]:
    """
    Reduces an annotation to its simple name.

    'org.w3c.dom.Node' -> 'Node', 'List[str]' -> 'List', None and 'None' -> None.
    """
    if annotation is None:
        return None
    text = str(annotation).strip().strip("'\"")
    text = text.split("[", 1)[0]
    name = text.rsplit(".", 1)[-1]
    if not name or name == "None":
        return None
    return name


class GriffeInterfaceSource:
    """
    Reads interface descriptors from a Python module of interface classes.

    The module is visited statically with Griffe; nothing is imported or executed.
    """

    def __init__(self, path: Path):
        self.path = Path(path)
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
        source_code = self.path.read_text(encoding="utf-8")
        try:
            ast.parse(source_code)
        except SyntaxError as e:
            raise ManifestError(f"Syntax error in {self.path}: {e}") from e

        module = griffe.visit(self.path.stem, filepath=self.path, code=source_code)
        for member in module.members.values():
            if member.is_alias or not member.is_class:
                continue
            self._interfaces[member.name] = self._map_class(member)

    def _map_class(self, gc: griffe.Class) -> InterfaceDef:
        interfaces = []
        for base in gc.bases:
            name = annotation_simple_name(base)
            if name and name not in IGNORED_BASES:
                interfaces.append(name)

        methods = []
        for member in gc.members.values():
            if member.is_alias or not member.is_function:
                continue
            if member.name.startswith("__") and member.name.endswith("__"):
                continue
            methods.append(self._map_function(member))

        return InterfaceDef(name=gc.name, interfaces=interfaces, methods=methods)

    def _map_function(self, gf: griffe.Function) -> MethodDef:
        params = list(gf.parameters)
        if params and params[0].name in ("self", "cls"):
            params = params[1:]

        return MethodDef(
            name=gf.name,
            parameters=[TypeRef(annotation_simple_name(p.annotation)) for p in params],
            returns=TypeRef(annotation_simple_name(gf.returns)),
        )
