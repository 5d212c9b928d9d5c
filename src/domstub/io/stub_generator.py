from dataclasses import dataclass
from pathlib import Path
from typing import List, Sequence

from domstub.common import bus
from domstub.spec import (
    InterfaceDef,
    InterfaceSourceProtocol,
    MethodDef,
    TypeRef,
)

# Emission order of the generated file. Edit this list to change the target set.
DOM_INTERFACES = (
    "Attr",
    "CDATASection",
    "CharacterData",
    "Comment",
    "Document",
    "DocumentFragment",
    "DocumentType",
    "DOMConfiguration",
    "DOMError",
    "DOMErrorHandler",
    "DOMImplementation",
    "DOMLocator",
    "DOMStringList",
    "Element",
    "Entity",
    "EntityReference",
    "NameList",
    "NamedNodeMap",
    "Node",
    "NodeList",
    "Notation",
    "ProcessingInstruction",
    "Text",
    "TypeInfo",
    "UserDataHandler",
)

HEADER_TEMPLATE = """
package {package}

//
// NOTE THIS FILE IS AUTO-GENERATED by {generator}
// See: {see}
//

import {marker}

// Contains stub APIs for the W3C DOM API so we can delegate to the platform DOM instead


"""


@dataclass(frozen=True)
class StubOptions:
    package: str = "org.w3c.dom"
    marker: str = "js.noImpl"
    generator: str = "domstub"
    see: str = "domstub/io/stub_generator.py"


def simple_type_name(type_ref: TypeRef) -> str:
    if type_ref.is_absent:
        return "Unit"
    name = type_ref.name
    answer = name[:1].upper() + name[1:]
    if answer == "Void":
        return "Unit"
    if answer == "Object":
        return "Any"
    return answer


class StubGenerator:
    def __init__(
        self,
        source: InterfaceSourceProtocol,
        interfaces: Sequence[str] = DOM_INTERFACES,
        options: StubOptions = StubOptions(),
    ):
        self.source = source
        self.interfaces = list(interfaces)
        self.options = options

    def header(self) -> str:
        return HEADER_TEMPLATE.format(
            package=self.options.package,
            generator=self.options.generator,
            see=self.options.see,
            marker=self.options.marker,
        )

    def resolve_all(self) -> List[InterfaceDef]:
        # Resolution failures are configuration errors and propagate.
        return [self.source.resolve(name) for name in self.interfaces]

    def render_method(self, method: MethodDef) -> str:
        parameters = ", ".join(
            f"arg{index}: {simple_type_name(param)}"
            for index, param in enumerate(method.parameters, start=1)
        )
        return_type = simple_type_name(method.returns)
        return (
            f"    fun {method.name}({parameters}): {return_type} = {self.options.marker}"
        )

    def render_interface(self, iface: InterfaceDef) -> str:
        # The supertype name is emitted raw, without type normalization.
        extends = f": {iface.supertype}" if iface.supertype else ""
        lines = [f"native public trait {iface.name}{extends} {{"]
        for method in iface.methods:
            lines.append(self.render_method(method))
        lines.append("}")
        lines.append("")
        return "\n".join(lines) + "\n"

    def render(self) -> str:
        """
        Renders the complete file content: the header followed by one
        declaration block per configured interface, in configured order.
        """
        parts = [self.header()]
        for iface in self.resolve_all():
            bus.debug(
                "generate.run.interface", name=iface.name, count=len(iface.methods)
            )
            parts.append(self.render_interface(iface))
        return "".join(parts)

    def generate(self, output_path: Path) -> None:
        """
        Writes the stub file to output_path, replacing any previous content.

        I/O errors are not caught: the caller sees the original OSError.
        """
        content = self.render()
        bus.progress("generate.file.writing", path=Path(output_path).resolve())
        with open(output_path, "w", encoding="utf-8", newline="\n") as writer:
            writer.write(content)
