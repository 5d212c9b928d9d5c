import pytest

from domstub.adapter import GriffeInterfaceSource
from domstub.adapter.python import annotation_simple_name
from domstub.spec import InterfaceNotFoundError, ManifestError, TypeRef

DOM_PROTOCOLS = """
    from typing import Protocol

    import org.w3c.dom as dom


    class Node(Protocol):
        def getNodeName(self) -> "String": ...
        def appendChild(self, newChild: "Node") -> "Node": ...
        def normalize(self) -> None: ...
        def getUserData(self, key: "String") -> object: ...


    class CharacterData(Node, Protocol):
        def getLength(self) -> "int": ...
        def __len__(self) -> int: ...


    class Text(dom.CharacterData):
        def splitText(self, offset: "int") -> "Text": ...
        def untyped(self, value): ...


    class Mixed(Node, CharacterData):
        pass


    def helper() -> None: ...
"""


@pytest.fixture
def source(workspace_factory):
    root = workspace_factory.with_source("dom.py", DOM_PROTOCOLS).build()
    return GriffeInterfaceSource(root / "dom.py")


@pytest.mark.parametrize(
    "annotation, expected",
    [
        (None, None),
        ("None", None),
        ("String", "String"),
        ("'Node'", "Node"),
        ("org.w3c.dom.Node", "Node"),
        ("List[str]", "List"),
        ("object", "object"),
    ],
)
def test_annotation_simple_name(annotation, expected):
    assert annotation_simple_name(annotation) == expected


def test_reads_classes_in_declaration_order(source):
    assert source.names == ["Node", "CharacterData", "Text", "Mixed"]


def test_protocol_base_is_not_a_supertype(source):
    assert source.resolve("Node").interfaces == []
    assert source.resolve("CharacterData").interfaces == ["Node"]


def test_dotted_base_uses_simple_name(source):
    assert source.resolve("Text").supertype == "CharacterData"


def test_multiple_bases_have_no_supertype(source):
    mixed = source.resolve("Mixed")
    assert mixed.interfaces == ["Node", "CharacterData"]
    assert mixed.supertype is None


def test_methods_skip_self_and_dunders(source):
    node = source.resolve("Node")
    assert [m.name for m in node.methods] == [
        "getNodeName",
        "appendChild",
        "normalize",
        "getUserData",
    ]
    assert node.methods[1].parameters == [TypeRef("Node")]
    assert node.methods[2].returns.is_absent
    assert node.methods[3].returns == TypeRef("object")

    assert [m.name for m in source.resolve("CharacterData").methods] == ["getLength"]


def test_missing_annotations_are_absent(source):
    untyped = source.resolve("Text").methods[1]
    assert untyped.parameters == [TypeRef()]
    assert untyped.returns.is_absent


def test_functions_are_not_interfaces(source):
    with pytest.raises(InterfaceNotFoundError):
        source.resolve("helper")


def test_syntax_error_raises_manifest_error(workspace_factory):
    root = workspace_factory.with_source("broken.py", "class Node(:\n").build()

    with pytest.raises(ManifestError):
        GriffeInterfaceSource(root / "broken.py")
