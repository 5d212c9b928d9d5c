import pytest
from pathlib import Path

from domstub.adapter import ManifestInterfaceSource, default_manifest_path
from domstub.io import DOM_INTERFACES
from domstub.spec import InterfaceNotFoundError, ManifestError, TypeRef


def test_parses_interfaces_with_defaults(workspace_factory):
    root = workspace_factory.with_manifest(
        "dom.yaml",
        [
            {
                "name": "Attr",
                "extends": ["Node"],
                "methods": [
                    {"name": "getName", "returns": "String"},
                    {"name": "setValue", "params": ["String"], "returns": "void"},
                    {"name": "normalize"},
                ],
            },
            {"name": "Node"},
        ],
    ).build()

    source = ManifestInterfaceSource(root / "dom.yaml")

    attr = source.resolve("Attr")
    assert attr.interfaces == ["Node"]
    assert attr.supertype == "Node"
    assert [m.name for m in attr.methods] == ["getName", "setValue", "normalize"]
    assert attr.methods[1].parameters == [TypeRef("String")]
    assert attr.methods[1].returns == TypeRef("void")
    assert attr.methods[2].returns.is_absent

    node = source.resolve("Node")
    assert node.interfaces == []
    assert node.methods == []
    assert source.names == ["Attr", "Node"]


def test_unknown_interface_raises(workspace_factory):
    root = workspace_factory.with_manifest("dom.yaml", [{"name": "Node"}]).build()
    source = ManifestInterfaceSource(root / "dom.yaml")

    with pytest.raises(InterfaceNotFoundError) as excinfo:
        source.resolve("Element")

    assert excinfo.value.name == "Element"
    assert "dom.yaml" in str(excinfo.value)


@pytest.mark.parametrize(
    "content",
    [
        "interfaces: [",
        "just a string",
        "interfaces: {}",
        "interfaces:\n  - extends: [Node]\n",
        "interfaces:\n  - name: Node\n    extends: Base\n",
        "interfaces:\n  - name: Node\n    methods:\n      - params: [int]\n",
        "interfaces:\n  - name: Node\n  - name: Node\n",
    ],
)
def test_malformed_manifest_raises(tmp_path: Path, content: str):
    manifest = tmp_path / "broken.yaml"
    manifest.write_text(content, encoding="utf-8")

    with pytest.raises(ManifestError):
        ManifestInterfaceSource(manifest)


def test_missing_manifest_file_raises_os_error(tmp_path: Path):
    with pytest.raises(FileNotFoundError):
        ManifestInterfaceSource(tmp_path / "absent.yaml")


class TestShippedManifest:
    @pytest.fixture(scope="class")
    def source(self):
        return ManifestInterfaceSource()

    def test_default_path_is_packaged(self, source):
        assert source.path == default_manifest_path()
        assert source.path.is_file()

    def test_covers_every_dom_interface(self, source):
        for name in DOM_INTERFACES:
            assert source.resolve(name).name == name

    def test_supertypes(self, source):
        assert source.resolve("Text").supertype == "CharacterData"
        assert source.resolve("CDATASection").supertype == "Text"
        assert source.resolve("Element").supertype == "Node"
        assert source.resolve("Node").supertype is None
        assert source.resolve("DOMConfiguration").supertype is None

    def test_marker_interfaces_have_no_methods(self, source):
        for name in ("CDATASection", "Comment", "DocumentFragment", "EntityReference"):
            assert source.resolve(name).methods == []
