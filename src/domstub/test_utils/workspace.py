from pathlib import Path
from textwrap import dedent
from typing import Any, Dict, List, Optional

import yaml


def _toml_value(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, list):
        return "[" + ", ".join(_toml_value(v) for v in value) + "]"
    if isinstance(value, str):
        return '"' + value.replace("\\", "\\\\").replace('"', '\\"') + '"'
    return str(value)


class WorkspaceFactory:
    """
    Builds throwaway project directories for tests.
    """

    def __init__(self, root_path: Path):
        self.root_path = root_path
        self._files: Dict[str, str] = {}
        self._config: Optional[Dict[str, Any]] = None

    def with_config(self, config: Dict[str, Any]) -> "WorkspaceFactory":
        self._config = config
        return self

    def with_manifest(
        self, path: str, interfaces: List[Dict[str, Any]]
    ) -> "WorkspaceFactory":
        self._files[path] = yaml.safe_dump(
            {"interfaces": interfaces}, sort_keys=False
        )
        return self

    def with_source(self, path: str, content: str) -> "WorkspaceFactory":
        self._files[path] = dedent(content)
        return self

    def build(self) -> Path:
        self.root_path.mkdir(parents=True, exist_ok=True)

        if self._config is not None:
            lines = ["[project]", 'name = "test-project"', "", "[tool.domstub]"]
            for key, value in self._config.items():
                lines.append(f"{key} = {_toml_value(value)}")
            (self.root_path / "pyproject.toml").write_text(
                "\n".join(lines) + "\n", encoding="utf-8"
            )

        for rel_path, content in self._files.items():
            file_path = self.root_path / rel_path
            file_path.parent.mkdir(parents=True, exist_ok=True)
            file_path.write_text(content, encoding="utf-8")

        return self.root_path
