from pathlib import Path
from typing import Optional

from domstub.adapter import GriffeInterfaceSource, ManifestInterfaceSource
from domstub.common import bus
from domstub.config import DomStubConfig, load_config_from_path
from domstub.io import StubGenerator
from domstub.spec import InterfaceSourceProtocol


class DomStubApp:
    def __init__(self, root_path: Path, config: Optional[DomStubConfig] = None):
        self.root_path = root_path
        self.config = config or load_config_from_path(root_path)

    def _build_source(self) -> InterfaceSourceProtocol:
        if self.config.source:
            source_path = self.root_path / self.config.source
            bus.debug("generate.run.source", source=source_path)
            return GriffeInterfaceSource(source_path)

        manifest_path = (
            self.root_path / self.config.manifest if self.config.manifest else None
        )
        source = ManifestInterfaceSource(manifest_path)
        bus.debug("generate.run.source", source=source.path)
        return source

    def build_generator(self) -> StubGenerator:
        return StubGenerator(
            source=self._build_source(),
            interfaces=self.config.interfaces,
            options=self.config.stub_options(),
        )

    def output_path(self, output: Optional[Path] = None) -> Path:
        return Path(output) if output else self.root_path / self.config.output

    def run_generate(
        self, output: Optional[Path] = None, dry_run: bool = False
    ) -> Optional[Path]:
        """
        Generates the stub file. Returns the written path, or None on a dry run.
        """
        generator = self.build_generator()
        target = self.output_path(output)
        count = len(generator.interfaces)

        if dry_run:
            generator.render()
            bus.info("generate.file.dry_run", count=count, path=target)
            return None

        generator.generate(target)
        bus.success("generate.file.success", count=count, path=target)
        return target

    def run_check(self, output: Optional[Path] = None) -> bool:
        """
        Compares freshly rendered content with the file on disk.
        """
        generator = self.build_generator()
        target = self.output_path(output)
        if not target.is_file():
            bus.warning("check.run.missing", path=target)
            return False

        expected = generator.render().encode("utf-8")
        if target.read_bytes() != expected:
            bus.warning("check.run.stale", path=target)
            return False

        bus.success("check.run.up_to_date", path=target)
        return True
