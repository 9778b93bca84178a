"""
Tuning loader - discovers and loads tuning system definitions.

Tunings can come from:
1. Built-in library (shipped with package)
2. Project tunings (user's project/tunings directory)
"""

from __future__ import annotations

import logging
from pathlib import Path

import yaml
from pydantic import ValidationError

from chuk_music_theory.core.registry import TuningRegistry
from chuk_music_theory.core.system import TuningSystem
from chuk_music_theory.models.tuning import TuningDefinition, TuningMetadata

logger = logging.getLogger(__name__)


class TuningLoader:
    """
    Discovers and loads tuning definitions.

    Tunings are loaded from YAML files in the library and project directories.
    Project tunings override library tunings with the same name. A file's
    name field must match its file name (12tet.yaml holds name: 12tet).
    """

    def __init__(
        self,
        library_path: Path | None = None,
        project_path: Path | None = None,
    ):
        """
        Initialize the tuning loader.

        Args:
            library_path: Path to built-in tuning library
            project_path: Path to project tunings directory
        """
        self.library_path = library_path or (Path(__file__).parent / "library")
        self.project_path = project_path
        self._cache: dict[str, TuningDefinition] = {}

    def list_tunings(self) -> list[TuningMetadata]:
        """List all available tunings, project tunings taking precedence."""
        return [
            TuningMetadata.from_definition(definition)
            for definition in self._discover().values()
        ]

    def get_definition(self, name: str) -> TuningDefinition | None:
        """
        Get a tuning definition by name.

        Project tunings take precedence over library tunings.

        Args:
            name: Tuning name (file stem)

        Returns:
            TuningDefinition if found, None otherwise
        """
        if name in self._cache:
            return self._cache[name]

        for directory in self._search_paths():
            path = directory / f"{name}.yaml"
            if path.exists():
                definition = self._load_tuning_file(path)
                if definition:
                    self._cache[name] = definition
                    return definition

        return None

    def get_system(self, name: str) -> TuningSystem | None:
        """Build the tuning system for name, or None if not found."""
        definition = self.get_definition(name)
        return definition.build() if definition else None

    def populate(self, registry: TuningRegistry, overwrite: bool = False) -> list[str]:
        """
        Register every available tuning in registry.

        Existing entries are kept unless overwrite is set.

        Returns:
            Names that were registered
        """
        registered = []
        for name, definition in sorted(self._discover().items()):
            system = definition.build()
            if overwrite:
                registry.register_system(name, system)
            elif not registry.register_if_absent(name, system):
                logger.debug("Tuning %s already registered, keeping existing system", name)
                continue
            registered.append(name)
        return registered

    def copy_to_project(self, name: str) -> Path | None:
        """
        Copy a library tuning to the project for customization.

        Args:
            name: Tuning name

        Returns:
            Path to copied file, or None if not found
        """
        if not self.project_path:
            raise ValueError("No project path configured")

        library_file = self.library_path / f"{name}.yaml"
        if not library_file.exists():
            return None

        self.project_path.mkdir(parents=True, exist_ok=True)

        dest_file = self.project_path / f"{name}.yaml"
        if dest_file.exists():
            raise ValueError(f"Tuning already exists in project: {name}")

        dest_file.write_text(library_file.read_text())

        # Invalidate cache
        self._cache.pop(name, None)

        return dest_file

    def clear_cache(self) -> None:
        """Clear the definition cache."""
        self._cache.clear()

    def _search_paths(self) -> list[Path]:
        """Directories to search, highest precedence first."""
        paths = []
        if self.project_path and self.project_path.exists():
            paths.append(self.project_path)
        if self.library_path.exists():
            paths.append(self.library_path)
        return paths

    def _discover(self) -> dict[str, TuningDefinition]:
        definitions: dict[str, TuningDefinition] = {}
        # Library first so project files override
        for directory in reversed(self._search_paths()):
            for path in sorted(directory.glob("*.yaml")):
                definition = self._load_tuning_file(path)
                if definition:
                    definitions[definition.name] = definition
        return definitions

    def _load_tuning_file(self, path: Path) -> TuningDefinition | None:
        """Load a tuning from a YAML file, skipping files that fail to parse."""
        try:
            with open(path) as f:
                data = yaml.safe_load(f)
            definition = TuningDefinition.model_validate(data)
        except (OSError, yaml.YAMLError, ValidationError) as err:
            logger.warning("Skipping tuning file %s: %s", path, err)
            return None

        # Lookups go by file name, registration by definition name; they must agree
        if definition.name != path.stem:
            logger.warning(
                "Skipping tuning file %s: name %r does not match the file name",
                path,
                definition.name,
            )
            return None
        return definition
