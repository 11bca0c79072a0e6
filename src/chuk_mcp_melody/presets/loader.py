"""
Preset loader - discovers and loads melody presets.

Presets can come from:
1. Built-in library (shipped with package)
2. Project presets (user's project/presets directory)
"""

from __future__ import annotations

import logging
from pathlib import Path

import yaml
from pydantic import ValidationError

from chuk_mcp_melody.constants import ErrorMessages
from chuk_mcp_melody.models.preset import MelodyPreset, PresetMetadata

logger = logging.getLogger(__name__)


def is_safe_name(name: str) -> bool:
    """True for a bare file stem: no path separators, not '.' or '..'."""
    return (
        bool(name)
        and name not in (".", "..")
        and "/" not in name
        and "\\" not in name
        and Path(name).name == name
    )


class PresetLoader:
    """
    Discovers and loads preset definitions.

    Presets are loaded from YAML files in the library and project directories.
    Project presets override library presets with the same name.
    """

    def __init__(
        self,
        library_path: Path | None = None,
        project_path: Path | None = None,
    ):
        """
        Initialize the preset loader.

        Args:
            library_path: Path to built-in preset library
            project_path: Path to project presets directory
        """
        self.library_path = library_path or (Path(__file__).parent / "library")
        self.project_path = project_path
        self._cache: dict[str, MelodyPreset] = {}

    def list_presets(self) -> list[PresetMetadata]:
        """
        List all available presets, sorted by name.

        Project presets take precedence over library presets.
        """
        presets: dict[str, PresetMetadata] = {}

        for directory in (self.library_path, self.project_path):
            if directory is None or not directory.exists():
                continue
            for path in sorted(directory.glob("*.yaml")):
                preset = self._load_preset_file(path)
                if preset:
                    presets[preset.name] = PresetMetadata.from_preset(preset, str(path))

        return sorted(presets.values(), key=lambda p: p.name)

    def get_preset(self, name: str) -> MelodyPreset | None:
        """
        Get a preset by name.

        Project presets take precedence over library presets.

        Args:
            name: Preset name

        Returns:
            MelodyPreset if found, None otherwise
        """
        if not is_safe_name(name):
            return None
        if name in self._cache:
            return self._cache[name]

        for directory in (self.project_path, self.library_path):
            if directory is None:
                continue
            path = directory / f"{name}.yaml"
            if path.exists():
                preset = self._load_preset_file(path)
                if preset:
                    self._cache[name] = preset
                    return preset

        return None

    def save_to_project(self, preset: MelodyPreset, overwrite: bool = False) -> Path:
        """
        Write a preset into the project directory.

        Args:
            preset: The preset to save
            overwrite: Replace an existing project preset of the same name

        Returns:
            Path of the written file
        """
        if not self.project_path:
            raise ValueError("No project path configured")
        if not is_safe_name(preset.name):
            raise ValueError(ErrorMessages.INVALID_FILE_NAME.format(name=preset.name))

        self.project_path.mkdir(parents=True, exist_ok=True)
        dest_file = self.project_path / f"{preset.name}.yaml"
        if dest_file.exists() and not overwrite:
            raise ValueError(f"Preset already exists in project: {preset.name}")

        with open(dest_file, "w") as f:
            yaml.safe_dump(preset.to_yaml_dict(), f, sort_keys=False)

        self._cache.pop(preset.name, None)
        return dest_file

    def _load_preset_file(self, path: Path) -> MelodyPreset | None:
        """Load a preset from a YAML file; unreadable files are skipped with a warning."""
        try:
            with open(path) as f:
                data = yaml.safe_load(f)
            return MelodyPreset.model_validate(data)
        except (OSError, yaml.YAMLError, ValidationError) as e:
            logger.warning(f"Skipping preset {path}: {e}")
            return None
