"""
Tests for presets: the YAML model and the loader.
"""

from pathlib import Path

import pytest
import yaml

from chuk_mcp_melody.generation import generate_melody
from chuk_mcp_melody.models import GenerationRequest, MelodyPreset
from chuk_mcp_melody.presets import PresetLoader, is_safe_name

LIBRARY_PRESETS = ["blues-arpeggios", "minor-ballad", "pentatonic-sparkle", "pop-cadence"]


class TestMelodyPreset:
    """Tests for the preset model."""

    def test_from_yaml_dict(self) -> None:
        """The schema key maps to schema_version."""
        preset = MelodyPreset.model_validate(
            {
                "schema": "preset/v1",
                "name": "test",
                "request": {"root": "D4", "scale": "blues", "bars": 2},
            }
        )
        assert preset.schema_version == "preset/v1"
        assert preset.request.scale == "blues"
        assert preset.request.tempo == 120

    def test_to_yaml_dict_round_trips(self) -> None:
        """to_yaml_dict output loads back to the same preset."""
        preset = MelodyPreset(
            name="mine",
            description="Mine",
            tags=["x"],
            request=GenerationRequest(scale="chromatic", chord_types=["sus2"]),
        )
        reloaded = MelodyPreset.model_validate(preset.to_yaml_dict())
        assert reloaded == preset

    def test_bad_request_rejected(self) -> None:
        """Unknown request fields fail validation."""
        with pytest.raises(ValueError):
            MelodyPreset.model_validate({"name": "bad", "request": {"colour": "blue"}})


class TestLibraryPresets:
    """The shipped presets load and generate."""

    def test_list_library(self, library_path: Path) -> None:
        loader = PresetLoader(library_path=library_path)
        names = [p.name for p in loader.list_presets()]
        assert names == LIBRARY_PRESETS

    @pytest.mark.parametrize("name", LIBRARY_PRESETS)
    def test_library_preset_generates(self, library_path: Path, name: str) -> None:
        """Every library preset is a valid request."""
        preset = PresetLoader(library_path=library_path).get_preset(name)
        assert preset is not None
        assert preset.name == name
        result = generate_melody(preset.request.with_overrides(seed=1))
        assert len(result.steps) == result.num_beats

    def test_default_library_path(self) -> None:
        """The loader finds the packaged library on its own."""
        assert PresetLoader().get_preset("pop-cadence") is not None

    def test_missing_preset(self, library_path: Path) -> None:
        assert PresetLoader(library_path=library_path).get_preset("nope") is None


class TestProjectPresets:
    """Project presets sit beside and override the library."""

    def test_save_and_override(self, library_path: Path, temp_dir: Path) -> None:
        loader = PresetLoader(library_path=library_path, project_path=temp_dir)
        custom = MelodyPreset(
            name="pop-cadence",
            description="Project override",
            request=GenerationRequest(scale="blues"),
        )
        path = loader.save_to_project(custom)
        assert path == temp_dir / "pop-cadence.yaml"

        loaded = loader.get_preset("pop-cadence")
        assert loaded is not None
        assert loaded.description == "Project override"

        listed = {p.name: p for p in loader.list_presets()}
        assert listed["pop-cadence"].scale == "blues"
        assert len(listed) == len(LIBRARY_PRESETS)

    def test_save_refuses_overwrite(self, temp_dir: Path) -> None:
        loader = PresetLoader(project_path=temp_dir)
        preset = MelodyPreset(name="once")
        loader.save_to_project(preset)
        with pytest.raises(ValueError):
            loader.save_to_project(preset)
        loader.save_to_project(preset, overwrite=True)

    def test_save_without_project_path(self, library_path: Path) -> None:
        with pytest.raises(ValueError):
            PresetLoader(library_path=library_path).save_to_project(MelodyPreset(name="x"))

    @pytest.mark.parametrize("name", ["../evil", "sub/preset", "..\\evil", "..", ""])
    def test_unsafe_names_rejected(self, temp_dir: Path, name: str) -> None:
        """Preset names never reach outside the preset directories."""
        loader = PresetLoader(project_path=temp_dir / "presets")
        assert loader.get_preset(name) is None
        with pytest.raises(ValueError, match="path separators"):
            loader.save_to_project(MelodyPreset(name=name))
        assert not any(temp_dir.rglob("*.yaml"))

    def test_is_safe_name(self) -> None:
        assert is_safe_name("pop-cadence")
        assert is_safe_name("v1.2")
        assert not is_safe_name("../pop-cadence")
        assert not is_safe_name("/tmp/pop-cadence")

    def test_broken_file_skipped(
        self, library_path: Path, temp_dir: Path, caplog: pytest.LogCaptureFixture
    ) -> None:
        """Invalid YAML is logged and ignored."""
        (temp_dir / "broken.yaml").write_text("name: [unclosed\n")
        (temp_dir / "invalid.yaml").write_text(
            yaml.safe_dump({"name": "invalid", "request": {"bars": "four"}})
        )
        loader = PresetLoader(library_path=library_path, project_path=temp_dir)
        names = [p.name for p in loader.list_presets()]
        assert "broken" not in names
        assert "invalid" not in names
        assert loader.get_preset("invalid") is None
        assert "Skipping preset" in caplog.text
