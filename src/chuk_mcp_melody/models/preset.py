"""
Preset model - named, reusable generation requests.

Presets live as YAML files, either shipped in the package library or
owned by the user in a project directory.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field

from chuk_mcp_melody.models.request import GenerationRequest


class MelodyPreset(BaseModel):
    """A named generation request with a description."""

    schema_version: str = Field("preset/v1", alias="schema", description="Schema version")
    name: str = Field(..., description="Preset name")
    description: str = Field("", description="Human-readable description")
    tags: list[str] = Field(default_factory=list, description="Free-form tags")
    request: GenerationRequest = Field(
        default_factory=GenerationRequest, description="Request this preset expands to"
    )

    model_config = {"populate_by_name": True}

    def to_yaml_dict(self) -> dict[str, Any]:
        """Convert to YAML-serializable dictionary."""
        return {
            "schema": self.schema_version,
            "name": self.name,
            "description": self.description,
            "tags": list(self.tags),
            "request": self.request.model_dump(exclude_none=True),
        }


class PresetMetadata(BaseModel):
    """Lightweight metadata for listing presets."""

    name: str
    description: str
    scale: str
    bars: int
    tags: list[str] = Field(default_factory=list)
    path: str | None = None

    model_config = {"frozen": True}

    @classmethod
    def from_preset(cls, preset: MelodyPreset, path: str | None = None) -> PresetMetadata:
        """Create metadata from a full preset."""
        return cls(
            name=preset.name,
            description=preset.description,
            scale=preset.request.scale,
            bars=preset.request.bars,
            tags=list(preset.tags),
            path=path,
        )
