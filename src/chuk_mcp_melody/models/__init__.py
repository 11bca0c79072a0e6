"""
Pydantic models for the melody system.

This module provides:
- GenerationRequest: Configuration for one melodic phrase
- MelodyPreset: A named, reusable request loaded from YAML
"""

from chuk_mcp_melody.models.preset import MelodyPreset, PresetMetadata
from chuk_mcp_melody.models.request import GenerationRequest

__all__ = [
    "GenerationRequest",
    "MelodyPreset",
    "PresetMetadata",
]
