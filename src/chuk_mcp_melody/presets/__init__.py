"""
Presets - named generation requests stored as YAML.
"""

from chuk_mcp_melody.presets.loader import PresetLoader, is_safe_name

__all__ = ["PresetLoader", "is_safe_name"]
