"""
MCP tool implementations.

Tools are organized by domain:
- theory - Scales, chord types and patterns
- generation - Phrase generation, MIDI export and presets
"""

from chuk_mcp_melody.tools.generation import register_generation_tools
from chuk_mcp_melody.tools.theory import register_theory_tools

__all__ = [
    "register_generation_tools",
    "register_theory_tools",
]
