"""
Theory tools - MCP tools for browsing the harmony tables.

Tools for listing scales, chord types and melodic patterns, and for
spelling out a concrete scale or chord.
"""

from __future__ import annotations

import json
from typing import TYPE_CHECKING, Any

from chuk_mcp_melody.core import CHORD_TYPES, SCALE_TYPES, Pitch, build_chord, build_scale
from chuk_mcp_melody.errors import MelodyError
from chuk_mcp_melody.generation import MelodicPattern

if TYPE_CHECKING:
    from chuk_mcp_server import ChukMCPServer


def _describe_notes(notes: list[Pitch]) -> list[dict[str, Any]]:
    return [
        {
            "name": note.name,
            "number": note.number,
            "frequency": round(note.frequency(), 2),
        }
        for note in notes
    ]


def _error(e: MelodyError) -> str:
    return json.dumps({"status": "error", "code": e.code, "message": str(e)})


def register_theory_tools(mcp: ChukMCPServer) -> dict[str, Any]:
    """
    Register harmony table tools with the MCP server.

    Args:
        mcp: The MCP server instance

    Returns:
        Dictionary of registered tool functions
    """
    tools: dict[str, Any] = {}

    @mcp.tool  # type: ignore[arg-type]
    async def melody_list_scales() -> str:
        """
        List available scales.

        Returns:
            JSON string with scale identifiers and their semitone offsets

        Example:
            melody_list_scales()
        """
        return json.dumps(
            {
                "status": "success",
                "scales": [
                    {
                        "name": scale.name,
                        "display_name": scale.display_name,
                        "offsets": list(scale.offsets),
                        "degrees": scale.degrees,
                    }
                    for scale in SCALE_TYPES.values()
                ],
                "count": len(SCALE_TYPES),
            }
        )

    tools["melody_list_scales"] = melody_list_scales

    @mcp.tool  # type: ignore[arg-type]
    async def melody_list_chord_types() -> str:
        """
        List available chord types.

        Returns:
            JSON string with chord type identifiers and their semitone offsets

        Example:
            melody_list_chord_types()
        """
        return json.dumps(
            {
                "status": "success",
                "chord_types": [
                    {
                        "name": chord.name,
                        "display_name": chord.display_name,
                        "offsets": list(chord.offsets),
                    }
                    for chord in CHORD_TYPES.values()
                ],
                "count": len(CHORD_TYPES),
            }
        )

    tools["melody_list_chord_types"] = melody_list_chord_types

    @mcp.tool  # type: ignore[arg-type]
    async def melody_list_patterns() -> str:
        """
        List melodic patterns (how each chord is rendered into notes).

        Returns:
            JSON string with pattern names

        Example:
            melody_list_patterns()
        """
        return json.dumps(
            {
                "status": "success",
                "patterns": [
                    {
                        "name": pattern.value,
                        "display_name": pattern.display_name,
                        "random": pattern.is_random,
                    }
                    for pattern in MelodicPattern
                ],
                "count": len(MelodicPattern),
            }
        )

    tools["melody_list_patterns"] = melody_list_patterns

    @mcp.tool  # type: ignore[arg-type]
    async def melody_describe_scale(root: str, scale: str) -> str:
        """
        Spell out the notes of a scale.

        Args:
            root: Root note name (e.g. 'C4', 'F#3')
            scale: Scale identifier (e.g. 'major', 'blues')

        Returns:
            JSON string with note names, numbers and frequencies

        Example:
            melody_describe_scale(root="A3", scale="natural-minor")
        """
        try:
            notes = build_scale(Pitch.from_name(root), scale)
        except MelodyError as e:
            return _error(e)

        return json.dumps(
            {
                "status": "success",
                "root": root,
                "scale": scale,
                "notes": _describe_notes(notes),
            }
        )

    tools["melody_describe_scale"] = melody_describe_scale

    @mcp.tool  # type: ignore[arg-type]
    async def melody_describe_chord(root: str, chord_type: str) -> str:
        """
        Spell out the notes of a chord.

        Args:
            root: Chord root note name (e.g. 'C4')
            chord_type: Chord type ('maj', 'min', 'maj7', 'min7', '7', 'sus4', 'sus2')

        Returns:
            JSON string with note names, numbers and frequencies

        Example:
            melody_describe_chord(root="C4", chord_type="min7")
        """
        try:
            notes = build_chord(Pitch.from_name(root), chord_type)
        except MelodyError as e:
            return _error(e)

        return json.dumps(
            {
                "status": "success",
                "root": root,
                "chord_type": chord_type,
                "symbol": f"{notes[0].name}{chord_type}",
                "notes": _describe_notes(notes),
            }
        )

    tools["melody_describe_chord"] = melody_describe_chord

    return tools
