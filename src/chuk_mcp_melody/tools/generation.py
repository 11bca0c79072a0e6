"""
Generation tools - MCP tools for producing melodic phrases.

Tools for generating a phrase (optionally writing it to MIDI) and for
browsing the preset library.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import TYPE_CHECKING, Any

from pydantic import ValidationError

from chuk_mcp_melody.compiler import MidiTrackSink
from chuk_mcp_melody.constants import ErrorMessages, SuccessMessages
from chuk_mcp_melody.core import BeatPosition
from chuk_mcp_melody.errors import MelodyError
from chuk_mcp_melody.generation import MelodyResult, generate_melody
from chuk_mcp_melody.models import GenerationRequest
from chuk_mcp_melody.presets import PresetLoader, is_safe_name

if TYPE_CHECKING:
    from chuk_mcp_server import ChukMCPServer

logger = logging.getLogger(__name__)


def _result_to_dict(result: MelodyResult) -> dict[str, Any]:
    """JSON-friendly view of a generation result."""
    time_sig = result.time_signature
    positions = [BeatPosition.from_beats(event.start, time_sig) for event in result.events]
    return {
        "chord_label": result.chord_label,
        "num_beats": result.num_beats,
        "end_beat": float(result.end_beat),
        "tempo": result.tempo,
        "time_signature": str(time_sig),
        "steps": [
            {
                "symbol": step.symbol,
                "move": step.move.value,
                "degree": step.degree,
                "chord_type": step.chord_type,
                "pattern": step.pattern.value,
                "start": float(step.start),
                "inverted": step.inverted,
                "notes": [note.name for note in step.notes],
            }
            for step in result.steps
        ],
        "events": [
            {
                "pitch": event.pitch.number,
                "name": event.pitch.name,
                "start": round(float(event.start), 4),
                "duration": round(float(event.duration), 4),
                "bar": position.bar + 1,
                "beat": round(float(position.beat) + 1, 4),
                "position": str(position),
            }
            for event, position in zip(result.events, positions)
        ],
    }


def register_generation_tools(
    mcp: ChukMCPServer,
    preset_loader: PresetLoader,
    output_dir: Path,
) -> dict[str, Any]:
    """
    Register melody generation tools with the MCP server.

    Args:
        mcp: The MCP server instance
        preset_loader: Loader for named presets
        output_dir: Directory for MIDI output files

    Returns:
        Dictionary of registered tool functions
    """
    tools: dict[str, Any] = {}

    @mcp.tool  # type: ignore[arg-type]
    async def melody_generate(
        root: str | int | None = None,
        scale: str | None = None,
        bars: int | None = None,
        beats_per_bar: int | None = None,
        note_value: int | None = None,
        tempo: int | None = None,
        chord_types: list[str] | None = None,
        patterns: list[str] | None = None,
        root_inversion: bool | None = None,
        end_on_tonic: bool | None = None,
        seed: int | None = None,
        preset: str | None = None,
        output_name: str | None = None,
    ) -> str:
        """
        Generate a chord-based melodic phrase.

        Starts from a preset (or the defaults) and applies any arguments
        given. With output_name, the phrase is also written as a MIDI file.

        Args:
            root: Scale root ('C4', 'D#', or a note number)
            scale: 'major', 'natural-minor', 'major-pentatonic', 'blues' or 'chromatic'
            bars: Phrase length in bars
            beats_per_bar: Time signature numerator
            note_value: Time signature denominator
            tempo: Tempo in BPM
            chord_types: Allowed chord types (e.g. ['maj', 'min', '7'])
            patterns: Allowed melodic patterns (e.g. ['ascending-arpeggio'])
            root_inversion: Randomly raise chord roots an octave
            end_on_tonic: End on the tonic major chord
            seed: Random seed for reproducible output
            preset: Optional preset name to start from
            output_name: Optional MIDI filename (without .mid extension)

        Returns:
            JSON string with chord label, chord steps and note events

        Example:
            melody_generate(root="A3", scale="natural-minor", bars=2, seed=42)
        """
        if output_name is not None and not is_safe_name(output_name):
            return json.dumps(
                {
                    "status": "error",
                    "code": "INVALID_NAME",
                    "message": ErrorMessages.INVALID_FILE_NAME.format(name=output_name),
                }
            )

        try:
            base = GenerationRequest()
            if preset:
                found = preset_loader.get_preset(preset)
                if found is None:
                    return json.dumps(
                        {
                            "status": "error",
                            "code": "PRESET_NOT_FOUND",
                            "message": ErrorMessages.PRESET_NOT_FOUND.format(name=preset),
                        }
                    )
                base = found.request

            request = base.with_overrides(
                root=root,
                scale=scale,
                bars=bars,
                beats_per_bar=beats_per_bar,
                note_value=note_value,
                tempo=tempo,
                chord_types=chord_types,
                patterns=patterns,
                root_inversion=root_inversion,
                end_on_tonic=end_on_tonic,
                seed=seed,
            )

            sink = MidiTrackSink(tempo_bpm=request.tempo)
            result = generate_melody(request, track=sink)
            data: dict[str, Any] = {"status": "success", **_result_to_dict(result)}

            if output_name:
                sink.time_signature = result.time_signature
                output_dir.mkdir(parents=True, exist_ok=True)
                output_path = output_dir / f"{output_name}.mid"
                sink.to_midi().save(str(output_path))
                data["path"] = str(output_path)
                data["message"] = SuccessMessages.MELODY_EXPORTED.format(
                    steps=len(result.steps), beats=result.num_beats, path=output_path
                )
            else:
                data["message"] = SuccessMessages.MELODY_GENERATED.format(
                    steps=len(result.steps), beats=result.num_beats
                )

            return json.dumps(data)
        except MelodyError as e:
            return json.dumps({"status": "error", "code": e.code, "message": str(e)})
        except ValidationError as e:
            return json.dumps({"status": "error", "code": "INVALID_REQUEST", "message": str(e)})
        except Exception as e:
            logger.exception("Failed to generate melody")
            return json.dumps({"status": "error", "code": "INTERNAL_ERROR", "message": str(e)})

    tools["melody_generate"] = melody_generate

    @mcp.tool  # type: ignore[arg-type]
    async def melody_list_presets() -> str:
        """
        List available presets.

        Returns:
            JSON string with preset summaries

        Example:
            melody_list_presets()
        """
        presets = preset_loader.list_presets()
        return json.dumps(
            {
                "status": "success",
                "presets": [
                    {
                        "name": p.name,
                        "description": p.description,
                        "scale": p.scale,
                        "bars": p.bars,
                        "tags": p.tags,
                    }
                    for p in presets
                ],
                "count": len(presets),
            }
        )

    tools["melody_list_presets"] = melody_list_presets

    @mcp.tool  # type: ignore[arg-type]
    async def melody_describe_preset(name: str) -> str:
        """
        Show the full request a preset expands to.

        Args:
            name: Preset name

        Returns:
            JSON string with the preset's request fields

        Example:
            melody_describe_preset(name="pop-cadence")
        """
        found = preset_loader.get_preset(name)
        if found is None:
            return json.dumps(
                {
                    "status": "error",
                    "code": "PRESET_NOT_FOUND",
                    "message": ErrorMessages.PRESET_NOT_FOUND.format(name=name),
                }
            )
        return json.dumps({"status": "success", "preset": found.to_yaml_dict()})

    tools["melody_describe_preset"] = melody_describe_preset

    return tools
