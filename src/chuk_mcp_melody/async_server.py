#!/usr/bin/env python3
"""
Async Melody MCP Server using chuk-mcp-server

This server provides MCP tools for generating chord-based melodic phrases.
A phrase is a random walk over the degrees of a scale: each step picks a
chord and renders it with a melodic pattern (held chord, repeated notes,
arpeggios), ending on a tonic cadence.

The server provides tools for:
- Browsing scales, chord types and melodic patterns
- Spelling out concrete scales and chords
- Generating phrases, optionally written to MIDI files
- Named presets (library and project)
"""

import logging
from pathlib import Path

from chuk_mcp_server import ChukMCPServer

from chuk_mcp_melody.presets import PresetLoader
from chuk_mcp_melody.tools import register_generation_tools, register_theory_tools

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)

# Create the MCP server instance
mcp = ChukMCPServer("chuk-mcp-melody")

# Paths - use standard project structure
BASE_PATH = Path.cwd()
PRESETS_DIR = BASE_PATH / "presets"
OUTPUT_DIR = BASE_PATH / "output"
PRESETS_LIBRARY_PATH = Path(__file__).parent / "presets" / "library"

preset_loader = PresetLoader(
    library_path=PRESETS_LIBRARY_PATH,
    project_path=PRESETS_DIR,
)

# Register all tools
theory_tools = register_theory_tools(mcp)
generation_tools = register_generation_tools(mcp, preset_loader, OUTPUT_DIR)

# Export tool functions for direct access
melody_list_scales = theory_tools["melody_list_scales"]
melody_list_chord_types = theory_tools["melody_list_chord_types"]
melody_list_patterns = theory_tools["melody_list_patterns"]
melody_describe_scale = theory_tools["melody_describe_scale"]
melody_describe_chord = theory_tools["melody_describe_chord"]

melody_generate = generation_tools["melody_generate"]
melody_list_presets = generation_tools["melody_list_presets"]
melody_describe_preset = generation_tools["melody_describe_preset"]

logger.info("CHUK Melody MCP Server initialized")
logger.info(f"  Preset library: {PRESETS_LIBRARY_PATH}")
logger.info(f"  Project presets: {PRESETS_DIR}")
logger.info(f"  Output dir: {OUTPUT_DIR}")
