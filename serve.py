#!/usr/bin/env python
"""Serve slug-studio via web browser using textual-serve."""

import os

from textual_serve.server import Server

host = os.environ.get("SLUG_STUDIO_HOST", "0.0.0.0")
port = int(os.environ.get("SLUG_STUDIO_PORT", "8000"))

# Use uv run to ensure correct environment
server = Server(
    "uv run python -m slug_studio",
    host=host,
    port=port,
)
server.serve()
