"""Skyline rectangle packing, containers, hashed strings, string helpers, render enumerations and input event dispatch."""

__version__ = "0.1.0"
__all__ = ["containers", "events", "hashstring", "rectpack", "text", "videodefs"]