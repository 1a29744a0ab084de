"""Falling Blocks: a pure, event-driven rules engine for a falling-block puzzle."""

__version__ = "0.1.0"
