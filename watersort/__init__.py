"""Liquid sort puzzle engine: tube model, level generator, hints and game sessions."""

__version__ = "1.0.0"
