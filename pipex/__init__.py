"""Run two commands connected by a pipe between an input file and an output file."""

__version__ = "0.1.0"
__all__ = ["chars", "path", "pipeline", "text"]