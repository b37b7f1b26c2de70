"""Utility helpers for the engine."""

from .fileio import read_source_file, read_yaml_file

__all__ = [
    "read_source_file",
    "read_yaml_file",
]
