"""Utilities for hostsnap."""

from .formatters import format_frequency, format_memory, generate_summary

__all__ = ["format_frequency", "format_memory", "generate_summary"]
