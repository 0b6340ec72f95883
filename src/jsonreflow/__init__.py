"""Permissive JSON reformatting.

This package reformats JSON-like text that may contain comments, missing or broken
punctuation and extra separators, fitting objects and arrays on a single line where
they fit within a width limit and laying them out over several lines otherwise.
"""

from importlib.metadata import PackageNotFoundError, version

from jsonreflow.config import DEFAULT_CONFIG, LENIENT_CONFIG, FormatConfig
from jsonreflow.exceptions import ConfigError, FormatterInvariantError, NestingDepthError
from jsonreflow.jsonreflow import decode_lenient, format_bytes, format_json

# Expose the version for both programmatic use and CLI
try:
    __version__ = version("jsonreflow")
except PackageNotFoundError:
    __version__ = "unknown"

__all__ = [
    "DEFAULT_CONFIG",
    "LENIENT_CONFIG",
    "ConfigError",
    "FormatConfig",
    "FormatterInvariantError",
    "NestingDepthError",
    "decode_lenient",
    "format_bytes",
    "format_json",
]
