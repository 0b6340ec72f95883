"""Formatter configuration.

This module defines the configuration record that controls how documents are laid
out: indentation, the single-line width threshold, comment syntax and handling, and
the trailing-comma policy. Configurations are immutable; derive variants with
``with_overrides`` or load them from a mapping or a (lenient JSON) file.

Example:
    >>> conf = DEFAULT_CONFIG.with_overrides(comment_line="#", width=40)
    >>> conf.width, conf.comment_line, conf.indent
    (40, '#', '  ')
    >>> FormatConfig.from_mapping({"trailingComma": True}).trailing_comma
    True
"""

from dataclasses import dataclass, fields, replace
from pathlib import Path
from typing import Any, Dict, Mapping, Optional

from jsonreflow.exceptions import ConfigError

# Keys accepted in configuration mappings and files, mapped to field names
_MAPPING_KEYS: Dict[str, str] = {
    "indent": "indent",
    "width": "width",
    "commentLine": "comment_line",
    "commentBlockStart": "comment_block_start",
    "commentBlockEnd": "comment_block_end",
    "trailingComma": "trailing_comma",
    "stripComments": "strip_comments",
    "maxDepth": "max_depth",
}


@dataclass(frozen=True)
class FormatConfig:
    """Layout policy for the formatter.

    Attributes:
        indent: Indentation unit. When empty, no separator spaces or newlines are
            emitted except after line comments, and composites always render on a
            single line.
        width: Column limit for single-line rendering of objects and arrays. When 0,
            single-line attempts are disabled and composites render multi-line
            (provided ``indent`` is set).
        comment_line: Prefix that starts a line comment. Empty disables line comments,
            and their syntax becomes ordinary atom content.
        comment_block_start: Opening delimiter of block comments.
        comment_block_end: Closing delimiter of block comments. Block comments,
            including nested ones, are only recognized when both delimiters are set.
        trailing_comma: Emit a comma after the last element of multi-line objects and
            arrays. Single-line renderings never get one.
        strip_comments: Omit comments from the output while still consuming them.
        max_depth: Maximum nesting depth of objects and arrays.
    """

    indent: str = "  "
    width: int = 80
    comment_line: str = "//"
    comment_block_start: str = "/*"
    comment_block_end: str = "*/"
    trailing_comma: bool = False
    strip_comments: bool = False
    max_depth: int = 128

    def __post_init__(self) -> None:
        for name in ("indent", "comment_line", "comment_block_start", "comment_block_end"):
            if not isinstance(getattr(self, name), str):
                raise ConfigError(f"{name} must be a string, got {type(getattr(self, name)).__name__}")

        for name in ("trailing_comma", "strip_comments"):
            if not isinstance(getattr(self, name), bool):
                raise ConfigError(f"{name} must be a boolean, got {type(getattr(self, name)).__name__}")

        if not _is_int(self.width) or self.width < 0:
            raise ConfigError(f"width must be a non-negative integer, got {self.width!r}")

        if not _is_int(self.max_depth) or self.max_depth < 1:
            raise ConfigError(f"max_depth must be a positive integer, got {self.max_depth!r}")

    @property
    def spacing(self) -> bool:
        """Whether separator spaces and newlines are emitted at all."""
        return self.indent != ""

    @property
    def prefers_single_line(self) -> bool:
        return self.width > 0

    @property
    def block_comments_enabled(self) -> bool:
        return self.comment_block_start != "" and self.comment_block_end != ""

    def with_overrides(self, **changes: Any) -> "FormatConfig":
        """Return a copy of this configuration with the given fields replaced.

        Raises:
            ConfigError: If a field name is unknown or a value is invalid.
        """
        known = {f.name for f in fields(self)}
        unknown = sorted(set(changes) - known)
        if unknown:
            raise ConfigError(f"Unknown configuration field(s): {', '.join(unknown)}")
        return replace(self, **changes)

    @classmethod
    def from_mapping(cls, mapping: Mapping[str, Any], base: Optional["FormatConfig"] = None) -> "FormatConfig":
        """Build a configuration from a mapping of camelCase keys.

        Keys follow the JSON spelling used in configuration files (``indent``,
        ``width``, ``commentLine``, ``commentBlockStart``, ``commentBlockEnd``,
        ``trailingComma``, ``stripComments``, ``maxDepth``). Missing keys keep the
        value from ``base``.

        Args:
            mapping: Configuration values keyed by their JSON names.
            base: Configuration supplying the values of missing keys. Defaults to
                ``DEFAULT_CONFIG``.

        Returns:
            The merged configuration.

        Raises:
            ConfigError: If the mapping has unknown keys or invalid values.
        """
        if not isinstance(mapping, Mapping):
            raise ConfigError(f"Configuration must be an object, got {type(mapping).__name__}")

        unknown = sorted(key for key in mapping if key not in _MAPPING_KEYS)
        if unknown:
            raise ConfigError(f"Unknown configuration key(s): {', '.join(unknown)}")

        changes = {_MAPPING_KEYS[key]: value for key, value in mapping.items()}
        return (base or DEFAULT_CONFIG).with_overrides(**changes)

    @classmethod
    def from_file(cls, path: Path, base: Optional["FormatConfig"] = None) -> "FormatConfig":
        """Load a configuration from a file.

        The file is itself decoded leniently, so it may contain comments, trailing
        commas or missing punctuation.

        Args:
            path: Path of the configuration file.
            base: Configuration supplying the values of missing keys.

        Returns:
            The loaded configuration.

        Raises:
            ConfigError: If the file cannot be decoded or holds invalid settings.
            OSError: If the file cannot be read.
        """
        from jsonreflow.jsonreflow import decode_lenient

        source = Path(path).read_bytes()
        try:
            mapping = decode_lenient(source)
        except ValueError as e:
            raise ConfigError(f"Cannot decode configuration file {path}: {e}") from e
        return cls.from_mapping(mapping, base=base)


def _is_int(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


DEFAULT_CONFIG = FormatConfig()

# Used by decode_lenient: comments stripped, everything on one line, no whitespace
LENIENT_CONFIG = FormatConfig(indent="", width=0, strip_comments=True)
