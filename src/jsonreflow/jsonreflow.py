"""Formatting and lenient decoding of JSON-like text.

This module provides the public entry points of jsonreflow. ``format_json`` reformats
text that is JSON-shaped but may contain comments, missing or broken punctuation and
extra separators, producing consistently punctuated output under a layout policy.
``decode_lenient`` builds on it to decode such "sloppy JSON" with the standard
library decoder.
"""

import json
from typing import Any, Union, overload

from jsonreflow.config import DEFAULT_CONFIG, LENIENT_CONFIG, FormatConfig
from jsonreflow.engine.formatter import Formatter
from jsonreflow.logging_config import get_logger
from jsonreflow.types import SourceType

logger = get_logger(__name__)


@overload
def format_json(source: str, config: FormatConfig = DEFAULT_CONFIG) -> str: ...


@overload
def format_json(source: bytes, config: FormatConfig = DEFAULT_CONFIG) -> bytes: ...


def format_json(source: SourceType, config: FormatConfig = DEFAULT_CONFIG) -> Union[str, bytes]:
    """Reformat JSON-like text according to a configuration.

    Formatting is permissive and never fails on malformed input: unrecognized content
    is carried through as an atom, missing punctuation is inserted and excess
    punctuation is dropped.

    Args:
        source: Text to format. Bytes are decoded as UTF-8, with invalid sequences
            replaced by U+FFFD.
        config: Layout policy. Defaults to ``DEFAULT_CONFIG``.

    Returns:
        The formatted text, of the same type as ``source``.

    Raises:
        TypeError: If ``source`` is neither str nor bytes.
        NestingDepthError: If objects and arrays nest deeper than ``config.max_depth``.

    Example:
        >>> format_json('{"a":[1,2,3]}')
        '{"a": [1, 2, 3]}\\n'
        >>> format_json(b"0")
        b'0\\n'
    """
    if isinstance(source, (bytes, bytearray)):
        return format_bytes(bytes(source), config)
    text = _source_text(source)

    logger.debug("Formatting %d characters", len(text))
    output = Formatter(config, text).run()
    logger.debug("Formatted output is %d characters", len(output))
    return output


def format_bytes(source: bytes, config: FormatConfig = DEFAULT_CONFIG) -> bytes:
    """Reformat UTF-8 encoded JSON-like text.

    Args:
        source: UTF-8 encoded text to format.
        config: Layout policy. Defaults to ``DEFAULT_CONFIG``.

    Returns:
        The formatted text, UTF-8 encoded.
    """
    return format_json(_source_text(source), config).encode("utf-8")


def decode_lenient(source: SourceType, config: FormatConfig = LENIENT_CONFIG, **json_kwargs: Any) -> Any:
    """Decode JSON-like text that may contain comments and broken punctuation.

    The source is first formatted with comments stripped and no whitespace, which
    repairs punctuation, and the result is then decoded by ``json.loads``.

    Without spacing, consecutive top-level values are written back to back, so
    ``1 2`` would read as ``12``. Input holding more than one top-level value is
    therefore rejected before decoding.

    Args:
        source: Text to decode.
        config: Formatting configuration used for the repair pass. It should strip
            comments; defaults to ``LENIENT_CONFIG``.
        **json_kwargs: Passed through to ``json.loads`` (``object_hook``,
            ``parse_float`` and so on).

    Returns:
        The decoded value.

    Raises:
        json.JSONDecodeError: If the source holds more than one top-level value
            ("Extra data", positioned at the second value in the repaired text),
            or if the repaired text is still not valid JSON, for example because
            of unquoted keys.

    Example:
        >>> decode_lenient('{"a" 1 "b" [true null] /* note */}')
        {'a': 1, 'b': [True, None]}
    """
    formatter = Formatter(config, _source_text(source))
    formatted = formatter.run()
    if len(formatter.root_offsets) > 1:
        raise json.JSONDecodeError("Extra data", formatted, formatter.root_offsets[1])
    return json.loads(formatted, **json_kwargs)


def _source_text(source: SourceType) -> str:
    if isinstance(source, (bytes, bytearray)):
        return bytes(source).decode("utf-8", errors="replace")
    if not isinstance(source, str):
        raise TypeError(f"Expected str or bytes, got {type(source).__name__}")
    return source
