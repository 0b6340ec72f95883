"""Tests for formatter configuration."""

import pytest

from jsonreflow.config import DEFAULT_CONFIG, LENIENT_CONFIG, FormatConfig
from jsonreflow.exceptions import ConfigError


def test_defaults():
    assert DEFAULT_CONFIG == FormatConfig(
        indent="  ",
        width=80,
        comment_line="//",
        comment_block_start="/*",
        comment_block_end="*/",
        trailing_comma=False,
        strip_comments=False,
        max_depth=128,
    )


def test_lenient_config():
    assert LENIENT_CONFIG.indent == ""
    assert LENIENT_CONFIG.width == 0
    assert LENIENT_CONFIG.strip_comments


def test_derived_properties():
    assert DEFAULT_CONFIG.spacing
    assert DEFAULT_CONFIG.prefers_single_line
    assert DEFAULT_CONFIG.block_comments_enabled

    config = FormatConfig(indent="", width=0, comment_block_end="")
    assert not config.spacing
    assert not config.prefers_single_line
    assert not config.block_comments_enabled


def test_config_is_immutable():
    with pytest.raises(AttributeError):
        DEFAULT_CONFIG.width = 10  # type: ignore[misc]


class TestValidation:
    @pytest.mark.parametrize(
        "changes,message",
        [
            ({"width": -1}, "width must be a non-negative integer"),
            ({"width": 1.5}, "width must be a non-negative integer"),
            ({"width": True}, "width must be a non-negative integer"),
            ({"max_depth": 0}, "max_depth must be a positive integer"),
            ({"indent": 2}, "indent must be a string"),
            ({"comment_line": None}, "comment_line must be a string"),
            ({"trailing_comma": "yes"}, "trailing_comma must be a boolean"),
            ({"strip_comments": 1}, "strip_comments must be a boolean"),
        ],
    )
    def test_invalid_values(self, changes, message):
        with pytest.raises(ConfigError, match=message):
            DEFAULT_CONFIG.with_overrides(**changes)

    def test_unknown_field(self):
        with pytest.raises(ConfigError, match="Unknown configuration field"):
            DEFAULT_CONFIG.with_overrides(colour="red")

    def test_with_overrides_returns_copy(self):
        config = DEFAULT_CONFIG.with_overrides(width=40)
        assert config.width == 40
        assert DEFAULT_CONFIG.width == 80


class TestFromMapping:
    def test_camel_case_keys(self):
        config = FormatConfig.from_mapping(
            {
                "indent": "\t",
                "width": 100,
                "commentLine": "#",
                "commentBlockStart": "(*",
                "commentBlockEnd": "*)",
                "trailingComma": True,
                "stripComments": True,
                "maxDepth": 64,
            }
        )
        assert config == FormatConfig("\t", 100, "#", "(*", "*)", True, True, 64)

    def test_missing_keys_come_from_base(self):
        base = FormatConfig(width=10)
        config = FormatConfig.from_mapping({"indent": ""}, base=base)
        assert config.width == 10
        assert config.indent == ""

    def test_unknown_keys(self):
        with pytest.raises(ConfigError, match="Unknown configuration key"):
            FormatConfig.from_mapping({"trailing_comma": True})

    def test_not_a_mapping(self):
        with pytest.raises(ConfigError, match="must be an object"):
            FormatConfig.from_mapping([1, 2])  # type: ignore[arg-type]


class TestFromFile:
    def test_lenient_file(self, tmp_path):
        path = tmp_path / "jsonreflow.json"
        path.write_text('// project settings\n{"width" 100 "trailingComma" true,}\n')
        config = FormatConfig.from_file(path)
        assert config.width == 100
        assert config.trailing_comma
        assert config.indent == DEFAULT_CONFIG.indent

    def test_invalid_value_in_file(self, tmp_path):
        path = tmp_path / "jsonreflow.json"
        path.write_text('{"width": "wide"}')
        with pytest.raises(ConfigError, match="width"):
            FormatConfig.from_file(path)

    def test_undecodable_file(self, tmp_path):
        path = tmp_path / "jsonreflow.json"
        path.write_text("{width: 10}")
        with pytest.raises(ConfigError, match="Cannot decode configuration file"):
            FormatConfig.from_file(path)

    def test_missing_file(self, tmp_path):
        with pytest.raises(OSError):
            FormatConfig.from_file(tmp_path / "missing.json")
