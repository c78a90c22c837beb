"""
Tests for nsisgen.options module.

Tests option normalization including:
- Placeholder substitution for missing metadata
- Compression and solid defaults
- Version fixup
- Required output path
"""

from __future__ import annotations

from dataclasses import FrozenInstanceError
from pathlib import Path

import pytest

from nsisgen.exceptions import ConfigError
from nsisgen.options import (
    PLACEHOLDERS,
    Compression,
    fix_version,
    normalize_options,
)


class TestFixVersion:
    """Tests for the three-part version fixup."""

    @pytest.mark.parametrize(
        "version, expected",
        [
            ("1.2.3", "1.2.3.0"),
            ("0.0.0", "0.0.0.0"),
            ("10.20.300", "10.20.300.0"),
        ],
    )
    def test_three_part_numeric_gets_fourth_component(self, version, expected):
        """Test that X.X.X versions are padded with .0."""
        assert fix_version(version) == expected

    @pytest.mark.parametrize(
        "version",
        ["1.2", "1.2.3.4", "1.2.3-beta", "v1.2.3", "1.a.3", "NO_VERSION", ""],
    )
    def test_other_formats_pass_through(self, version):
        """Test that anything else is returned unchanged."""
        assert fix_version(version) == version

    def test_trailing_newline_is_not_matched(self):
        """Test that a trailing newline does not sneak past the match."""
        assert fix_version("1.2.3\n") == "1.2.3\n"


class TestNormalizeOptions:
    """Tests for building ComposerOptions from raw mappings."""

    def test_full_options(self, sample_options_data):
        """Test that supplied values are kept."""
        options = normalize_options(sample_options_data)

        assert options.app_name == "Demo App"
        assert options.company_name == "Demo Inc."
        assert options.description == "Demo application"
        assert options.version == "1.2.3"
        assert options.fixed_version == "1.2.3.0"
        assert options.copyright == "(c) 2025 Demo Inc."
        assert options.compression is Compression.ZLIB
        assert options.solid is True
        assert options.src_dir == Path(sample_options_data["src_dir"])
        assert options.output == Path(sample_options_data["output"])

    def test_missing_metadata_uses_placeholders(self):
        """Test that each missing cosmetic field gets its own placeholder."""
        options = normalize_options({"output": "setup.exe"})

        assert options.app_name == "NO_APPNAME"
        assert options.company_name == "NO_COMPANYNAME"
        assert options.description == "NO_DESCRIPTION"
        assert options.version == "NO_VERSION"
        assert options.copyright == "NO_COPYRIGHT"
        assert options.fixed_version == "NO_VERSION"

    def test_placeholders_are_distinct(self):
        """Test that no two fields share a placeholder."""
        assert len(set(PLACEHOLDERS.values())) == len(PLACEHOLDERS)

    def test_empty_strings_use_placeholders(self):
        """Test that empty strings count as missing."""
        options = normalize_options({"app_name": "", "version": "", "output": "x.exe"})

        assert options.app_name == "NO_APPNAME"
        assert options.version == "NO_VERSION"

    def test_compression_defaults_to_lzma(self):
        """Test lzma default and non-solid default."""
        options = normalize_options({"output": "setup.exe"})

        assert options.compression is Compression.LZMA
        assert options.solid is False

    def test_compression_is_case_insensitive(self):
        """Test that BZIP2 is accepted as bzip2."""
        options = normalize_options({"compression": "BZIP2", "output": "setup.exe"})

        assert options.compression is Compression.BZIP2

    def test_unknown_compression_raises(self):
        """Test that an unsupported compressor is a ConfigError."""
        with pytest.raises(ConfigError, match="Unsupported compression"):
            normalize_options({"compression": "zstd", "output": "setup.exe"})

    def test_solid_is_coerced_to_bool(self):
        """Test that truthy and falsy values become strict booleans."""
        assert normalize_options({"solid": "yes", "output": "a.exe"}).solid is True
        assert normalize_options({"solid": 0, "output": "a.exe"}).solid is False

    def test_missing_output_raises(self):
        """Test that output is required."""
        with pytest.raises(ConfigError, match="output"):
            normalize_options({"app_name": "Demo"})

    @pytest.mark.parametrize("key", ["output", "src_dir", "srcDir"])
    @pytest.mark.parametrize("value", [5, ["dist"], {"path": "dist"}, True])
    def test_non_path_values_raise_config_error(self, key, value):
        """Test that numbers, lists and mappings are rejected as paths."""
        raw = {"output": "setup.exe", key: value}

        with pytest.raises(ConfigError, match="must be a path string"):
            normalize_options(raw)

    def test_path_objects_are_accepted(self, tmp_path):
        """Test that Path values pass through unchanged."""
        options = normalize_options(
            {"output": tmp_path / "setup.exe", "src_dir": tmp_path}
        )

        assert options.output == tmp_path / "setup.exe"
        assert options.src_dir == tmp_path

    def test_src_dir_is_optional(self):
        """Test that src_dir may be omitted at normalization time."""
        options = normalize_options({"output": "setup.exe"})

        assert options.src_dir is None

    def test_camel_case_aliases(self):
        """Test that appName/companyName/srcDir are accepted."""
        options = normalize_options(
            {
                "appName": "Camel",
                "companyName": "Camel Co",
                "srcDir": "dist",
                "output": "setup.exe",
            }
        )

        assert options.app_name == "Camel"
        assert options.company_name == "Camel Co"
        assert options.src_dir == Path("dist")

    def test_snake_case_wins_over_alias(self):
        """Test that snake_case takes precedence when both are given."""
        options = normalize_options(
            {"appName": "Camel", "app_name": "Snake", "output": "setup.exe"}
        )

        assert options.app_name == "Snake"

    def test_numeric_version_is_stringified(self):
        """Test that a YAML float version becomes a string."""
        options = normalize_options({"version": 1.5, "output": "setup.exe"})

        assert options.version == "1.5"
        assert options.fixed_version == "1.5"

    def test_options_are_immutable(self):
        """Test that normalized options cannot be mutated."""
        options = normalize_options({"output": "setup.exe"})

        with pytest.raises(FrozenInstanceError):
            options.app_name = "Changed"
