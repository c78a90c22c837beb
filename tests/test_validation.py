"""
Tests for config validation module.

This module tests the validation functionality that checks config files
without walking the source tree or writing a script.
"""

from __future__ import annotations

from nsisgen.validation import validate_config


class TestValidateConfig:
    """Tests for validate_config function."""

    def test_valid_config(self, tmp_path):
        """Test that a complete config passes without warnings."""
        (tmp_path / "dist").mkdir()
        config = tmp_path / "installer.yaml"
        config.write_text(
            """
app_name: Demo
company_name: Demo Inc.
description: Demo application
version: "1.2.3"
copyright: (c) 2025 Demo Inc.
nsis:
  compression: bzip2
  solid: true
  src_dir: dist
  output: out/setup.exe
""",
            encoding="utf-8",
        )

        result = validate_config(config)

        assert result.status == "valid"
        assert result.errors == []
        assert result.warnings == []
        assert result.config_path == str(config)

    def test_missing_metadata_is_warning(self, tmp_path):
        """Test that missing cosmetic fields only warn."""
        (tmp_path / "dist").mkdir()
        config = tmp_path / "installer.yaml"
        config.write_text("src_dir: dist\noutput: setup.exe\n", encoding="utf-8")

        result = validate_config(config)

        assert result.status == "valid"
        assert any("app_name" in w for w in result.warnings)
        assert any("copyright" in w for w in result.warnings)

    def test_non_numeric_version_is_warning(self, tmp_path):
        """Test that a version makensis can't use is flagged."""
        (tmp_path / "dist").mkdir()
        config = tmp_path / "installer.yaml"
        config.write_text(
            'app_name: A\ncompany_name: B\ndescription: C\ncopyright: D\n'
            'version: "1.2.3-beta"\nsrc_dir: dist\noutput: setup.exe\n',
            encoding="utf-8",
        )

        result = validate_config(config)

        assert result.status == "valid"
        assert len(result.warnings) == 1
        assert "1.2.3-beta" in result.warnings[0]

    def test_missing_file(self, tmp_path):
        """Test that a missing config file is reported."""
        result = validate_config(tmp_path / "nonexistent.yaml")

        assert result.status == "invalid"
        assert len(result.errors) == 1
        assert "not found" in result.errors[0]

    def test_invalid_yaml_syntax(self, tmp_path):
        """Test that invalid YAML is reported."""
        config = tmp_path / "installer.yaml"
        config.write_text("nsis: [unclosed\n", encoding="utf-8")

        result = validate_config(config)

        assert result.status == "invalid"
        assert "YAML" in result.errors[0]

    def test_missing_output_and_src_dir(self, tmp_path):
        """Test that both required paths are reported."""
        config = tmp_path / "installer.yaml"
        config.write_text("app_name: Demo\n", encoding="utf-8")

        result = validate_config(config)

        assert result.status == "invalid"
        assert any("output" in e for e in result.errors)
        assert any("src_dir" in e for e in result.errors)

    def test_src_dir_not_found(self, tmp_path):
        """Test that a nonexistent source directory is an error."""
        config = tmp_path / "installer.yaml"
        config.write_text("src_dir: missing\noutput: setup.exe\n", encoding="utf-8")

        result = validate_config(config)

        assert result.status == "invalid"
        assert any("not found" in e for e in result.errors)

    def test_src_dir_is_file(self, tmp_path):
        """Test that a file given as src_dir is an error."""
        (tmp_path / "file.txt").write_text("x", encoding="utf-8")
        config = tmp_path / "installer.yaml"
        config.write_text("src_dir: file.txt\noutput: setup.exe\n", encoding="utf-8")

        result = validate_config(config)

        assert result.status == "invalid"
        assert any("not a directory" in e for e in result.errors)

    def test_non_string_paths_are_errors(self, tmp_path):
        """Test that numeric output and list src_dir are reported, not raised."""
        config = tmp_path / "installer.yaml"
        config.write_text("src_dir: [dist]\noutput: 5\n", encoding="utf-8")

        result = validate_config(config)

        assert result.status == "invalid"
        assert "'output' must be a path string, got 5" in result.errors
        assert "'src_dir' must be a path string, got ['dist']" in result.errors

    def test_bad_compression_and_solid(self, tmp_path):
        """Test that bad compression and non-boolean solid are errors."""
        (tmp_path / "dist").mkdir()
        config = tmp_path / "installer.yaml"
        config.write_text(
            "compression: zstd\nsolid: maybe\nsrc_dir: dist\noutput: setup.exe\n",
            encoding="utf-8",
        )

        result = validate_config(config)

        assert result.status == "invalid"
        assert len(result.errors) == 2
        assert any("zstd" in e for e in result.errors)
        assert any("solid" in e for e in result.errors)
