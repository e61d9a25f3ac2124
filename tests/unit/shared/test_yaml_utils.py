"""Tests for YAML utilities."""

import pytest
import yaml
from pathlib import Path
from context_overlay.common.shared.yaml_utils import load_yaml, dump_yaml, save_yaml


class TestLoadYaml:
    """Tests for load_yaml function."""

    def test_load_nested_yaml(self, temp_dir):
        """Test loading YAML with nested structures."""
        yaml_file = temp_dir / "test.yaml"
        yaml_file.write_text(
            "outer:\n"
            "  inner:\n"
            "    key: value\n"
            "  list:\n"
            "    - item1\n"
            "    - item2\n"
        )
        
        data = load_yaml(yaml_file)
        
        assert data["outer"]["inner"]["key"] == "value"
        assert data["outer"]["list"] == ["item1", "item2"]

    def test_file_not_found(self):
        """Test that missing file raises FileNotFoundError."""
        non_existent = Path("/nonexistent/file.yaml")
        
        with pytest.raises(FileNotFoundError, match="YAML file not found"):
            load_yaml(non_existent)

    def test_invalid_yaml(self, temp_dir):
        """Test that invalid YAML raises yaml.YAMLError."""
        yaml_file = temp_dir / "invalid.yaml"
        yaml_file.write_text("invalid: yaml: content: [")
        
        with pytest.raises(yaml.YAMLError):
            load_yaml(yaml_file)

    def test_empty_yaml(self, temp_dir):
        """Test loading empty YAML file."""
        yaml_file = temp_dir / "empty.yaml"
        yaml_file.write_text("")
        
        assert load_yaml(yaml_file) is None

    def test_accepts_string_path(self, temp_dir):
        """Test that a plain string path is accepted."""
        yaml_file = temp_dir / "test.yaml"
        yaml_file.write_text("number: 42\n")
        
        assert load_yaml(str(yaml_file)) == {"number": 42}


class TestDumpYaml:
    """Tests for dump_yaml function."""

    def test_keeps_key_order(self):
        """Test that mapping order is preserved in the output."""
        text = dump_yaml({"b": 1, "a": 2})
        
        assert text.index("b:") < text.index("a:")

    def test_block_style(self):
        """Test that nested structures are written in block style."""
        text = dump_yaml({"outer": {"list": [1, 2]}})
        
        assert yaml.safe_load(text) == {"outer": {"list": [1, 2]}}
        assert "{" not in text


class TestSaveYaml:
    """Tests for save_yaml function."""

    def test_create_parent_directory(self, temp_dir):
        """Test that parent directory is created if it doesn't exist."""
        output_file = temp_dir / "nested" / "deep" / "test.yaml"
        
        save_yaml(output_file, {"key": "value"})
        
        assert load_yaml(output_file) == {"key": "value"}

    def test_overwrites_existing_content(self, temp_dir):
        """Test that a second save replaces the first one entirely."""
        output_file = temp_dir / "test.yaml"
        save_yaml(output_file, {"first": 1, "padding": "x" * 100})
        
        save_yaml(output_file, {"second": 2})
        
        assert load_yaml(output_file) == {"second": 2}

    def test_unrepresentable_data_keeps_previous_file(self, temp_dir):
        """Test that a failed dump does not truncate the file."""
        output_file = temp_dir / "test.yaml"
        save_yaml(output_file, {"key": "value"})
        
        with pytest.raises(yaml.YAMLError):
            save_yaml(output_file, {"key": object()})
        
        assert load_yaml(output_file) == {"key": "value"}
