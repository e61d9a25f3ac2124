"""Tests for fragment parsing and loading."""

import json

import pytest

from context_overlay.config.fragments import load_fragment, parse_fragment
from context_overlay.errors import FragmentParseError


class TestParseFragment:
    """Tests for parse_fragment function."""

    def test_yaml_fragment(self, temp_dir):
        """Test parsing a YAML fragment."""
        path = temp_dir / "frag.yaml"
        path.write_text("DB:\n  host: db1\n")
        
        assert parse_fragment(path) == {"DB": {"host": "db1"}}

    def test_yml_suffix(self, temp_dir):
        """Test that .yml is treated as YAML."""
        path = temp_dir / "frag.yml"
        path.write_text("a: 1\n")
        
        assert parse_fragment(path) == {"a": 1}

    def test_json_fragment(self, temp_dir):
        """Test parsing a JSON fragment."""
        path = temp_dir / "frag.json"
        path.write_text(json.dumps({"a": [1, 2]}))
        
        assert parse_fragment(path) == {"a": [1, 2]}

    def test_invalid_yaml_raises(self, temp_dir):
        """Test that broken YAML becomes FragmentParseError."""
        path = temp_dir / "broken.yaml"
        path.write_text("invalid: yaml: content: [")
        
        with pytest.raises(FragmentParseError, match="broken.yaml"):
            parse_fragment(path)

    def test_invalid_json_raises(self, temp_dir):
        """Test that broken JSON becomes FragmentParseError."""
        path = temp_dir / "broken.json"
        path.write_text("{not json")
        
        with pytest.raises(FragmentParseError) as exc_info:
            parse_fragment(path)
        
        assert isinstance(exc_info.value.__cause__, json.JSONDecodeError)

    def test_unsupported_suffix(self, temp_dir):
        """Test that unknown file types are rejected."""
        path = temp_dir / "frag.php"
        path.write_text("<?php return [];")
        
        with pytest.raises(FragmentParseError, match="Unsupported"):
            parse_fragment(path)


class TestLoadFragment:
    """Tests for load_fragment function."""

    def test_missing_file_is_absent(self, temp_dir):
        """Test that a missing file contributes nothing and does not raise."""
        assert load_fragment(temp_dir / "missing.yaml") is None

    def test_directory_is_absent(self, temp_dir):
        """Test that a directory at the candidate path is skipped."""
        (temp_dir / "dir.yaml").mkdir()
        
        assert load_fragment(temp_dir / "dir.yaml") is None

    def test_empty_file_is_absent(self, temp_dir):
        """Test that an empty fragment contributes nothing."""
        path = temp_dir / "empty.yaml"
        path.write_text("")
        
        assert load_fragment(path) is None

    def test_empty_mapping_is_absent(self, temp_dir):
        """Test that an empty mapping contributes nothing."""
        path = temp_dir / "empty.yaml"
        path.write_text("{}\n")
        
        assert load_fragment(path) is None

    @pytest.mark.parametrize("content", ["- a\n- b\n", "just a string\n", "42\n"])
    def test_non_mapping_is_absent(self, temp_dir, content):
        """Test that lists and scalars contribute nothing."""
        path = temp_dir / "frag.yaml"
        path.write_text(content)
        
        assert load_fragment(path) is None

    def test_mapping_returned(self, write_yaml):
        """Test that a mapping fragment is returned."""
        path = write_yaml("frag.yaml", {"SYS": {"debug": True}})
        
        assert load_fragment(path) == {"SYS": {"debug": True}}

    def test_custom_parser(self, temp_dir):
        """Test that an injected parser replaces the default one."""
        path = temp_dir / "frag.conf"
        path.write_text("ignored")
        seen = []

        def parser(p):
            seen.append(p)
            return {"from": "parser"}

        assert load_fragment(path, parser) == {"from": "parser"}
        assert seen == [path]

    def test_custom_parser_not_called_for_missing_file(self, temp_dir):
        """Test that the parser only sees existing files."""
        calls = []
        
        load_fragment(temp_dir / "missing.conf", lambda p: calls.append(p))
        
        assert calls == []

    def test_parse_error_propagates(self, temp_dir):
        """Test that parse errors are not swallowed."""
        path = temp_dir / "broken.yaml"
        path.write_text("a: [")
        
        with pytest.raises(FragmentParseError):
            load_fragment(path)
