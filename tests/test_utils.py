import pytest
from pathlib import Path
import tempfile
import json

from css_selector_builder.utils import is_valid_file_path, load_json_data
from css_selector_builder.exceptions import ParseError

def test_is_valid_file_path():
    # Test with temporary file
    with tempfile.NamedTemporaryFile() as tmp:
        assert is_valid_file_path(tmp.name) is True

    # Test with non-existent file
    assert is_valid_file_path("nonexistent.json") is False

def test_is_valid_file_path_directory(tmp_path):
    assert is_valid_file_path(tmp_path) is False

def test_load_json_data():
    # Test with valid JSON
    with tempfile.NamedTemporaryFile(mode='w', suffix='.json', delete=False) as tmp:
        json.dump({"element": "div"}, tmp)
        tmp.flush()
        tmp_path = tmp.name

    try:
        data = load_json_data(tmp_path)
        assert data == {"element": "div"}
    finally:
        # Clean up the temporary file
        Path(tmp_path).unlink(missing_ok=True)

def test_load_json_data_errors(tmp_path):
    broken = tmp_path / "broken.json"
    broken.write_text("{", encoding="utf-8")
    with pytest.raises(ParseError, match="Invalid JSON format"):
        load_json_data(broken)

    with pytest.raises(ParseError, match="Error reading file"):
        load_json_data(tmp_path / "missing.json")
