"""
Unit tests for document writing.
"""

from pathlib import Path
from unittest.mock import patch

import pytest

from eju_toolkit.builder.output.writer import write_document


class TestWriteDocument:

    def test_write_creates_parent_directories(self, tmp_path):
        path = tmp_path / "dist" / "nested" / "eju-math.jsx"

        size = write_document(path, "const x = 1;\n")

        assert path.read_text(encoding="utf-8") == "const x = 1;\n"
        assert size == len("const x = 1;\n")

    def test_write_returns_utf8_byte_count(self, tmp_path):
        size = write_document(tmp_path / "out.jsx", "数学")

        assert size == 6

    def test_write_overwrites_existing_file(self, tmp_path):
        path = tmp_path / "out.jsx"
        path.write_text("old", encoding="utf-8")

        write_document(path, "new")

        assert path.read_text(encoding="utf-8") == "new"

    def test_write_leaves_no_temporary_files(self, tmp_path):
        write_document(tmp_path / "out.jsx", "text")

        assert [p.name for p in tmp_path.iterdir()] == ["out.jsx"]

    def test_write_when_replace_fails_then_target_untouched(self, tmp_path):
        path = tmp_path / "out.jsx"
        path.write_text("old", encoding="utf-8")

        with patch.object(Path, "replace", side_effect=OSError("disk")):
            with pytest.raises(OSError, match="disk"):
                write_document(path, "new")

        assert path.read_text(encoding="utf-8") == "old"
        assert [p.name for p in tmp_path.iterdir()] == ["out.jsx"]
