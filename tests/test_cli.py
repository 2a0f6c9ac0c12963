"""
Tests for the eju-build command-line entry point.
"""

import logging

from conftest import make_fragment_data
from eju_toolkit.cli import main


class TestMain:

    def test_main_when_build_succeeds_then_zero(self, tmp_path, data_dir, template_file,
                                                 write_fragment, caplog):
        write_fragment("a.json", make_fragment_data())
        out = tmp_path / "out" / "eju-math.jsx"

        with caplog.at_level(logging.INFO):
            code = main([
                "--data", str(data_dir),
                "--out", str(out),
                "--template", str(template_file),
            ])

        assert code == 0
        assert out.is_file()
        assert "Build complete" in caplog.text

    def test_main_when_data_missing_then_one(self, tmp_path, template_file, caplog):
        code = main([
            "--data", str(tmp_path / "missing"),
            "--out", str(tmp_path / "out.jsx"),
            "--template", str(template_file),
        ])

        assert code == 1
        assert "Build failed: Data directory does not exist" in caplog.text

    def test_main_uses_defaults_relative_to_cwd(self, tmp_path, monkeypatch):
        (tmp_path / "data").mkdir()
        (tmp_path / "template").mkdir()
        (tmp_path / "template" / "app-template.jsx").write_text(
            "const examDatabase = __EXAM_DATABASE__;\n", encoding="utf-8"
        )
        monkeypatch.chdir(tmp_path)

        assert main([]) == 0
        assert (tmp_path / "dist" / "eju-math.jsx").read_text(encoding="utf-8") == (
            "const examDatabase = {};\n"
        )
