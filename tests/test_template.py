"""
Tests for the viewer template shipped with the project.
"""

from pathlib import Path

from conftest import make_fragment_data
from eju_toolkit.builder.config import DEFAULT_TEMPLATE_PATH
from eju_toolkit.builder.loading.loader import Fragment
from eju_toolkit.builder.merge import merge
from eju_toolkit.builder.output.injector import extract_database, inject, placeholder_statement

TEMPLATE = Path(__file__).resolve().parent.parent / DEFAULT_TEMPLATE_PATH


class TestShippedTemplate:

    def test_template_exists_at_default_path(self):
        assert TEMPLATE.is_file()

    def test_template_has_one_placeholder_statement(self):
        assert TEMPLATE.read_text(encoding="utf-8").count(placeholder_statement()) == 1

    def test_template_accepts_injection(self):
        db, _ = merge([Fragment("a.json", make_fragment_data())])

        document = inject(TEMPLATE.read_text(encoding="utf-8"), db)

        assert extract_database(document) == db
