import json
import sys
from pathlib import Path

import pytest

# Add src to sys.path so we can import eju_toolkit
SRC_PATH = Path(__file__).resolve().parent.parent / "src"
if SRC_PATH.as_posix() not in sys.path:
    sys.path.insert(0, SRC_PATH.as_posix())


TEMPLATE_TEXT = (
    'import { useState } from "react";\n'
    "\n"
    "// ==================== EXAM DATA ====================\n"
    "const examDatabase = __EXAM_DATABASE__;\n"
    "\n"
    "export default function App() { return Object.keys(examDatabase).length; }\n"
)


def make_raw_question(qid="q1", **overrides) -> dict:
    """Raw question record as produced by the fragment pipeline."""
    question = {
        "id": qid,
        "number": "問1",
        "topic": "2次関数",
        "topicTag": "関数",
        "japanese": "$y = x^2 - 2x$ の最小値を求めよ。",
        "answer_match": True,
        "needs_review": False,
        "solution": {
            "translation": "求 $y = x^2 - 2x$ 的最小值。",
            "analysis": "配方。",
            "steps": [
                {
                    "title": "配方",
                    "content": "$$y = (x-1)^2 - 1$$",
                    "why": "完全平方式",
                },
                {
                    "title": "结论",
                    "content": "$x = 1$ 时最小",
                    "diagram": {"svg": "<svg><path d='M0 0'/></svg>"},
                },
            ],
            "finalAnswer": "$-1$",
        },
    }
    question.update(overrides)
    return question


def make_fragment_data(
    course="course1",
    year=2011,
    session=1,
    questions=None,
    **metadata,
) -> dict:
    meta = {
        "course": course,
        "year": year,
        "session": session,
        "examTitle": f"{year}年 第{session}回",
        "examDate": f"{year}-06",
    }
    meta.update(metadata)
    return {
        "metadata": meta,
        "questions": [make_raw_question()] if questions is None else questions,
    }


@pytest.fixture
def raw_question() -> dict:
    return make_raw_question()


@pytest.fixture
def fragment_data() -> dict:
    return make_fragment_data()


@pytest.fixture
def data_dir(tmp_path: Path) -> Path:
    """Empty fragment directory."""
    path = tmp_path / "data"
    path.mkdir()
    return path


@pytest.fixture
def write_fragment(data_dir: Path):
    """Write a fragment dict (or raw text) into the data directory."""

    def _write(name: str, data) -> Path:
        path = data_dir / name
        if isinstance(data, str):
            path.write_text(data, encoding="utf-8")
        else:
            path.write_text(json.dumps(data, ensure_ascii=False), encoding="utf-8")
        return path

    return _write


@pytest.fixture
def template_file(tmp_path: Path) -> Path:
    path = tmp_path / "template" / "app-template.jsx"
    path.parent.mkdir()
    path.write_text(TEMPLATE_TEXT, encoding="utf-8")
    return path
