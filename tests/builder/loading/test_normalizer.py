"""
Unit tests for question normalization.
"""

from conftest import make_raw_question
from eju_toolkit.builder.loading.normalizer import normalize_question, normalize_step


class TestNormalizeQuestion:
    """Raw fragment question → canonical question."""

    def test_normalize_copies_fixed_field_set(self, raw_question):
        question = normalize_question(raw_question)

        assert question.id == "q1"
        assert question.number == "問1"
        assert question.topic == "2次関数"
        assert question.topic_tag == "関数"
        assert question.question == raw_question["japanese"]
        assert question.solution.final_answer == "$-1$"

    def test_normalize_drops_review_flags(self, raw_question):
        data = normalize_question(raw_question).to_dict()

        assert "answer_match" not in data
        assert "needs_review" not in data
        assert "japanese" not in data

    def test_normalize_when_human_verified_absent_then_false(self, raw_question):
        assert normalize_question(raw_question).human_verified is False

    def test_normalize_when_human_verified_true_then_kept(self):
        assert normalize_question(make_raw_question(humanVerified=True)).human_verified is True

    def test_normalize_when_human_verified_null_then_false(self):
        assert normalize_question(make_raw_question(humanVerified=None)).human_verified is False

    def test_normalize_when_question_diagram_then_hoisted(self):
        raw = make_raw_question(questionDiagram={"svg": "<svg id='q'/>"})

        data = normalize_question(raw).to_dict()

        assert data["questionDiagramSvg"] == "<svg id='q'/>"
        assert "questionDiagram" not in data

    def test_normalize_when_no_question_diagram_then_key_absent(self, raw_question):
        assert "questionDiagramSvg" not in normalize_question(raw_question).to_dict()

    def test_normalize_preserves_step_order(self):
        steps = [{"title": f"s{i}", "content": str(i)} for i in range(5)]
        raw = make_raw_question(
            solution={"translation": "", "analysis": "", "steps": steps, "finalAnswer": ""}
        )

        titles = [s.title for s in normalize_question(raw).solution.steps]

        assert titles == ["s0", "s1", "s2", "s3", "s4"]

    def test_normalize_when_solution_missing_then_none(self):
        raw = make_raw_question()
        del raw["solution"]

        assert normalize_question(raw).solution is None

    def test_normalize_when_already_canonical_then_unchanged(self, raw_question):
        once = normalize_question(raw_question)

        twice = normalize_question(once.to_dict())

        assert twice == once


class TestNormalizeStep:

    def test_step_diagram_hoisted_to_flat_field(self):
        step = normalize_step({"title": "t", "content": "c", "diagram": {"svg": "<svg/>"}})

        assert step.diagram_svg == "<svg/>"
        assert step.to_dict() == {"title": "t", "content": "c", "diagramSvg": "<svg/>"}

    def test_step_why_kept(self):
        assert normalize_step({"title": "t", "content": "c", "why": "w"}).why == "w"

    def test_step_when_why_null_then_absent(self):
        assert "why" not in normalize_step({"title": "t", "content": "c", "why": None}).to_dict()

    def test_step_when_empty_diagram_then_no_svg(self):
        assert normalize_step({"title": "t", "content": "c", "diagram": {}}).diagram_svg is None
