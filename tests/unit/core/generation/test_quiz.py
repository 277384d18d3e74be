"""
Unit tests for quiz generation and grading.
"""
import json

from core.generation.quiz import (
    FALLBACK_QUESTIONS,
    QUIZ_QUESTION_COUNT,
    build_quiz_request,
    generate_improvement_tip,
    generate_quiz_questions,
    grade_answers,
    is_quiz_question,
)
from tests import make_llm_reply


def _question(n: int) -> dict:
    return {
        "question": f"Question {n}?",
        "options": ["A", "B", "C", "D"],
        "correctAnswer": "A",
        "explanation": f"Because {n}.",
    }


class TestBuildQuizRequest:

    def test_includes_skills(self):
        prompt = build_quiz_request("tech", ["Python", "SQL"]).render()

        assert f"Generate {QUIZ_QUESTION_COUNT} multiple-choice" in prompt
        assert "for a tech professional with expertise in Python, SQL." in prompt

    def test_without_skills_or_industry(self):
        prompt = build_quiz_request(None, []).render()

        assert "for a general professional." in prompt
        assert "expertise" not in prompt


class TestIsQuizQuestion:

    def test_valid(self):
        assert is_quiz_question(_question(1))

    def test_wrong_option_count(self):
        q = _question(1)
        q["options"] = ["A", "B"]
        assert not is_quiz_question(q)

    def test_missing_answer(self):
        q = _question(1)
        del q["correctAnswer"]
        assert not is_quiz_question(q)

    def test_explanation_must_be_text(self):
        for bad in (5, {"why": "x"}, ["x"]):
            q = _question(1)
            q["explanation"] = bad
            assert not is_quiz_question(q)

    def test_missing_explanation_allowed(self):
        q = _question(1)
        del q["explanation"]
        assert is_quiz_question(q)


class TestGenerateQuizQuestions:

    def test_generated_questions(self, generator, mock_llm):
        questions = [_question(i) for i in range(QUIZ_QUESTION_COUNT)]
        mock_llm.generate_text.return_value = "```json\n" + json.dumps({"questions": questions}) + "\n```"

        outcome = generate_quiz_questions(generator, "tech", ["Python"])

        assert outcome.status == "completed"
        assert outcome.result == questions

    def test_malformed_questions_dropped(self, generator, mock_llm):
        mock_llm.generate_text.return_value = json.dumps({"questions": [_question(1), {"question": "broken"}]})

        outcome = generate_quiz_questions(generator, "tech", [])

        assert outcome.result == [_question(1)]

    def test_zero_questions_falls_back_verbatim(self, generator, mock_llm):
        mock_llm.generate_text.return_value = '{"questions": []}'

        outcome = generate_quiz_questions(generator, "tech", [])

        assert outcome.is_fallback
        assert outcome.result == FALLBACK_QUESTIONS
        assert len(outcome.result) == 10

    def test_non_text_explanation_falls_back(self, generator, mock_llm):
        q = _question(1)
        q["explanation"] = 5
        mock_llm.generate_text.return_value = json.dumps({"questions": [q]})

        outcome = generate_quiz_questions(generator, "tech", [])

        assert outcome.is_fallback
        assert outcome.result == FALLBACK_QUESTIONS

    def test_missing_questions_key_falls_back(self, generator, mock_llm):
        mock_llm.generate_text.return_value = '{"items": []}'

        assert generate_quiz_questions(generator, "tech", []).is_fallback

    def test_provider_error_falls_back(self, generator, mock_llm):
        mock_llm.generate_text.side_effect = RuntimeError("503")

        outcome = generate_quiz_questions(generator, "tech", [])

        assert outcome.is_fallback
        assert mock_llm.generate_text.call_count == 1


class TestGradeAnswers:

    def test_marks_each_answer(self):
        results = grade_answers([_question(1), _question(2)], ["A", "B"])

        assert results[0]["isCorrect"] is True
        assert results[1]["isCorrect"] is False
        assert results[1] == {
            "question": "Question 2?",
            "correctAnswer": "A",
            "userAnswer": "B",
            "isCorrect": False,
            "explanation": "Because 2.",
        }

    def test_missing_answers_count_as_wrong(self):
        results = grade_answers([_question(1), _question(2)], ["A"])

        assert results[1]["userAnswer"] is None
        assert results[1]["isCorrect"] is False


class TestGenerateImprovementTip:

    def test_no_wrong_answers_skips_generation(self, generator, mock_llm):
        results = grade_answers([_question(1)], ["A"])

        assert generate_improvement_tip(generator, "tech", results) is None
        mock_llm.generate_text.assert_not_called()

    def test_tip_for_wrong_answers(self, generator, mock_llm):
        mock_llm.generate_text.side_effect = make_llm_reply("  Review indexing basics.  ")
        results = grade_answers([_question(1)], ["C"])

        tip = generate_improvement_tip(generator, "tech", results)

        assert tip == "Review indexing basics."
        prompt = mock_llm.generate_text.call_args[0][0]
        assert 'Question: "Question 1?" | Correct: "A" | User: "C"' in prompt

    def test_tip_failure_returns_none(self, generator, mock_llm):
        mock_llm.generate_text.side_effect = RuntimeError("down")
        results = grade_answers([_question(1)], ["C"])

        assert generate_improvement_tip(generator, "tech", results) is None
