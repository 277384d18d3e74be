"""Interview quiz generation and grading."""
import logging
from typing import Any, Dict, List, Optional, Sequence

from core.generation.generator import GenerationOutcome, GenerationRequest, TolerantGenerator
from core.generation.schema import FieldKind, FieldSpec, ResultSchema, is_non_empty_string
from core.llm.system_prompts import (
    IMPROVEMENT_TIP_PROMPT_TEMPLATE,
    JSON_ONLY_SYSTEM_PROMPT,
    QUIZ_PROMPT_TEMPLATE,
)

logger = logging.getLogger(__name__)

QUIZ_QUESTION_COUNT = 10
OPTIONS_PER_QUESTION = 4


def is_quiz_question(item: Any) -> bool:
    """A usable question has text, four string options, an answer and an
    optional string explanation."""
    if not isinstance(item, dict):
        return False
    options = item.get("options")
    explanation = item.get("explanation")
    return (
        is_non_empty_string(item.get("question"))
        and isinstance(options, list)
        and len(options) == OPTIONS_PER_QUESTION
        and all(isinstance(o, str) for o in options)
        and is_non_empty_string(item.get("correctAnswer"))
        and (explanation is None or isinstance(explanation, str))
    )


def _require_questions(result: Dict[str, Any]) -> None:
    if len(result["questions"]) < 1:
        raise ValueError("Invalid quiz format: no questions")


QUIZ_SCHEMA = ResultSchema(
    name="interview_quiz",
    fields=(
        FieldSpec("questions", FieldKind.SEQUENCE, [], item_check=is_quiz_question),
    ),
    check=_require_questions,
)

FALLBACK_QUESTIONS: List[Dict[str, Any]] = [
    {
        "question": "What does HTML stand for?",
        "options": [
            "HyperText Markup Language",
            "HighText Machine Language",
            "HyperTransfer Markup Language",
            "HyperText Markdown Language",
        ],
        "correctAnswer": "HyperText Markup Language",
        "explanation": "HTML defines the structure of web pages.",
    },
    {
        "question": "Which CSS property is used to change text color?",
        "options": ["color", "text-color", "font-color", "background-color"],
        "correctAnswer": "color",
        "explanation": "The 'color' property defines text color in CSS.",
    },
    {
        "question": "Which JavaScript keyword declares a constant variable?",
        "options": ["const", "var", "let", "static"],
        "correctAnswer": "const",
        "explanation": "'const' creates a block-scoped, unchangeable variable.",
    },
    {
        "question": "Which React hook is used for state management?",
        "options": ["useState", "useEffect", "useContext", "useMemo"],
        "correctAnswer": "useState",
        "explanation": "useState manages component-level state in React.",
    },
    {
        "question": "What does SQL stand for?",
        "options": [
            "Structured Query Language",
            "Simple Query Language",
            "Sequential Query Logic",
            "Structured Question Language",
        ],
        "correctAnswer": "Structured Query Language",
        "explanation": "SQL stands for Structured Query Language.",
    },
    {
        "question": "Which tag is used to link an external CSS file in HTML?",
        "options": ["<link>", "<style>", "<css>", "<stylesheet>"],
        "correctAnswer": "<link>",
        "explanation": "The <link> tag links external CSS files.",
    },
    {
        "question": "Which method converts JSON text into a JavaScript object?",
        "options": [
            "JSON.parse()",
            "JSON.stringify()",
            "JSON.convert()",
            "JSON.toObject()",
        ],
        "correctAnswer": "JSON.parse()",
        "explanation": "JSON.parse() converts JSON strings to JS objects.",
    },
    {
        "question": "What is Node.js?",
        "options": [
            "JavaScript runtime environment",
            "Programming language",
            "Database",
            "Web framework",
        ],
        "correctAnswer": "JavaScript runtime environment",
        "explanation": "Node.js runs JavaScript outside the browser.",
    },
    {
        "question": "Which HTTP method is used to create data on a server?",
        "options": ["POST", "GET", "PUT", "DELETE"],
        "correctAnswer": "POST",
        "explanation": "POST is used to create or submit data to a server.",
    },
    {
        "question": "Which AI model is commonly used for text generation?",
        "options": ["Transformer", "CNN", "RNN", "GAN"],
        "correctAnswer": "Transformer",
        "explanation": "Transformer models power modern LLMs like Gemini and GPT.",
    },
]


def build_quiz_request(industry: Optional[str], skills: Optional[Sequence[str]]) -> GenerationRequest:
    expertise = f" with expertise in {', '.join(skills)}" if skills else ""
    return GenerationRequest(
        template=QUIZ_PROMPT_TEMPLATE,
        parameters={
            "count": QUIZ_QUESTION_COUNT,
            "industry": industry or "general",
            "expertise": expertise,
        },
        system_prompt=JSON_ONLY_SYSTEM_PROMPT,
    )


def generate_quiz_questions(
    generator: TolerantGenerator,
    industry: Optional[str],
    skills: Optional[Sequence[str]]
) -> GenerationOutcome:
    """Generate quiz questions; outcome.result is the list of questions."""
    outcome = generator.generate(
        build_quiz_request(industry, skills),
        QUIZ_SCHEMA,
        {"questions": FALLBACK_QUESTIONS},
    )
    questions = outcome.result["questions"]
    if outcome.is_fallback:
        logger.error(f"Quiz generation fell back to the static question set: {outcome.error}")
    else:
        logger.info(f"Quiz generated with {len(questions)} questions")
    return GenerationOutcome(result=questions, status=outcome.status, error=outcome.error)


def grade_answers(
    questions: Sequence[Dict[str, Any]],
    answers: Sequence[Optional[str]]
) -> List[Dict[str, Any]]:
    """Pair each question with the user's answer.

    A missing answer (answers shorter than questions) is recorded as None
    and counts as wrong.
    """
    results = []
    for i, q in enumerate(questions):
        user_answer = answers[i] if i < len(answers) else None
        results.append({
            "question": q.get("question"),
            "correctAnswer": q.get("correctAnswer"),
            "userAnswer": user_answer,
            "isCorrect": q.get("correctAnswer") == user_answer,
            "explanation": q.get("explanation"),
        })
    return results


def build_improvement_tip_request(industry: Optional[str], wrong_answers: Sequence[Dict[str, Any]]) -> GenerationRequest:
    wrong_summary = "\n".join(
        f'Question: "{q["question"]}" | Correct: "{q["correctAnswer"]}" | User: "{q["userAnswer"]}"'
        for q in wrong_answers
    )
    return GenerationRequest(
        template=IMPROVEMENT_TIP_PROMPT_TEMPLATE,
        parameters={"industry": industry or "general", "wrong_summary": wrong_summary},
    )


def generate_improvement_tip(
    generator: TolerantGenerator,
    industry: Optional[str],
    question_results: Sequence[Dict[str, Any]]
) -> Optional[str]:
    """Ask for a short study tip covering the wrong answers.

    Returns None when every answer was right or generation failed.
    """
    wrong_answers = [q for q in question_results if not q["isCorrect"]]
    if not wrong_answers:
        return None

    outcome = generator.generate_text(build_improvement_tip_request(industry, wrong_answers), fallback=None)
    if outcome.is_fallback:
        logger.error(f"Error generating improvement tip: {outcome.error}")
    return outcome.result
