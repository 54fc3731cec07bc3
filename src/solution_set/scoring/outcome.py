"""Scoring a session against the correct answer and its alternates."""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass, field
from typing import Sequence

from ..core.marks import Mark
from .compare import compare_marks

logger = logging.getLogger(__name__)

CORRECT_ANSWER_KEY = "correctAnswer"

CORRECT = "correct"
INCORRECT = "incorrect"
MISSING = "missing"


@dataclass(frozen=True)
class CorrectedMark:
    """A mark tagged as correct, incorrect, or missing from the session."""

    mark: Mark
    correctness: str


@dataclass(frozen=True)
class BestAnswer:
    score: float = 0
    answer_key: str | None = None
    corrected: tuple[CorrectedMark, ...] = field(default_factory=tuple)


def _building(mark: Mark) -> bool:
    return getattr(mark, "building", False)


def unique_marks(marks: Sequence[Mark]) -> list[Mark]:
    """Drop marks equal (per ``compare_marks``) to an earlier one."""
    unique: list[Mark] = []
    for m in marks:
        if not any(compare_marks(m, u) for u in unique):
            unique.append(m)
    return unique


def get_answer_corrected(
    session_answers: Sequence[Mark], correct_marks: Sequence[Mark],
) -> list[CorrectedMark]:
    """Tag each session mark, then append correct marks the session lacks."""
    tagged = [
        CorrectedMark(
            m,
            CORRECT if any(compare_marks(m, c) for c in correct_marks) else INCORRECT,
        )
        for m in session_answers
    ]
    missing = [
        CorrectedMark(c, MISSING)
        for c in correct_marks
        if not any(compare_marks(c, m) for m in session_answers)
    ]
    return tagged + missing


def _ordered_answers(answers: dict[str, list[Mark]] | None) -> dict[str, list[Mark]]:
    # correct answer first, then alternates by key; marks being drawn are ignored
    answers = {
        key: [m for m in marks or [] if not _building(m)]
        for key, marks in (answers or {}).items()
    }
    if not answers:
        return {CORRECT_ANSWER_KEY: []}
    ordered = {CORRECT_ANSWER_KEY: answers.get(CORRECT_ANSWER_KEY, [])}
    for key in sorted(answers):
        if key != CORRECT_ANSWER_KEY:
            ordered[key] = answers[key]
    return ordered


def get_best_answer(
    answers: dict[str, list[Mark]] | None, session_answer: Sequence[Mark] | None,
) -> BestAnswer:
    """Score the session against every possible answer and keep the best.

    Matching marks score a point each; marks beyond the answer's mark
    count cost one each. The score is then divided by the mark count
    and floored, so only a full match scores 1.
    """
    session = unique_marks(session_answer or [])
    best = BestAnswer(
        corrected=tuple(CorrectedMark(m, INCORRECT) for m in session),
    )
    found = False
    for key, marks in _ordered_answers(answers).items():
        if not marks:
            continue
        corrected = get_answer_corrected(session, marks)
        correct = sum(1 for c in corrected if c.correctness == CORRECT)
        placed = sum(1 for c in corrected if c.correctness != MISSING)
        max_score = len(marks)
        score = correct
        if placed > max_score:
            score -= placed - max_score
        score = max(score, 0)
        if score / max_score > best.score or not found:
            best = BestAnswer(math.floor(score / max_score), key, tuple(corrected))
            found = True
    logger.debug("Best answer %s with score %s", best.answer_key, best.score)
    return best


def outcome(
    answers: dict[str, list[Mark]] | None,
    session_answer: Sequence[Mark] | None,
    mode: str = "evaluate",
) -> dict:
    """``{"score": ...}`` for the session; ``empty`` is set when it has no marks."""
    if not session_answer:
        return {"score": 0, "empty": True}
    if mode != "evaluate" or not answers or not answers.get(CORRECT_ANSWER_KEY):
        return {"score": 0}
    return {"score": get_best_answer(answers, session_answer).score}


def validate_model(number_of_lines: int, marks: Sequence[Mark]) -> dict:
    """Authoring errors for the correct answer, keyed like the stored model.

    Returns ``{}`` when the lines are drawn and a solution set is chosen.
    """
    message = None
    if number_of_lines == 1:
        if len(marks) < 1:
            message = "At least 1 line object should be defined."
        elif len(marks) == 1 and _building(marks[0]):
            message = "1 or more graph object should be correctly defined."
    else:
        if len(marks) < 2:
            message = "At least 2 line object should be defined."
        elif len(marks) == 2 and (_building(marks[0]) or _building(marks[1])):
            message = "1 or more graph object should be correctly defined."
    has_polygon = any(m.type == "polygon" for m in marks)
    if message is None and not has_polygon:
        message = "Please select a solution set for the graphing solution set item."
    if message is None:
        return {}
    return {"correctAnswerErrors": {CORRECT_ANSWER_KEY: message}}
