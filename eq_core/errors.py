"""Evaluation errors.

Every error is raised before aggregation starts, so a failed evaluation never
leaves a partial score behind.
"""
from __future__ import annotations

from typing import Iterable, Tuple


class EvaluationError(Exception):
    """Base class for evaluation failures."""

    code = "evaluation_error"


class MissingAnswerError(EvaluationError):
    """One or more battery questions have no answer."""

    code = "missing_answers"

    def __init__(self, question_ids: Iterable[str]):
        self.question_ids: Tuple[str, ...] = tuple(question_ids)
        super().__init__(f"missing answers for {len(self.question_ids)} question(s): {', '.join(self.question_ids)}")


class MalformedPairError(EvaluationError):
    """An inconsistency pair is not exactly one positive and one reversed item."""

    code = "malformed_pair"

    def __init__(self, pair_id: str, reason: str = "expected one positive and one reversed member"):
        self.pair_id = pair_id
        self.reason = reason
        super().__init__(f"inconsistency pair {pair_id!r} is malformed: {reason}")


class InvalidOptionError(EvaluationError):
    """A submitted value matches none of the question's options."""

    code = "invalid_option"

    def __init__(self, question_id: str, value: object):
        self.question_id = question_id
        self.value = value
        super().__init__(f"value {value!r} is not an option of question {question_id}")


class EmptyBatteryError(EvaluationError):
    code = "empty_battery"

    def __init__(self) -> None:
        super().__init__("cannot evaluate an empty question battery")


class DuplicateQuestionError(EvaluationError):
    code = "duplicate_question"

    def __init__(self, question_id: str):
        self.question_id = question_id
        super().__init__(f"question id {question_id!r} appears more than once in the battery")


# Battery content defects, as opposed to bad submissions.
INTEGRITY_ERRORS = (MalformedPairError, DuplicateQuestionError, EmptyBatteryError)

__all__ = [
    "EvaluationError",
    "MissingAnswerError",
    "MalformedPairError",
    "InvalidOptionError",
    "EmptyBatteryError",
    "DuplicateQuestionError",
    "INTEGRITY_ERRORS",
]
