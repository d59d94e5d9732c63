
from __future__ import annotations
import logging
from typing import Dict, List, Mapping, Sequence, Tuple

from .errors import (
    DuplicateQuestionError,
    EmptyBatteryError,
    MalformedPairError,
    MissingAnswerError,
)
from .scoring import resolve_option, response_level, scale_bounds
from .types import InconsistencyPair, Question

log = logging.getLogger(__name__)


def check_battery(questions: Sequence[Question]) -> None:
    if not questions:
        raise EmptyBatteryError()
    seen: set[str] = set()
    for q in questions:
        if q.id in seen:
            raise DuplicateQuestionError(q.id)
        seen.add(q.id)


def group_pairs(questions: Sequence[Question]) -> Dict[str, Tuple[Question, Question]]:
    """Map pair id -> (positive, reversed); raises on any malformed pair."""
    members: Dict[str, List[Question]] = {}
    for q in questions:
        if q.inconsistency_pair_id:
            members.setdefault(q.inconsistency_pair_id, []).append(q)
    pairs: Dict[str, Tuple[Question, Question]] = {}
    for pid, qs in members.items():
        if len(qs) != 2:
            raise MalformedPairError(pid, f"has {len(qs)} member(s), expected 2")
        pos = [q for q in qs if not q.is_reversed]
        rev = [q for q in qs if q.is_reversed]
        if len(pos) != 1 or len(rev) != 1:
            raise MalformedPairError(pid, f"has {len(pos)} positive and {len(rev)} reversed member(s)")
        if scale_bounds(pos[0]) != scale_bounds(rev[0]):
            raise MalformedPairError(pid, "members use different response scales")
        pairs[pid] = (pos[0], rev[0])
    return pairs


def check_answers(questions: Sequence[Question], answers: Mapping[str, object]) -> None:
    missing = [q.id for q in questions if answers.get(q.id) is None]
    if missing:
        raise MissingAnswerError(missing)
    known = {q.id for q in questions}
    extra = [qid for qid in answers if qid not in known]
    if extra:
        log.warning("ignoring %d answer(s) for questions outside the battery: %s", len(extra), extra)
    for q in questions:
        resolve_option(q, answers[q.id])


def pair_deviation(positive: Question, reversed_: Question, answers: Mapping[str, object]) -> InconsistencyPair:
    lo, hi = scale_bounds(positive)
    span = hi - lo
    pos_level = response_level(positive, resolve_option(positive, answers[positive.id]))
    rev_level = response_level(reversed_, resolve_option(reversed_, answers[reversed_.id]))
    # for a 1..N scale this is (N + 1) - positive
    expected = lo + hi - pos_level
    deviation = abs(rev_level - expected) / span * 100.0 if span > 0 else 0.0
    return InconsistencyPair(
        pair_id=positive.inconsistency_pair_id or "",
        positive_id=positive.id,
        reversed_id=reversed_.id,
        positive_response=pos_level,
        reversed_response=rev_level,
        expected_response=expected,
        deviation=max(0.0, min(100.0, deviation)),
    )


def inconsistency_index(pairs: Sequence[InconsistencyPair]) -> float:
    if not pairs: return 0.0
    return sum(p.deviation for p in pairs) / len(pairs)
