# eq_core/evaluator.py
"""EQ score evaluation.

Turns a fixed question battery and a complete answer set into an
:class:`~eq_core.types.EvaluationResult`:

1. each answer resolves to its option's 0-100 score;
2. scores are averaged per (module, submodule), weighted by ``Question.weight``;
3. a module score is the plain mean of its submodule means;
4. the overall score is the plain mean of module scores;
5. the overall score is bucketed into an EQ rating;
6. paired positive/reversed items yield an inconsistency index and rating.

The evaluator holds only its rating tables, so one instance can serve any
number of concurrent evaluations.
"""
from __future__ import annotations

import logging
from typing import Dict, List, Mapping, Optional, Sequence, Tuple, Union

from . import config
from .errors import INTEGRITY_ERRORS
from .rating import RatingTable, eq_rating_table, inconsistency_table
from .scoring import score_question
from .types import Answer, EvaluationResult, ModuleScore, Question
from .validators import (
    check_answers,
    check_battery,
    group_pairs,
    inconsistency_index,
    pair_deviation,
)

log = logging.getLogger(__name__)

AnswerInput = Union[Mapping[str, object], Sequence[Answer]]


def _answer_map(answers: AnswerInput) -> Dict[str, object]:
    if isinstance(answers, Mapping):
        return dict(answers)
    return {a.question_id: a.value for a in answers}


def _weighted_mean(pairs: Sequence[Tuple[float, float]]) -> float:
    total_w = sum(w for _, w in pairs)
    return sum(s * w for s, w in pairs) / total_w


def _mean(values: Sequence[float]) -> float:
    return sum(values) / len(values)


def _bounded(x: float) -> float:
    return max(0.0, min(100.0, x))


class EQScoreEvaluator:
    def __init__(
        self,
        rating_table: Optional[RatingTable] = None,
        consistency_table: Optional[RatingTable] = None,
        round_places: int = config.ROUND_PLACES,
    ):
        self.rating_table = rating_table or eq_rating_table()
        self.consistency_table = consistency_table or inconsistency_table()
        self.round_places = int(round_places)

    @classmethod
    def from_config(cls, cfg: Optional[dict] = None) -> "EQScoreEvaluator":
        cfg = cfg if cfg is not None else config.load_config()
        return cls(
            rating_table=eq_rating_table(cfg.get("eq_rating_bands")),
            consistency_table=inconsistency_table(cfg.get("inconsistency_bands")),
            round_places=int(cfg.get("round_places", config.ROUND_PLACES)),
        )

    def _round(self, x: float) -> float:
        return round(_bounded(x), self.round_places)

    def evaluate(self, questions: Sequence[Question], answers: AnswerInput) -> EvaluationResult:
        amap = _answer_map(answers)

        # every check runs before any aggregation
        try:
            check_battery(questions)
            pairs = group_pairs(questions)
        except INTEGRITY_ERRORS as exc:
            log.error("question bank defect: %s", exc)
            raise
        check_answers(questions, amap)

        groups: Dict[str, Dict[str, List[Tuple[float, float]]]] = {}
        for q in questions:
            score, _meta = score_question(q, amap[q.id])
            groups.setdefault(q.module, {}).setdefault(q.submodule, []).append((score, q.weight))

        module_scores: Dict[str, ModuleScore] = {}
        module_means: List[float] = []
        for module, subs in groups.items():
            sub_means = {sub: _weighted_mean(items) for sub, items in subs.items()}
            module_mean = _mean(list(sub_means.values()))
            module_means.append(module_mean)
            module_scores[module] = ModuleScore(
                module=module,
                score=self._round(module_mean),
                submodules={sub: self._round(m) for sub, m in sub_means.items()},
            )
            log.debug("module %s: %d submodule(s), score=%.2f", module, len(subs), module_mean)

        overall = self._round(_mean(module_means))

        pair_rows = [pair_deviation(pos, rev, amap) for pos, rev in pairs.values()]
        index = self._round(inconsistency_index(pair_rows))
        for row in pair_rows:
            row.deviation = self._round(row.deviation)

        result = EvaluationResult(
            overall_score=overall,
            eq_rating=self.rating_table.classify(overall),
            module_scores=module_scores,
            inconsistency_index=index,
            inconsistency_rating=self.consistency_table.classify(index),
            inconsistency_pairs=pair_rows,
        )
        log.debug(
            "evaluated %d question(s): overall=%.2f rating=%s inconsistency=%.2f over %d pair(s)",
            len(questions), overall, result.eq_rating, index, len(pair_rows),
        )
        return result


def evaluate(questions: Sequence[Question], answers: AnswerInput, evaluator: Optional[EQScoreEvaluator] = None) -> EvaluationResult:
    """Evaluate with the default rating tables (or the given evaluator)."""
    return (evaluator or EQScoreEvaluator()).evaluate(questions, answers)
