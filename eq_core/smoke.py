from __future__ import annotations

import logging
import random
from typing import Dict, List, Optional

from .evaluator import EQScoreEvaluator
from .question_bank import load_bank
from .reporting import result_to_dict
from .types import EvaluationResult, Question


def _maybe_enable_logging() -> None:
    logging.basicConfig(level=logging.INFO, format="[%(levelname)s] %(message)s")


def _auto_answers(items: List[Question], profile: str, rng: random.Random) -> Dict[str, object]:
    """
    consistent: agrees with positives, disagrees with reversed items.
    random: uniform over each question's options.
    """
    out: Dict[str, object] = {}
    for it in items:
        if profile == "random":
            out[it.id] = rng.choice(it.options).value
        elif it.is_reversed:
            out[it.id] = it.options[0].value
        else:
            out[it.id] = it.options[-1].value
    return out


def run_smoke(profile: str = "consistent", seed: int = 7, items: Optional[List[Question]] = None) -> EvaluationResult:
    _maybe_enable_logging()
    bank = items if items is not None else load_bank()
    answers = _auto_answers(bank, profile, random.Random(seed))
    logging.info("Starting %s smoke run over %d question(s)", profile, len(bank))

    result = EQScoreEvaluator.from_config().evaluate(bank, answers)
    payload = result_to_dict(result)

    logging.info(
        "Run complete: overall=%.2f (%s) inconsistency=%.2f (%s)",
        result.overall_score, result.eq_rating,
        result.inconsistency_index, result.inconsistency_rating,
    )
    for module, ms in payload["module_scores"].items():
        logging.info("Module %s: score=%.2f", module, float(ms["score"]))
        for sub, score in ms["submodules"].items():
            logging.info("  %s=%.2f", sub, float(score))
    return result


if __name__ == "__main__":  # pragma: no cover
    run_smoke()
    run_smoke("random")
