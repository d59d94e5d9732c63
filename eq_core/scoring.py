from __future__ import annotations
from typing import Tuple, Dict, Any

from .errors import InvalidOptionError
from .types import Option, Question


def _clamp100(x: float) -> float:
    xf = float(x)
    if xf < 0.0: return 0.0
    if xf > 100.0: return 100.0
    return xf


def _is_number(v: object) -> bool:
    return isinstance(v, (int, float)) and not isinstance(v, bool)


def resolve_option(question: Question, value: object) -> Option:
    """
    Find the option a submitted value refers to.
    Matches on option value first (``4`` and ``"4"`` are the same answer),
    then on the option label, which is what older clients submit.
    """
    if value is None or isinstance(value, bool):
        raise InvalidOptionError(question.id, value)
    for opt in question.options:
        if opt.value == value:
            return opt
    text = str(value).strip()
    for opt in question.options:
        if str(opt.value) == text:
            return opt
    for opt in question.options:
        if opt.label == text:
            return opt
    raise InvalidOptionError(question.id, value)


def _numeric_scale(question: Question) -> bool:
    return all(_is_number(o.value) for o in question.options)


def response_level(question: Question, option: Option) -> float:
    """Ordinal response for pair comparison: the numeric value, else the 1-based position."""
    if _numeric_scale(question):
        return float(option.value)  # type: ignore[arg-type]
    return float(question.options.index(option) + 1)


def scale_bounds(question: Question) -> Tuple[float, float]:
    if _numeric_scale(question):
        vals = [float(o.value) for o in question.options]  # type: ignore[arg-type]
        return min(vals), max(vals)
    return 1.0, float(len(question.options))


def score_question(question: Question, value: object) -> Tuple[float, Dict[str, Any]]:
    """
    Returns (score in 0..100, meta).
    The score is the selected option's own score; reverse keying is part of
    how a reversed item's options are authored.
    """
    opt = resolve_option(question, value)
    meta = {
        "type": question.type,
        "label": opt.label,
        "value": opt.value,
        "level": response_level(question, opt),
    }
    return _clamp100(opt.score), meta
