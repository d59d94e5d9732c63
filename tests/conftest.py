from __future__ import annotations

import pytest

from eq_core.battery import likert_options
from eq_core.types import Option, Question


def pair(pair_id: str, module: str, submodule: str) -> list[Question]:
    return [
        Question(
            id=f"{pair_id}_pos",
            text=f"{pair_id} positive",
            type="likert",
            module=module,
            submodule=submodule,
            options=likert_options(),
            inconsistency_pair_id=pair_id,
            is_reversed=False,
        ),
        Question(
            id=f"{pair_id}_rev",
            text=f"{pair_id} reversed",
            type="likert",
            module=module,
            submodule=submodule,
            options=likert_options(reversed_=True),
            inconsistency_pair_id=pair_id,
            is_reversed=True,
        ),
    ]


def single(qid: str, module: str, submodule: str, weight: float = 1.0) -> Question:
    return Question(
        id=qid,
        text=f"{qid} statement",
        type="likert",
        module=module,
        submodule=submodule,
        options=likert_options(),
        weight=weight,
    )


def mcq(qid: str, module: str, submodule: str) -> Question:
    return Question(
        id=qid,
        text=f"{qid} scenario",
        type="mcq",
        module=module,
        submodule=submodule,
        options=[
            Option(label="Walk away", value="a", score=0),
            Option(label="Ask how they feel", value="b", score=100),
            Option(label="Change the subject", value="c", score=40),
        ],
    )


def build_synthetic_battery(*, modules: list[str] | None = None, pairs_per_module: int = 1, singles_per_sub: int = 2) -> list[Question]:
    """Deterministic battery: per module one paired submodule plus two single-item submodules."""

    items: list[Question] = []
    for module in modules or ["Goleman", "MSCEIT"]:
        for p in range(pairs_per_module):
            items.extend(pair(f"{module.lower()}_p{p}", module, "Paired"))
        for sub in ("Empathy", "Motivation"):
            for idx in range(singles_per_sub):
                items.append(single(f"{module.lower()}_{sub.lower()}_{idx}", module, sub))
    return items


def answers_at(items: list[Question], option_index: int) -> dict[str, object]:
    return {q.id: q.options[option_index].value for q in items}


@pytest.fixture
def synthetic_battery() -> list[Question]:
    return build_synthetic_battery()
