# eq_core/rating.py
from __future__ import annotations
from typing import Iterable, Literal, Sequence, Tuple

from .config import EQ_RATING_BANDS, INCONSISTENCY_BANDS

Direction = Literal["at_least", "at_most"]


class RatingTable:
    """Ordered (bound, label) buckets evaluated from the top down.

    ``at_least`` tables pick the first bucket with ``score >= bound`` (higher is
    better); ``at_most`` tables pick the first with ``score <= bound`` (lower is
    better). A score no bucket admits falls into the last label.
    """

    def __init__(self, bands: Iterable[Tuple[float, str]], direction: Direction = "at_least"):
        self.bands: Tuple[Tuple[float, str], ...] = tuple((float(b), str(lbl)) for b, lbl in bands)
        if not self.bands:
            raise ValueError("rating table needs at least one band")
        if direction not in ("at_least", "at_most"):
            raise ValueError(f"unknown direction {direction!r}")
        bounds = [b for b, _ in self.bands]
        ordered = sorted(bounds, reverse=(direction == "at_least"))
        if bounds != ordered:
            raise ValueError(f"{direction} bands must be ordered from best to worst")
        self.direction = direction

    def classify(self, score: float) -> str:
        s = float(score)
        for bound, label in self.bands:
            if self.direction == "at_least" and s >= bound: return label
            if self.direction == "at_most" and s <= bound: return label
        return self.bands[-1][1]

    @property
    def labels(self) -> Sequence[str]:
        return [lbl for _, lbl in self.bands]

    @property
    def best(self) -> str:
        return self.bands[0][1]

    @property
    def worst(self) -> str:
        return self.bands[-1][1]


def eq_rating_table(bands=None) -> RatingTable:
    return RatingTable(bands or EQ_RATING_BANDS, "at_least")


def inconsistency_table(bands=None) -> RatingTable:
    return RatingTable(bands or INCONSISTENCY_BANDS, "at_most")
