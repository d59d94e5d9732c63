
from __future__ import annotations
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Literal, Union

QuestionType = Literal["likert", "mcq"]
OptionValue = Union[int, float, str]
QUESTION_TYPES = ("likert", "mcq")


def _pick(raw: Dict[str, Any], *keys: str, default: Any = None) -> Any:
    for k in keys:
        if k in raw and raw[k] is not None:
            return raw[k]
    return default


def _flag(raw: Any) -> bool:
    if isinstance(raw, bool):
        return raw
    if isinstance(raw, str) and raw.strip().lower() in {"true", "false"}:
        return raw.strip().lower() == "true"
    raise ValueError(f"expected a boolean flag, got {raw!r}")


@dataclass
class Option:
    label: str
    value: OptionValue
    score: float

    def __post_init__(self) -> None:
        self.score = float(self.score)
        if not 0.0 <= self.score <= 100.0:
            raise ValueError(f"option {self.label!r} score {self.score} outside 0..100")

    @classmethod
    def from_dict(cls, raw: Dict[str, Any]) -> "Option":
        return cls(label=str(raw["label"]), value=raw["value"], score=raw["score"])


@dataclass
class Question:
    id: str; text: str; type: QuestionType; module: str; submodule: str
    options: List[Option] = field(default_factory=list)
    category: str = "general"
    difficulty: str = "general"
    inconsistency_pair_id: Optional[str] = None
    is_reversed: bool = False
    weight: float = 1.0

    def __post_init__(self) -> None:
        if self.type not in QUESTION_TYPES:
            raise ValueError(f"question {self.id}: unknown type {self.type!r}")
        if not self.module or not self.submodule:
            raise ValueError(f"question {self.id}: module and submodule are required")
        if not self.options:
            raise ValueError(f"question {self.id}: at least one option is required")
        self.weight = float(self.weight)
        if self.weight <= 0.0:
            raise ValueError(f"question {self.id}: weight must be positive")

    @classmethod
    def from_dict(cls, raw: Dict[str, Any]) -> "Question":
        """Build from bank JSON; accepts both camelCase and snake_case keys."""
        opts = [o if isinstance(o, Option) else Option.from_dict(o) for o in raw.get("options") or []]
        return cls(
            id=str(raw["id"]),
            text=str(raw.get("text", "")),
            type=str(raw.get("type", "likert")).lower(),  # type: ignore[arg-type]
            module=str(raw.get("module", "")),
            submodule=str(raw.get("submodule", "")),
            options=opts,
            category=str(raw.get("category") or "general"),
            difficulty=str(raw.get("difficulty") or "general"),
            inconsistency_pair_id=_pick(raw, "inconsistencyPairId", "inconsistency_pair_id"),
            is_reversed=_flag(_pick(raw, "isReversed", "is_reversed", default=False)),
            weight=float(_pick(raw, "weight", default=1.0)),
        )


@dataclass
class Answer:
    question_id: str; value: OptionValue


@dataclass
class ModuleScore:
    module: str
    score: float
    submodules: Dict[str, float] = field(default_factory=dict)


@dataclass
class InconsistencyPair:
    pair_id: str
    positive_id: str
    reversed_id: str
    positive_response: float
    reversed_response: float
    expected_response: float
    deviation: float


@dataclass
class EvaluationResult:
    overall_score: float
    eq_rating: str
    module_scores: Dict[str, ModuleScore]
    inconsistency_index: float
    inconsistency_rating: str
    inconsistency_pairs: List[InconsistencyPair] = field(default_factory=list)

    @property
    def submodule_scores(self) -> Dict[str, float]:
        """Flat ``<module>_<submodule>`` view used for storage and exports."""
        out: Dict[str, float] = {}
        for module, ms in self.module_scores.items():
            for sub, score in ms.submodules.items():
                out[f"{module}_{sub}"] = score
        return out
