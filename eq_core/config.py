from __future__ import annotations
import os, json, pathlib, logging

log = logging.getLogger(__name__)


def _env_bool(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    return raw.strip().lower() in {"1", "true", "yes", "on"}


def _env_int(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    try:
        return int(raw.strip())
    except ValueError:
        return default


# (bound, label) pairs, evaluated top-down
EQ_RATING_BANDS: tuple[tuple[float, str], ...] = (
    (80.0, "Very High"),
    (65.0, "High"),
    (45.0, "Average"),
    (30.0, "Below Average"),
    (0.0, "Low"),
)
# lower index is better; last entry catches everything above
INCONSISTENCY_BANDS: tuple[tuple[float, str], ...] = (
    (10.0, "Excellent"),
    (25.0, "Good"),
    (45.0, "Moderate"),
    (100.0, "Poor"),
)

ROUND_PLACES: int = 2
LIKERT_LABELS: tuple[str, ...] = (
    "Strongly Disagree",
    "Disagree",
    "Neutral",
    "Agree",
    "Strongly Agree",
)

BANK_MIN_PER_SUBMODULE: int = 2
BANK_EXPECT_PAIRS: bool = True

CONFIG_PATH: str = "eq_config.json"

ROUND_PLACES = _env_int("ROUND_PLACES", ROUND_PLACES)
BANK_MIN_PER_SUBMODULE = _env_int("BANK_MIN_PER_SUBMODULE", BANK_MIN_PER_SUBMODULE)
BANK_EXPECT_PAIRS = _env_bool("BANK_EXPECT_PAIRS", BANK_EXPECT_PAIRS)
CONFIG_PATH = os.getenv("EQ_CONFIG_PATH", CONFIG_PATH)


def _bands(raw) -> list[tuple[float, str]] | None:
    if not isinstance(raw, list) or not raw:
        return None
    out = []
    for entry in raw:
        if isinstance(entry, dict):
            out.append((float(entry["bound"]), str(entry["label"])))
        else:
            bound, label = entry
            out.append((float(bound), str(label)))
    return out


def load_config(path: str | None = None) -> dict:
    """Read the JSON config file (if any) and overlay environment overrides.

    Recognised keys: ``eq_rating_bands``, ``inconsistency_bands`` (lists of
    ``[bound, label]`` or ``{"bound": .., "label": ..}``), ``round_places`` and
    ``bank_path``.
    """
    cfg: dict = {}
    p = pathlib.Path(path or CONFIG_PATH)
    if p.exists():
        try:
            cfg = json.loads(p.read_text(encoding="utf-8"))
        except (OSError, ValueError) as exc:
            log.warning("ignoring unreadable config %s: %s", p, exc)
            cfg = {}
    for key in ("eq_rating_bands", "inconsistency_bands"):
        if key in cfg:
            parsed = _bands(cfg.get(key))
            if parsed is None:
                cfg.pop(key)
            else:
                cfg[key] = parsed
    e = os.environ
    if e.get("EQ_BANK_PATH"): cfg["bank_path"] = e.get("EQ_BANK_PATH")
    if e.get("ROUND_PLACES"): cfg["round_places"] = _env_int("ROUND_PLACES", ROUND_PLACES)
    return cfg
