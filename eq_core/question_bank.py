from __future__ import annotations
import json, logging, pathlib
from typing import Dict, Iterable, List, Optional
from .battery import build_default_battery
from .config import load_config
from .types import Question

log = logging.getLogger(__name__)

MODULES = ["Goleman", "MSCEIT", "EQ-i 2.0"]


def load_bank_file(path: str | pathlib.Path) -> List[Question]:
    raw = json.loads(pathlib.Path(path).read_text(encoding="utf-8"))
    if isinstance(raw, dict):
        raw = raw.get("questions", [])
    return [Question.from_dict(r) for r in raw]


def load_bank(cfg: Optional[dict] = None) -> List[Question]:
    cfg = cfg if cfg is not None else load_config()
    path = cfg.get("bank_path")
    if path:
        items = load_bank_file(path)
        log.info("loaded %d question(s) from %s", len(items), path)
        return items
    return build_default_battery()


def module_map(items: Iterable[Question]) -> Dict[str, List[str]]:
    """Module -> submodules, in first-seen order."""
    out: Dict[str, List[str]] = {}
    for it in items:
        subs = out.setdefault(it.module, [])
        if it.submodule not in subs:
            subs.append(it.submodule)
    return out
