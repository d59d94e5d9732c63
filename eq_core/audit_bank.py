from __future__ import annotations

import argparse
import json
import logging
from collections import Counter
from pathlib import Path
from typing import Iterable, Sequence

from . import config
from .errors import MalformedPairError
from .question_bank import load_bank, load_bank_file, module_map
from .types import Question
from .validators import group_pairs

log = logging.getLogger(__name__)


def _pair_warnings(items: Sequence[Question]) -> tuple[int, list[str]]:
    by_pair: dict[str, list[Question]] = {}
    for it in items:
        if it.inconsistency_pair_id:
            by_pair.setdefault(it.inconsistency_pair_id, []).append(it)
    ok = 0
    warnings: list[str] = []
    for pid, members in by_pair.items():
        try:
            group_pairs(members)
            ok += 1
        except MalformedPairError as exc:
            log.error("question bank defect: %s", exc)
            warnings.append(str(exc))
    return ok, warnings


def audit_items(items: Iterable[Question]) -> dict[str, object]:
    items = list(items)
    coverage: dict[str, dict[str, int]] = {}
    by_type: Counter[str] = Counter()
    by_module: Counter[str] = Counter()
    ids: Counter[str] = Counter()
    paired_modules: set[str] = set()
    flat_scale: list[str] = []

    for it in items:
        coverage.setdefault(it.module, {}).setdefault(it.submodule, 0)
        coverage[it.module][it.submodule] += 1
        by_type[it.type] += 1
        by_module[it.module] += 1
        ids[it.id] += 1
        if it.inconsistency_pair_id:
            paired_modules.add(it.module)
        if len({o.score for o in it.options}) < 2:
            flat_scale.append(it.id)

    pairs_ok, warnings = _pair_warnings(items)

    for qid, n in ids.items():
        if n > 1:
            warnings.append(f"question id {qid} appears {n} times")

    for module, subs in coverage.items():
        for sub, n in subs.items():
            if n < config.BANK_MIN_PER_SUBMODULE:
                warnings.append(f"{module} / {sub} has {n} item(s) (<{config.BANK_MIN_PER_SUBMODULE})")
        if config.BANK_EXPECT_PAIRS and module not in paired_modules:
            warnings.append(f"{module} has no inconsistency pairs")

    for qid in flat_scale:
        warnings.append(f"question {qid} options all carry the same score")

    totals = {
        "total": len(items),
        "by_type": dict(by_type),
        "by_module": dict(by_module),
        "inconsistency_pairs": pairs_ok,
    }
    return {"coverage": coverage, "modules": module_map(items), "warnings": warnings, "totals": totals}


def print_report(summary: dict[str, object]) -> None:
    coverage: dict[str, dict[str, int]] = summary["coverage"]  # type: ignore[assignment]
    print("=== Question Bank Coverage ===")
    for module in sorted(coverage):
        print(f"\nModule: {module}")
        for sub, n in sorted(coverage[module].items()):
            print(f"  {sub:<28} {n:3d}")

    warnings: list[str] = summary["warnings"]  # type: ignore[assignment]
    if warnings:
        print("\nWarnings:")
        for msg in warnings:
            print(f" - {msg}")
    else:
        print("\nNo warnings.")

    print("\nTotals:", summary["totals"])


def write_summary(summary: dict[str, object], path: Path = Path("/tmp/eq_bank_audit.json")) -> str:
    text = json.dumps(summary, indent=2, sort_keys=True)
    path.write_text(text + "\n", encoding="utf-8")
    return text


def main(argv: list[str] | None = None) -> int:
    ap = argparse.ArgumentParser(description="Audit an EQ question bank")
    ap.add_argument("--bank", help="bank JSON file (default: configured bank)")
    ap.add_argument("--out", default="/tmp/eq_bank_audit.json")
    args = ap.parse_args(argv)

    items = load_bank_file(args.bank) if args.bank else load_bank()
    summary = audit_items(items)
    print_report(summary)
    write_summary(summary, Path(args.out))
    return 2 if summary["warnings"] else 0


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO, format="[%(levelname)s] %(message)s")
    raise SystemExit(main())
