from __future__ import annotations
import os, json, datetime
from eq_core.evaluator import EQScoreEvaluator
from eq_core.errors import EvaluationError
from eq_core.question_bank import load_bank
from eq_core.reporting import detailed_analysis
def ask(prompt: str, options) -> int:
    print(prompt)
    for i,opt in enumerate(options): print(f"  [{i}] {opt.label}")
    while True:
        v = input("Your choice (index): ").strip()
        if v.isdigit() and int(v) < len(options): return int(v)
        print("Enter a number index.")
def main():
    print("EQ Assessment")
    bank = load_bank(); answers = {}
    for n, q in enumerate(bank, start=1):
        idx = ask(f"({n}/{len(bank)}) {q.text}", q.options)
        answers[q.id] = q.options[idx].value
    try:
        res = EQScoreEvaluator.from_config().evaluate(bank, answers)
    except EvaluationError as e:
        print(f"Evaluation failed: {e}"); return 1
    print(f"Overall: {res.overall_score:.1f} ({res.eq_rating})")
    print(f"Consistency: {res.inconsistency_index:.1f} ({res.inconsistency_rating})")
    for m, ms in res.module_scores.items(): print(f"  {m}: {ms.score:.1f}")
    os.makedirs("reports", exist_ok=True)
    ts = datetime.datetime.now().strftime("%Y%m%d_%H%M%S")
    path = os.path.join("reports", f"eq_report_{ts}.json")
    with open(path, "w", encoding="utf-8") as f:
        json.dump(detailed_analysis(res, bank, answers), f, ensure_ascii=False, indent=2)
    print(f"Done. Report saved to: {path}")
    return 0
if __name__ == "__main__": raise SystemExit(main())
