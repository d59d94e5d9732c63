from __future__ import annotations
from fastapi import FastAPI, HTTPException, Query, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from pydantic import BaseModel, StrictBool, StrictFloat, StrictInt, StrictStr
import logging, os, uuid, typing as t

from eq_core.config import load_config
from eq_core.errors import (
    EvaluationError,
    INTEGRITY_ERRORS,
    InvalidOptionError,
    MalformedPairError,
    MissingAnswerError,
)
from eq_core.evaluator import EQScoreEvaluator
from eq_core.audit_bank import audit_items
from eq_core.question_bank import load_bank, module_map
from eq_core.reporting import detailed_analysis, result_to_dict
from eq_core.types import Question
from .storage import (
    delete_result,
    list_results_for_candidate,
    load_result,
    save_result,
    utcnow_iso,
)

log = logging.getLogger(__name__)

CFG = load_config()
BANK: list[Question] = load_bank(CFG)
EVALUATOR = EQScoreEvaluator.from_config(CFG)

app = FastAPI(title="EQ Evaluator API")

ALLOWED_ORIGINS = [o.strip() for o in os.getenv("ALLOWED_ORIGINS", "http://localhost:5173,http://localhost:3000").split(",") if o.strip()]

app.add_middleware(
    CORSMiddleware,
    allow_origins=ALLOWED_ORIGINS,
    allow_methods=["*"],
    allow_headers=["*"],
    allow_credentials=False,
)

# ---- Schemas ----
# bools pass through unchanged so the evaluator can reject them
AnswerValue = t.Union[StrictBool, StrictInt, StrictFloat, StrictStr]

class EvaluateReq(BaseModel):
    answers: dict[str, AnswerValue]

class SubmitReq(BaseModel):
    candidate_id: str
    answers: dict[str, AnswerValue]

# ---- Error mapping ----
_STATUS: dict[type, int] = {
    MissingAnswerError: 422,
    InvalidOptionError: 400,
}

@app.exception_handler(EvaluationError)
def _evaluation_error(_request: Request, exc: EvaluationError):
    body: dict[str, t.Any] = {"error": exc.code, "detail": str(exc)}
    if isinstance(exc, MissingAnswerError):
        body["question_ids"] = list(exc.question_ids)
    elif isinstance(exc, InvalidOptionError):
        body["question_id"] = exc.question_id
    elif isinstance(exc, MalformedPairError):
        body["pair_id"] = exc.pair_id
    # bank defects are logged at ERROR by the evaluator
    status = 409 if isinstance(exc, INTEGRITY_ERRORS) else _STATUS.get(type(exc), 400)
    log.warning("rejected submission (%d): %s", status, exc)
    return JSONResponse(status_code=status, content=body)

# ---- Helpers ----
def _serialize_question(q: Question) -> dict[str, t.Any]:
    """Candidate view: no option scores, no pair metadata."""
    return {
        "id": q.id,
        "text": q.text,
        "type": q.type,
        "module": q.module,
        "submodule": q.submodule,
        "options": [{"label": o.label, "value": o.value} for o in q.options],
    }

# ---- Health ----
@app.get("/")
def root():
    return {"status": "ok", "service": "eq-evaluator-api"}

@app.get("/health")
def health():
    return {
        "questions": len(BANK),
        "bank_path": CFG.get("bank_path"),
        "rating_bands": list(EVALUATOR.rating_table.labels),
    }

# ---- Question bank ----
@app.get("/questions")
def list_questions(
    module: str | None = Query(None),
    submodule: str | None = Query(None),
    type: str | None = Query(None),
):
    items = [
        q for q in BANK
        if (module is None or q.module == module)
        and (submodule is None or q.submodule == submodule)
        and (type is None or q.type == type)
    ]
    return {"questions": [_serialize_question(q) for q in items], "total": len(items)}

@app.get("/questions/modules")
def list_modules():
    return {"modules": module_map(BANK)}

@app.get("/questions/stats")
def question_stats():
    summary = audit_items(BANK)
    return {**summary["totals"], "warnings": summary["warnings"]}

# ---- Evaluation ----
@app.post("/evaluate")
def evaluate(req: EvaluateReq):
    res = EVALUATOR.evaluate(BANK, req.answers)
    return result_to_dict(res)

@app.post("/tests/{test_id}/submit")
def submit(test_id: str, req: SubmitReq):
    res = EVALUATOR.evaluate(BANK, req.answers)
    rid = str(uuid.uuid4())
    created = utcnow_iso()
    report = detailed_analysis(
        res, BANK, req.answers,
        meta={"resultId": rid, "testId": test_id, "candidateId": req.candidate_id, "createdAt": created},
    )
    save_result(rid, report, {
        "testId": test_id,
        "candidateId": req.candidate_id,
        "createdAt": created,
        "overallScore": res.overall_score,
        "eqRating": res.eq_rating,
        "inconsistencyIndex": res.inconsistency_index,
    })
    log.info("stored result %s for candidate %s (overall=%.2f)", rid, req.candidate_id, res.overall_score)
    return {"result_id": rid, "evaluation": result_to_dict(res)}

# ---- Results ----
@app.get("/results/{result_id}")
def get_result(result_id: str):
    report = load_result(result_id)
    if not report:
        raise HTTPException(404, "result not found")
    return report

@app.delete("/results/{result_id}")
def delete_result_endpoint(result_id: str):
    if not delete_result(result_id):
        raise HTTPException(404, "result not found")
    return {"ok": True}

@app.get("/candidates/{candidate_id}/results")
def list_results(candidate_id: str, test_id: str | None = Query(None)):
    return {"results": list_results_for_candidate(candidate_id, test_id)}
