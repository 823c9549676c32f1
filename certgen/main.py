from fastapi import FastAPI, UploadFile, File, HTTPException
from .models import CertifyResponse, CertifySummary, CertificationOutcome, HealthResponse
from .loader import parse_roster_bytes
from .pipeline import run_pipeline

app = FastAPI(
    title="certgen",
    description="Employee certification scoring and letter payloads",
    version="0.1.0",
)

@app.get("/health", response_model=HealthResponse)
def health():
    return {"ok": True}

@app.post("/certify", response_model=CertifyResponse)
async def certify(file: UploadFile = File(...)):
    if not (file.filename or "").lower().endswith(".csv"):
        raise HTTPException(status_code=422, detail="Only CSV files are supported")

    raw = await file.read()
    result = run_pipeline(parse_roster_bytes(raw))

    outcomes = [employee.outcome for employee in result.employees]
    summary = CertifySummary(
        loaded=result.loaded,
        unique=len(result.employees),
        skipped=len(result.skipped),
        failed=outcomes.count(CertificationOutcome.FAILED),
        passed=outcomes.count(CertificationOutcome.PASSED),
        passed_excellent=outcomes.count(CertificationOutcome.PASSED_EXCELLENT),
        documents=len(result.payloads),
    )
    return CertifyResponse(
        summary=summary,
        employees=result.employees,
        skipped=result.skipped,
        documents=result.payloads,
    )
