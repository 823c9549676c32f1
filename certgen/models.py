from __future__ import annotations

from enum import Enum
from typing import List, Optional
from pydantic import BaseModel, ConfigDict, Field, computed_field


class CertificationOutcome(str, Enum):
    FAILED = "Failed"
    PASSED = "Passed"
    PASSED_EXCELLENT = "PassedExcellent"


class EmployeeRecord(BaseModel):
    model_config = ConfigDict(frozen=True)

    first_name: str = ""
    last_name: str = ""
    department: str = ""
    theoretical_score: float = 0.0
    practical_score: float = 0.0
    # Not part of the roster format; kept for the letter template
    email: Optional[str] = None
    phone: Optional[str] = None
    final_score: float = 0.0

    @computed_field
    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}".strip()


class SkippedRow(BaseModel):
    line: int
    reason: str
    value: Optional[str] = None


class LoadReport(BaseModel):
    records: List[EmployeeRecord] = Field(default_factory=list)
    skipped: List[SkippedRow] = Field(default_factory=list)
    encoding: Optional[str] = None
    source_error: Optional[str] = None


class CertificationPayload(BaseModel):
    full_name: str
    department: str
    phone: str
    email: str
    final_score: str = Field(examples=["86.0"])
    body_text: str
    outcome: CertificationOutcome


class ClassifiedEmployee(BaseModel):
    record: EmployeeRecord
    outcome: CertificationOutcome


class RenderFailure(BaseModel):
    full_name: str
    error: str


class PipelineResult(BaseModel):
    # Records read from the roster, before duplicates are dropped
    loaded: int = 0
    employees: List[ClassifiedEmployee] = Field(default_factory=list)
    skipped: List[SkippedRow] = Field(default_factory=list)
    payloads: List[CertificationPayload] = Field(default_factory=list)
    documents: List[str] = Field(default_factory=list)
    failures: List[RenderFailure] = Field(default_factory=list)
    source_error: Optional[str] = None


class CertifySummary(BaseModel):
    loaded: int = 0
    unique: int = 0
    skipped: int = 0
    failed: int = 0
    passed: int = 0
    passed_excellent: int = 0
    documents: int = 0


class CertifyResponse(BaseModel):
    summary: CertifySummary
    employees: List[ClassifiedEmployee] = Field(default_factory=list)
    skipped: List[SkippedRow] = Field(default_factory=list)
    documents: List[CertificationPayload] = Field(default_factory=list)


class HealthResponse(BaseModel):
    ok: bool = True
