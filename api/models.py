from typing import List, Literal, Optional
from pydantic import BaseModel, Field


# Models
class Finding(BaseModel):
    title: str
    finding: str
    recommendation: str
    severity: Literal["Critical", "High", "Medium", "Positive"]
    effort: Literal["High", "Medium", "Low", "N/A"]


class Score(BaseModel):
    designScore: float
    summary: str


class AuditResult(BaseModel):
    """Validation mirror of analyzer.schema.AUDIT_SCHEMA; only the hyphenated keys are accepted"""

    heuristics: List[Finding]
    golden_rules: List[Finding] = Field(alias="golden-rules")
    user_flow: List[Finding] = Field(alias="user-flow")
    benchmark: Score


class AuditRequest(BaseModel):
    url: Optional[str] = None


class ErrorResponse(BaseModel):
    error: str
