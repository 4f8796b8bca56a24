from typing import List, Optional

from pydantic import BaseModel, Field

from consistency_linter.models import Severity


class NamingIssueOut(BaseModel):
    severity: Severity
    file_path: str
    line: int
    category: str
    identifier: str
    rule_id: str
    suggestion: str


class PatternIssueOut(BaseModel):
    severity: Severity
    files: List[str]
    category: str
    identifier: str
    rule_id: str
    description: str
    suggestion: str


class FailureOut(BaseModel):
    file_path: str
    message: str


class ConventionOut(BaseModel):
    dominant_convention: str
    confidence_score: float = Field(ge=0, le=1)


class SummaryOut(BaseModel):
    files_analyzed: int
    total_issues: int
    naming_issues: int
    pattern_issues: int
    failed_files: int
    by_category: dict[str, int] = Field(default_factory=dict)
    by_severity: dict[str, int] = Field(default_factory=dict)


class ReportOut(BaseModel):
    summary: SummaryOut
    naming_issues: List[NamingIssueOut] = Field(default_factory=list)
    pattern_issues: List[PatternIssueOut] = Field(default_factory=list)
    failures: List[FailureOut] = Field(default_factory=list)
    conventions: Optional[ConventionOut] = None
    recommendations: List[str] = Field(default_factory=list)
