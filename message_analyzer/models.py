from pydantic import BaseModel, Field, StrictStr
from typing import Dict, Optional

from .risk_engine import RiskLevel


class AnalyzeRequest(BaseModel):
    message: StrictStr = Field(..., min_length=1)  # Free-text email or chat message


class AnalysisResult(BaseModel):
    riskLevel: RiskLevel  # Safe / Suspicious / High Risk Fraud
    reason: str
    businessImpact: str
    recommendedAction: str
    suggestedReply: Dict[str, str]  # neutral / polite / legal drafts
    leadQualityScore: Optional[int] = Field(default=None, ge=0, le=10)  # Only set for leads
    businessInsight: str
    isLead: bool


class ErrorResponse(BaseModel):
    error: str
