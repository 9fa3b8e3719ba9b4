"""
MESSAGE ANALYZER - Single-message classification pipeline

PIPELINE ORDER:
Message → Fraud Scan → Risk Classification → Lead Scan + Quality Score →
Intent Cascade → Decision Table

Pure and synchronous: every call derives its state from the read-only rule
tables, so one analyzer can serve concurrent requests.
"""

import logging
from typing import Dict, List, Optional
from dataclasses import dataclass, field

from .fraud_rules import FraudRulesEngine, fraud_rules_engine
from .risk_engine import RiskClassifier, RiskLevel, risk_classifier
from .lead_scorer import LeadScorer, lead_scorer
from .intent import Intent, classify_intent
from .decision_engine import Decision, synthesize_decision
from .models import AnalysisResult

logger = logging.getLogger(__name__)


@dataclass
class MessageAnalysis:
    """Complete working record of one analysis"""
    risk_score: int
    detected_indicators: List[str]
    risk_level: RiskLevel
    is_lead: bool
    lead_quality_score: Optional[int]
    intent: Intent
    decision: Decision
    lead_factors: List[str] = field(default_factory=list)

    def to_result(self) -> AnalysisResult:
        return AnalysisResult(
            riskLevel=self.risk_level,
            reason=self.decision.reason,
            businessImpact=self.decision.business_impact,
            recommendedAction=self.decision.recommended_action,
            suggestedReply=dict(self.decision.suggested_reply),
            leadQualityScore=self.lead_quality_score if self.is_lead else None,
            businessInsight=self.decision.business_insight,
            isLead=self.is_lead,
        )

    def to_dict(self) -> Dict:
        """Internal view for logging and debugging"""
        return {
            "risk_score": self.risk_score,
            "risk_level": self.risk_level.value,
            "detected_indicators": list(self.detected_indicators),
            "is_lead": self.is_lead,
            "lead_quality_score": self.lead_quality_score,
            "lead_factors": list(self.lead_factors),
            "intent": self.intent.value,
            "decision_branch": self.decision.branch.value,
        }


class MessageAnalyzer:
    """
    Runs the four classification stages over one message.
    Never raises for a str input; empty text yields the Safe, non-lead default.
    """

    def __init__(
        self,
        fraud_engine: FraudRulesEngine = fraud_rules_engine,
        classifier: RiskClassifier = risk_classifier,
        scorer: LeadScorer = lead_scorer,
    ):
        self.fraud_engine = fraud_engine
        self.classifier = classifier
        self.scorer = scorer

    def analyze(self, text: str) -> MessageAnalysis:
        # STEP 1-2: Fraud scan and risk level
        risk_score, detected_indicators = self.fraud_engine.analyze_message(text)
        risk_level = self.classifier.classify(risk_score)

        # STEP 3: Lead detection and quality
        lead = self.scorer.assess(text)

        # STEP 4: Intent
        intent = classify_intent(text, lead.is_lead)

        # STEP 5: Decision table
        decision = synthesize_decision(
            risk_level,
            lead.is_lead,
            lead.quality_score,
            intent,
            detected_indicators,
        )

        analysis = MessageAnalysis(
            risk_score=risk_score,
            detected_indicators=detected_indicators,
            risk_level=risk_level,
            is_lead=lead.is_lead,
            lead_quality_score=lead.quality_score,
            intent=intent,
            decision=decision,
            lead_factors=lead.factors,
        )
        logger.debug(f"Analysis: {analysis.to_dict()}")
        return analysis


# Singleton instance
message_analyzer = MessageAnalyzer()
