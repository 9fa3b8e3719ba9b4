"""
RISK ENGINE - Threshold classification of fraud risk scores

RISK THRESHOLDS:
- 0-3:  SAFE            - No significant fraud indicators
- 4-7:  SUSPICIOUS      - Verify before responding
- 8+:   HIGH RISK FRAUD - Do not respond

No hysteresis or smoothing: a single boundary crossing flips the level.
"""

import logging
from enum import Enum

logger = logging.getLogger(__name__)


class RiskLevel(str, Enum):
    """Risk categories reported to callers"""
    SAFE = "Safe"
    SUSPICIOUS = "Suspicious"
    HIGH_RISK_FRAUD = "High Risk Fraud"


class RiskClassifier:
    """Maps a fraud risk score onto a RiskLevel"""

    THRESHOLD_SUSPICIOUS = 4
    THRESHOLD_HIGH_RISK = 8

    def classify(self, risk_score: int) -> RiskLevel:
        if risk_score >= self.THRESHOLD_HIGH_RISK:
            logger.warning(f"🚨 High risk fraud score: {risk_score}")
            return RiskLevel.HIGH_RISK_FRAUD
        if risk_score >= self.THRESHOLD_SUSPICIOUS:
            logger.info(f"Suspicious risk score: {risk_score}")
            return RiskLevel.SUSPICIOUS
        return RiskLevel.SAFE


# Singleton instance
risk_classifier = RiskClassifier()
