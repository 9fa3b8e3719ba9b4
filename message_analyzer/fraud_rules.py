"""
FRAUD RULES ENGINE - Weighted pattern detection for business message fraud
Deterministic scan of a message against a fixed table of fraud indicators.

SCORING:
- Every indicator fires at most once per message
- riskScore = sum of weights of fired indicators (always >= 0)
- Detected tags keep rule definition order
"""

import re
import logging
from typing import List, Tuple
from dataclasses import dataclass

from .patterns import compile_pattern

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class FraudIndicator:
    """Single weighted fraud rule"""
    tag: str
    pattern: re.Pattern
    weight: int
    description: str = ""

    def matches(self, text: str) -> bool:
        return self.pattern.search(text) is not None


def _rule(tag: str, pattern: str, weight: int, description: str) -> FraudIndicator:
    return FraudIndicator(
        tag=tag,
        pattern=compile_pattern(pattern),
        weight=weight,
        description=description,
    )


# Order matters: detected tags are reported in this order
FRAUD_INDICATORS: Tuple[FraudIndicator, ...] = (
    _rule(
        "urgency_pressure",
        r'urgent|immediately|act now|hurry|time.?sensitive',
        2, "Urgency or time pressure language",
    ),
    _rule(
        "phishing",
        r'verify.{0,20}account|confirm.{0,20}identity|update.{0,20}payment',
        3, "Request to verify account, identity or payment details",
    ),
    _rule(
        "fear_tactic",
        r'suspended|locked|restricted|unauthorized|unusual.{0,10}activity',
        3, "Account threat or unusual activity warning",
    ),
    _rule(
        "suspicious_payment",
        r'wire.{0,10}transfer|bitcoin|cryptocurrency|gift.?card|prepaid',
        4, "Untraceable payment method",
    ),
    _rule(
        "authority_impersonation",
        r'ceo|director|manager.{0,20}requesting',
        3, "Executive or manager authority claim",
    ),
    _rule(
        "too_good_to_be_true",
        r'congratulations|winner|prize|lottery|inheritance',
        4, "Unexpected prize, winnings or inheritance",
    ),
    _rule(
        "suspicious_link",
        r'click.{0,10}here|bit\.ly|tinyurl|suspicious.{0,10}link',
        2, "Link click request or URL shortener",
    ),
    _rule(
        "credential_request",
        r'password|social.?security|bank.{0,10}account|credit.?card',
        3, "Credential or sensitive financial data request",
    ),
    _rule(
        "financial_lure",
        r'refund|overpayment|tax.{0,10}return',
        2, "Refund or overpayment lure",
    ),
    _rule(
        "secrecy_request",
        r'confidential|do.?not.{0,10}share|secret|discreet',
        2, "Request for secrecy or discretion",
    ),
)


class FraudRulesEngine:
    """
    Deterministic fraud indicator scanner.
    Holds a read-only rule table, so one instance can be shared freely.
    """

    def __init__(self, indicators: Tuple[FraudIndicator, ...] = FRAUD_INDICATORS):
        self.indicators = tuple(indicators)

    def match_indicators(self, text: str) -> List[FraudIndicator]:
        """Return every indicator that fires on the text, in rule order"""
        return [rule for rule in self.indicators if rule.matches(text)]

    def analyze_message(self, text: str) -> Tuple[int, List[str]]:
        """
        Scan a single message.
        Returns (risk_score, detected_tags).
        """
        matches = self.match_indicators(text)
        risk_score = sum(rule.weight for rule in matches)
        detected_tags = [rule.tag for rule in matches]

        if matches:
            logger.debug(f"Fraud indicators fired: {detected_tags} (score={risk_score})")

        return risk_score, detected_tags


# Singleton instance
fraud_rules_engine = FraudRulesEngine()
