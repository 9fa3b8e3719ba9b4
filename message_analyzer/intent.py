"""
INTENT CLASSIFIER - Priority cascade over the message text
First matching rule wins; a detected lead always wins.
"""

import re
from enum import Enum
from typing import Tuple

from .patterns import compile_pattern


class Intent(str, Enum):
    SALES_LEAD = "sales_lead"
    COMPLAINT = "complaint"
    SUPPORT_REQUEST = "support_request"
    NEGOTIATION = "negotiation"
    GENERAL_INQUIRY = "general_inquiry"


INTENT_PATTERNS: Tuple[Tuple[Intent, re.Pattern], ...] = (
    (Intent.COMPLAINT, compile_pattern(r'complaint|unhappy|dissatisfied|refund')),
    (Intent.SUPPORT_REQUEST, compile_pattern(r'support|help|how.{0,10}to|problem')),
    (Intent.NEGOTIATION, compile_pattern(r'negotiate|discuss.{0,10}terms|counter.{0,10}offer')),
)


def classify_intent(text: str, is_lead: bool) -> Intent:
    if is_lead:
        return Intent.SALES_LEAD
    for intent, pattern in INTENT_PATTERNS:
        if pattern.search(text):
            return intent
    return Intent.GENERAL_INQUIRY
