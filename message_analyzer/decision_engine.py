"""
DECISION ENGINE - Decision table mapping analysis outcomes to response guidance

SELECTION ORDER:
1. Risk level overrides everything (HIGH RISK FRAUD, SUSPICIOUS)
2. Safe leads are tiered by quality score (>=7 HIGH, >=4 MODERATE, else LOW)
3. Safe non-leads are keyed on intent (COMPLAINT, SUPPORT_REQUEST, GENERAL)

Each branch resolves to one immutable ResponseTemplate. Only the reason
text is parameterised (by the detected fraud indicator tags).
"""

from enum import Enum
from types import MappingProxyType
from typing import Dict, List, Mapping, Optional
from dataclasses import dataclass

from .risk_engine import RiskLevel
from .intent import Intent


class DecisionBranch(str, Enum):
    HIGH_RISK_FRAUD = "high_risk_fraud"
    SUSPICIOUS = "suspicious"
    LEAD_HIGH = "lead_high"
    LEAD_MODERATE = "lead_moderate"
    LEAD_LOW = "lead_low"
    COMPLAINT = "complaint"
    SUPPORT_REQUEST = "support_request"
    GENERAL = "general"


class ReplyTone(str, Enum):
    NEUTRAL = "neutral"
    POLITE = "polite"
    LEGAL = "legal"


@dataclass(frozen=True)
class ResponseTemplate:
    """Output bundle for one decision branch"""
    reason: str
    business_impact: str
    recommended_action: str
    suggested_reply: Mapping[ReplyTone, str]
    business_insight: str


@dataclass(frozen=True)
class Decision:
    """Rendered guidance for one analysed message"""
    branch: DecisionBranch
    reason: str
    business_impact: str
    recommended_action: str
    suggested_reply: Dict[str, str]
    business_insight: str


HIGH_QUALITY_LEAD = 7
MODERATE_QUALITY_LEAD = 4
HIGH_RISK_REASON_TAGS = 3


# ---------------------------------------------------------------------------
# Shared template text
# ---------------------------------------------------------------------------

SAFE_REASON = (
    "Message appears legitimate with standard business communication patterns. "
    "No significant fraud indicators detected."
)

STANDARD_IMPACT = (
    "Standard business communication. Low risk with normal operational handling required."
)

STANDARD_INSIGHT = (
    "Standard business communication requiring professional response. Maintain response "
    "time SLAs to ensure customer satisfaction and operational efficiency."
)

NURTURE_INSIGHT = (
    "Lead requires nurturing. Set up automated follow-up sequence. Monitor engagement "
    "metrics. Re-qualify in 30 days if no response."
)

LEAD_REPLIES = MappingProxyType({
    ReplyTone.NEUTRAL: (
        "Thank you for your inquiry. We'd be happy to discuss how our solutions can meet "
        "your needs. Could you share more details about your specific requirements and timeline?"
    ),
    ReplyTone.POLITE: (
        "Thank you for reaching out to us! We appreciate your interest in our services. "
        "I'd love to schedule a brief call to better understand your needs and explore how "
        "we can help. When would be a convenient time for you?"
    ),
})

ACKNOWLEDGEMENT_REPLIES = MappingProxyType({
    ReplyTone.NEUTRAL: (
        "Thank you for your message. We've received your inquiry and will respond with the "
        "information you need within 1-2 business days."
    ),
    ReplyTone.POLITE: (
        "Thank you for reaching out! We've received your message and our team is reviewing "
        "it. We'll get back to you shortly with a detailed response."
    ),
})


def _lead_impact(tier: str) -> str:
    return f"Potential revenue opportunity. Lead quality score indicates {tier} conversion probability."


# ---------------------------------------------------------------------------
# Decision table
# ---------------------------------------------------------------------------

DECISION_TABLE: Mapping[DecisionBranch, ResponseTemplate] = MappingProxyType({
    DecisionBranch.HIGH_RISK_FRAUD: ResponseTemplate(
        reason=(
            "Multiple high-risk fraud indicators detected: {indicators}. "
            "Message exhibits classic scam patterns including {primary}."
        ),
        business_impact=(
            "High risk of financial loss, data breach, or reputation damage. Responding or "
            "engaging could lead to wire fraud, credential theft, or business email compromise (BEC)."
        ),
        recommended_action=(
            "DO NOT RESPOND. Mark as spam/phishing. Report to IT security team. Block sender. "
            "Do not click any links or provide any information."
        ),
        suggested_reply=MappingProxyType({
            ReplyTone.LEGAL: (
                "This message has been flagged by our security systems. We do not respond to "
                "unverified requests. If you are a legitimate sender, please contact us through "
                "official channels listed on our website."
            ),
        }),
        business_insight=(
            "Train team members to recognize similar fraud patterns. Implement email "
            "authentication (SPF, DKIM, DMARC). Consider security awareness program."
        ),
    ),
    DecisionBranch.SUSPICIOUS: ResponseTemplate(
        reason=(
            "Detected suspicious patterns: {indicators}. Exercise caution and verify sender "
            "authenticity before responding."
        ),
        business_impact=(
            "Moderate risk. Potential for phishing attack, data exposure, or operational "
            "disruption if proper verification is not conducted."
        ),
        recommended_action=(
            "Verify sender identity through independent channels (official website, known phone "
            "number). Do not use contact information from the message. Escalate to security team "
            "if verification fails."
        ),
        suggested_reply=MappingProxyType({
            ReplyTone.POLITE: (
                "Thank you for your message. For security purposes, we need to verify this request "
                "through our standard authentication process. Please contact us directly at "
                "[official company phone/email] to proceed."
            ),
            ReplyTone.LEGAL: (
                "We have received your communication. Per our security protocols, we cannot process "
                "requests of this nature via this channel. Please contact our official support line "
                "at [number] and reference case ID [XXX] for verification and assistance."
            ),
        }),
        business_insight=(
            "Exercise caution and verify sender authenticity before engaging. Route similar "
            "messages through independent verification and share the pattern with the security team."
        ),
    ),
    DecisionBranch.LEAD_HIGH: ResponseTemplate(
        reason=SAFE_REASON,
        business_impact=_lead_impact("high"),
        recommended_action=(
            "High-priority lead. Assign to senior sales representative. Schedule qualification "
            "call within 24 hours. Prepare customized proposal."
        ),
        suggested_reply=LEAD_REPLIES,
        business_insight=(
            "High-value opportunity detected. Fast response critical for conversion. Assign to "
            "top performer. Track progression through sales pipeline."
        ),
    ),
    DecisionBranch.LEAD_MODERATE: ResponseTemplate(
        reason=SAFE_REASON,
        business_impact=_lead_impact("moderate"),
        recommended_action=(
            "Moderate-quality lead. Send initial response with company information. Schedule "
            "discovery call. Qualify budget and timeline."
        ),
        suggested_reply=LEAD_REPLIES,
        business_insight=NURTURE_INSIGHT,
    ),
    DecisionBranch.LEAD_LOW: ResponseTemplate(
        reason=SAFE_REASON,
        business_impact=_lead_impact("low"),
        recommended_action=(
            "Low-priority lead. Send automated response with resources. Add to nurture "
            "campaign. Monitor for engagement signals."
        ),
        suggested_reply=LEAD_REPLIES,
        business_insight=NURTURE_INSIGHT,
    ),
    DecisionBranch.COMPLAINT: ResponseTemplate(
        reason=SAFE_REASON,
        business_impact=STANDARD_IMPACT,
        recommended_action=(
            "Escalate to customer service manager. Respond within 4 hours acknowledging "
            "concern. Investigate issue and prepare resolution plan."
        ),
        suggested_reply=MappingProxyType({
            ReplyTone.NEUTRAL: (
                "Thank you for bringing this to our attention. We take all feedback seriously and "
                "will investigate this matter immediately. Could you provide additional details so "
                "we can resolve this quickly?"
            ),
            ReplyTone.POLITE: (
                "We sincerely apologize for any inconvenience you've experienced. Your satisfaction "
                "is our priority, and we're committed to making this right. Our team will "
                "investigate this immediately and follow up within 24 hours."
            ),
        }),
        business_insight=(
            "Customer retention opportunity. Swift resolution can convert detractor to promoter. "
            "Track resolution time and customer satisfaction metrics."
        ),
    ),
    DecisionBranch.SUPPORT_REQUEST: ResponseTemplate(
        reason=SAFE_REASON,
        business_impact=STANDARD_IMPACT,
        recommended_action=(
            "Route to support team. Acknowledge receipt within 2 hours. Provide ticket number "
            "and expected resolution timeline."
        ),
        suggested_reply=ACKNOWLEDGEMENT_REPLIES,
        business_insight=STANDARD_INSIGHT,
    ),
    DecisionBranch.GENERAL: ResponseTemplate(
        reason=SAFE_REASON,
        business_impact=STANDARD_IMPACT,
        recommended_action=(
            "Respond with standard business communication protocol. Address inquiry "
            "professionally within 24-48 hours."
        ),
        suggested_reply=ACKNOWLEDGEMENT_REPLIES,
        business_insight=STANDARD_INSIGHT,
    ),
})


def select_branch(
    risk_level: RiskLevel,
    is_lead: bool,
    lead_quality_score: Optional[int],
    intent: Intent,
) -> DecisionBranch:
    """Pick the decision table row. Risk first, then lead tier, then intent."""
    if risk_level == RiskLevel.HIGH_RISK_FRAUD:
        return DecisionBranch.HIGH_RISK_FRAUD
    if risk_level == RiskLevel.SUSPICIOUS:
        return DecisionBranch.SUSPICIOUS

    if is_lead:
        score = lead_quality_score or 0
        if score >= HIGH_QUALITY_LEAD:
            return DecisionBranch.LEAD_HIGH
        if score >= MODERATE_QUALITY_LEAD:
            return DecisionBranch.LEAD_MODERATE
        return DecisionBranch.LEAD_LOW

    if intent == Intent.COMPLAINT:
        return DecisionBranch.COMPLAINT
    if intent == Intent.SUPPORT_REQUEST:
        return DecisionBranch.SUPPORT_REQUEST
    return DecisionBranch.GENERAL


def render_reason(branch: DecisionBranch, detected_indicators: List[str]) -> str:
    template = DECISION_TABLE[branch].reason
    if branch == DecisionBranch.HIGH_RISK_FRAUD:
        indicators = detected_indicators[:HIGH_RISK_REASON_TAGS]
    else:
        indicators = detected_indicators
    primary = detected_indicators[0] if detected_indicators else "manipulation tactics"
    return template.format(indicators=", ".join(indicators), primary=primary)


def synthesize_decision(
    risk_level: RiskLevel,
    is_lead: bool,
    lead_quality_score: Optional[int],
    intent: Intent,
    detected_indicators: List[str],
) -> Decision:
    branch = select_branch(risk_level, is_lead, lead_quality_score, intent)
    template = DECISION_TABLE[branch]
    return Decision(
        branch=branch,
        reason=render_reason(branch, detected_indicators),
        business_impact=template.business_impact,
        recommended_action=template.recommended_action,
        suggested_reply={tone.value: text for tone, text in template.suggested_reply.items()},
        business_insight=template.business_insight,
    )
