"""
LEAD SCORER - Sales lead detection and lead quality scoring

DETECTION:
A message is a lead if ANY lead indicator matches.

QUALITY SCORE (leads only):
    base 3
    +2 budget or price mention
    +2 timeline cue
    +1 specific requirements (long message)
    +1 contact information
    +1 professional tone
Clamped to 0-10.
"""

import logging
from typing import List, Optional
from dataclasses import dataclass, field

from .patterns import compile_pattern

logger = logging.getLogger(__name__)


LEAD_INDICATORS = tuple(
    compile_pattern(pattern)
    for pattern in (
        r'interested.{0,20}in.{0,20}(your|our).{0,20}(product|service)',
        r'looking.{0,20}for.{0,20}(solution|provider|vendor)',
        r'quote|proposal|pricing|budget|cost',
        r'demo|trial|meeting|call|discuss',
        r'partnership|collaboration|business.{0,10}opportunity',
    )
)

BUDGET_PATTERN = compile_pattern(r'budget|price|cost|\$\d+')
TIMELINE_PATTERN = compile_pattern(r'asap|next.{0,10}week|next.{0,10}month|soon|timeline')
SPECIFICS_PATTERN = compile_pattern(r'specific|require|need|must have')
CONTACT_PATTERN = compile_pattern(r'@|phone|email|contact')
# Matches the literal phrase "all caps", not capitalised text
UNPROFESSIONAL_PATTERN = compile_pattern(r'\?\?\?|!!!|all caps')


@dataclass
class LeadAssessment:
    """Lead detection outcome for one message"""
    is_lead: bool
    quality_score: Optional[int] = None
    factors: List[str] = field(default_factory=list)


class LeadScorer:
    """Detects sales leads and scores their quality"""

    BASE_SCORE = 3
    MIN_SCORE = 0
    MAX_SCORE = 10

    BUDGET_POINTS = 2
    TIMELINE_POINTS = 2
    SPECIFICS_POINTS = 1
    CONTACT_POINTS = 1
    PROFESSIONAL_POINTS = 1

    SPECIFICS_MIN_LENGTH = 100
    PROFESSIONAL_MIN_WORDS = 20

    def is_lead(self, text: str) -> bool:
        return any(pattern.search(text) for pattern in LEAD_INDICATORS)

    def score_quality(self, text: str) -> LeadAssessment:
        """Score a message already known to be a lead"""
        score = self.BASE_SCORE
        factors = []

        if BUDGET_PATTERN.search(text):
            score += self.BUDGET_POINTS
            factors.append("budget_mention")

        if TIMELINE_PATTERN.search(text):
            score += self.TIMELINE_POINTS
            factors.append("timeline")

        if len(text) > self.SPECIFICS_MIN_LENGTH and SPECIFICS_PATTERN.search(text):
            score += self.SPECIFICS_POINTS
            factors.append("specifics")

        if CONTACT_PATTERN.search(text):
            score += self.CONTACT_POINTS
            factors.append("contact_info")

        # Words are counted on single spaces
        word_count = len(text.split(" "))
        if word_count > self.PROFESSIONAL_MIN_WORDS and not UNPROFESSIONAL_PATTERN.search(text):
            score += self.PROFESSIONAL_POINTS
            factors.append("professional_tone")

        score = max(self.MIN_SCORE, min(self.MAX_SCORE, score))
        logger.debug(f"Lead quality score {score} from factors {factors}")

        return LeadAssessment(is_lead=True, quality_score=score, factors=factors)

    def assess(self, text: str) -> LeadAssessment:
        if not self.is_lead(text):
            return LeadAssessment(is_lead=False)
        return self.score_quality(text)


# Singleton instance
lead_scorer = LeadScorer()
