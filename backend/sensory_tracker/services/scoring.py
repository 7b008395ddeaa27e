"""
Sensory Profile Scoring Engine.

Turns questionnaire responses into seeking/avoiding scores for the six
sensory domains. Pure functions with no shared state.

Key formulas:
    Question points:    "no" -> 0; "yes" -> 1 (rarely or no frequency),
                        2 (sometimes), 3 (often)
    Domain total:       seeking + avoiding
    Domain percentage:  total / (3 * questions_scored) * 100
    Overall:            the same sums and percentage across all domains

Where:
    questions_scored = questions in the domain's section whose id contains
                       "seeking" or "avoiding"; any other question is ignored
"""

from dataclasses import dataclass
from typing import Any, Optional

from sensory_tracker.schemas import (
    AssessmentQuestion,
    AssessmentResponses,
    AssessmentScores,
    AssessmentSection,
    parse_assessment_responses,
)

DOMAINS = ("auditory", "visual", "tactile", "vestibular", "proprioception", "oral")

MAX_POINTS_PER_QUESTION = 3

FREQUENCY_POINTS = {
    None: 1,
    "rarely": 1,
    "sometimes": 2,
    "often": 3,
}


@dataclass(frozen=True)
class DomainScore:
    seeking: int = 0
    avoiding: int = 0
    questions_scored: int = 0

    @property
    def total(self) -> int:
        return self.seeking + self.avoiding

    @property
    def max_possible(self) -> int:
        return self.questions_scored * MAX_POINTS_PER_QUESTION


def section_id_for(domain: str) -> str:
    """Section identifier holding a domain's questions, e.g. ``auditoryProcessing``."""
    return f"{domain}Processing"


def percentage(points: int, max_possible: int) -> float:
    """Share of the maximum, in [0, 100]. Zero when nothing could be scored."""
    if max_possible <= 0:
        return 0.0
    return points / max_possible * 100


def question_points(question: AssessmentQuestion) -> int:
    """Points contributed by one answer."""
    if question.answer != "yes":
        return 0
    return FREQUENCY_POINTS[question.frequency]


def find_section(responses: AssessmentResponses, domain: str) -> Optional[AssessmentSection]:
    wanted = section_id_for(domain)
    return next((s for s in responses.sections if s.section_id == wanted), None)


def score_domain(section: Optional[AssessmentSection]) -> DomainScore:
    """Accumulate seeking and avoiding points for one section.

    A missing section scores zero everywhere.
    """
    if section is None:
        return DomainScore()

    seeking = avoiding = scored = 0
    for question in section.questions:
        if "seeking" in question.id:
            seeking += question_points(question)
        elif "avoiding" in question.id:
            avoiding += question_points(question)
        else:
            continue
        scored += 1
    return DomainScore(seeking=seeking, avoiding=avoiding, questions_scored=scored)


def calculate_scores(responses: AssessmentResponses) -> AssessmentScores:
    """Compute the full score report for validated responses.

    Args:
        responses: Parsed questionnaire responses.

    Returns:
        Per-domain seeking, avoiding, total and percentage values plus the
        overall totals.
    """
    fields: dict = {}
    total_seeking = total_avoiding = total_max = 0

    for domain in DOMAINS:
        result = score_domain(find_section(responses, domain))
        fields[f"{domain}_seeking_score"] = result.seeking
        fields[f"{domain}_avoiding_score"] = result.avoiding
        fields[f"{domain}_total"] = result.total
        fields[f"{domain}_percentage"] = percentage(result.total, result.max_possible)

        total_seeking += result.seeking
        total_avoiding += result.avoiding
        total_max += result.max_possible

    overall = total_seeking + total_avoiding
    fields["total_seeking_score"] = total_seeking
    fields["total_avoiding_score"] = total_avoiding
    fields["overall_score"] = overall
    fields["overall_percentage"] = percentage(overall, total_max)
    return AssessmentScores(**fields)


def score_payload(payload: Any) -> AssessmentScores:
    """Validate an untyped payload as responses, then score it.

    Raises:
        ValidationError: If the payload is not a valid set of responses.
    """
    responses = parse_assessment_responses(payload).unwrap()
    return calculate_scores(responses)
