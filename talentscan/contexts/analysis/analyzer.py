"""
Resume Analyzer

Scores free-text resume content against a role profile. analyze() runs a fixed
sequence of literal-matching passes and never fails on string input:

1. Role resolution (unknown ids fall back to the catalog's first role)
2. Candidate name (first line, or a sentinel)
3. Skill matching (case-insensitive substring containment)
4. Experience inference ("N years" phrases, then date ranges)
5. Education and certification detection (case-sensitive tokens)
6. Weighted scoring
7. Recommendations (six fixed slots)

Only AnalysisResult.id, created_at and Skill.proficiency vary between calls
with the same input. Pass a seeded random.Random as rng to pin proficiency.
"""

import math
import random
import uuid
from typing import List, Optional, Sequence, Tuple

from talentscan.contexts.analysis.analysis_data_structure import (
    SKILL_CATEGORIES,
    AnalysisResult,
    EducationSummary,
    ExperienceEstimate,
    RoleProfile,
    ScoreBreakdown,
    Skill,
)
from talentscan.contexts.analysis.defaults import (
    EDUCATION_SCORE_WITH_DEGREE,
    EDUCATION_SCORE_WITHOUT_DEGREE,
    EDUCATION_WEIGHT,
    EXPERIENCE_WEIGHT,
    MIN_SOFT_SKILLS,
    NAME_MAX_LENGTH,
    PROFICIENCY_RANGES,
    TECHNICAL_WEIGHT,
    UNKNOWN_CANDIDATE,
)
from talentscan.contexts.analysis.logger import _log_debug
from talentscan.contexts.analysis.patterns import (
    CERTIFICATION_MENTION,
    CERTIFICATION_TOKENS,
    DEGREE_TOKENS,
    MAX_STATED_YEARS,
    MAX_YEARS_DIGITS,
    YEARS_PER_DATE_RANGE,
    ExperiencePatterns,
)
from talentscan.contexts.analysis.roles import RoleCatalog, resolve_role
from talentscan.utils.timestamp import now


def analyze(
    resume_text: str,
    role_id: str,
    catalog: Optional[RoleCatalog] = None,
    rng: Optional[random.Random] = None,
) -> AnalysisResult:
    """
    Analyze resume text against a job role.

    Args:
        resume_text: Raw resume text (may be empty)
        role_id: Role identifier; unknown ids use the catalog's first role
        catalog: Role catalog to resolve against (default: built-in catalog)
        rng: Random source for skill proficiency values (default: module random)

    Returns:
        Immutable AnalysisResult

    Example:
        >>> result = analyze(text, "frontend")
        >>> result.role_title
        'Frontend Developer'
    """
    role = resolve_role(role_id, catalog)
    normalized_text = resume_text.lower()

    candidate_name = extract_candidate_name(resume_text)

    found_technical = find_keywords(normalized_text, role.technical_keywords)
    found_soft = find_keywords(normalized_text, role.soft_skill_keywords)
    skills = build_skills(found_technical, found_soft, rng)

    years = infer_experience_years(resume_text)
    relevance = experience_relevance(years, role.minimum_years)

    education = detect_education(resume_text)

    overall_score, breakdown = compute_scores(
        role, found_technical, found_soft, relevance, education
    )

    recommendations = generate_recommendations(
        role, found_technical, found_soft, years, normalized_text
    )

    _log_debug(
        f"Analyzed {len(resume_text)} chars against {role.id!r}: "
        f"{len(found_technical)}/{len(role.technical_keywords)} technical, "
        f"{len(found_soft)}/{len(role.soft_skill_keywords)} soft, "
        f"{years} years, score {overall_score}"
    )

    return AnalysisResult(
        id=str(uuid.uuid4()),
        created_at=now(),
        candidate_name=candidate_name,
        role_title=role.title,
        overall_score=overall_score,
        breakdown=breakdown,
        skills=skills,
        experience=ExperienceEstimate(
            years=years,
            relevance=math.floor(relevance),
            summary=f"{years} years of experience in related fields.",
        ),
        education=education,
        recommendations=recommendations,
        raw_text=resume_text,
    )


# =============================================================================
# EXTRACTION PASSES
# =============================================================================


def extract_candidate_name(text: str) -> str:
    """
    Take the trimmed first line as the candidate name.

    Resumes conventionally open with a name. A first line of NAME_MAX_LENGTH
    characters or more is probably a paragraph, and an empty one is nothing;
    both yield UNKNOWN_CANDIDATE.
    """
    first_line = text.split("\n")[0].strip()
    if 0 < len(first_line) < NAME_MAX_LENGTH:
        return first_line
    return UNKNOWN_CANDIDATE


def find_keywords(normalized_text: str, keywords: Sequence[str]) -> List[str]:
    """
    Return keywords contained in the text, in keyword order.

    Plain substring containment on lowercased text: no tokenization and no
    word boundaries, so "R" matches inside "frontend".

    Args:
        normalized_text: Lowercased resume text
        keywords: Catalog keywords (original casing is preserved in the output)
    """
    return [k for k in keywords if k.lower() in normalized_text]


def build_skills(
    found_technical: Sequence[str],
    found_soft: Sequence[str],
    rng: Optional[random.Random] = None,
) -> Tuple[Skill, ...]:
    """Create one Skill per found keyword, technical first, each with its own proficiency draw."""
    rng = rng or random
    skills = []
    for category, names in zip(SKILL_CATEGORIES, (found_technical, found_soft)):
        low, high = PROFICIENCY_RANGES[category]
        for name in names:
            skills.append(Skill(name=name, category=category, proficiency=rng.randint(low, high)))
    return tuple(skills)


def infer_experience_years(text: str) -> int:
    """
    Infer total years of experience.

    Tried in order, first signal wins:
    1. Largest N among "N year(s)" phrases
    2. Number of "YYYY - YYYY" / "YYYY - Present" ranges, two years each
    3. Zero
    """
    stated = [m.lstrip("0") or "0" for m in ExperiencePatterns.YEARS_PHRASE.findall(text)]
    if stated:
        # Compare as digit strings; int() refuses very long numbers
        largest = max(stated, key=lambda digits: (len(digits), digits))
        if len(largest) > MAX_YEARS_DIGITS:
            return MAX_STATED_YEARS
        return int(largest)

    date_ranges = ExperiencePatterns.DATE_RANGE.findall(text)
    if date_ranges:
        return len(date_ranges) * YEARS_PER_DATE_RANGE

    return 0


def experience_relevance(years: int, minimum_years: int) -> float:
    """Years as a percentage of the role minimum, capped at 100 (not floored)."""
    if years >= minimum_years:
        return 100
    return years / minimum_years * 100


def detect_education(text: str) -> EducationSummary:
    """
    Find degree and certification tokens in the raw text.

    Case-sensitive on purpose, so "AWS" does not fire on an incidental "aws".
    """
    return EducationSummary(
        degrees=tuple(token for token in DEGREE_TOKENS if token in text),
        certifications=tuple(token for token in CERTIFICATION_TOKENS if token in text),
    )


# =============================================================================
# SCORING
# =============================================================================


def compute_scores(
    role: RoleProfile,
    found_technical: Sequence[str],
    found_soft: Sequence[str],
    relevance: float,
    education: EducationSummary,
) -> Tuple[int, ScoreBreakdown]:
    """
    Compute the overall score and its breakdown.

    The skills breakdown averages technical and soft coverage, but the overall
    score weighs technical coverage alone:

        overall = floor(technical * 0.5 + relevance * 0.3 + education * 0.2)

    Returns:
        (overall_score, breakdown)
    """
    technical_score = len(found_technical) / len(role.technical_keywords) * 100
    soft_score = len(found_soft) / len(role.soft_skill_keywords) * 100
    education_score = (
        EDUCATION_SCORE_WITH_DEGREE if education.degrees else EDUCATION_SCORE_WITHOUT_DEGREE
    )

    overall_score = math.floor(
        technical_score * TECHNICAL_WEIGHT
        + relevance * EXPERIENCE_WEIGHT
        + education_score * EDUCATION_WEIGHT
    )

    breakdown = ScoreBreakdown(
        skills=math.floor((technical_score + soft_score) / 2),
        experience=math.floor(relevance),
        education=education_score,
    )
    return overall_score, breakdown


# =============================================================================
# RECOMMENDATIONS
# =============================================================================


def generate_recommendations(
    role: RoleProfile,
    found_technical: Sequence[str],
    found_soft: Sequence[str],
    years: int,
    normalized_text: str,
) -> Tuple[str, ...]:
    """
    Build the six recommendations, one per fixed slot.

    Slots: technical keywords, experience, certifications, soft skills,
    metrics (always), summary alignment (always).
    """
    if len(found_technical) < len(role.technical_keywords) / 2:
        missing = [k for k in role.technical_keywords if k not in found_technical][:2]
        technical = f"Add more technical keywords like {', '.join(missing)}."
    else:
        technical = "Great technical keyword density."

    if years < role.minimum_years:
        experience = (
            f"Highlight more relevant projects to compensate for {years} years of experience "
            f"(target: {role.minimum_years}+)."
        )
    else:
        experience = "Experience level meets or exceeds role requirements."

    if CERTIFICATION_MENTION not in normalized_text:
        certifications = "Consider adding industry-recognized certifications to boost credibility."
    else:
        certifications = "Good certification profile."

    if len(found_soft) < MIN_SOFT_SKILLS:
        soft = (
            "Elaborate more on soft skills like leadership or communication "
            "in your experience section."
        )
    else:
        soft = "Soft skills are well-represented."

    return (
        technical,
        experience,
        certifications,
        soft,
        "Quantify your achievements with more metrics (e.g., 'increased revenue by 20%').",
        "Ensure your summary section directly aligns with the specific job description.",
    )
