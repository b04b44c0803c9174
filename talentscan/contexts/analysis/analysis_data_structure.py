"""
Analysis data structures for the Analysis context.

Provides the role profile used as a scoring baseline and the immutable
AnalysisResult aggregate produced by one call to analyze().
"""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Dict, Tuple

SKILL_CATEGORIES = ("technical", "soft")


@dataclass(frozen=True)
class RoleProfile:
    """
    Job-role baseline: keywords to look for and the experience threshold.

    Attributes:
        id: Unique catalog key (e.g., "frontend")
        title: Display name (e.g., "Frontend Developer")
        technical_keywords: Technical keywords in catalog order
        soft_skill_keywords: Soft-skill keywords in catalog order
        minimum_years: Years of experience that count as 100% relevance
    """

    id: str
    title: str
    technical_keywords: Tuple[str, ...]
    soft_skill_keywords: Tuple[str, ...]
    minimum_years: int


@dataclass(frozen=True)
class Skill:
    """A role keyword found in the resume text."""

    name: str
    category: str  # "technical" or "soft"
    proficiency: int

    def to_dict(self) -> Dict[str, Any]:
        return {"name": self.name, "category": self.category, "proficiency": self.proficiency}

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Skill":
        return cls(
            name=data["name"],
            category=data["category"],
            proficiency=int(data["proficiency"]),
        )


@dataclass(frozen=True)
class ExperienceEstimate:
    years: int
    relevance: int
    summary: str


@dataclass(frozen=True)
class EducationSummary:
    """Degree and certification vocabulary tokens found in the resume."""

    degrees: Tuple[str, ...] = ()
    certifications: Tuple[str, ...] = ()


@dataclass(frozen=True)
class ScoreBreakdown:
    """Sub-scores shown next to the overall score, each in [0, 100]."""

    skills: int
    experience: int
    education: int


@dataclass(frozen=True)
class AnalysisResult:
    """
    Suitability assessment of one resume against one role.

    Created atomically by analyze() and never mutated afterwards. Ownership
    belongs to whatever collection the caller keeps (see reporting.history).

    Attributes:
        id: Unique identifier generated per analysis
        created_at: Timezone-aware generation time
        candidate_name: First line of the resume, or "Unknown Candidate"
        role_title: Display title of the role the resume was scored against
        overall_score: Weighted score in [0, 100]
        breakdown: Skills / experience / education sub-scores
        skills: Matched technical skills followed by matched soft skills
        experience: Inferred years and relevance
        education: Degree and certification tokens
        recommendations: Exactly six suggestions in fixed order
        raw_text: Original resume text
    """

    id: str
    created_at: datetime
    candidate_name: str
    role_title: str
    overall_score: int
    breakdown: ScoreBreakdown
    skills: Tuple[Skill, ...]
    experience: ExperienceEstimate
    education: EducationSummary
    recommendations: Tuple[str, ...]
    raw_text: str = field(repr=False)

    @property
    def technical_skills(self) -> Tuple[Skill, ...]:
        return tuple(s for s in self.skills if s.category == "technical")

    @property
    def soft_skills(self) -> Tuple[Skill, ...]:
        return tuple(s for s in self.skills if s.category == "soft")

    # =========================================================================
    # SERIALIZATION
    # =========================================================================

    def to_dict(self) -> Dict[str, Any]:
        """Convert to a JSON-compatible dict."""
        return {
            "id": self.id,
            "created_at": self.created_at.isoformat(),
            "candidate_name": self.candidate_name,
            "role_title": self.role_title,
            "overall_score": self.overall_score,
            "breakdown": {
                "skills": self.breakdown.skills,
                "experience": self.breakdown.experience,
                "education": self.breakdown.education,
            },
            "skills": [s.to_dict() for s in self.skills],
            "experience": {
                "years": self.experience.years,
                "relevance": self.experience.relevance,
                "summary": self.experience.summary,
            },
            "education": {
                "degrees": list(self.education.degrees),
                "certifications": list(self.education.certifications),
            },
            "recommendations": list(self.recommendations),
            "raw_text": self.raw_text,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "AnalysisResult":
        """
        Rebuild a result from to_dict() output.

        Raises:
            KeyError: If a required field is missing
            ValueError: If created_at is not an ISO 8601 timestamp
        """
        breakdown = data["breakdown"]
        experience = data["experience"]
        education = data["education"]
        return cls(
            id=data["id"],
            created_at=datetime.fromisoformat(data["created_at"]),
            candidate_name=data["candidate_name"],
            role_title=data["role_title"],
            overall_score=int(data["overall_score"]),
            breakdown=ScoreBreakdown(
                skills=int(breakdown["skills"]),
                experience=int(breakdown["experience"]),
                education=int(breakdown["education"]),
            ),
            skills=tuple(Skill.from_dict(s) for s in data["skills"]),
            experience=ExperienceEstimate(
                years=int(experience["years"]),
                relevance=int(experience["relevance"]),
                summary=experience["summary"],
            ),
            education=EducationSummary(
                degrees=tuple(education["degrees"]),
                certifications=tuple(education["certifications"]),
            ),
            recommendations=tuple(data["recommendations"]),
            raw_text=data["raw_text"],
        )
