"""
Analysis Context

Responsibilities:
- Holds the role catalog (job-role profiles used as scoring baselines)
- Extracts candidate name, skills, experience, and education from resume text
- Scores suitability and synthesizes recommendations

Owns: Role profiles, extraction heuristics, scoring weights, recommendation rules
Never: Stores results, renders reports, or performs I/O during analysis
"""

from talentscan.contexts.analysis.analysis_data_structure import (
    AnalysisResult,
    EducationSummary,
    ExperienceEstimate,
    RoleProfile,
    ScoreBreakdown,
    Skill,
)
from talentscan.contexts.analysis.analyzer import analyze
from talentscan.contexts.analysis.exceptions import RoleCatalogError
from talentscan.contexts.analysis.roles import (
    DEFAULT_CATALOG,
    RoleCatalog,
    list_roles,
    load_role_catalog,
    resolve_role,
)

__all__ = [
    "AnalysisResult",
    "EducationSummary",
    "ExperienceEstimate",
    "RoleProfile",
    "ScoreBreakdown",
    "Skill",
    "analyze",
    "RoleCatalogError",
    "DEFAULT_CATALOG",
    "RoleCatalog",
    "list_roles",
    "load_role_catalog",
    "resolve_role",
]
