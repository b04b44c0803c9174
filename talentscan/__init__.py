"""
TalentScan - Rule-based resume suitability analysis

Scores free-text resume content against a target job-role profile and produces
a structured assessment: overall score, skills inventory, experience estimate,
education summary, and recommendations.

Architecture:
- Analysis Context: Role catalog, extraction passes, scoring, recommendations
- Reporting Context: Analysis history and plain-text reports
"""

__version__ = "0.1.0"
