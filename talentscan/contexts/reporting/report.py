"""
Plain-text analysis reports.

Reads candidate_name, role_title, overall_score, breakdown, skills, education
and recommendations from an AnalysisResult; never inspects the resume text.
"""

import re

from talentscan.contexts.analysis.analysis_data_structure import AnalysisResult
from talentscan.utils.report_formatter import Column, TableFormatter

REPORT_TITLE = "TalentScan AI - Analysis Report"
REPORT_WIDTH = 72


def score_band(score: int) -> str:
    """Qualitative band for an overall score: strong (>80), moderate (>60), weak."""
    if score > 80:
        return "strong"
    if score > 60:
        return "moderate"
    return "weak"


def report_filename(result: AnalysisResult, extension: str = ".txt") -> str:
    """File name for a saved report, e.g. "Alex_Johnson_Analysis.txt"."""
    stem = re.sub(r"\s+", "_", result.candidate_name)
    return f"{stem}_Analysis{extension}"


def format_analysis_report(result: AnalysisResult) -> str:
    """
    Render an AnalysisResult as a plain-text report.

    Sections: header, score breakdown, skills, experience and education,
    recommendations.

    Args:
        result: AnalysisResult from analyze()

    Returns:
        Report text
    """
    report = TableFormatter(total_width=REPORT_WIDTH)

    report.add_section_header(REPORT_TITLE)
    report.add_key_value("Candidate", result.candidate_name)
    report.add_key_value("Role", result.role_title)
    report.add_key_value("Date", result.created_at.strftime("%Y-%m-%d"))
    report.add_key_value(
        "Overall Suitability Score", f"{result.overall_score}% ({score_band(result.overall_score)})"
    )
    report.add_blank_line()

    report.add_subheader("Score Breakdown")
    report.set_columns([Column("Component", 20), Column("Score", 8, ">")])
    report.add_table_header().add_separator()
    report.add_row(["Skills", f"{result.breakdown.skills}%"])
    report.add_row(["Experience", f"{result.breakdown.experience}%"])
    report.add_row(["Education", f"{result.breakdown.education}%"])
    report.add_blank_line()

    report.add_subheader("Skills Analysis")
    if result.skills:
        report.set_columns(
            [Column("Skill", 28), Column("Category", 12), Column("Proficiency", 12, ">")]
        )
        report.add_table_header().add_separator()
        for skill in result.skills:
            report.add_row([skill.name, skill.category, f"{skill.proficiency}%"])
    else:
        report.add_text("No role keywords found.")
    report.add_blank_line()

    report.add_subheader("Experience & Education")
    report.add_key_value("Years of experience", result.experience.years)
    report.add_key_value("Experience relevance", f"{result.experience.relevance}%")
    report.add_key_value("Degrees", ", ".join(result.education.degrees) or "None detected")
    report.add_key_value(
        "Certifications", ", ".join(result.education.certifications) or "None detected"
    )
    report.add_blank_line()

    report.add_subheader("Recommendations")
    report.add_numbered_list(result.recommendations)

    return report.render()
