"""
Reporting Context

Responsibilities:
- Keeps a bounded history of recent analysis results
- Formats analysis results as plain-text reports

Owns: History storage, report layout
Never: Computes scores or inspects resume text
"""

from talentscan.contexts.reporting.history import HISTORY_LIMIT, AnalysisHistory
from talentscan.contexts.reporting.report import (
    format_analysis_report,
    report_filename,
    score_band,
)

__all__ = [
    "HISTORY_LIMIT",
    "AnalysisHistory",
    "format_analysis_report",
    "report_filename",
    "score_band",
]
