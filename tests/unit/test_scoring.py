"""Unit tests for scoring and recommendation synthesis."""

import pytest

from talentscan.contexts.analysis.analysis_data_structure import EducationSummary, RoleProfile
from talentscan.contexts.analysis.analyzer import compute_scores, generate_recommendations

ROLE = RoleProfile(
    id="backend",
    title="Backend Developer",
    technical_keywords=("Python", "Django", "Redis", "Docker"),
    soft_skill_keywords=("Communication", "Ownership"),
    minimum_years=4,
)

NO_EDUCATION = EducationSummary()
WITH_DEGREE = EducationSummary(degrees=("B.S.",))


class TestComputeScores:

    @pytest.mark.unit
    def test_weighted_overall(self):
        # technical 50, relevance 50, education 100 -> 25 + 15 + 20
        overall, breakdown = compute_scores(
            ROLE, ["Python", "Django"], ["Ownership"], 50.0, WITH_DEGREE
        )
        assert overall == 60
        assert breakdown.skills == 50
        assert breakdown.experience == 50
        assert breakdown.education == 100

    @pytest.mark.unit
    def test_overall_uses_technical_score_only(self):
        # Soft coverage changes the skills breakdown but not the overall score
        low_soft, low_breakdown = compute_scores(ROLE, ["Python"], [], 0, NO_EDUCATION)
        high_soft, high_breakdown = compute_scores(
            ROLE, ["Python"], ["Communication", "Ownership"], 0, NO_EDUCATION
        )
        assert low_soft == high_soft == 22  # floor(12.5 + 0 + 10)
        assert low_breakdown.skills == 12
        assert high_breakdown.skills == 62

    @pytest.mark.unit
    def test_education_without_degree(self):
        _, breakdown = compute_scores(
            ROLE, [], [], 0, EducationSummary(certifications=("AWS",))
        )
        assert breakdown.education == 50

    @pytest.mark.unit
    def test_nothing_matched(self):
        overall, breakdown = compute_scores(ROLE, [], [], 0, NO_EDUCATION)
        assert overall == 10
        assert (breakdown.skills, breakdown.experience, breakdown.education) == (0, 0, 50)

    @pytest.mark.unit
    def test_everything_matched(self):
        overall, breakdown = compute_scores(
            ROLE, list(ROLE.technical_keywords), list(ROLE.soft_skill_keywords), 100, WITH_DEGREE
        )
        assert overall == 100
        assert (breakdown.skills, breakdown.experience, breakdown.education) == (100, 100, 100)

    @pytest.mark.unit
    def test_experience_breakdown_is_floored(self):
        _, breakdown = compute_scores(ROLE, [], [], 66.9, NO_EDUCATION)
        assert breakdown.experience == 66


class TestRecommendations:

    @pytest.mark.unit
    def test_always_six(self):
        recs = generate_recommendations(ROLE, [], [], 0, "")
        assert len(recs) == 6

    @pytest.mark.unit
    def test_all_gaps(self):
        recs = generate_recommendations(ROLE, ["Python"], [], 1, "python")
        assert recs[0] == "Add more technical keywords like Django, Redis."
        assert recs[1] == (
            "Highlight more relevant projects to compensate for 1 years of experience (target: 4+)."
        )
        assert recs[2] == (
            "Consider adding industry-recognized certifications to boost credibility."
        )
        assert recs[3] == (
            "Elaborate more on soft skills like leadership or communication "
            "in your experience section."
        )

    @pytest.mark.unit
    def test_all_strengths(self):
        recs = generate_recommendations(
            ROLE,
            ["Python", "Django"],
            ["Communication", "Ownership"],
            4,
            "aws certification holder",
        )
        assert recs[:4] == (
            "Great technical keyword density.",
            "Experience level meets or exceeds role requirements.",
            "Good certification profile.",
            "Soft skills are well-represented.",
        )

    @pytest.mark.unit
    def test_fixed_generic_slots(self):
        recs = generate_recommendations(ROLE, [], [], 0, "")
        assert recs[4] == (
            "Quantify your achievements with more metrics (e.g., 'increased revenue by 20%')."
        )
        assert recs[5] == (
            "Ensure your summary section directly aligns with the specific job description."
        )

    @pytest.mark.unit
    def test_half_technical_is_enough(self):
        # 2 of 4 is not below half
        recs = generate_recommendations(ROLE, ["Redis", "Docker"], [], 0, "")
        assert recs[0] == "Great technical keyword density."

    @pytest.mark.unit
    def test_missing_keywords_in_catalog_order(self):
        recs = generate_recommendations(ROLE, ["Django"], [], 0, "")
        assert recs[0] == "Add more technical keywords like Python, Redis."

    @pytest.mark.unit
    def test_certification_mention_is_case_insensitive(self):
        recs = generate_recommendations(ROLE, [], [], 0, "CERTIFICATIONS".lower())
        assert recs[2] == "Good certification profile."

    @pytest.mark.unit
    def test_certified_does_not_count_as_certification(self):
        recs = generate_recommendations(ROLE, [], [], 0, "aws certified developer")
        assert recs[2] == (
            "Consider adding industry-recognized certifications to boost credibility."
        )

    @pytest.mark.unit
    def test_single_soft_skill_is_not_enough(self):
        recs = generate_recommendations(ROLE, [], ["Ownership"], 0, "")
        assert recs[3].startswith("Elaborate more on soft skills")
