"""
Integration tests for analyze(): full passes from resume text to AnalysisResult.
"""

import random
import uuid
from datetime import datetime

import pytest

from talentscan.contexts.analysis import analyze
from talentscan.contexts.analysis.defaults import SAMPLE_RESUME, UNKNOWN_CANDIDATE
from talentscan.contexts.analysis.patterns import MAX_STATED_YEARS
from talentscan.contexts.analysis.roles import list_roles


def _comparable(result):
    """to_dict() without the fields that change on every call."""
    data = result.to_dict()
    del data["id"]
    del data["created_at"]
    return data


@pytest.mark.integration
def test_sample_resume_frontend():
    result = analyze(SAMPLE_RESUME, "frontend", rng=random.Random(1))

    assert result.candidate_name == "Alex Johnson"
    assert result.role_title == "Frontend Developer"
    assert [s.name for s in result.technical_skills] == [
        "React",
        "TypeScript",
        "Tailwind",
        "Next.js",
        "CSS",
        "HTML",
        "JavaScript",
        "Redux",
    ]
    assert [s.name for s in result.soft_skills] == [
        "Communication",
        "Teamwork",
        "Problem Solving",
        "Agile",
    ]
    assert result.experience.years == 4
    assert result.experience.relevance == 100
    assert result.experience.summary == "4 years of experience in related fields."
    assert result.education.degrees == ("B.S.",)
    assert result.education.certifications == ()
    assert (result.breakdown.skills, result.breakdown.experience, result.breakdown.education) == (
        90,
        100,
        100,
    )
    assert result.overall_score == 90
    assert result.recommendations[:4] == (
        "Great technical keyword density.",
        "Experience level meets or exceeds role requirements.",
        "Consider adding industry-recognized certifications to boost credibility.",
        "Soft skills are well-represented.",
    )
    assert result.raw_text == SAMPLE_RESUME


@pytest.mark.integration
def test_years_phrase_example():
    text = "5 years of experience with React, TypeScript, and strong Communication and Teamwork."
    result = analyze(text, "frontend")

    assert result.experience.years == 5
    assert result.experience.relevance == 100
    assert result.breakdown.experience == 100
    assert {"React", "TypeScript"} <= {s.name for s in result.technical_skills}
    assert {"Communication", "Teamwork"} <= {s.name for s in result.soft_skills}
    # 2/10 technical, 2/4 soft, no degree
    assert result.breakdown.skills == 35
    assert result.breakdown.education == 50
    assert result.overall_score == 50
    assert result.recommendations[0] == "Add more technical keywords like Tailwind, Next.js."
    # The whole sentence is the first line and too long to be a name
    assert result.candidate_name == UNKNOWN_CANDIDATE


@pytest.mark.integration
def test_date_range_fallback_example():
    text = "Sam Lee\nDeveloper | 2019 - 2021\nLead Developer | 2021 - Present"
    result = analyze(text, "frontend")
    assert result.experience.years == 4
    assert result.experience.relevance == 100


@pytest.mark.integration
def test_degree_without_certification_example():
    text = "Pat Kim\nB.S. in Computer Science\nReact developer"
    result = analyze(text, "frontend")
    assert result.education.degrees == ("B.S.",)
    assert result.education.certifications == ()
    assert result.breakdown.education == 100
    assert result.recommendations[2] == (
        "Consider adding industry-recognized certifications to boost credibility."
    )

    with_mention = analyze(text + "\nPursuing certification in accessibility", "frontend")
    assert with_mention.recommendations[2] == "Good certification profile."


@pytest.mark.integration
@pytest.mark.parametrize("role_id", [r.id for r in list_roles()])
def test_empty_text(role_id):
    result = analyze("", role_id)

    assert result.candidate_name == UNKNOWN_CANDIDATE
    assert result.skills == ()
    assert result.experience.years == 0
    assert result.experience.relevance == 0
    assert result.education.degrees == ()
    assert result.education.certifications == ()
    assert (result.breakdown.skills, result.breakdown.experience, result.breakdown.education) == (
        0,
        0,
        50,
    )
    assert result.overall_score == 10
    assert len(result.recommendations) == 6


@pytest.mark.integration
@pytest.mark.parametrize("role_id", ["", "does-not-exist", "Frontend"])
def test_unknown_role_matches_first_role(role_id):
    fallback = analyze(SAMPLE_RESUME, role_id, rng=random.Random(5))
    default = analyze(SAMPLE_RESUME, "frontend", rng=random.Random(5))
    assert _comparable(fallback) == _comparable(default)


@pytest.mark.integration
def test_deterministic_apart_from_id_time_and_proficiency():
    first = analyze(SAMPLE_RESUME, "data-scientist")
    second = analyze(SAMPLE_RESUME, "data-scientist")

    assert first.id != second.id
    first_data, second_data = _comparable(first), _comparable(second)
    for data in (first_data, second_data):
        for skill in data["skills"]:
            del skill["proficiency"]
    assert first_data == second_data


@pytest.mark.integration
def test_identity_fields():
    result = analyze(SAMPLE_RESUME, "frontend")
    assert uuid.UUID(result.id).version == 4
    assert isinstance(result.created_at, datetime)
    assert result.created_at.tzinfo is not None


@pytest.mark.integration
def test_result_is_immutable():
    result = analyze(SAMPLE_RESUME, "frontend")
    with pytest.raises(AttributeError):
        result.overall_score = 100
    assert isinstance(result.skills, tuple)
    assert isinstance(result.recommendations, tuple)


@pytest.mark.integration
def test_single_letter_keyword_matches_inside_words():
    # "R" is found inside "Frontend" for the data scientist role
    result = analyze("Frontend work", "data-scientist")
    assert [s.name for s in result.skills] == ["R"]


@pytest.mark.integration
@pytest.mark.parametrize("seed", range(20))
def test_scores_within_bounds(seed):
    rng = random.Random(seed)
    role = rng.choice(list_roles())
    words = list(role.technical_keywords + role.soft_skill_keywords) + [
        "B.S.",
        "AWS",
        "certification",
        "2018 - 2020",
        f"{rng.randint(0, 40)} years",
        "filler",
    ]
    text = "Candidate\n" + " ".join(rng.sample(words, rng.randint(0, len(words))))
    result = analyze(text, role.id, rng=rng)

    assert 0 <= result.overall_score <= 100
    for value in (result.breakdown.skills, result.breakdown.experience, result.breakdown.education):
        assert 0 <= value <= 100
    assert 0 <= result.experience.relevance <= 100
    for skill in result.skills:
        assert 0 <= skill.proficiency <= 100
    assert len(result.recommendations) == 6


@pytest.mark.integration
def test_to_dict_from_dict():
    from talentscan.contexts.analysis import AnalysisResult

    result = analyze(SAMPLE_RESUME, "ux-designer")
    assert AnalysisResult.from_dict(result.to_dict()) == result


@pytest.mark.integration
@pytest.mark.parametrize("digits", [400, 5000])
def test_huge_stated_years(digits):
    result = analyze("Dana\n" + "9" * digits + " years of experience", "frontend")

    assert result.experience.relevance == 100
    assert result.breakdown.experience == 100
    expected_years = MAX_STATED_YEARS if digits == 5000 else int("9" * digits)
    assert result.experience.years == expected_years
    assert result.recommendations[1] == "Experience level meets or exceeds role requirements."
    assert result.experience.summary.endswith(" years of experience in related fields.")
