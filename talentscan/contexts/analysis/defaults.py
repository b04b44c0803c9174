"""
Default values for TalentScan analysis.

Provides shared defaults used by:
- roles.py (built-in role catalog, same shape as a YAML catalog entry)
- analyzer.py (name heuristic, proficiency ranges, scoring weights)
- scripts/analyze_resume.py (sample resume)
"""

from typing import Any, Dict, List

# Built-in role catalog. The first entry is the fallback for unknown role ids.
DEFAULT_ROLE_DEFINITIONS: List[Dict[str, Any]] = [
    {
        "id": "frontend",
        "title": "Frontend Developer",
        "keywords": [
            "React",
            "TypeScript",
            "Tailwind",
            "Next.js",
            "Vite",
            "CSS",
            "HTML",
            "JavaScript",
            "Redux",
            "Testing Library",
        ],
        "soft_skills": ["Communication", "Teamwork", "Problem Solving", "Agile"],
        "min_years": 3,
    },
    {
        "id": "data-scientist",
        "title": "Data Scientist",
        "keywords": [
            "Python",
            "R",
            "SQL",
            "Machine Learning",
            "Pandas",
            "NumPy",
            "Scikit-learn",
            "TensorFlow",
            "PyTorch",
            "Statistics",
        ],
        "soft_skills": ["Analytical Thinking", "Data Storytelling", "Curiosity"],
        "min_years": 2,
    },
    {
        "id": "product-manager",
        "title": "Product Manager",
        "keywords": [
            "Roadmap",
            "Agile",
            "Scrum",
            "User Stories",
            "Stakeholder Management",
            "Market Research",
            "KPIs",
            "Product Discovery",
        ],
        "soft_skills": ["Leadership", "Strategic Thinking", "Empathy", "Negotiation"],
        "min_years": 5,
    },
    {
        "id": "ux-designer",
        "title": "UX Designer",
        "keywords": [
            "Figma",
            "Adobe XD",
            "User Research",
            "Wireframing",
            "Prototyping",
            "Design Systems",
            "Accessibility",
            "Interaction Design",
        ],
        "soft_skills": ["Creativity", "User Centricity", "Collaboration"],
        "min_years": 3,
    },
]

# Candidate name heuristic
UNKNOWN_CANDIDATE = "Unknown Candidate"
NAME_MAX_LENGTH = 50  # First lines this long or longer are not names

# Inclusive proficiency ranges per skill category
PROFICIENCY_RANGES = {
    "technical": (70, 99),
    "soft": (80, 99),
}

# Overall score weights
TECHNICAL_WEIGHT = 0.5
EXPERIENCE_WEIGHT = 0.3
EDUCATION_WEIGHT = 0.2

# Education score with and without a degree token
EDUCATION_SCORE_WITH_DEGREE = 100
EDUCATION_SCORE_WITHOUT_DEGREE = 50

# Soft skills needed before they count as well represented
MIN_SOFT_SKILLS = 2

SAMPLE_RESUME = """Alex Johnson
alex.johnson@email.com | 555-0123 | San Francisco, CA

SUMMARY
Experienced Frontend Developer with 4 years of expertise in building scalable web applications using React and TypeScript. Passionate about clean code and user-centric design.

EXPERIENCE
Senior Frontend Engineer | TechFlow Solutions | 2021 - Present
- Led the migration of a legacy dashboard to Next.js, improving load times by 40%.
- Implemented a comprehensive design system using Tailwind CSS.
- Mentored junior developers and conducted code reviews.

Web Developer | Creative Pulse | 2019 - 2021
- Developed responsive websites for various clients using JavaScript and CSS.
- Collaborated with UX designers to implement pixel-perfect interfaces.

EDUCATION
B.S. in Computer Science | University of California, Berkeley | 2015 - 2019

SKILLS
Technical: React, TypeScript, Next.js, Tailwind CSS, Redux, Jest, HTML5, CSS3, Git
Soft: Communication, Teamwork, Problem Solving, Agile Methodologies"""
