from services.skill_vocabulary import (
    JOB_SKILLS,
    RESUME_ONLY_SKILLS,
    RESUME_SKILLS,
    find_skills,
    skill_terms,
)


def test_resume_vocabulary_is_superset():
    assert set(JOB_SKILLS) <= set(RESUME_SKILLS)
    assert "leadership" in RESUME_SKILLS
    assert "leadership" not in JOB_SKILLS


def test_resume_only_terms_follow_job_terms():
    assert list(RESUME_SKILLS) == list(JOB_SKILLS) + list(RESUME_ONLY_SKILLS)


def test_every_term_is_lowercase_and_categorized():
    for term, category in RESUME_SKILLS.items():
        assert term == term.lower()
        assert category


def test_find_skills_keeps_vocabulary_order():
    text = "Docker, then Python, then React"
    assert find_skills(text, JOB_SKILLS) == ["react", "python", "docker"]


def test_find_skills_is_substring_based():
    # "java" inside "javascript" counts as a match
    assert find_skills("JavaScript only", JOB_SKILLS) == ["javascript", "java"]


def test_find_skills_case_insensitive():
    assert find_skills("KUBERNETES", JOB_SKILLS) == ["kubernetes"]


def test_find_skills_no_duplicates():
    assert find_skills("redis redis redis", JOB_SKILLS) == ["redis"]


def test_find_skills_soft_skills_on_resume_only():
    text = "Known for leadership and teamwork"
    assert find_skills(text, JOB_SKILLS) == []
    assert find_skills(text, RESUME_SKILLS) == ["leadership", "teamwork"]


def test_find_skills_empty_text():
    assert find_skills("", RESUME_SKILLS) == []


def test_vocabulary_sizes():
    assert len(JOB_SKILLS) == 40
    assert len(RESUME_ONLY_SKILLS) == 9
    assert len(RESUME_SKILLS) == 49


def test_job_vocabulary_bounds():
    terms = list(JOB_SKILLS)
    assert terms[0] == "javascript"
    assert terms[-1] == "teams"


def test_skill_terms_normalizes():
    assert skill_terms(["React", " react ", "", "FastAPI", "react"]) == ("react", "fastapi")


def test_skill_terms_keeps_vocabulary_order():
    assert skill_terms(JOB_SKILLS) == tuple(JOB_SKILLS)
