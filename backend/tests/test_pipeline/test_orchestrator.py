"""Tests for the pipeline orchestrator."""

import pytest

from models.requests import ResumeInput
from models.responses import AnalysisResult
from services.pipeline.orchestrator import (
    analyze,
    extract_requirements,
    rank_resumes,
    rank_results,
)
from services.pipeline.stage_registry import get_stage


SCENARIO_JD = (
    "5 years of experience required. Bachelor's degree needed. "
    "Skills: react, node.js, aws, docker."
)

SCENARIO_RESUME = (
    "5 years experience with react and node.js, "
    "Bachelor of Science in Computer Science"
)

NO_SIGNAL_JD = "We need a motivated person to join us."

# One required skill, 5 years, master: a bachelor with 4 years scores 70/75/70 -> 72
TIE_JD = "Python engineer with 5 years of experience and a Master's degree."
TIE_RESUME_A = "4 years of experience writing Python. Bachelor of Arts in Mathematics."
TIE_RESUME_B = "4 years of experience building Python services. Bachelor of Science in Biology."
TOP_RESUME = "6 years of experience with Python. Master of Science in Physics."


class TestAnalyze:
    def test_empty_resumes(self, sample_jd):
        assert analyze([], sample_jd) == []

    def test_ranked_highest_first(self, sample_jd, sample_resumes):
        results = analyze(sample_resumes, sample_jd)

        assert [r.resume_id for r in results] == ["strong", "weak"]
        assert all(isinstance(r, AnalysisResult) for r in results)

    def test_strong_candidate(self, sample_jd, sample_resumes):
        strong = analyze(sample_resumes, sample_jd)[0]

        assert strong.file_name == "strong.txt"
        assert strong.skills_match == 100
        assert strong.experience_match == 95
        assert strong.education_match == 90
        assert strong.overall_score == 96
        assert strong.recommendation == "Excellent match - Priority candidate for interview"
        assert strong.key_strengths == [
            "Strong technical skill alignment",
            "Excellent experience level match",
            "Strong educational background",
            "Diverse technical skill set",
        ]
        assert strong.gaps == ["No significant gaps identified"]

    def test_weak_candidate(self, sample_jd, sample_resumes):
        weak = analyze(sample_resumes, sample_jd)[1]

        assert weak.skills_match == 0
        assert weak.experience_match == 40
        assert weak.education_match == 50
        assert weak.overall_score == 27
        assert weak.recommendation == "May not be suitable for this role"
        assert weak.key_strengths == ["Candidate shows potential"]
        assert len(weak.gaps) == 4

    def test_partial_skill_match(self):
        resume = ResumeInput(id="r1", file_name="r1.txt", content=SCENARIO_RESUME)
        [result] = analyze([resume], SCENARIO_JD)

        assert result.skills_match == 70
        assert result.experience_match == 90
        assert result.education_match == 90
        assert result.overall_score == 82
        assert result.recommendation == "Strong candidate - Recommend for interview"
        assert result.key_strengths == [
            "Excellent experience level match",
            "Strong educational background",
        ]
        assert result.gaps == ["Limited technical skill diversity"]

    def test_job_without_signals_uses_flat_scores(self):
        resume = ResumeInput(id="r1", content="Python and Docker, 10 years of experience")
        [result] = analyze([resume], NO_SIGNAL_JD)

        assert result.skills_match == 75
        assert result.experience_match == 80
        assert result.education_match == 85
        assert result.overall_score == 79

    def test_empty_resume_content(self, sample_jd):
        [result] = analyze([ResumeInput(id="blank")], sample_jd)
        assert result.skills_match == 0
        assert result.experience_match == 40
        assert result.education_match == 50

    def test_deterministic(self, sample_jd, sample_resumes):
        assert analyze(sample_resumes, sample_jd) == analyze(sample_resumes, sample_jd)

    def test_ties_keep_input_order(self, sample_jd):
        resumes = [
            ResumeInput(id=f"r{i}", file_name=f"r{i}.txt", content=SCENARIO_RESUME)
            for i in range(4)
        ]
        results = analyze(resumes, sample_jd)
        assert [r.resume_id for r in results] == ["r0", "r1", "r2", "r3"]

    def test_equal_scores_of_72_keep_input_order(self):
        resumes = [
            ResumeInput(id="tie_a", content=TIE_RESUME_A),
            ResumeInput(id="top", content=TOP_RESUME),
            ResumeInput(id="tie_b", content=TIE_RESUME_B),
        ]
        results = analyze(resumes, TIE_JD)

        assert [r.resume_id for r in results] == ["top", "tie_a", "tie_b"]
        assert [r.overall_score for r in results] == [84, 72, 72]
        tie_a, tie_b = results[1:]
        assert (tie_a.skills_match, tie_a.experience_match, tie_a.education_match) == (70, 75, 70)
        assert (tie_b.skills_match, tie_b.experience_match, tie_b.education_match) == (70, 75, 70)

        reversed_results = analyze(resumes[::-1], TIE_JD)
        assert [r.resume_id for r in reversed_results] == ["top", "tie_b", "tie_a"]

    def test_thread_pool_matches_inline(self, sample_jd, sample_resumes):
        resumes = sample_resumes + [
            ResumeInput(id=f"dup{i}", content=SCENARIO_RESUME) for i in range(3)
        ]
        assert analyze(resumes, sample_jd, workers=4) == analyze(resumes, sample_jd)

    def test_identifiers_carried_through(self, sample_jd, sample_resumes):
        results = analyze(sample_resumes, sample_jd)
        assert {(r.resume_id, r.file_name) for r in results} == {
            ("weak", "weak.txt"),
            ("strong", "strong.txt"),
        }


class TestRankResults:
    def test_descending_and_stable(self):
        results = [
            AnalysisResult(resume_id="a", overall_score=60),
            AnalysisResult(resume_id="b", overall_score=90),
            AnalysisResult(resume_id="c", overall_score=60),
            AnalysisResult(resume_id="d", overall_score=75),
        ]
        ranked = rank_results(results)
        assert [r.resume_id for r in ranked] == ["b", "d", "a", "c"]

    def test_does_not_mutate_input(self):
        results = [
            AnalysisResult(resume_id="a", overall_score=10),
            AnalysisResult(resume_id="b", overall_score=20),
        ]
        rank_results(results)
        assert [r.resume_id for r in results] == ["a", "b"]


class TestRankResumes:
    def test_requirements_extracted_once_and_reused(self, sample_jd, sample_resumes):
        requirements = extract_requirements(sample_jd)
        results = rank_resumes(sample_resumes, requirements)
        assert [r.resume_id for r in results] == ["strong", "weak"]

    def test_stages_loaded_on_use(self, sample_jd, sample_resumes):
        analyze(sample_resumes, sample_jd)
        for name in ("requirement_extractor", "resume_extractor", "dimension_scorer", "aggregator"):
            assert get_stage(name).is_ready

    @pytest.mark.parametrize("workers", [0, 1, 2, 8])
    def test_any_worker_count(self, sample_jd, sample_resumes, workers):
        requirements = extract_requirements(sample_jd)
        results = rank_resumes(sample_resumes, requirements, workers=workers)
        assert [r.overall_score for r in results] == [96, 27]
