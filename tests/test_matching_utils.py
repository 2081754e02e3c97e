"""Tests for response payload and recommendation log helpers."""

from jobmatch.domain.models import Candidate, Opportunity, Profile
from jobmatch.matching import (
    FactorContribution,
    MatchResult,
    RankedMatch,
    assess_profile_completeness,
    build_candidate_recommendations_response,
    build_job_recommendations_response,
    build_match_payload,
    build_recommendation_log_entries,
)


def make_ranked(record, *scores):
    """Wrap a record with a result built from (factor, score) pairs."""
    factors = [FactorContribution(factor=name, score=score) for name, score in scores]
    return RankedMatch(record=record, result=MatchResult.from_factors(factors))


class TestBuildMatchPayload:
    """Tests for build_match_payload()."""

    def test_record_fields_and_annotation(self):
        """Test that the payload carries the record plus the match annotation."""
        job = Opportunity(id=3, title="Data Engineer", required_skills=["Python"])
        ranked = RankedMatch(
            record=job,
            result=MatchResult.from_factors(
                [FactorContribution(factor="skills", score=40.0, details={"matched_count": 1})]
            ),
        )

        payload = build_match_payload(ranked)

        assert payload["id"] == 3
        assert payload["title"] == "Data Engineer"
        assert payload["required_skills"] == ["Python"]
        assert payload["match_score"] == 40
        assert payload["match_percentage"] == 40
        assert payload["match_factors"] == [
            {"factor": "skills", "matched_count": 1, "score": 40.0}
        ]

    def test_extra_columns_kept(self):
        """Test that extra columns from the data layer survive."""
        job = Opportunity.model_validate({"job_id": 9, "company_name": "Acme"})

        payload = build_match_payload(make_ranked(job))

        assert payload["company_name"] == "Acme"
        assert payload["match_factors"] == []


class TestAssessProfileCompleteness:
    """Tests for assess_profile_completeness()."""

    def test_complete_profile(self, seeker_profile):
        summary = assess_profile_completeness(seeker_profile)

        assert summary == {"has_complete_profile": True, "missing_fields": []}

    def test_empty_profile(self):
        summary = assess_profile_completeness(Profile())

        assert summary["has_complete_profile"] is False
        assert summary["missing_fields"] == [
            "skills",
            "experience_years",
            "city",
            "country",
            "desired_salary_min",
            "preferred_categories",
        ]

    def test_zero_years_counts_as_present(self):
        """Test that 0 years of experience is a real value."""
        summary = assess_profile_completeness(Profile(skills=["sql"], experience_years=0))

        assert summary["has_complete_profile"] is True
        assert "experience_years" not in summary["missing_fields"]

    def test_skills_required_for_completeness(self):
        summary = assess_profile_completeness(Profile(experience_years=4))

        assert summary["has_complete_profile"] is False
        assert "skills" in summary["missing_fields"]


class TestResponses:
    """Tests for the response envelopes."""

    def test_job_recommendations(self, seeker_profile):
        ranked = [
            make_ranked(Opportunity(id=1), ("skills", 40.0)),
            make_ranked(Opportunity(id=2), ("skills", 20.0)),
        ]

        response = build_job_recommendations_response(seeker_profile, ranked)

        assert [r["id"] for r in response["recommendations"]] == [1, 2]
        assert response["user_profile"]["has_complete_profile"] is True

    def test_candidate_recommendations(self, backend_candidate):
        job = Opportunity(id=5, title="Backend Developer")

        response = build_candidate_recommendations_response(
            job, [make_ranked(backend_candidate, ("skills", 50.0))], total_candidates=12
        )

        assert response["job_title"] == "Backend Developer"
        assert response["total_candidates"] == 12
        assert response["candidates"][0]["current_position"] == "Backend Developer"
        assert response["candidates"][0]["match_score"] == 50

    def test_total_candidates_defaults_to_returned(self):
        ranked = [make_ranked(Candidate(id=i)) for i in range(3)]

        response = build_candidate_recommendations_response(Opportunity(), ranked)

        assert response["total_candidates"] == 3
        assert response["job_title"] is None


class TestRecommendationLogEntries:
    """Tests for build_recommendation_log_entries()."""

    def test_rows(self):
        ranked = [
            make_ranked(Opportunity(id=1), ("skills", 40.0), ("location", 15.0)),
            make_ranked(Opportunity(id=2), ("skills", 10.0)),
        ]

        rows = build_recommendation_log_entries(42, ranked)

        assert rows == [
            {"user_id": 42, "job_id": 1, "match_score": 55},
            {"user_id": 42, "job_id": 2, "match_score": 10},
        ]

    def test_records_without_id_skipped(self):
        ranked = [make_ranked(Opportunity()), make_ranked(Opportunity(id=8))]

        rows = build_recommendation_log_entries(42, ranked)

        assert [row["job_id"] for row in rows] == [8]

    def test_empty(self):
        assert build_recommendation_log_entries(42, []) == []
