"""Unit tests for the factor scoring functions and skill strategies."""

import pytest

from jobmatch.matching.scoring import (
    EMPLOYER_EXPERIENCE_REFERENCE,
    JOB_SEEKER_EXPERIENCE_REFERENCE,
    employer_experience_points,
    job_seeker_experience_points,
    salary_points,
    score_category,
    score_experience,
    score_languages,
    score_location,
    score_salary,
    score_skills,
)
from jobmatch.matching.strategies import (
    containment_match,
    exact_match,
    get_skill_matcher,
)


class TestSkillStrategies:
    """Tests for skill matching strategies."""

    def test_containment_both_directions(self):
        """Test that containment works either way round."""
        assert containment_match("node", ["node.js"]) is True
        assert containment_match("react native", ["react"]) is True

    def test_containment_is_permissive(self):
        """Test the known false positive: java covers javascript."""
        assert containment_match("java", ["javascript"]) is True

    def test_containment_no_match(self):
        """Test unrelated skills."""
        assert containment_match("sql", ["python", "django"]) is False

    def test_exact_match(self):
        """Test verbatim matching."""
        assert exact_match("java", ["javascript"]) is False
        assert exact_match("java", ["java", "kotlin"]) is True

    def test_get_skill_matcher(self):
        """Test strategy lookup by name."""
        assert get_skill_matcher("containment") is containment_match
        assert get_skill_matcher("exact") is exact_match

    def test_get_skill_matcher_unknown(self):
        """Test unknown strategy name."""
        with pytest.raises(ValueError, match="Unknown skill matching strategy"):
            get_skill_matcher("semantic")


class TestScoreSkills:
    """Tests for the skills factor."""

    def test_partial_match(self):
        """Test half of the required skills matched."""
        contribution = score_skills(["javascript", "react"], ["javascript", "node"], 40)

        assert contribution.score == 20
        assert contribution.details["matched"] == ["javascript"]
        assert contribution.details["matched_count"] == 1
        assert contribution.details["required_count"] == 2

    def test_case_insensitive(self):
        """Test that skills are compared lower-cased."""
        contribution = score_skills(["PYTHON"], ["Python"], 50)

        assert contribution.score == 50

    def test_fractional_score_kept(self):
        """Test that the raw score is not rounded."""
        contribution = score_skills(["python"], ["python", "sql", "docker"], 40)

        assert contribution.score == pytest.approx(40 / 3)

    def test_skipped_without_required_skills(self):
        """Test that no required skills means no skills factor."""
        assert score_skills(["python"], [], 40) is None

    def test_skipped_without_profile_skills(self):
        """Test that an empty profile skill list skips the factor."""
        assert score_skills([], ["python"], 40) is None

    def test_zero_weight_disables(self):
        """Test that a zero weight disables the factor."""
        assert score_skills(["python"], ["python"], 0) is None

    def test_custom_matcher(self):
        """Test that the strategy is pluggable."""
        loose = score_skills(["javascript"], ["java"], 40)
        strict = score_skills(["javascript"], ["java"], 40, matcher=exact_match)

        assert loose.score == 40
        assert strict.score == 0

    def test_monotonic_in_overlap(self):
        """Test that more overlap never lowers the score."""
        required = ["python", "sql", "docker", "aws"]
        profiles = [[], ["python"], ["python", "sql"], ["python", "sql", "docker"], required]
        scores = [
            (score_skills(p, required, 40).score if p else 0.0) for p in profiles
        ]

        assert scores == sorted(scores)


class TestExperienceTiers:
    """Tests for experience tier tables."""

    @pytest.mark.parametrize(
        "delta,points",
        [(0, 20), (2, 20), (3, 15), (5, 15), (6, 0), (-1, 10), (-2, 0)],
    )
    def test_job_seeker_tiers(self, delta, points):
        """Test job seeker experience tiers at their boundaries."""
        assert job_seeker_experience_points(delta) == points

    @pytest.mark.parametrize(
        "delta,points",
        [(0, 25), (3, 25), (4, 20), (15, 20), (-1, 15), (-2, 0)],
    )
    def test_employer_tiers(self, delta, points):
        """Test employer experience tiers at their boundaries."""
        assert employer_experience_points(delta) == points


class TestScoreExperience:
    """Tests for the experience factor."""

    def test_ideal_fit(self):
        """Test delta within the ideal band."""
        contribution = score_experience(
            3, 2, 20, job_seeker_experience_points, JOB_SEEKER_EXPERIENCE_REFERENCE
        )

        assert contribution.score == 20
        assert contribution.details == {"years": 3, "required_years": 2, "delta": 1}

    def test_zero_years_is_present(self):
        """Test that 0 years is scored rather than skipped."""
        contribution = score_experience(
            0, 0, 20, job_seeker_experience_points, JOB_SEEKER_EXPERIENCE_REFERENCE
        )

        assert contribution is not None
        assert contribution.score == 20

    def test_zero_points_still_listed(self):
        """Test that a large gap is listed with 0 points."""
        contribution = score_experience(
            0, 5, 20, job_seeker_experience_points, JOB_SEEKER_EXPERIENCE_REFERENCE
        )

        assert contribution.score == 0
        assert contribution.details["delta"] == -5

    @pytest.mark.parametrize("years,required", [(None, 2), (3, None), (None, None)])
    def test_skipped_when_missing(self, years, required):
        """Test that missing years skip the factor."""
        assert (
            score_experience(
                years, required, 20, job_seeker_experience_points, JOB_SEEKER_EXPERIENCE_REFERENCE
            )
            is None
        )

    def test_scaled_weight(self):
        """Test that a custom weight scales the tier points."""
        contribution = score_experience(
            4, 0, 50, employer_experience_points, EMPLOYER_EXPERIENCE_REFERENCE
        )

        # 20 of 25 points, scaled to a weight of 50
        assert contribution.score == 40


class TestScoreLocation:
    """Tests for the location factor."""

    def test_same_city(self):
        """Test exact city match."""
        contribution = score_location("Almaty", "Kazakhstan", "almaty", "Kazakhstan", False, 15)

        assert contribution.score == 15
        assert contribution.details["match_type"] == "same_city"

    def test_same_country(self):
        """Test country match when cities differ."""
        contribution = score_location("Astana", "Kazakhstan", "Almaty", "Kazakhstan", True, 15)

        assert contribution.score == 10
        assert contribution.details["match_type"] == "same_country"

    def test_remote(self):
        """Test remote fallback."""
        contribution = score_location("Berlin", "Germany", "Almaty", "Kazakhstan", True, 15)

        assert contribution.score == 15
        assert contribution.details == {"match_type": "remote"}

    def test_no_match(self):
        """Test that nothing matching means no entry."""
        assert score_location("Berlin", "Germany", "Almaty", "Kazakhstan", False, 15) is None

    def test_missing_values_do_not_match(self):
        """Test that two missing cities are not a city match."""
        assert score_location(None, None, None, None, False, 15) is None

    def test_country_tier_scaled(self):
        """Test that the country tier scales with the weight."""
        contribution = score_location(None, "KZ", None, "kz", False, 30)

        assert contribution.score == 20


class TestScoreSalary:
    """Tests for the salary factor."""

    @pytest.mark.parametrize(
        "ratio,points",
        [(1.0, 15), (1.3, 15), (1.31, 12), (3.0, 12), (0.99, 8), (0.8, 8), (0.79, 0)],
    )
    def test_salary_tiers(self, ratio, points):
        """Test salary tiers at their boundaries."""
        assert salary_points(ratio) == points

    def test_good_match(self):
        """Test ceiling slightly above the floor."""
        contribution = score_salary(500000, 600000, 15)

        assert contribution.score == 15
        assert contribution.details["ratio"] == pytest.approx(1.2)

    def test_listed_when_too_low(self):
        """Test that a low ceiling is listed with 0 points."""
        contribution = score_salary(1000, 500, 15)

        assert contribution.score == 0

    @pytest.mark.parametrize("floor,ceiling", [(None, 1000), (1000, None), (0, 1000)])
    def test_skipped(self, floor, ceiling):
        """Test missing amounts and a zero floor skip the factor."""
        assert score_salary(floor, ceiling, 15) is None

    def test_currency_mismatch_skipped(self):
        """Test that different currencies are not compared."""
        assert score_salary(1000, 1200, 15, "USD", "KZT") is None

    def test_currency_case_insensitive(self):
        """Test that currency codes are compared case-insensitively."""
        assert score_salary(1000, 1200, 15, "usd", "USD").score == 15

    def test_one_currency_missing_still_compared(self):
        """Test that a single missing currency does not block scoring."""
        assert score_salary(1000, 1200, 15, None, "USD").score == 15


class TestScoreCategory:
    """Tests for the category factor."""

    def test_preferred(self):
        """Test preferred category."""
        contribution = score_category("IT", ["it", "design"], 10)

        assert contribution.score == 10
        assert contribution.details == {"matched": "IT"}

    def test_not_preferred(self):
        """Test non-preferred category."""
        assert score_category("sales", ["it"], 10) is None

    def test_missing_category(self):
        """Test job without a category."""
        assert score_category(None, ["it"], 10) is None

    @pytest.mark.parametrize(
        "category,preferred",
        [("it", ["IT"]), ("Design", ["design"]), ("MARKETING", ["Marketing"])],
    )
    def test_case_ignored(self, category, preferred):
        """Test that category and preferences match regardless of case."""
        assert score_category(category, preferred, 10).score == 10


class TestScoreLanguages:
    """Tests for the languages factor."""

    def test_all_required_spoken(self):
        """Test all languages present."""
        contribution = score_languages(["english", "Russian"], ["English", "russian"], 10)

        assert contribution.score == 10
        assert contribution.details["matched"] == ["English", "russian"]

    def test_missing_language_gives_nothing(self):
        """Test that one missing language forfeits the factor."""
        assert score_languages(["English"], ["English", "Russian"], 10) is None

    def test_empty_requirement_awards_full_weight(self):
        """Test that a job requiring no languages is met by everyone."""
        contribution = score_languages(["English"], [], 10)

        assert contribution.score == 10
        assert contribution.details["matched"] == []

    def test_empty_requirement_without_spoken_languages(self):
        """Test that a candidate listing no languages still meets an empty requirement."""
        assert score_languages([], [], 10).score == 10

    def test_unstated_requirement_skipped(self):
        """Test that a job that never stated its languages skips the factor."""
        assert score_languages(["English"], None, 10) is None

    def test_zero_weight_disables(self):
        assert score_languages(["English"], [], 0) is None
