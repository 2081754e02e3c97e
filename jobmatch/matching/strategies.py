"""Skill matching strategies.

A strategy decides whether one required skill is covered by a set of profile
skills. Both arguments are already lower-cased by the caller.

Strategies:
- containment: bidirectional substring containment. Permissive: "java" covers
  "javascript" and "react" covers "react native". This is the default.
- exact: the required skill must appear verbatim in the profile skills.
"""

from typing import Callable, Dict, Sequence

SkillMatcher = Callable[[str, Sequence[str]], bool]


def containment_match(required_skill: str, profile_skills: Sequence[str]) -> bool:
    """Match if the required skill contains, or is contained in, any profile skill.

    Args:
        required_skill: Lower-cased required skill
        profile_skills: Lower-cased profile skills

    Returns:
        True if any profile skill overlaps the required skill

    Example:
        >>> containment_match("node", ["node.js", "react"])
        True
    """
    for skill in profile_skills:
        if required_skill in skill or skill in required_skill:
            return True
    return False


def exact_match(required_skill: str, profile_skills: Sequence[str]) -> bool:
    """Match only if the required skill is listed verbatim.

    Example:
        >>> exact_match("java", ["javascript"])
        False
    """
    return required_skill in profile_skills


SKILL_MATCHERS: Dict[str, SkillMatcher] = {
    "containment": containment_match,
    "exact": exact_match,
}


def get_skill_matcher(name: str) -> SkillMatcher:
    """Look up a strategy by name.

    Raises:
        ValueError: If the name is not a known strategy
    """
    try:
        return SKILL_MATCHERS[name]
    except KeyError:
        raise ValueError(
            f"Unknown skill matching strategy: '{name}'. "
            f"Must be one of: {', '.join(sorted(SKILL_MATCHERS))}"
        ) from None
