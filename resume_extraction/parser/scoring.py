"""Heuristic resume scoring and job-description skill matching."""

import re
from collections import Counter
from typing import List, Sequence, Tuple

from .models import ParsedResume, ResumeScore
from .skills import extract_skills


MAX_SKILLS_SCORE = 30
POINTS_PER_SKILL = 5
MAX_GRAMMAR_SCORE = 20
COMPLETENESS_POINTS = 5

# (minimum years, score) from most to least experienced
EXPERIENCE_BANDS = [(5, 25), (3, 20), (1, 15)]
DEFAULT_EXPERIENCE_SCORE = 5


def _skills_score(skills: Sequence[str]) -> int:
    return min(len(skills) * POINTS_PER_SKILL, MAX_SKILLS_SCORE)


def _experience_score(years: int) -> int:
    for min_years, score in EXPERIENCE_BANDS:
        if years >= min_years:
            return score
    return DEFAULT_EXPERIENCE_SCORE


def grammar_score(text: str) -> int:
    """Rough writing-quality score out of 20.

    Penalizes fragment sentences (fewer than three words), words longer than
    three letters used more than five times, and text with almost no
    capitalized words.
    """
    score = MAX_GRAMMAR_SCORE

    sentences = [s for s in re.split(r"[.!?]+", text) if s.strip()]
    fragments = [s for s in sentences if len(s.split()) < 3]
    score -= 2 * len(fragments)

    counts: Counter = Counter()
    for word in text.split():
        clean = re.sub(r"[^a-z]", "", word.lower())
        if len(clean) > 3:
            counts[clean] += 1
    score -= sum(1 for n in counts.values() if n > 5)

    if len(re.findall(r"\b[A-Z][a-z]+", text)) < 3:
        score -= 3

    return max(score, 0)


def _completeness_score(parsed: ParsedResume) -> int:
    present = [
        parsed.email,
        parsed.phone,
        parsed.skills,
        parsed.experience_years > 0,
        parsed.education,
    ]
    return COMPLETENESS_POINTS * sum(1 for field in present if field)


def match_job_skills(skills: Sequence[str], job_description: str) -> Tuple[List[str], int]:
    """Compare resume skills with the skills a job description asks for.

    A resume skill counts as matched when it contains, or is contained in,
    any skill found in the job description (case-insensitive).

    Args:
        skills: Canonical skills from the resume
        job_description: Free-text job description

    Returns:
        (matched skills in resume order, match percentage 0-100)
    """
    job_skills = [s.lower() for s in extract_skills(job_description)]
    if not job_skills:
        return [], 0

    matched = [
        skill for skill in skills
        if any(js in skill.lower() or skill.lower() in js for js in job_skills)
    ]
    # Several resume skills can hit the same job skill ("Java", "JavaScript")
    percentage = min(int(round(100.0 * len(matched) / len(job_skills))), 100)
    return matched, percentage


def score_resume(parsed: ParsedResume, text: str, job_description: str = "") -> ResumeScore:
    """Score a parsed resume out of 100.

    Args:
        parsed: Output of the resume parser
        text: The resume text the record was parsed from
        job_description: Optional job description for skill matching

    Returns:
        ResumeScore with the total and its breakdown
    """
    skills = _skills_score(parsed.skills)
    experience = _experience_score(parsed.experience_years)
    grammar = grammar_score(text or "")
    completeness = _completeness_score(parsed)

    matched: List[str] = []
    percentage = 0
    if job_description and job_description.strip():
        matched, percentage = match_job_skills(parsed.skills, job_description)

    return ResumeScore(
        total_score=min(skills + experience + grammar + completeness, 100),
        skills_score=skills,
        experience_score=experience,
        grammar_score=grammar,
        completeness_score=completeness,
        skill_match_percentage=percentage,
        matched_skills=matched,
    )
