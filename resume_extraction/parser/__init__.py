"""Resume Parser Module

A rule-based parser that recovers a structured candidate record from plain
resume text (already extracted from PDF/DOC/DOCX by an upstream converter).

Components:
    - models: ParsedResume record and supporting types
    - similarity: Normalized Levenshtein similarity
    - contact: Email, phone, and name extraction
    - links: LinkedIn and GitHub URL extraction
    - languages: Spoken language extraction
    - skills: Vocabulary-based skill matching (exact + fuzzy)
    - sections: Header-driven section scanner
    - education: Degree category classification
    - experience: Years-of-experience estimation
    - scoring: Resume score and job-description skill match
    - parser: Main parser facade

Usage:
    from resume_extraction.parser import ResumeParser, parse_resume_text

    # Using the class-based API
    parser = ResumeParser()
    result = parser.parse(text)
    print(result.email)
    print(result.skills)
    print(result.experience_years)

    # Using the function API
    data = parse_resume_text(text)
    print(data["experienceYears"])
"""

from .models import (
    EducationCategory,
    DateRange,
    ParsedResume,
    ResumeScore,
)

from .similarity import similarity

from .contact import (
    extract_email,
    extract_phone,
    extract_name,
)

from .links import extract_links, extract_linkedin, extract_github, SocialLinks

from .languages import extract_languages

from .skills import extract_skills, SkillMatcher, SKILL_VOCABULARY, STOP_WORDS

from .sections import find_section, SectionScanner

from .education import classify_education, classify_education_categories

from .experience import estimate_years, merge_date_ranges

from .scoring import score_resume, match_job_skills

from .parser import (
    ResumeParser,
    parse_resume,
    parse_resume_text,
)


__all__ = [
    # Models
    "EducationCategory",
    "DateRange",
    "ParsedResume",
    "ResumeScore",
    # Main parser
    "ResumeParser",
    "parse_resume",
    "parse_resume_text",
    # Individual extractors
    "similarity",
    "extract_email",
    "extract_phone",
    "extract_name",
    "extract_links",
    "extract_linkedin",
    "extract_github",
    "SocialLinks",
    "extract_languages",
    "extract_skills",
    "SkillMatcher",
    "SKILL_VOCABULARY",
    "STOP_WORDS",
    "find_section",
    "SectionScanner",
    "classify_education",
    "classify_education_categories",
    "estimate_years",
    "merge_date_ranges",
    # Scoring
    "score_resume",
    "match_job_skills",
]
