"""
Unit tests for vocabulary-based skill matching.
"""

from resume_extraction.parser.skills import (
    SKILL_GROUPS,
    SKILL_VOCABULARY,
    STOP_WORDS,
    SkillMatcher,
    extract_skills,
)


class TestVocabulary:

    def test_no_duplicates(self):
        assert len(SKILL_VOCABULARY) == len(set(SKILL_VOCABULARY))

    def test_size_and_groups(self):
        assert len(SKILL_VOCABULARY) > 140
        assert {"languages", "databases", "cloud", "security", "testing", "soft_skills"} <= set(SKILL_GROUPS)

    def test_first_occurrence_keeps_position(self):
        # Firebase is listed under databases and cloud
        assert SKILL_VOCABULARY.index("Firebase") < SKILL_VOCABULARY.index("NumPy")

    def test_stop_words_are_lowercase(self):
        assert all(w == w.lower() for w in STOP_WORDS)


class TestExtractSkills:

    def test_exact_substring_match(self):
        skills = extract_skills("Built dashboards with react.js")
        assert "React" in skills

    def test_multi_word_skill(self):
        assert "Machine Learning" in extract_skills("Applied machine learning to fraud data")

    def test_canonical_casing(self):
        skills = extract_skills("POSTGRESQL and mongodb")
        assert "PostgreSQL" in skills
        assert "MongoDB" in skills

    def test_fuzzy_token_match(self):
        assert "Kubernetes" in extract_skills("Deployed services with Kubernets")

    def test_fuzzy_javascript_typo(self):
        assert "JavaScript" in extract_skills("Frontend in Javascrpt")

    def test_fuzzy_match_against_whole_text(self):
        # Neither 3-letter token is close to 'django'; the full text is
        assert "Django" in extract_skills("Dja ngo")

    def test_exact_matches_precede_fuzzy(self):
        skills = extract_skills("Kubernets and Python")
        assert skills.index("Python") < skills.index("Kubernetes")

    def test_single_character_skill_dropped(self):
        skills = extract_skills("Statistics in R")
        assert "R" not in skills

    def test_no_duplicates_in_output(self):
        skills = extract_skills("Postman postman POSTMAN")
        assert skills.count("Postman") == 1

    def test_empty_text(self):
        assert extract_skills("") == []

    def test_unrelated_text(self):
        assert extract_skills("xyz") == []


class TestSkillMatcher:

    def test_stop_words_filtered(self):
        matcher = SkillMatcher(vocabulary=["the", "R", "Docker"])
        assert matcher.extract("The R and Docker") == ["Docker"]

    def test_custom_threshold(self):
        strict = SkillMatcher(vocabulary=["Kubernetes"], threshold=0.95)
        assert strict.extract("Kubernets") == []
        loose = SkillMatcher(vocabulary=["Kubernetes"], threshold=0.85)
        assert loose.extract("Kubernets") == ["Kubernetes"]

    def test_idempotent(self):
        matcher = SkillMatcher()
        text = "Python, Docker and Kubernets on AWS"
        assert matcher.extract(text) == matcher.extract(text)
