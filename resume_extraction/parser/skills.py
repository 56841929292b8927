"""Skills extraction from resume text."""

import logging
from typing import Dict, FrozenSet, Iterable, List, Tuple

from .similarity import can_reach, similarity


logger = logging.getLogger(__name__)


# Canonical skill names grouped by domain; output keeps this casing
SKILL_GROUPS: Dict[str, Tuple[str, ...]] = {
    "languages": (
        "Python", "Java", "JavaScript", "TypeScript", "C++", "C#", "Go", "Rust",
        "Ruby", "Kotlin", "Swift", "PHP", "SQL", "R", "Shell", "Bash",
    ),
    "web": (
        "HTML", "CSS", "React", "Next.js", "Vue.js", "Angular", "Svelte",
        "Tailwind CSS", "Bootstrap", "jQuery", "Django", "Flask", "FastAPI",
        "Express.js", "Node.js", "Spring Boot", "ASP.NET",
    ),
    "mobile": (
        "React Native", "Flutter", "SwiftUI", "Xamarin", "Android Development",
        "iOS Development",
    ),
    "databases": (
        "MySQL", "PostgreSQL", "MongoDB", "SQLite", "Firebase", "Redis",
        "Cassandra", "Elasticsearch", "Oracle Database",
    ),
    "data_science": (
        "NumPy", "Pandas", "Matplotlib", "Seaborn", "Scikit-learn", "TensorFlow",
        "Keras", "PyTorch", "OpenCV", "Statsmodels", "Plotly", "Dask",
    ),
    "machine_learning": (
        "Machine Learning", "Deep Learning", "Computer Vision",
        "Natural Language Processing", "Transformers", "LangChain", "LLMs",
        "Prompt Engineering", "Reinforcement Learning",
    ),
    "devops": (
        "Docker", "Kubernetes", "Terraform", "Ansible", "Git", "GitHub", "GitLab",
        "CI/CD", "Jenkins", "GitHub Actions", "Bitbucket", "SonarQube",
        "Prometheus", "Grafana", "New Relic",
    ),
    "cloud": (
        "AWS", "Amazon S3", "EC2", "Lambda", "CloudFormation", "Azure",
        "Azure DevOps", "Google Cloud Platform", "GCP", "Firebase", "Heroku",
        "DigitalOcean", "Netlify", "Vercel",
    ),
    "security": (
        "Penetration Testing", "Kali Linux", "Wireshark", "Metasploit",
        "Burp Suite", "OWASP", "Nmap", "Cryptography", "Network Security",
    ),
    "testing": (
        "Unit Testing", "Integration Testing", "Selenium", "JUnit", "Pytest",
        "TestNG", "Postman", "Cypress", "Load Testing",
    ),
    "backend": (
        "REST API", "GraphQL", "gRPC", "WebSockets", "Microservices",
        "Monolithic Architecture", "Message Queues", "RabbitMQ", "Kafka",
    ),
    "tools": (
        "VS Code", "IntelliJ", "PyCharm", "Jira", "Slack", "Notion", "Figma",
        "Trello", "Postman", "Zotero",
    ),
    "soft_skills": (
        "Agile", "Scrum", "Kanban", "Design Thinking", "System Design",
        "Requirement Analysis", "Software Architecture", "Technical Writing",
        "Code Review", "Version Control",
    ),
    "extras": (
        "Linux", "WSL", "API Integration", "Firebase Auth", "JWT", "OAuth2",
        "WebRTC", "Multithreading", "Data Structures", "Algorithms", "OOP",
        "Functional Programming",
    ),
}


def _flatten(groups: Dict[str, Tuple[str, ...]]) -> Tuple[str, ...]:
    """Flatten groups into one ordered tuple, first occurrence wins."""
    seen = set()
    ordered: List[str] = []
    for names in groups.values():
        for name in names:
            if name not in seen:
                seen.add(name)
                ordered.append(name)
    return tuple(ordered)


SKILL_VOCABULARY: Tuple[str, ...] = _flatten(SKILL_GROUPS)

# Function words that must never surface as skills
STOP_WORDS: FrozenSet[str] = frozenset({
    "a", "an", "the", "and", "or", "but", "if", "then", "else", "when", "where",
    "how", "what", "who", "why", "to", "in", "of", "for", "with", "on", "at",
    "by", "from", "up", "down", "over", "under", "this", "that", "be", "have",
    "do", "as", "am", "is", "are", "was", "were", "been", "being", "will",
    "would", "could", "should", "can", "may", "might", "must", "shall",
})

FUZZY_THRESHOLD = 0.85
MIN_TOKEN_LENGTH = 3


class SkillMatcher:
    """Match free text against a fixed skills vocabulary.

    Two passes run over the vocabulary:
    1. Exact: the skill's lower-cased form is a substring of the text.
    2. Fuzzy: similarity >= threshold against any whitespace token of at
       least three characters, or against the whole lower-cased text.

    Matches that are stop words or a single character are dropped.

    Usage:
        matcher = SkillMatcher()
        matcher.extract("Built services in Python and Kubernets")
        # ['Python', 'Kubernetes']
    """

    def __init__(
        self,
        vocabulary: Iterable[str] = SKILL_VOCABULARY,
        stop_words: FrozenSet[str] = STOP_WORDS,
        threshold: float = FUZZY_THRESHOLD,
    ):
        self.vocabulary: Tuple[str, ...] = tuple(vocabulary)
        self.stop_words = stop_words
        self.threshold = threshold
        self._lowered: Tuple[Tuple[str, str], ...] = tuple(
            (skill, skill.lower()) for skill in self.vocabulary
        )

    def extract(self, text: str) -> List[str]:
        """Extract canonical skill names from text.

        Args:
            text: Raw resume text

        Returns:
            Deduplicated skills, exact matches first, each pass in
            vocabulary order
        """
        if not text:
            return []

        text_lower = text.lower()
        found: Dict[str, None] = {}

        for skill, skill_lower in self._lowered:
            if skill_lower in text_lower:
                found[skill] = None

        tokens = [
            tok.lower() for tok in text.split() if len(tok) >= MIN_TOKEN_LENGTH
        ]
        for skill, skill_lower in self._lowered:
            if skill in found:
                continue
            if self._fuzzy_hit(skill_lower, tokens, text_lower):
                logger.debug(f"Fuzzy skill match: {skill}")
                found[skill] = None

        return [
            skill for skill in found
            if len(skill) > 1 and skill.lower() not in self.stop_words
        ]

    def _fuzzy_hit(self, skill_lower: str, tokens: List[str], text_lower: str) -> bool:
        """Check a skill against every token and the whole text."""
        if self._similar(skill_lower, text_lower):
            return True
        return any(self._similar(skill_lower, tok) for tok in tokens)

    def _similar(self, a: str, b: str) -> bool:
        if not can_reach(len(a), len(b), self.threshold):
            return False
        return similarity(a, b) >= self.threshold


_default_matcher = SkillMatcher()


def extract_skills(text: str) -> List[str]:
    """Extract skills from resume text using the built-in vocabulary.

    Args:
        text: Raw resume text

    Returns:
        List of canonical skill names (deduplicated, order preserved)
    """
    return _default_matcher.extract(text)
