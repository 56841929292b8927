"""
Pytest configuration and fixtures
"""

import pytest

from resume_extraction.config import get_settings


SAMPLE_RESUME = """Priya Sharma
Senior Backend Engineer
priya.sharma92@gmail.com | +91 98765 43210
linkedin.com/in/priya-sharma | https://github.com/priyasharma

Summary
Backend engineer building APIs with Python, Django and PostgreSQL.

Work Experience
Software Engineer, Acme Technologies 2016 - 2019
Senior Engineer, Globex Solutions 2019 - present
Built Docker and Kubernetes deployments on AWS.

Education
B.Tech in Computer Science, 2012 - 2016

Skills
Python, Django, PostgreSQL, Docker, Kubernetes, AWS, Git

Languages
English, Hindi, Telugu
"""

FRESHER_RESUME = """CURRICULUM VITAE
rahul_verma07@example.com
Fresher looking for a role as a Java developer.
Completed 12th from City Public School.
"""


@pytest.fixture
def sample_resume():
    """A labelled resume with every field present"""
    return SAMPLE_RESUME


@pytest.fixture
def fresher_resume():
    """A resume with no name line and no dated work history"""
    return FRESHER_RESUME


@pytest.fixture(autouse=True)
def clear_settings_cache():
    """Settings are cached; reset around each test so env overrides apply"""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
