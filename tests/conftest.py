"""Shared fixtures for resume matcher tests."""

import logging

import pytest

from resume_match.logging.context import clear_log_context

SAMPLE_RESUME = """
Jane Doe - Senior Product Manager

Summary
Product manager with 8 years of experience leading agile teams and shipping
machine learning features for e-commerce platforms.

Experience
- Led a cross-functional scrum team of 12 engineers and designers
- Defined the product roadmap and strategy for recommendation systems
- Partnered with data science to launch ML-driven personalization
- Tracked KPIs and analytics dashboards in Looker; managed Jira backlogs

Skills
Agile, Scrum, Kanban, product strategy, roadmap planning, user experience,
SQL, analytics, stakeholder management, AWS
"""

SAMPLE_JOB = """
Product Owner - Personalization (Remote)

About the role
We are looking for a Product Owner to join our team and lead the roadmap for
our personalization platform. You will collaborate with engineering, design
and data science to deliver machine learning products to millions of customers.

Responsibilities
- Own the product backlog and run sprint planning with an agile scrum team
- Define metrics and analytics for experiments
- Work with stakeholders to prioritize the strategy

Requirements
- 5+ years of product management experience
- Experience with machine learning products and cloud platforms (AWS or GCP)
- Strong communication skills
"""


@pytest.fixture
def sample_resume_text():
    """A realistic product-manager resume."""
    return SAMPLE_RESUME


@pytest.fixture
def sample_job_text():
    """A realistic product-owner job posting (passes the job text pre-checks)."""
    return SAMPLE_JOB


@pytest.fixture(autouse=True)
def clean_log_context():
    """Clear logging context before and after each test."""
    clear_log_context()
    yield
    clear_log_context()


@pytest.fixture
def restore_root_logger():
    """Restore root logger handlers and level after tests that call configure_logging."""
    root_logger = logging.getLogger()
    handlers = list(root_logger.handlers)
    level = root_logger.level
    yield root_logger
    root_logger.handlers[:] = handlers
    root_logger.setLevel(level)


@pytest.fixture
def clean_env(monkeypatch):
    """Unset environment variables read by the matcher."""
    for name in ("RESUME_MATCH_CONFIG", "LOG_LEVEL", "LOG_FORMAT", "ENVIRONMENT"):
        monkeypatch.delenv(name, raising=False)
    return monkeypatch
