"""
Pytest configuration for the GrindBreaker tests.
"""
import json
import os
import sys
from unittest.mock import MagicMock

import pytest

# No daily log files from test runs
os.environ.setdefault("LOG_DIR", "off")

sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

from grindbreaker.models import Candidacy, CandidacyStatus, CandidacyStep  # noqa: E402
from grindbreaker.repositories.base import (  # noqa: E402
    CandidacyRepositoryBase,
    ProfileRepositoryBase,
)


@pytest.fixture
def data_dir(tmp_path):
    """Fresh data directory per test"""
    return tmp_path / "GrindBreaker"


@pytest.fixture
def mock_host():
    """Fixture to create a mock window host"""
    return MagicMock()


@pytest.fixture
def mock_profile_repository():
    return MagicMock(spec=ProfileRepositoryBase)


@pytest.fixture
def mock_candidacy_repository():
    return MagicMock(spec=CandidacyRepositoryBase)


@pytest.fixture
def reply(mock_host):
    """Return the single (request_id, result_type, envelope) sent to the host"""

    def _reply():
        mock_host.return_.assert_called_once()
        request_id, result_type, body = mock_host.return_.call_args.args
        return request_id, result_type, json.loads(body)

    return _reply


@pytest.fixture
def make_candidacy():
    def _make(**overrides):
        fields = {
            "company": "Acme Corp",
            "title": "Backend Engineer",
            "job_link": "https://example.com/jobs/42",
            "job_description": "Python, APIs, storage.",
            "date_applied": 1640995200,
            "status": CandidacyStatus.Applied,
            "application_steps": [
                CandidacyStep(type="Application Submitted", date=1640995200, notes="Applied online"),
                CandidacyStep(type="Phone Interview", date=1641081600, notes="Initial screening"),
                CandidacyStep(type="Technical Interview", date=1641168000),
            ],
        }
        fields.update(overrides)
        return Candidacy(**fields)

    return _make
