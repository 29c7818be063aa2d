"""Shared test fixtures for miniprof tests."""

from datetime import UTC, datetime
from pathlib import Path

import pytest
from typer.testing import CliRunner

from miniprof.models import CustomTiming, Session, Timing
from miniprof.services import HostEnvironment

FIXED_NOW = datetime(2026, 1, 4, 12, 0, 0, tzinfo=UTC)


@pytest.fixture
def runner() -> CliRunner:
    """Create CLI test runner."""
    return CliRunner()


@pytest.fixture
def fixed_environment() -> HostEnvironment:
    """Host environment with a fixed host name and clock."""
    return HostEnvironment(machine_name=lambda: "web01", utcnow=lambda: FIXED_NOW)


@pytest.fixture
def request_session() -> Session:
    """Request (120.5ms) with one Query child carrying one sql timing."""
    query = Timing(
        name="Query",
        duration_milliseconds=45.25,
        custom_timings={
            "sql": [CustomTiming(command_string="SELECT 1", duration_milliseconds=45.25)]
        },
    )
    root = Timing(name="Request", duration_milliseconds=120.5, children=[query])
    return Session(name="/home", user="alice", root=root)


@pytest.fixture
def nested_session() -> Session:
    """Session whose tree checks pre-order and sibling order.

    root
      a
        a1
        a2
      b
        b1
          b1x
    """
    tree = Timing(
        name="root",
        duration_milliseconds=100,
        children=[
            Timing(
                name="a",
                duration_milliseconds=40,
                children=[
                    Timing(name="a1", duration_milliseconds=10),
                    Timing(name="a2", duration_milliseconds=20),
                ],
            ),
            Timing(
                name="b",
                duration_milliseconds=50,
                children=[
                    Timing(
                        name="b1",
                        duration_milliseconds=30,
                        children=[Timing(name="b1x", duration_milliseconds=5)],
                    )
                ],
            ),
        ],
    )
    return Session(root=tree)


@pytest.fixture
def session_file(tmp_path: Path, request_session: Session) -> Path:
    """Write request_session to a JSON file."""
    path = tmp_path / "session.json"
    path.write_text(request_session.model_dump_json(indent=2))
    return path

