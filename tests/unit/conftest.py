"""Shared fixtures for llmlaunch unit tests."""

from __future__ import annotations

import pytest

from fakes import FakeRunner, RecordingDispatcher


@pytest.fixture
def runner() -> FakeRunner:
    return FakeRunner()


@pytest.fixture
def dispatcher() -> RecordingDispatcher:
    return RecordingDispatcher()
