"""Shared fixtures for calculator tests."""

import io
from typing import Tuple

import pytest

from va_compensation_calculator.console import ConsoleSession
from va_compensation_calculator.menu import MenuLoop
from va_compensation_calculator.store import ScenarioStore


@pytest.fixture
def store() -> ScenarioStore:
    return ScenarioStore()


@pytest.fixture
def run_menu():
    """Run the menu against scripted input; returns (status, output, store)."""

    def _run(script: str) -> Tuple[int, str, ScenarioStore]:
        stdout = io.StringIO()
        session_store = ScenarioStore()
        with ConsoleSession(io.StringIO(script), stdout) as console:
            status = MenuLoop(console, store=session_store).run()
        return status, stdout.getvalue(), session_store

    return _run
