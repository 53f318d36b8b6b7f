"""Pytest configuration and fixtures.

This file is automatically loaded by pytest and provides:
- Environment variable loading from .env
- Shared board fixtures for all tests
"""

from __future__ import annotations

from pathlib import Path

import pytest
from dotenv import load_dotenv

from scrabrules.core.board import Board


def pytest_configure(config):
    """Load environment variables from .env file."""
    env_file = Path(__file__).parent.parent / ".env"
    if env_file.exists():
        load_dotenv(env_file, override=False)


@pytest.fixture(autouse=True)
def _isolated_env(monkeypatch, tmp_path) -> None:
    """Config flags z .env nesmú ovplyvniť výsledky testov."""
    monkeypatch.delenv("SCRABRULES_STRICT_RACK", raising=False)
    monkeypatch.setenv("SCRABRULES_LOG_PATH", str(tmp_path / "scrabrules.log"))


@pytest.fixture
def board() -> Board:
    """Prázdna doska so štandardným rozložením prémií."""
    return Board.standard()


@pytest.fixture
def first_board() -> Board:
    """Doska po prvom ťahu FIRST na H8 vodorovne."""
    from scrabrules.core.command import parse_play_command
    from scrabrules.core.play import play_move

    return play_move(parse_play_command("FIRST h8 h"), Board.standard()).board
