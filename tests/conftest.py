"""
Shared test fixtures.

Every test runs in an empty working directory with a private HOME and no
CARDFILTER_* environment variables, so configuration lookups never pick up
files or settings from the developer machine.
"""

import os

import pytest

from cardfilter.cards import Card, sample_cards


@pytest.fixture(autouse=True)
def isolated_environment(tmp_path, monkeypatch):
    """Run each test in a clean directory and environment."""
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("HOME", str(tmp_path))
    monkeypatch.delenv("XDG_CONFIG_HOME", raising=False)
    for name in list(os.environ):
        if name.startswith("CARDFILTER_"):
            monkeypatch.delenv(name)
    return tmp_path


@pytest.fixture
def cards():
    """The five-card sample dataset."""
    return sample_cards()


@pytest.fixture
def make_card():
    """Factory for single cards with sensible defaults."""

    def _make_card(cost: float = 10.0, version: int = 1, leader_id: int = 0, card_id: int = 0) -> Card:
        return Card(id=card_id, name=f"Card{card_id}", cost=cost, version=version, leader_id=leader_id)

    return _make_card
