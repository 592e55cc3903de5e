"""Shared pytest fixtures for the spur-context test suite."""

from __future__ import annotations

from pathlib import Path

import pytest

FIXTURES_DIR = Path(__file__).resolve().parent / "fixtures"


def read_fixture(name: str) -> str:
    return (FIXTURES_DIR / name).read_text(encoding="utf-8")


@pytest.fixture
def fixtures_dir() -> Path:
    return FIXTURES_DIR


@pytest.fixture
def vpn_json() -> str:
    return read_fixture("vpn_response.json")


@pytest.fixture
def end_to_end_json() -> str:
    return (
        '{"ip":"89.39.106.191","infrastructure":"DATACENTER",'
        '"as":{"number":49981,"organization":"WorldStream"},'
        '"risks":["TUNNEL","SPAM"],'
        '"tunnels":[{"type":"VPN","operator":"NordVPN","anonymous":true}]}'
    )
