"""Tests for the default observer configuration."""

from __future__ import annotations

import logging

import pytest

from planetarium_tools import config


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv(config.OBSERVER_LON_ENV, raising=False)
    monkeypatch.delenv(config.OBSERVER_LAT_ENV, raising=False)


def test_default_observer() -> None:
    """Without overrides the observer is at EPFL."""
    where = config.get_default_observer()
    assert where.lon_deg == pytest.approx(6.57)
    assert where.lat_deg == pytest.approx(46.52)


def test_environment_override(monkeypatch: pytest.MonkeyPatch) -> None:
    """Environment variables replace the built-in location."""
    monkeypatch.setenv(config.OBSERVER_LON_ENV, '-71.1')
    monkeypatch.setenv(config.OBSERVER_LAT_ENV, ' 42.36 ')
    where = config.get_default_observer()
    assert where.lon_deg == pytest.approx(-71.1)
    assert where.lat_deg == pytest.approx(42.36)


def test_unparsable_value_falls_back(
    monkeypatch: pytest.MonkeyPatch, caplog: pytest.LogCaptureFixture
) -> None:
    """A non-numeric value is logged and ignored."""
    monkeypatch.setenv(config.OBSERVER_LAT_ENV, 'north')
    with caplog.at_level(logging.WARNING, logger='planetarium_tools.config'):
        where = config.get_default_observer()
    assert where.lat_deg == pytest.approx(46.52)
    assert config.OBSERVER_LAT_ENV in caplog.text


@pytest.mark.parametrize('name, value', [
    (config.OBSERVER_LON_ENV, '180'),
    (config.OBSERVER_LAT_ENV, '90.5'),
])
def test_out_of_range_value_raises(monkeypatch: pytest.MonkeyPatch, name: str, value: str) -> None:
    """A numeric value outside the valid range is an error."""
    monkeypatch.setenv(name, value)
    with pytest.raises(ValueError):
        config.get_default_observer()
