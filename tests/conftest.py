"""Pytest configuration and shared fixtures."""

from __future__ import annotations

from collections.abc import Iterator

import pytest

from cirrus.cloud_settings.service import reset_cloud_settings_service


@pytest.fixture(autouse=True)
def _reset_cloud_settings_singleton() -> Iterator[None]:
    """Drop the shared cloud settings service around every test."""
    reset_cloud_settings_service()
    yield
    reset_cloud_settings_service()
