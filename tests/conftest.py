"""Pytest configuration and shared fixtures."""

from datetime import datetime, timezone
from pathlib import Path

import pytest
import yaml

from buildinfo.builder import BuildInfoBuilder
from buildinfo.core.config import BuilderSettings
from buildinfo.models import Artifact, Module

STARTED = "2024-01-01T00:00:00.000+0000"
STARTED_DATE = datetime(2024, 1, 1, tzinfo=timezone.utc)
STARTED_MILLIS = 1704067200000


@pytest.fixture
def builder_settings() -> BuilderSettings:
    """Builder settings pinned to UTC so naive datetimes are deterministic."""
    return BuilderSettings(timezone="UTC", json_indent=2)


@pytest.fixture
def builder(builder_settings: BuilderSettings) -> BuildInfoBuilder:
    """Create a builder with every required field set.

    Args:
        builder_settings: Builder settings fixture.

    Returns:
        BuildInfoBuilder ready to build().
    """
    return BuildInfoBuilder("app", settings=builder_settings).number("17").started(STARTED)


@pytest.fixture
def sample_module() -> Module:
    """Create a module with one artifact."""
    return Module(
        id="org.acme:app:1.0",
        type="maven",
        artifacts=[Artifact(name="app-1.0.jar", type="jar", sha1="a1b2c3")],
    )


@pytest.fixture
def write_description(tmp_path: Path):
    """Return a helper that writes a YAML build description to disk.

    Args:
        tmp_path: pytest temporary directory.

    Returns:
        Callable taking a mapping and returning the written file path.
    """

    def _write(data: dict, name: str = "build.yaml") -> Path:
        path = tmp_path / name
        path.write_text(yaml.safe_dump(data, sort_keys=False), encoding="utf-8")
        return path

    return _write
