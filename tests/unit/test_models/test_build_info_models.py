"""Tests for build-info data models."""

import json
from datetime import datetime, timedelta, timezone
from zoneinfo import ZoneInfo

import pytest
from pydantic import ValidationError

from buildinfo.builder import BuildInfoBuilder
from buildinfo.models import (
    Agent,
    Artifact,
    BuildInfo,
    BuildRetention,
    Dependency,
    Issue,
    Issues,
    Module,
    PromotionStatus,
    format_started,
    parse_started,
    to_millis,
)


class TestStartedFormat:
    """Tests for started timestamp helpers."""

    def test_format_aware(self) -> None:
        """Test formatting keeps the datetime's own offset."""
        date = datetime(2024, 3, 5, 7, 8, 9, 10000, tzinfo=timezone(timedelta(hours=5, minutes=30)))
        assert format_started(date) == "2024-03-05T07:08:09.010+0530"

    def test_format_naive_with_zone(self) -> None:
        """Test formatting a naive datetime in a given zone."""
        assert format_started(datetime(2024, 1, 1), timezone.utc) == "2024-01-01T00:00:00.000+0000"

    @pytest.mark.parametrize(
        ("offset", "expected"),
        [
            (timedelta(minutes=19, seconds=32), "+0019"),
            (-timedelta(hours=3, minutes=30, seconds=10), "-0330"),
            (-timedelta(seconds=59), "+0000"),
        ],
    )
    def test_offset_with_seconds_truncated(self, offset: timedelta, expected: str) -> None:
        """Test that offsets carrying seconds render as whole minutes."""
        date = datetime(1890, 6, 1, 12, 0, tzinfo=timezone(offset))

        started = format_started(date)

        assert started == f"1890-06-01T12:00:00.000{expected}"
        assert parse_started(started).utcoffset() == timedelta(minutes=int(offset / timedelta(minutes=1)))

    def test_lmt_zone_offset(self) -> None:
        """Test a historical zone whose local mean time offset has seconds."""
        amsterdam = ZoneInfo("Europe/Amsterdam")

        started = format_started(datetime(1890, 6, 1, 12, 0), amsterdam)

        assert started.startswith("1890-06-01T12:00:00.000+00")
        assert len(started) == len("1890-06-01T12:00:00.000+0019")
        parse_started(started)

    def test_parse(self) -> None:
        """Test parsing a started timestamp."""
        parsed = parse_started("2024-01-01T00:00:00.500+0000")

        assert parsed == datetime(2024, 1, 1, 0, 0, 0, 500000, tzinfo=timezone.utc)
        assert to_millis(parsed) == 1704067200500

    def test_parse_invalid(self) -> None:
        """Test that other formats are rejected."""
        with pytest.raises(ValueError):
            parse_started("2024-01-01 00:00:00")

    def test_to_millis_before_epoch(self) -> None:
        """Test millis for instants before 1970."""
        assert to_millis(datetime(1969, 12, 31, 23, 59, 59, tzinfo=timezone.utc)) == -1000


class TestBuildInfo:
    """Tests for the BuildInfo record."""

    @pytest.fixture
    def build_info(self, builder: BuildInfoBuilder, sample_module: Module) -> BuildInfo:
        return (
            builder.project("proj")
            .started_millis(1704067200000)
            .agent(Agent(name="Jenkins", version="2.440"))
            .artifactory_principal("deployer")
            .add_module(sample_module)
            .add_property("buildInfo.env.CI", "true")
            .build_retention(BuildRetention(count=3))
            .build()
        )

    def test_json_uses_camel_case(self, build_info: BuildInfo) -> None:
        """Test the wire names of the rendered document."""
        document = json.loads(build_info.to_json())

        assert document["artifactoryPrincipal"] == "deployer"
        assert document["buildRetention"]["deleteBuildArtifacts"] is False
        assert document["buildRetention"]["buildNumbersNotToBeDiscarded"] == []
        assert document["modules"][0]["artifacts"][0]["name"] == "app-1.0.jar"
        assert document["properties"] == {"buildInfo.env.CI": "true"}

    def test_json_omits_transport_fields_and_none(self, build_info: BuildInfo) -> None:
        """Test that project, startedMillis and unset fields are not rendered."""
        document = json.loads(build_info.to_json())

        assert "project" not in document
        assert "startedMillis" not in document
        assert "version" not in document
        assert "principal" not in document
        assert "statuses" not in document

    def test_to_dict_matches_json(self, build_info: BuildInfo) -> None:
        """Test that to_dict is the parsed form of to_json."""
        assert build_info.to_dict() == json.loads(build_info.to_json(indent=2))

    def test_from_json(self, build_info: BuildInfo) -> None:
        """Test reading a rendered document back."""
        parsed = BuildInfo.from_json(build_info.to_json())

        assert parsed.name == "app"
        assert parsed.agent == build_info.agent
        assert parsed.get_module("org.acme:app:1.0").artifacts[0].sha1 == "a1b2c3"
        assert parsed.project is None

    def test_frozen(self, build_info: BuildInfo) -> None:
        """Test that records cannot be reassigned."""
        with pytest.raises(ValidationError):
            build_info.number = "99"

    def test_lookups(self, build_info: BuildInfo) -> None:
        """Test module and property lookups."""
        assert build_info.get_module("missing") is None
        assert build_info.get_property("missing", "default") == "default"
        assert build_info.get_property("buildInfo.env.CI") == "true"

    def test_lookups_without_collections(self, builder: BuildInfoBuilder) -> None:
        """Test lookups when no modules or properties were set."""
        info = builder.build()

        assert info.get_module("any") is None
        assert info.get_property("any") is None


class TestCollaborators:
    """Tests for the collaborator models."""

    def test_module_requires_id(self) -> None:
        """Test that a module without id is rejected."""
        with pytest.raises(ValidationError):
            Module(type="maven")

    def test_populate_by_alias(self) -> None:
        """Test that camelCase input is accepted."""
        artifact = Artifact.model_validate({"name": "a.jar", "remotePath": "org/acme/a.jar"})
        dependency = Dependency.model_validate({"id": "dep", "requestedBy": [["org.acme:app:1.0"]]})
        status = PromotionStatus.model_validate({"status": "released", "ciUser": "ci"})

        assert artifact.remote_path == "org/acme/a.jar"
        assert dependency.requested_by == [["org.acme:app:1.0"]]
        assert status.ci_user == "ci"

    def test_retention_defaults(self) -> None:
        """Test the default retention policy keeps everything."""
        retention = BuildRetention()

        assert retention.count == -1
        assert retention.delete_build_artifacts is False
        assert retention.build_numbers_not_to_be_discarded == []
        assert retention.minimum_build_date is None

    def test_add_issue_replaces_same_key(self) -> None:
        """Test that affected issues are unique by key."""
        issues = Issues()
        issues.add_issue(Issue(key="APP-1", summary="old"))
        issues.add_issue(Issue(key="APP-2"))
        issues.add_issue(Issue(key="APP-1", summary="new"))

        assert [i.key for i in issues.affected_issues] == ["APP-2", "APP-1"]
        assert issues.affected_issues[-1].summary == "new"
