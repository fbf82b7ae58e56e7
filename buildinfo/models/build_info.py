"""The build-info record and its started-timestamp format."""

from datetime import datetime, timedelta, timezone, tzinfo
from typing import Any

from pydantic import ConfigDict, Field

from buildinfo.models.agent import Agent, BuildAgent
from buildinfo.models.base import BuildInfoModel
from buildinfo.models.issues import Issues
from buildinfo.models.module import Module
from buildinfo.models.release import BuildRetention, PromotionStatus
from buildinfo.models.vcs import MatrixParameter, Vcs

# yyyy-MM-dd'T'HH:mm:ss.SSSZ, e.g. 2024-01-01T00:00:00.000+0000
STARTED_FORMAT = "%Y-%m-%dT%H:%M:%S.%f%z"

_EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)

# Kept out of the JSON document; project travels as a request parameter.
_TRANSPORT_FIELDS = {"project", "started_millis"}


def _as_aware(value: datetime, tz: tzinfo | None = None) -> datetime:
    if value.tzinfo is not None:
        return value
    if tz is not None:
        return value.replace(tzinfo=tz)
    return value.astimezone()


def _format_offset(aware: datetime) -> str:
    # Whole minutes only (+HHMM); seconds in LMT offsets are dropped toward zero.
    minutes = int(aware.utcoffset() / timedelta(minutes=1))
    sign = "-" if minutes < 0 else "+"
    hours, minutes = divmod(abs(minutes), 60)
    return f"{sign}{hours:02d}{minutes:02d}"


def format_started(value: datetime, tz: tzinfo | None = None) -> str:
    """Render a datetime in the started format.

    Args:
        value: Datetime to render. Aware values keep their own offset.
        tz: Zone for naive values. Naive values are local time when omitted.

    Returns:
        Timestamp with millisecond precision and a +HHMM UTC offset.
        Offsets with a seconds part (historical LMT zones) are truncated to
        whole minutes, so such a string parses back to a slightly different
        instant than the one to_millis() reports.
    """
    aware = _as_aware(value, tz)
    return f"{aware:%Y-%m-%dT%H:%M:%S}.{aware.microsecond // 1000:03d}{_format_offset(aware)}"


def parse_started(text: str) -> datetime:
    """Parse a started timestamp back into an aware datetime."""
    return datetime.strptime(text, STARTED_FORMAT)


def to_millis(value: datetime, tz: tzinfo | None = None) -> int:
    """Return epoch milliseconds of a datetime, truncating sub-millisecond parts."""
    return (_as_aware(value, tz) - _EPOCH) // timedelta(milliseconds=1)


class BuildInfo(BuildInfoModel):
    """Immutable snapshot of a CI build's metadata.

    Produced by BuildInfoBuilder.build(). Rendered to the build-info JSON
    document with to_json().
    """

    model_config = ConfigDict(frozen=True)

    version: str | None = Field(default=None, description="Build-info schema version")
    name: str = Field(description="Build name")
    number: str = Field(description="Build number")
    project: str | None = Field(default=None, description="Project key the build belongs to")
    agent: Agent | None = None
    build_agent: BuildAgent | None = None
    started: str = Field(description="Start time in the started format")
    started_millis: int = Field(default=0, description="Start time in epoch milliseconds")
    duration_millis: int = 0
    principal: str | None = None
    artifactory_principal: str | None = None
    artifactory_plugin_version: str | None = None
    url: str | None = None
    parent_name: str | None = None
    parent_number: str | None = None
    vcs: list[Vcs] | None = None
    run_parameters: list[MatrixParameter] | None = None
    modules: list[Module] | None = None
    statuses: list[PromotionStatus] | None = None
    properties: dict[Any, Any] | None = None
    build_retention: BuildRetention | None = None
    issues: Issues | None = None

    def get_module(self, module_id: str) -> Module | None:
        """Return the module with the given id, if present."""
        for module in self.modules or []:
            if module.id == module_id:
                return module
        return None

    def get_property(self, key: Any, default: Any = None) -> Any:
        """Return a build property value."""
        if not self.properties:
            return default
        return self.properties.get(key, default)

    def started_datetime(self) -> datetime:
        """Return the started timestamp as an aware datetime."""
        return parse_started(self.started)

    def to_dict(self) -> dict[str, Any]:
        """Return the JSON-compatible document with camelCase keys."""
        return self.model_dump(
            mode="json",
            by_alias=True,
            exclude_none=True,
            exclude=_TRANSPORT_FIELDS,
        )

    def to_json(self, indent: int | None = None) -> str:
        """Render the build-info JSON document."""
        return self.model_dump_json(
            by_alias=True,
            exclude_none=True,
            exclude=_TRANSPORT_FIELDS,
            indent=indent,
        )

    @classmethod
    def from_json(cls, data: str | bytes) -> "BuildInfo":
        """Parse a build-info JSON document."""
        return cls.model_validate_json(data)
