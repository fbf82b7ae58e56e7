"""Agent descriptors."""

from pydantic import Field

from buildinfo.models.base import BuildInfoModel


class Agent(BuildInfoModel):
    """The CI server that ran the build (e.g. Jenkins 2.440)."""

    name: str | None = Field(default=None, description="CI server name")
    version: str | None = Field(default=None, description="CI server version")


class BuildAgent(BuildInfoModel):
    """The build tool that produced the build (e.g. Maven 3.9.6)."""

    name: str | None = Field(default=None, description="Build tool name")
    version: str | None = Field(default=None, description="Build tool version")
