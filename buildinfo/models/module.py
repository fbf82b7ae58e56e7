"""Module, artifact and dependency models."""

from typing import Any

from pydantic import Field

from buildinfo.models.base import BuildInfoModel


class Artifact(BuildInfoModel):
    """A file produced by a module."""

    name: str | None = None
    type: str | None = None
    sha1: str | None = None
    sha256: str | None = None
    md5: str | None = None
    remote_path: str | None = Field(default=None, description="Deployment path in the repository")
    properties: dict[str, Any] | None = None


class Dependency(BuildInfoModel):
    """A file a module was built against."""

    id: str | None = None
    type: str | None = None
    scopes: list[str] | None = None
    sha1: str | None = None
    sha256: str | None = None
    md5: str | None = None
    requested_by: list[list[str]] | None = Field(
        default=None,
        description="Paths of dependency ids that pulled this dependency in",
    )
    properties: dict[str, Any] | None = None


class Module(BuildInfoModel):
    """A named unit of build output.

    The id is the key the builder uses to de-duplicate modules.
    """

    id: str = Field(description="Stable module identifier, e.g. 'org.acme:app:1.0'")
    type: str | None = Field(default=None, description="Module type (maven, gradle, npm, ...)")
    repository: str | None = None
    sha1: str | None = None
    md5: str | None = None
    artifacts: list[Artifact] | None = None
    excluded_artifacts: list[Artifact] | None = None
    dependencies: list[Dependency] | None = None
    properties: dict[str, Any] | None = None
