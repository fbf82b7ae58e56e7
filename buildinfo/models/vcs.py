"""VCS and matrix parameter models."""

from pydantic import Field

from buildinfo.models.base import BuildInfoModel


class Vcs(BuildInfoModel):
    """A version control checkout that took part in the build."""

    revision: str | None = Field(default=None, description="Revision (format is VCS specific)")
    message: str | None = Field(default=None, description="Commit message")
    branch: str | None = Field(default=None, description="Branch name")
    url: str | None = Field(default=None, description="Repository URL")


class MatrixParameter(BuildInfoModel):
    """A run parameter describing one build matrix axis."""

    key: str
    value: str | None = None
