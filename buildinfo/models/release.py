"""Promotion status and retention policy models."""

from pydantic import Field

from buildinfo.models.base import BuildInfoModel


class PromotionStatus(BuildInfoModel):
    """A record of the build being promoted through a release stage."""

    status: str = Field(description="Promotion status, e.g. 'staged' or 'released'")
    comment: str | None = None
    repository: str | None = Field(default=None, description="Target repository")
    timestamp: str | None = Field(default=None, description="Promotion time in the started format")
    user: str | None = None
    ci_user: str | None = None


class BuildRetention(BuildInfoModel):
    """Rules governing how many builds and artifacts are kept."""

    count: int = Field(default=-1, description="Builds to keep (-1 = keep all)")
    delete_build_artifacts: bool = False
    build_numbers_not_to_be_discarded: list[str] = Field(default_factory=list)
    minimum_build_date: int | None = Field(
        default=None,
        description="Epoch millis; builds started before it are discarded",
    )
