"""Issue-tracking models."""

from pydantic import Field

from buildinfo.models.base import BuildInfoModel


class IssueTracker(BuildInfoModel):
    """The issue tracker the build reports against."""

    name: str | None = None
    version: str | None = None


class Issue(BuildInfoModel):
    """An issue affected by the build."""

    key: str
    url: str | None = None
    summary: str | None = None
    aggregated: bool = False


class Issues(BuildInfoModel):
    """Issue-tracking metadata attached to a build."""

    tracker: IssueTracker | None = None
    aggregate_build_issues: bool = False
    aggregation_build_status: str | None = None
    affected_issues: list[Issue] = Field(default_factory=list)

    def add_issue(self, issue: Issue) -> None:
        """Add an affected issue, replacing any issue with the same key."""
        self.affected_issues = [i for i in self.affected_issues if i.key != issue.key]
        self.affected_issues.append(issue)
