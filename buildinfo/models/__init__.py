"""Data models module."""

from buildinfo.models.agent import Agent, BuildAgent
from buildinfo.models.build_info import (
    STARTED_FORMAT,
    BuildInfo,
    format_started,
    parse_started,
    to_millis,
)
from buildinfo.models.issues import Issue, Issues, IssueTracker
from buildinfo.models.module import Artifact, Dependency, Module
from buildinfo.models.release import BuildRetention, PromotionStatus
from buildinfo.models.vcs import MatrixParameter, Vcs

__all__ = [
    "Agent",
    "BuildAgent",
    "BuildInfo",
    "STARTED_FORMAT",
    "format_started",
    "parse_started",
    "to_millis",
    "Issue",
    "Issues",
    "IssueTracker",
    "Artifact",
    "Dependency",
    "Module",
    "BuildRetention",
    "PromotionStatus",
    "MatrixParameter",
    "Vcs",
]
