"""buildinfo - assemble CI build-info records."""

__version__ = "0.1.0"

from buildinfo.builder import BuildInfoBuilder
from buildinfo.core.exceptions import BuildInfoError, InvalidBuildError
from buildinfo.models import BuildInfo, Module

__all__ = [
    "__version__",
    "BuildInfoBuilder",
    "BuildInfo",
    "Module",
    "BuildInfoError",
    "InvalidBuildError",
]
