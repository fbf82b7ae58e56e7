"""Fluent builder for build-info records."""

import threading
import warnings
from collections.abc import Iterable, Mapping
from datetime import datetime
from typing import Any

from pydantic import BaseModel, TypeAdapter, ValidationError
from pydantic.alias_generators import to_snake

from buildinfo.core.config.settings import BuilderSettings, get_settings
from buildinfo.core.exceptions.errors import InvalidBuildError
from buildinfo.core.logger.logger import get_logger
from buildinfo.models.agent import Agent, BuildAgent
from buildinfo.models.build_info import BuildInfo, format_started, to_millis
from buildinfo.models.issues import Issues
from buildinfo.models.module import Module
from buildinfo.models.release import BuildRetention, PromotionStatus
from buildinfo.models.vcs import MatrixParameter, Vcs

logger = get_logger(__name__)

# Setters driven by from_dict(), keyed by snake_case field name.
_STRING_SETTERS = {
    "version": "version",
    "number": "number",
    "project": "project",
    "principal": "principal",
    "artifactory_principal": "artifactory_principal",
    "artifactory_plugin_version": "artifactory_plugin_version",
    "url": "url",
    "parent_name": "parent_name",
    "parent_number": "parent_number",
    "vcs_revision": "vcs_revision",
    "vcs_url": "vcs_url",
}
_INT_SETTERS = {
    "started_millis": "started_millis",
    "duration_millis": "duration_millis",
}
_MODEL_SETTERS: dict[str, tuple[str, type[BaseModel]]] = {
    "agent": ("agent", Agent),
    "build_agent": ("build_agent", BuildAgent),
    "build_retention": ("build_retention", BuildRetention),
    "issues": ("issues", Issues),
}
_LIST_SETTERS: dict[str, tuple[str, type[BaseModel]]] = {
    "vcs": ("vcs", Vcs),
    "modules": ("modules", Module),
    "statuses": ("statuses", PromotionStatus),
    "run_parameters": ("build_run_parameters", MatrixParameter),
    "build_run_parameters": ("build_run_parameters", MatrixParameter),
}


def _is_blank(value: str | None) -> bool:
    return value is None or not value.strip()


class BuildInfoBuilder:
    """Accumulates build attributes and assembles BuildInfo records.

    Every setter returns the builder itself so calls can be chained:

        info = (
            BuildInfoBuilder("app")
            .number("17")
            .started_date(datetime.now())
            .add_module(Module(id="org.acme:app:1.0"))
            .build()
        )

    The builder stays usable after build(); each call produces a fresh
    record from the current state.
    """

    def __init__(self, name: str | None, settings: BuilderSettings | None = None) -> None:
        """Initialize the builder.

        Args:
            name: Build name.
            settings: Builder settings. Uses global settings if not provided.
        """
        self._settings = settings
        self._lock = threading.Lock()

        self._version: str | None = None
        self._name = name
        self._number: str | None = None
        self._project: str | None = None
        self._started: str | None = None
        self._started_millis = 0
        self._duration_millis = 0
        self._agent: Agent | None = None
        self._build_agent: BuildAgent | None = None
        self._principal: str | None = None
        self._artifactory_principal: str | None = None
        self._artifactory_plugin_version: str | None = None
        self._url: str | None = None
        self._parent_name: str | None = None
        self._parent_number: str | None = None
        self._vcs: list[Vcs] | None = []
        self._vcs_revision: str | None = None
        self._vcs_url: str | None = None
        self._run_parameters: list[MatrixParameter] | None = None
        self._modules: dict[str, Module] | None = None
        self._statuses: list[PromotionStatus] | None = None
        self._properties: dict[Any, Any] | None = None
        self._build_retention: BuildRetention | None = None
        self._issues: Issues | None = None

    def build(self) -> BuildInfo:
        """Assemble a build-info record from the current builder state.

        Returns:
            A new BuildInfo. Collections are copied, so later changes to
            the builder do not leak into records already built.

        Raises:
            InvalidBuildError: If name, number or started is blank. Checked
                in that order; the first failure is reported.
        """
        if _is_blank(self._name):
            raise InvalidBuildError("Build must have a name", field="name")
        if _is_blank(self._number):
            raise InvalidBuildError("Build number must be set", field="number")
        if _is_blank(self._started):
            raise InvalidBuildError("Build start time must be set", field="started")

        build_info = BuildInfo(
            version=None if _is_blank(self._version) else self._version,
            name=self._name,
            number=self._number,
            project=self._project,
            agent=self._agent,
            build_agent=self._build_agent,
            started=self._started,
            started_millis=self._started_millis,
            duration_millis=self._duration_millis,
            principal=self._principal,
            artifactory_principal=self._artifactory_principal,
            artifactory_plugin_version=self._artifactory_plugin_version,
            url=self._url,
            parent_name=self._parent_name,
            parent_number=self._parent_number,
            vcs=list(self._vcs) if self._vcs is not None else None,
            run_parameters=list(self._run_parameters) if self._run_parameters is not None else None,
            modules=list(self._modules.values()) if self._modules is not None else None,
            statuses=list(self._statuses) if self._statuses is not None else None,
            properties=dict(self._properties) if self._properties is not None else None,
            build_retention=self._build_retention,
            issues=self._issues,
        )
        logger.debug(
            f"Assembled build {build_info.name}#{build_info.number} "
            f"({len(build_info.modules or [])} modules)"
        )
        return build_info

    def version(self, version: str | None) -> "BuildInfoBuilder":
        """Set the build-info schema version."""
        self._version = version
        return self

    def name(self, name: str | None) -> "BuildInfoBuilder":
        """Set the build name."""
        self._name = name
        return self

    def number(self, number: str | None) -> "BuildInfoBuilder":
        """Set the build number."""
        self._number = number
        return self

    def project(self, project: str | None) -> "BuildInfoBuilder":
        """Set the project key the build belongs to."""
        self._project = project
        return self

    def set_project(self, project: str | None) -> "BuildInfoBuilder":
        """Alias of project()."""
        return self.project(project)

    def agent(self, agent: Agent | None) -> "BuildInfoBuilder":
        """Set the CI server agent."""
        self._agent = agent
        return self

    def build_agent(self, build_agent: BuildAgent | None) -> "BuildInfoBuilder":
        """Set the build tool agent."""
        self._build_agent = build_agent
        return self

    def started(self, started: str | None) -> "BuildInfoBuilder":
        """Set the start time string. started_millis is left untouched."""
        self._started = started
        return self

    def started_millis(self, started_millis: int) -> "BuildInfoBuilder":
        """Set the start time in epoch milliseconds."""
        self._started_millis = started_millis
        return self

    def started_date(self, started_date: datetime) -> "BuildInfoBuilder":
        """Set both start time fields from one datetime.

        Naive datetimes are interpreted in the configured timezone, or in
        local time when none is configured.
        """
        settings = self._settings or get_settings().builder
        tz = settings.tzinfo()
        started = format_started(started_date, tz)
        started_millis = to_millis(started_date, tz)
        self._started, self._started_millis = started, started_millis
        return self

    def duration_millis(self, duration_millis: int) -> "BuildInfoBuilder":
        """Set the build duration in milliseconds."""
        self._duration_millis = duration_millis
        return self

    def principal(self, principal: str | None) -> "BuildInfoBuilder":
        """Set the user who triggered the build."""
        self._principal = principal
        return self

    def artifactory_principal(self, artifactory_principal: str | None) -> "BuildInfoBuilder":
        """Set the repository user that deployed the build."""
        self._artifactory_principal = artifactory_principal
        return self

    def artifactory_plugin_version(self, artifactory_plugin_version: str | None) -> "BuildInfoBuilder":
        self._artifactory_plugin_version = artifactory_plugin_version
        return self

    def url(self, url: str | None) -> "BuildInfoBuilder":
        """Set the CI URL of the build."""
        self._url = url
        return self

    def parent_name(self, parent_name: str | None) -> "BuildInfoBuilder":
        """Set the name of the build that triggered this one."""
        self._parent_name = parent_name
        return self

    def parent_number(self, parent_number: str | None) -> "BuildInfoBuilder":
        """Set the number of the build that triggered this one."""
        self._parent_number = parent_number
        return self

    def vcs(self, vcs: list[Vcs] | None) -> "BuildInfoBuilder":
        """Set the VCS entries of the build."""
        self._vcs = vcs
        return self

    def vcs_revision(self, vcs_revision: str | None) -> "BuildInfoBuilder":
        """Set the VCS revision.

        Deprecated: use vcs() instead. The value is not part of built records.
        """
        warnings.warn(
            "vcs_revision() is deprecated, use vcs() instead",
            DeprecationWarning,
            stacklevel=2,
        )
        self._vcs_revision = vcs_revision
        return self

    def vcs_url(self, vcs_url: str | None) -> "BuildInfoBuilder":
        """Set the VCS URL.

        Deprecated: use vcs() instead. The value is not part of built records.
        """
        warnings.warn(
            "vcs_url() is deprecated, use vcs() instead",
            DeprecationWarning,
            stacklevel=2,
        )
        self._vcs_url = vcs_url
        return self

    def modules(self, modules: Mapping[str, Module] | Iterable[Module]) -> "BuildInfoBuilder":
        """Replace all modules of the build.

        Args:
            modules: Either a mapping of module id to module, used as is, or
                an iterable of modules keyed by their id. For duplicate ids
                the last module wins.
        """
        if isinstance(modules, Mapping):
            self._modules = dict(modules)
        else:
            self._modules = {module.id: module for module in modules}
        logger.debug(f"Replaced modules of build {self._name}: {len(self._modules)} modules")
        return self

    def add_module(self, module: Module) -> "BuildInfoBuilder":
        """Add a module, replacing any module with the same id.

        Safe to call from several threads sharing one builder.
        """
        if self._modules is None:
            with self._lock:
                if self._modules is None:
                    self._modules = {}
        self._modules[module.id] = module
        return self

    def statuses(self, statuses: list[PromotionStatus] | None) -> "BuildInfoBuilder":
        """Set the promotion statuses of the build."""
        self._statuses = statuses
        return self

    def add_status(self, status: PromotionStatus) -> "BuildInfoBuilder":
        """Append a promotion status."""
        if self._statuses is None:
            with self._lock:
                if self._statuses is None:
                    self._statuses = []
        self._statuses.append(status)
        return self

    def build_retention(self, build_retention: BuildRetention | None) -> "BuildInfoBuilder":
        """Set the retention policy applied after the build is published."""
        self._build_retention = build_retention
        return self

    def build_run_parameters(self, run_parameters: list[MatrixParameter] | None) -> "BuildInfoBuilder":
        """Set the matrix run parameters."""
        self._run_parameters = run_parameters
        return self

    def add_run_parameters(self, parameter: MatrixParameter) -> "BuildInfoBuilder":
        """Append a matrix run parameter."""
        if self._run_parameters is None:
            with self._lock:
                if self._run_parameters is None:
                    self._run_parameters = []
        self._run_parameters.append(parameter)
        return self

    def properties(self, properties: dict[Any, Any] | None) -> "BuildInfoBuilder":
        """Set the build properties."""
        self._properties = properties
        return self

    def add_property(self, key: Any, value: Any) -> "BuildInfoBuilder":
        """Set one build property, overwriting an existing value for the key."""
        if self._properties is None:
            with self._lock:
                if self._properties is None:
                    self._properties = {}
        self._properties[key] = value
        return self

    def issues(self, issues: Issues | None) -> "BuildInfoBuilder":
        """Set the issue-tracking metadata."""
        self._issues = issues
        return self

    @classmethod
    def from_dict(
        cls,
        data: Mapping[str, Any],
        settings: BuilderSettings | None = None,
    ) -> "BuildInfoBuilder":
        """Create a builder populated from a build description.

        Keys may be snake_case or camelCase. Nested values may be plain
        mappings or model instances. A datetime under 'started' sets both
        start time fields.

        Args:
            data: Build description, e.g. loaded from YAML.
            settings: Builder settings passed to the new builder.

        Returns:
            Populated builder. build() still has to be called.

        Raises:
            InvalidBuildError: For unknown keys or values of the wrong shape.
        """
        fields = {to_snake(key): value for key, value in data.items()}
        name = fields.pop("name", None)
        builder = cls(None if name is None else str(name), settings=settings)

        for key, value in fields.items():
            try:
                builder._apply(key, value)
            except ValidationError as e:
                raise InvalidBuildError(
                    f"Invalid value for '{key}'",
                    field=key,
                    details={"errors": e.errors(include_url=False)},
                ) from e

        return builder

    def _apply(self, key: str, value: Any) -> None:
        if key == "started":
            if isinstance(value, datetime):
                self.started_date(value)
            else:
                self.started(None if value is None else str(value))
        elif key in _STRING_SETTERS:
            getattr(self, _STRING_SETTERS[key])(None if value is None else str(value))
        elif key in _INT_SETTERS:
            getattr(self, _INT_SETTERS[key])(TypeAdapter(int).validate_python(value))
        elif key in _MODEL_SETTERS:
            setter, model = _MODEL_SETTERS[key]
            getattr(self, setter)(None if value is None else model.model_validate(value))
        elif key in _LIST_SETTERS:
            setter, model = _LIST_SETTERS[key]
            items = None if value is None else TypeAdapter(list[model]).validate_python(value)
            if setter == "modules" and items is None:
                self._modules = None
            else:
                getattr(self, setter)(items)
        elif key == "properties":
            self.properties(None if value is None else TypeAdapter(dict[Any, Any]).validate_python(value))
        else:
            raise InvalidBuildError(f"Unknown build field '{key}'", field=key)
