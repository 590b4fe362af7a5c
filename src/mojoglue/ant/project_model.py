# Copyright (c) 2026 - 2026, Oracle and/or its affiliates. All rights reserved.
# Licensed under the Universal Permissive License v 1.0 as shown at https://oss.oracle.com/licenses/upl/.

"""This module contains the read-only Maven project model used to generate Ant build files."""

from dataclasses import dataclass, field

from packageurl import PackageURL

from mojoglue.ant.repository_layout import get_artifact_path

#: The dependency scopes that are not needed to compile the main sources.
TEST_ONLY_SCOPES = frozenset({"test"})

#: The dependency scopes that are resolved from a repository.
REPOSITORY_SCOPES = frozenset({"compile", "provided", "runtime", "test"})


@dataclass(frozen=True)
class Dependency:
    """A direct dependency of a Maven project."""

    group_id: str
    artifact_id: str
    version: str
    scope: str = "compile"
    type: str = "jar"
    classifier: str | None = None
    optional: bool = False

    #: The path of the artifact for ``system`` scoped dependencies.
    system_path: str | None = None

    @property
    def purl(self) -> PackageURL:
        """Return the PackageURL of the dependency."""
        qualifiers = {"type": self.type} if self.type != "jar" else {}
        if self.classifier:
            qualifiers["classifier"] = self.classifier
        return PackageURL(
            type="maven",
            namespace=self.group_id,
            name=self.artifact_id,
            version=self.version,
            qualifiers=qualifiers or None,
        )

    @property
    def management_key(self) -> str:
        """Return the key identifying the dependency regardless of its version, as Maven does."""
        key = f"{self.group_id}:{self.artifact_id}:{self.type}"
        if self.classifier:
            key = f"{key}:{self.classifier}"
        return key

    @property
    def property_key(self) -> str:
        """Return the key of the dependency path in ``build.properties``.

        The key does not contain the version: two dependencies differing only in their version share a key.
        """
        return f"dependency.{self.group_id}.{self.artifact_id}.{self.scope}.path"

    @property
    def repository_path(self) -> str:
        """Return the path of the artifact relative to the root of a Maven repository."""
        return get_artifact_path(
            self.group_id,
            self.artifact_id,
            self.version,
            dep_type=self.type,
            classifier=self.classifier,
        )

    @property
    def is_test_only(self) -> bool:
        """Return True if the dependency is only needed for the tests."""
        return self.scope in TEST_ONLY_SCOPES

    @property
    def from_repository(self) -> bool:
        """Return True if the dependency is retrieved from a Maven repository."""
        return self.scope in REPOSITORY_SCOPES


@dataclass(frozen=True)
class BuildLayout:
    """The build directories of a project, relative to its base directory.

    The default values are the ones of the Maven super POM.
    """

    directory: str = "target"
    output_directory: str = "target/classes"
    test_output_directory: str = "target/test-classes"
    source_directory: str = "src/main/java"
    test_source_directory: str = "src/test/java"
    resource_directories: tuple[str, ...] = ("src/main/resources",)
    test_resource_directories: tuple[str, ...] = ("src/test/resources",)

    #: The name of the packaged artifact, without extension. Empty means ``${artifactId}-${version}``.
    final_name: str = ""


@dataclass(frozen=True)
class ProjectDescriptor:
    """A Maven project, as supplied by the build tool."""

    group_id: str
    artifact_id: str
    version: str

    #: The absolute path to the base directory of the project.
    basedir: str

    packaging: str = "jar"
    name: str = ""
    description: str = ""
    modules: tuple[str, ...] = ()
    dependencies: tuple[Dependency, ...] = ()
    remote_repositories: tuple[str, ...] = ()
    build: BuildLayout = field(default_factory=BuildLayout)

    @property
    def artifact_coordinates(self) -> PackageURL:
        """Return the PackageURL of the project artifact."""
        return PackageURL(type="maven", namespace=self.group_id, name=self.artifact_id, version=self.version)

    @property
    def final_name(self) -> str:
        """Return the name of the packaged artifact, without extension."""
        return self.build.final_name or f"{self.artifact_id}-{self.version}"

    @property
    def display_name(self) -> str:
        """Return the human-readable name of the project."""
        return self.name or self.artifact_id

    @property
    def is_aggregator(self) -> bool:
        """Return True if the project builds sub-modules."""
        return bool(self.modules)

    @property
    def repository_dependencies(self) -> list[Dependency]:
        """Return the dependencies retrieved from a Maven repository, in declaration order."""
        return [dep for dep in self.dependencies if dep.from_repository]
