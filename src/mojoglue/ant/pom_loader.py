# Copyright (c) 2026 - 2026, Oracle and/or its affiliates. All rights reserved.
# Licensed under the Universal Permissive License v 1.0 as shown at https://oss.oracle.com/licenses/upl/.

"""This module loads the project model of a Maven project from its ``pom.xml`` file.

Only the POM itself is read: the parent POM is not retrieved and dependencies are not resolved
transitively. The values that the POM inherits from its parent (group ID and version) are taken from
the ``<parent>`` element.
"""

import logging
import os
import re
from xml.etree.ElementTree import Element  # nosec B405

import defusedxml.ElementTree
from defusedxml import DefusedXmlException
from defusedxml.ElementTree import fromstring

from mojoglue.ant.project_model import BuildLayout, Dependency, ProjectDescriptor
from mojoglue.config.defaults import defaults
from mojoglue.errors import ProjectModelError

logger: logging.Logger = logging.getLogger(__name__)

PROPERTY_PATTERN = re.compile(r"\$\{([^}]+)}")

# Chained properties are resolved up to this depth, which also stops self-referencing properties.
MAX_INTERPOLATION_DEPTH = 10


def parse_pom_string(pom_string: str | bytes) -> Element | None:
    """Parse the passed POM string using defusedxml.

    Parameters
    ----------
    pom_string : str | bytes
        The contents of a POM file. Bytes are decoded with the encoding declared by the XML prolog.

    Returns
    -------
    Element | None
        The parsed element representing the POM's XML hierarchy.
    """
    try:
        # Stored here first to help with type checking.
        pom: Element = fromstring(pom_string)
        return pom
    except (DefusedXmlException, defusedxml.ElementTree.ParseError, ValueError) as error:
        logger.debug("Failed to parse XML: %s", error)
        return None


def _local_name(tag: str) -> str:
    """Return the tag name without its namespace, e.g. ``{http://maven.apache.org/POM/4.0.0}version``."""
    return tag.rsplit("}", 1)[-1]


def _find_element(parent: Element | None, target: str) -> Element | None:
    if parent is None:
        return None

    # Handle raw tags, and tags accompanied by the POM namespace enclosed in curly braces. E.g. '{namespace}tag'
    for child in parent:
        if isinstance(child.tag, str) and _local_name(child.tag) == target:
            return child
    return None


def _find_all(parent: Element | None, target: str) -> list[Element]:
    if parent is None:
        return []
    return [child for child in parent if isinstance(child.tag, str) and _local_name(child.tag) == target]


def _find_text(parent: Element | None, path: str) -> str:
    """Return the stripped text of the element at a ``.`` separated path, or an empty string."""
    element = parent
    for part in path.split("."):
        element = _find_element(element, part)
        if element is None:
            return ""
    return (element.text or "").strip()


def interpolate(value: str, properties: dict[str, str]) -> str:
    """Replace the ``${...}`` placeholders of a value with the properties.

    Unknown placeholders are kept as they are.

    Parameters
    ----------
    value : str
        The value to interpolate.
    properties : dict[str, str]
        The known properties.

    Returns
    -------
    str
        The interpolated value.

    Examples
    --------
    >>> interpolate("${project.artifactId}-${suffix}", {"project.artifactId": "app", "suffix": "core"})
    'app-core'
    """
    for _ in range(MAX_INTERPOLATION_DEPTH):
        replaced = PROPERTY_PATTERN.sub(lambda match: properties.get(match.group(1), match.group(0)), value)
        if replaced == value:
            break
        value = replaced
    return value


class PomLoader:
    """This class builds a ``ProjectDescriptor`` from a ``pom.xml`` file."""

    def __init__(self, pom_path: str) -> None:
        """Initialize instance.

        Parameters
        ----------
        pom_path : str
            The path to the ``pom.xml`` file.
        """
        self.pom_path = os.path.abspath(pom_path)
        self.basedir = os.path.dirname(self.pom_path)
        self.properties: dict[str, str] = {}

    def load(self) -> ProjectDescriptor:
        """Load the project model.

        Returns
        -------
        ProjectDescriptor
            The project model.

        Raises
        ------
        ProjectModelError
            If the POM cannot be read or parsed, or lacks the project coordinates.
        """
        try:
            with open(self.pom_path, "rb") as file:
                pom_content = file.read()
        except OSError as error:
            raise ProjectModelError(f"Cannot read the POM file {self.pom_path}: {error}") from error

        pom = parse_pom_string(pom_content)
        if pom is None or _local_name(pom.tag) != "project":
            raise ProjectModelError(f"The file {self.pom_path} is not a valid POM.")

        group_id = _find_text(pom, "groupId") or _find_text(pom, "parent.groupId")
        artifact_id = _find_text(pom, "artifactId")
        version = _find_text(pom, "version") or _find_text(pom, "parent.version")
        if not (group_id and artifact_id and version):
            raise ProjectModelError(f"The POM file {self.pom_path} does not define the project coordinates.")

        self.properties = self._collect_properties(pom, group_id, artifact_id, version)
        group_id = self._resolve(group_id)
        artifact_id = self._resolve(artifact_id)
        version = self._resolve(version)

        project = ProjectDescriptor(
            group_id=group_id,
            artifact_id=artifact_id,
            version=version,
            basedir=self.basedir,
            packaging=self._resolve(_find_text(pom, "packaging")) or "jar",
            name=self._resolve(_find_text(pom, "name")),
            description=self._resolve(_find_text(pom, "description")),
            modules=tuple(
                self._resolve(module.text.strip())
                for module in _find_all(_find_element(pom, "modules"), "module")
                if module.text and module.text.strip()
            ),
            dependencies=tuple(self._read_dependencies(pom)),
            remote_repositories=tuple(self._read_repositories(pom)),
            build=self._read_build(pom),
        )
        logger.debug(
            "Loaded project %s with %d dependencies and %d modules.",
            project.artifact_coordinates,
            len(project.dependencies),
            len(project.modules),
        )
        return project

    def _resolve(self, value: str) -> str:
        return interpolate(value, self.properties)

    def _collect_properties(self, pom: Element, group_id: str, artifact_id: str, version: str) -> dict[str, str]:
        properties = {}
        properties_element = _find_element(pom, "properties")
        if properties_element is not None:
            for child in properties_element:
                if isinstance(child.tag, str):
                    properties[_local_name(child.tag)] = (child.text or "").strip()

        project_properties = {
            "groupId": group_id,
            "artifactId": artifact_id,
            "version": version,
            "basedir": self.basedir,
            "parent.groupId": _find_text(pom, "parent.groupId"),
            "parent.version": _find_text(pom, "parent.version"),
        }
        for key, value in project_properties.items():
            properties[f"project.{key}"] = value
            # The ``pom.`` prefix is a deprecated alias of ``project.``.
            properties[f"pom.{key}"] = value
        properties["basedir"] = self.basedir
        return properties

    def _read_dependencies(self, pom: Element) -> list[Dependency]:
        managed_versions = {}
        management = _find_element(_find_element(pom, "dependencyManagement"), "dependencies")
        for element in _find_all(management, "dependency"):
            dependency_key = (
                self._resolve(_find_text(element, "groupId")),
                self._resolve(_find_text(element, "artifactId")),
            )
            managed_versions[dependency_key] = self._resolve(_find_text(element, "version"))

        dependencies = []
        for element in _find_all(_find_element(pom, "dependencies"), "dependency"):
            group_id = self._resolve(_find_text(element, "groupId"))
            artifact_id = self._resolve(_find_text(element, "artifactId"))
            version = self._resolve(_find_text(element, "version")) or managed_versions.get(
                (group_id, artifact_id), ""
            )
            if not (group_id and artifact_id and version):
                raise ProjectModelError(
                    f"Cannot determine the coordinates of the dependency {group_id}:{artifact_id} "
                    f"in {self.pom_path}."
                )

            dependencies.append(
                Dependency(
                    group_id=group_id,
                    artifact_id=artifact_id,
                    version=version,
                    scope=self._resolve(_find_text(element, "scope")) or "compile",
                    type=self._resolve(_find_text(element, "type")) or "jar",
                    classifier=self._resolve(_find_text(element, "classifier")) or None,
                    optional=_find_text(element, "optional").lower() == "true",
                    system_path=self._resolve(_find_text(element, "systemPath")) or None,
                )
            )
        return dependencies

    def _read_repositories(self, pom: Element) -> list[str]:
        repositories = [
            self._resolve(_find_text(element, "url")).rstrip("/")
            for element in _find_all(_find_element(pom, "repositories"), "repository")
            if _find_text(element, "url")
        ]
        # The central repository is always available to Maven builds.
        for url in defaults.get_list("maven", "remote_repositories"):
            if url.rstrip("/") not in repositories:
                repositories.append(url.rstrip("/"))
        return repositories

    def _read_build(self, pom: Element) -> BuildLayout:
        build = _find_element(pom, "build")
        layout = BuildLayout()
        if build is None:
            return layout

        def _resource_dirs(parent_tag: str, child_tag: str, fallback: tuple[str, ...]) -> tuple[str, ...]:
            directories = tuple(
                self._relativize(self._resolve(_find_text(element, "directory")))
                for element in _find_all(_find_element(build, parent_tag), child_tag)
                if _find_text(element, "directory")
            )
            return directories or fallback

        directory = self._relativize(self._resolve(_find_text(build, "directory"))) or layout.directory
        return BuildLayout(
            directory=directory,
            output_directory=self._relativize(self._resolve(_find_text(build, "outputDirectory")))
            or f"{directory}/classes",
            test_output_directory=self._relativize(self._resolve(_find_text(build, "testOutputDirectory")))
            or f"{directory}/test-classes",
            source_directory=self._relativize(self._resolve(_find_text(build, "sourceDirectory")))
            or layout.source_directory,
            test_source_directory=self._relativize(self._resolve(_find_text(build, "testSourceDirectory")))
            or layout.test_source_directory,
            resource_directories=_resource_dirs("resources", "resource", layout.resource_directories),
            test_resource_directories=_resource_dirs(
                "testResources", "testResource", layout.test_resource_directories
            ),
            final_name=self._resolve(_find_text(build, "finalName")),
        )

    def _relativize(self, path: str) -> str:
        """Return the path relative to the base directory if it is inside it."""
        if path and os.path.isabs(path):
            relative = os.path.relpath(path, self.basedir)
            if not relative.startswith(os.pardir):
                return relative.replace(os.sep, "/")
        return path


def load_project(pom_path: str) -> ProjectDescriptor:
    """Load the project model from a ``pom.xml`` file.

    Parameters
    ----------
    pom_path : str
        The path to the ``pom.xml`` file.

    Returns
    -------
    ProjectDescriptor
        The project model.

    Raises
    ------
    ProjectModelError
        If the POM cannot be read or parsed, or lacks the project coordinates.
    """
    return PomLoader(pom_path).load()
