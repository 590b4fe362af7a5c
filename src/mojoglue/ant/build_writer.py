# Copyright (c) 2026 - 2026, Oracle and/or its affiliates. All rights reserved.
# Licensed under the Universal Permissive License v 1.0 as shown at https://oss.oracle.com/licenses/upl/.

"""This module contains the writer generating an Ant build file and its properties from a Maven project."""

import logging
import os
import posixpath

from jinja2 import Environment, FileSystemLoader, TemplateError, select_autoescape

import mojoglue.ant.jinja2_extensions as jinja2_extensions  # pylint: disable=consider-using-from-import
from mojoglue.ant.project_model import Dependency, ProjectDescriptor
from mojoglue.errors import DescriptorWriteError, MojoGlueError

logger: logging.Logger = logging.getLogger(__name__)

TEMPLATE_DIR = os.path.join(os.path.dirname(os.path.abspath(__file__)), "templates")

DEFAULT_BUILD_FILE_NAME = "build.xml"
DEFAULT_PROPERTIES_FILE_NAME = "build.properties"


def create_environment() -> Environment:
    """Create the Jinja2 environment of the Ant templates.

    The XML template is autoescaped. The properties template is escaped with the ``properties_*`` filters.
    """
    env = Environment(
        loader=FileSystemLoader(TEMPLATE_DIR),
        autoescape=select_autoescape(enabled_extensions=["xml"], default_for_string=False),
        trim_blocks=True,
        lstrip_blocks=True,
        keep_trailing_newline=True,
    )
    for name, custom_filter in jinja2_extensions.filter_extensions.items():
        env.filters[name] = getattr(jinja2_extensions, custom_filter)
    return env


class AntBuildWriter:
    """This class writes the Ant ``build.xml`` and ``build.properties`` of a Maven project.

    The generated content only depends on the project model and the writer options, so regenerating
    the files of an unchanged project reproduces them byte for byte.
    """

    def __init__(
        self,
        project: ProjectDescriptor,
        local_repository: str,
        offline: bool = False,
        build_file_name: str = DEFAULT_BUILD_FILE_NAME,
        properties_file_name: str = DEFAULT_PROPERTIES_FILE_NAME,
        env: Environment | None = None,
    ) -> None:
        """Initialize instance.

        Parameters
        ----------
        project : ProjectDescriptor
            The Maven project.
        local_repository : str
            The base directory of the local Maven repository.
        offline : bool
            If True, the generated build does not download dependencies.
        build_file_name : str
            The name of the Ant build file, by default ``build.xml``.
        properties_file_name : str
            The name of the properties file, by default ``build.properties``.
        env : Environment | None
            The pre-initiated ``jinja2.Environment``. If not provided, the default one is created.
        """
        self.project = project
        self.local_repository = local_repository.replace(os.sep, "/").rstrip("/") or "/"
        self.offline = offline
        self.build_file_name = build_file_name
        self.properties_file_name = properties_file_name
        self.env = env or create_environment()

    @property
    def build_file_path(self) -> str:
        """Return the path to the generated Ant build file."""
        return os.path.join(self.project.basedir, self.build_file_name)

    @property
    def properties_file_path(self) -> str:
        """Return the path to the generated properties file."""
        return os.path.join(self.project.basedir, self.properties_file_name)

    def get_local_path(self, dependency: Dependency) -> str:
        """Return the path of a dependency in the local repository.

        ``system`` scoped dependencies are not in the repository: their system path is returned instead.
        """
        if dependency.scope == "system" and dependency.system_path:
            return dependency.system_path
        return posixpath.join(self.local_repository, dependency.repository_path)

    def get_dependency_paths(self) -> dict[str, str]:
        """Return the local paths of the dependencies keyed by their ``build.properties`` key.

        Dependencies sharing a key overwrite each other: the last one in declaration order wins.
        """
        paths: dict[str, str] = {}
        for dependency in self.project.dependencies:
            if dependency.property_key in paths:
                logger.debug(
                    "The path of %s overrides the previous value of %s.", dependency.purl, dependency.property_key
                )
            paths[dependency.property_key] = self.get_local_path(dependency)
        return paths

    def _classpath_location(self, dependency: Dependency) -> dict[str, str]:
        if dependency.scope == "system" and dependency.system_path:
            return {"location": dependency.system_path}
        return {"location": f"${{maven.repo.local}}/{dependency.repository_path}"}

    def _render(self, template_name: str) -> str:
        dependencies = self.project.dependencies
        context = {
            "project": self.project,
            "build": self.project.build,
            "local_repository": self.local_repository,
            "offline": self.offline,
            "properties_file_name": self.properties_file_name,
            "compile_classpath": [
                self._classpath_location(dep)
                for dep in dependencies
                if not dep.is_test_only and (dep.from_repository or dep.system_path)
            ],
            "test_classpath": [
                self._classpath_location(dep) for dep in dependencies if dep.from_repository or dep.system_path
            ],
            "downloads": [
                {"path": dep.repository_path, "directory": posixpath.dirname(dep.repository_path)}
                for dep in self.project.repository_dependencies
            ],
            "dependency_paths": self.get_dependency_paths(),
        }
        try:
            return self.env.get_template(template_name).render(context)
        except TemplateError as error:
            raise MojoGlueError(f"Cannot render the {template_name} template: {error}") from error

    def render_build_xml(self) -> str:
        """Return the content of the Ant build file."""
        return self._render("build.xml")

    def render_build_properties(self) -> str:
        """Return the content of the properties file."""
        return self._render("build.properties")

    def write_file(self, file_path: str, data: str) -> str:
        """Write the data into a file.

        Parameters
        ----------
        file_path : str
            The path to the target file.
        data : str
            The data to write into the file.

        Returns
        -------
        str
            The path to the written file.

        Raises
        ------
        DescriptorWriteError
            If the file cannot be written.
        """
        try:
            with open(file_path, mode="w", encoding="utf-8", newline="\n") as file:
                logger.info("Writing to file %s", file_path)
                file.write(data)
        except OSError as error:
            raise DescriptorWriteError(f"Cannot write the file: {error}", path=file_path) from error
        return file_path

    def write_build_xml(self) -> str:
        """Generate the Ant build file in the base directory of the project.

        Returns
        -------
        str
            The path to the written file.

        Raises
        ------
        DescriptorWriteError
            If the file cannot be written.
        """
        return self.write_file(self.build_file_path, self.render_build_xml())

    def write_build_properties(self) -> str:
        """Generate the properties file in the base directory of the project.

        Returns
        -------
        str
            The path to the written file.

        Raises
        ------
        DescriptorWriteError
            If the file cannot be written.
        """
        return self.write_file(self.properties_file_path, self.render_build_properties())
