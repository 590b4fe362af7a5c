# Copyright (c) 2026 - 2026, Oracle and/or its affiliates. All rights reserved.
# Licensed under the Universal Permissive License v 1.0 as shown at https://oss.oracle.com/licenses/upl/.

"""This module contains functions to compute artifact paths in a Maven repository."""

import posixpath

#: The mappings between Maven dependency types and their (extension, classifier).
TYPE_HANDLERS: dict[str, tuple[str, str | None]] = {
    "jar": ("jar", None),
    "test-jar": ("jar", "tests"),
    "maven-plugin": ("jar", None),
    "ejb": ("jar", None),
    "ejb-client": ("jar", "client"),
    "java-source": ("jar", "sources"),
    "javadoc": ("jar", "javadoc"),
    "bundle": ("jar", None),
    "pom": ("pom", None),
}


def get_artifact_path(
    group_id: str,
    artifact_id: str,
    version: str,
    dep_type: str = "jar",
    classifier: str | None = None,
) -> str:
    """Return the path of an artifact relative to the root of a Maven repository.

    The path is always ``/`` separated so it can be used both in URLs and in Ant paths.

    Parameters
    ----------
    group_id : str
        The group ID of the artifact.
    artifact_id : str
        The artifact ID of the artifact.
    version : str
        The version of the artifact.
    dep_type : str
        The Maven type of the artifact, by default ``jar``.
    classifier : str | None
        The classifier of the artifact. If None, the default classifier of the type is used.

    Returns
    -------
    str
        The artifact path.

    Examples
    --------
    >>> get_artifact_path("junit", "junit", "3.8.1")
    'junit/junit/3.8.1/junit-3.8.1.jar'
    >>> get_artifact_path("org.apache.maven", "maven-core", "2.0", dep_type="test-jar")
    'org/apache/maven/maven-core/2.0/maven-core-2.0-tests.jar'
    """
    extension, default_classifier = TYPE_HANDLERS.get(dep_type, (dep_type, None))
    classifier = classifier or default_classifier

    file_name = f"{artifact_id}-{version}"
    if classifier:
        file_name = f"{file_name}-{classifier}"

    return posixpath.join(*group_id.split("."), artifact_id, version, f"{file_name}.{extension}")
