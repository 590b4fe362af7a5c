# Copyright (c) 2026 - 2026, Oracle and/or its affiliates. All rights reserved.
# Licensed under the Universal Permissive License v 1.0 as shown at https://oss.oracle.com/licenses/upl/.

"""This module contains the Jinja2 extension filters used by the Ant build file templates.

All filters will have ``j2_filter_`` as a prefix. The rest of the name will
be the name of that filter in the Jinja2 Environment.

References
----------
    - https://jinja.palletsprojects.com/en/3.1.x/api/#custom-filters
    - https://docs.oracle.com/javase/8/docs/api/java/util/Properties.html#load-java.io.Reader-
"""

_VALUE_ESCAPES = {
    "\\": "\\\\",
    "\n": "\\n",
    "\r": "\\r",
    "\t": "\\t",
    "\f": "\\f",
}

_KEY_ESCAPES = {
    **_VALUE_ESCAPES,
    " ": "\\ ",
    "=": "\\=",
    ":": "\\:",
    "#": "\\#",
    "!": "\\!",
}


def j2_filter_properties_value(value: object) -> str:
    """Escape a value for a Java properties file.

    Parameters
    ----------
    value : object
        The value. It is converted to a string first.

    Returns
    -------
    str
        The escaped value.
    """
    text = "".join(_VALUE_ESCAPES.get(char, char) for char in str(value))
    # A leading space would be dropped when the file is loaded.
    if text.startswith(" "):
        text = "\\" + text
    return text


def j2_filter_properties_key(key: object) -> str:
    """Escape a key for a Java properties file.

    Parameters
    ----------
    key : object
        The key. It is converted to a string first.

    Returns
    -------
    str
        The escaped key.
    """
    return "".join(_KEY_ESCAPES.get(char, char) for char in str(key))


filter_extensions: dict[str, str] = {
    filter_str.replace("j2_filter_", ""): filter_str for filter_str in dir() if filter_str.startswith("j2_filter_")
}
"""The mappings between the name of a filter and its function's name as defined in this module."""
