"""ConfigForge exception hierarchy.

The detection engine itself never raises: every function in
``discovery``, ``core`` and ``extraction`` is total over its input. The
exceptions below belong to the edges of the system (catalog files and input
sources), and all inherit from ConfigForgeError so the CLI can catch them in
one place.
"""


class ConfigForgeError(Exception):
    """Base exception for all ConfigForge errors."""


class CatalogError(ConfigForgeError):
    """Raised when a catalog override file cannot be loaded.

    Covers unreadable files, invalid YAML, unknown catalog keys and entries
    with the wrong shape.
    """


class SourceError(ConfigForgeError):
    """Raised when an input source cannot be read.

    Covers missing paths and unreadable files or directories passed to the
    local source reader.
    """
