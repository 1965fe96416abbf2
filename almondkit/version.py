"""Engine version information."""

MAJOR = 0
MINOR = 1
REVISION = 4


def get_major() -> int:
    """Return the major version number."""
    return MAJOR


def get_minor() -> int:
    """Return the minor version number."""
    return MINOR


def get_revision() -> int:
    """Return the revision number."""
    return REVISION


def get_engine_version() -> str:
    """Return the version as a dotted ``major.minor.revision`` string."""
    return f"{MAJOR}.{MINOR}.{REVISION}"