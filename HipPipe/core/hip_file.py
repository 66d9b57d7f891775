"""
Hip File Record

Describes a versioned Houdini project file name following the studio
convention ``{base}_{version:03d}.{ext}``, e.g. ``shot01_007.hip``.
"""

from typing import Tuple


class HipFile:
    """
    Versioned Houdini project file name.

    Two HipFile objects are equal when they render to the same full name.
    Instances are mutable (see inc_version) and therefore not hashable.

    Attributes:
        base: Name prefix before the trailing version segment
        ext: File extension without the dot ('hip', 'hipnc', ...)
        version: Version number, 0 or greater
    """

    def __init__(self, base: str, ext: str, version: int = 1):
        if isinstance(version, bool) or not isinstance(version, int):
            raise ValueError(f"Version must be an integer, got {version!r}")
        if version < 0:
            raise ValueError(f"Version must be 0 or greater, got {version}")
        for field, value in (("base", base), ("ext", ext)):
            if "," in value or value != value.strip():
                raise ValueError(f"Invalid {field} {value!r}: no commas or surrounding whitespace allowed")
        if not ext or "." in ext:
            raise ValueError(f"Extension must be non-empty and contain no dot, got {ext!r}")

        self.base = base
        self.ext = ext
        self.version = version

    def inc_version(self) -> int:
        """
        Increase the version by 1.

        Returns:
            The new version number
        """
        self.version += 1
        return self.version

    def get_full_name(self) -> str:
        """
        Get the full file name.

        Returns:
            Name formatted as ``{base}_{version:03d}.{ext}``
        """
        return f"{self.base}_{self.version:03d}.{self.ext}"

    def print_name(self):
        """Print the full file name to the console."""
        print(f"this file has name: {self.get_full_name()}")

    def __eq__(self, other):
        if not isinstance(other, HipFile):
            return NotImplemented
        return self.get_full_name() == other.get_full_name()

    __hash__ = None

    def __str__(self):
        return self.get_full_name()

    def __repr__(self):
        return f"HipFile(base={self.base!r}, ext={self.ext!r}, version={self.version})"


def compare_hip_files(a: HipFile, b: HipFile) -> bool:
    """
    Check whether two hip files render to the same full name.

    Args:
        a: First hip file
        b: Second hip file

    Returns:
        True if both full names match
    """
    return a.get_full_name() == b.get_full_name()


def increment_version(hip_file: HipFile) -> Tuple[HipFile, int]:
    """
    Version up a hip file in place.

    Args:
        hip_file: Hip file to update

    Returns:
        Tuple of (updated hip file, new version number)

    Examples:
        >>> hip_file, version = increment_version(HipFile("x", "hip", 1))
        >>> version
        2
    """
    version = hip_file.inc_version()
    return hip_file, version
