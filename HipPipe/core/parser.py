"""
Hip File Name Parser

Extracts HipFile records from comma separated file lists, as handed over by
Houdini parameters, file dialogs or directory listings.

Parsing rules:
- Entries are stripped of surrounding whitespace, empty entries are ignored
- The extension is the part after the last dot ("shot.v2_003.hip" -> "hip")
- The stem is split at its last underscore: the trailing token is the
  version, everything before it is the base
- A stem without an underscore is unversioned and gets version 1
- A version token that is not made of digits is malformed
"""

import re
from typing import Iterable, List, Optional, Tuple

from HipPipe.core.errors import HipFileNotFoundError, MalformedVersionError
from HipPipe.core.hip_file import HipFile
from HipPipe.utils.config import get_hip_extensions
from HipPipe.utils.logger import getLogger

logger = getLogger("HipParser")

FILE_SEPARATOR = ","
EXTENSION_SEPARATOR = "."
VERSION_SEPARATOR = "_"

_VERSION_TOKEN = re.compile(r"[0-9]+")


def _resolve_extensions(extensions: Optional[Iterable[str]]) -> frozenset:
    if extensions is None:
        extensions = get_hip_extensions()
    elif isinstance(extensions, str):
        extensions = (extensions,)
    return frozenset(extensions)


def split_file_list(text: str) -> List[str]:
    """
    Split a comma separated file list into file names.

    Args:
        text: File list, e.g. "a.txt, shot01_003.hip"

    Returns:
        List of stripped, non-empty file names
    """
    files = [name.strip() for name in text.split(FILE_SEPARATOR)]
    return [name for name in files if name]


def split_extension(filename: str) -> Tuple[str, str]:
    """
    Split a file name into stem and extension at the last dot.

    Args:
        filename: File name, e.g. "shot.v2_003.hip"

    Returns:
        Tuple of (stem, extension). Extension is empty if there is no dot.
    """
    stem, separator, ext = filename.rpartition(EXTENSION_SEPARATOR)
    if not separator:
        return filename, ""
    return stem, ext


def is_hip_file(filename: str, extensions: Optional[Iterable[str]] = None) -> bool:
    """Check whether a file name has a recognized project file extension."""
    _, ext = split_extension(filename)
    return ext in _resolve_extensions(extensions)


def parse_hip_name(filename: str, extensions: Optional[Iterable[str]] = None) -> HipFile:
    """
    Parse a single project file name.

    Args:
        filename: File name, e.g. "shot01_007.hip"
        extensions: Recognized extensions, defaults to the configured ones

    Returns:
        HipFile record

    Raises:
        HipFileNotFoundError: If the extension is not recognized
        MalformedVersionError: If the version token is not a number

    Examples:
        >>> parse_hip_name("shot01_007.hip")
        HipFile(base='shot01', ext='hip', version=7)
        >>> parse_hip_name("lookdev.hipnc")
        HipFile(base='lookdev', ext='hipnc', version=1)
    """
    stem, ext = split_extension(filename)
    if ext not in _resolve_extensions(extensions):
        raise HipFileNotFoundError(filename)

    base, separator, token = stem.rpartition(VERSION_SEPARATOR)
    if not separator:
        return HipFile(stem, ext)

    if not _VERSION_TOKEN.fullmatch(token):
        raise MalformedVersionError(filename, token)

    return HipFile(base, ext, int(token))


def find_first_hip_file(text: str, extensions: Optional[Iterable[str]] = None) -> HipFile:
    """
    Find the first project file in a comma separated file list.

    Args:
        text: Comma separated file names
        extensions: Recognized extensions, defaults to the configured ones

    Returns:
        HipFile record for the first entry with a recognized extension

    Raises:
        HipFileNotFoundError: If no entry has a recognized extension
        MalformedVersionError: If the first matching entry has an invalid version
    """
    extensions = _resolve_extensions(extensions)

    for filename in split_file_list(text):
        if is_hip_file(filename, extensions):
            return parse_hip_name(filename, extensions)

    raise HipFileNotFoundError(text)


def find_all_hip_files(text: str, extensions: Optional[Iterable[str]] = None) -> List[HipFile]:
    """
    Find all project files in a comma separated file list.

    Entries without a recognized extension and entries with a malformed
    version are skipped. Callers decide whether an empty result deserves
    a warning.

    Args:
        text: Comma separated file names
        extensions: Recognized extensions, defaults to the configured ones

    Returns:
        List of HipFile records in input order
    """
    extensions = _resolve_extensions(extensions)
    hip_files = []

    for filename in split_file_list(text):
        if not is_hip_file(filename, extensions):
            continue
        try:
            hip_files.append(parse_hip_name(filename, extensions))
        except MalformedVersionError as e:
            logger.debug(f"Skipping {filename}: {e}")

    return hip_files


if __name__ == "__main__":
    import sys

    file_list = ",".join(sys.argv[1:]) or "a.txt,shot01_007.hip,lookdev_012.hipnc"
    for hip in find_all_hip_files(file_list):
        print(f"{hip.get_full_name()}: base={hip.base} version={hip.version} ext={hip.ext}")
