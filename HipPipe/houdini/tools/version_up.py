"""
Version Up Tool - Save the Current Scene as the Next Version

Parses the name of the open hip file, bumps its version and saves the
session next to it, e.g. shot01_004.hip -> shot01_005.hip.
"""

from pathlib import Path

from HipPipe.core.errors import HipPipeError
from HipPipe.core.hip_file import increment_version
from HipPipe.core.parser import parse_hip_name
from HipPipe.utils.host import get_current_hip_path
from HipPipe.utils.logger import getLogger

# Initialize logger
logger = getLogger("VersionUp")


def next_version_path(hip_path, extensions=None, skip_existing=True):
    """
    Get the path of the next version of a hip file.

    Args:
        hip_path: Path of the current hip file
        extensions: Recognized extensions, defaults to the configured ones
        skip_existing: Keep versioning up while the target file already exists

    Returns:
        str: Path of the next version, in the same directory

    Raises:
        HipFileNotFoundError: If the file is not a project file
        MalformedVersionError: If the file name carries an invalid version
    """
    hip_path = Path(hip_path)
    hip_file = parse_hip_name(hip_path.name, extensions)

    increment_version(hip_file)
    target = hip_path.with_name(hip_file.get_full_name())

    while skip_existing and target.exists():
        logger.debug(f"{target.name} already exists, skipping")
        increment_version(hip_file)
        target = hip_path.with_name(hip_file.get_full_name())

    return str(target)


def version_up_current_hip():
    """
    Save the current Houdini session as the next version.

    Returns:
        str or None: Saved path, or None if the scene could not be versioned up
    """
    import hou

    current_path = get_current_hip_path()

    if hou.hipFile.isNewFile():
        logger.warning("Scene has never been saved, refusing to version up")
        hou.ui.displayMessage(
            "Save this scene before versioning it up.",
            severity=hou.severityType.Warning,
            title="Version Up"
        )
        return None

    logger.info(f"Versioning up: {current_path}")

    try:
        new_path = next_version_path(current_path)
    except HipPipeError as e:
        logger.error(f"Cannot version up {current_path}: {e}")
        hou.ui.displayMessage(
            f"Cannot version up this scene:\n\n{e}",
            severity=hou.severityType.Error,
            title="Version Up"
        )
        return None

    hou.hipFile.save(file_name=new_path)
    logger.info(f"Saved new version: {new_path}")
    return new_path


def register():
    """
    Register the Version Up tool with HipPipe.

    Returns:
        Dictionary with tool metadata for shelf registration
    """
    return {
        'menu_name': 'Version Up',
        'action': version_up_current_hip
    }
