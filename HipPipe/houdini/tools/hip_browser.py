"""
Hip Browser Tool - Browse Versioned Project Files on Disk

Lists the Houdini project files of a directory, optionally reduced to the
latest version of each file, and opens the chosen one in the session.
Integrates with the Hip Browser Widget for user interaction.
"""

from pathlib import Path

from HipPipe.core.parser import FILE_SEPARATOR, find_all_hip_files
from HipPipe.utils.host import get_current_hip_path
from HipPipe.utils.logger import getLogger

# Initialize logger
logger = getLogger("HipBrowser")


def list_hip_files(directory, extensions=None):
    """
    List the project files found in a directory.

    Args:
        directory: Directory to scan (not recursive)
        extensions: Recognized extensions, defaults to the configured ones

    Returns:
        List of HipFile records sorted by file name
    """
    directory = Path(directory)
    names = []

    for path in sorted(directory.iterdir()):
        if not path.is_file():
            continue
        # A comma would split the name in two entries
        if FILE_SEPARATOR in path.name:
            logger.debug(f"Skipping file with a comma in its name: {path.name}")
            continue
        names.append(path.name)

    hip_files = find_all_hip_files(FILE_SEPARATOR.join(names), extensions)

    if not hip_files:
        logger.warning(f"No Houdini projects found in {directory}")
    else:
        logger.info(f"Found {len(hip_files)} Houdini project(s) in {directory}")

    return hip_files


def latest_versions(hip_files):
    """
    Keep only the highest version of each project file.

    Files are grouped by base name and extension, so shot01.hip and
    shot01.hipnc are versioned separately.

    Args:
        hip_files: Iterable of HipFile records

    Returns:
        List of HipFile records in the order each group was first seen
    """
    latest = {}

    for hip_file in hip_files:
        key = (hip_file.base, hip_file.ext)
        current = latest.get(key)
        if current is None or hip_file.version > current.version:
            latest[key] = hip_file

    return list(latest.values())


# Global reference to widget
_widget = None


def show_hip_browser_widget():
    """
    Show the Hip Browser widget.

    This is the main entry point called from the HipPipe shelf.
    """
    global _widget

    from HipPipe.houdini.widgets.hip_browser_widget import HipBrowserWidget

    if _widget is None:
        current_path = get_current_hip_path()
        start_dir = Path(current_path).parent if current_path else Path.cwd()

        _widget = HipBrowserWidget(str(start_dir))
        _widget.open_requested.connect(_on_open_requested)

    _widget.refresh()
    _widget.show()
    _widget.raise_()
    _widget.activateWindow()


def _on_open_requested(path):
    """
    Handle open request signal from widget.

    Args:
        path: Full path of the hip file to load
    """
    import hou

    logger.info(f"Opening {path}")
    try:
        hou.hipFile.load(path)
    except hou.OperationFailed as e:
        logger.error(f"Failed to open {path}: {e}")
        _widget.show_error("Open Failed", f"Failed to open {path}:\n\n{e}")


def register():
    """
    Register the Hip Browser tool with HipPipe.

    Returns:
        Dictionary with tool metadata for shelf registration
    """
    return {
        'menu_name': 'Hip Browser',
        'action': show_hip_browser_widget
    }
