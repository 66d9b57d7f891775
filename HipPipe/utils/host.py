"""
Host DCC Detection and Houdini Session Utilities

Provides functions to detect the current DCC application, pick the matching
Qt/PySide version and query the Houdini session (version, current hip file).
"""


def getDcc():
    """
    Detect the current DCC application.

    Returns:
        str or None: DCC name ('houdini', 'maya', 'nuke') or None if standalone

    Examples:
        >>> if getDcc() == 'houdini':
        ...     print("Running in Houdini")
    """
    # Houdini first, it is the main host for HipPipe
    try:
        import hou
        return "houdini"
    except ImportError:
        pass

    try:
        import maya.cmds
        return "maya"
    except ImportError:
        pass

    try:
        import nuke
        return "nuke"
    except ImportError:
        pass

    return None


def getPySideVersion(dcc=None):
    """
    Get the appropriate PySide version (2 or 6) for the current DCC.

    - Houdini 19.5 and older: PySide2, Houdini 20+: PySide6
    - Maya 2024 and older: PySide2, Maya 2025+: PySide6
    - Nuke 15 and older: PySide2, Nuke 16+: PySide6
    - Standalone/unknown: PySide6

    Args:
        dcc (str, optional): DCC name. If None, will auto-detect using getDcc()

    Returns:
        int: PySide version (2 or 6)

    Raises:
        RuntimeError: If DCC is detected but its version cannot be determined
    """
    if dcc is None:
        dcc = getDcc()

    if dcc == "houdini":
        version = get_houdini_version()
        if version is None:
            raise RuntimeError("Failed to detect Houdini version")
        return 6 if version[0] >= 20 else 2

    elif dcc == "maya":
        try:
            import maya.cmds as cmds
            maya_version = int(cmds.about(version=True))
        except Exception as e:
            raise RuntimeError(f"Failed to detect Maya version: {e}")
        return 6 if maya_version >= 2025 else 2

    elif dcc == "nuke":
        try:
            import nuke
            major_version = int(nuke.NUKE_VERSION_STRING.split('.')[0])
        except Exception as e:
            raise RuntimeError(f"Failed to detect Nuke version: {e}")
        return 6 if major_version >= 16 else 2

    return 6


def get_houdini_version():
    """
    Get the Houdini version as a tuple (major, minor, build).

    Returns:
        tuple or None: (major, minor, build) or None if not in Houdini
    """
    try:
        import hou
    except ImportError:
        return None

    return tuple(hou.applicationVersion())


def get_current_hip_path():
    """
    Get the full path of the hip file open in the current Houdini session.

    Returns:
        str or None: Hip file path, or None if not running inside Houdini

    Examples:
        >>> get_current_hip_path()
        '/shows/demo/shot01/shot01_004.hip'
    """
    try:
        import hou
    except ImportError:
        return None

    return hou.hipFile.path()


if __name__ == "__main__":
    print(f"Detected DCC: {getDcc()}")
    print(f"PySide Version: {getPySideVersion()}")

    if getDcc() == "houdini":
        print(f"Houdini Version: {get_houdini_version()}")
        print(f"Current hip file: {get_current_hip_path()}")
