"""
HipPipe - Houdini Project File Pipeline Package

A small pipeline package for working with versioned Houdini project files
(``{base}_{version:03d}.hip``): parsing file lists into structured records,
versioning up the current scene and browsing project files on disk.

The core parser lives in HipPipe.core and has no dependency on Houdini;
the Houdini integration lives in HipPipe.houdini.
"""

__version__ = "0.1.0"
__author__ = "Demo Pipeline"
