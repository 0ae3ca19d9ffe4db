import platform
from os import path
from pathlib import PureWindowsPath

import psutil
from lzstring import LZString

lzstring = LZString()


def compress(text: str) -> str:
    return lzstring.compressToEncodedURIComponent(text)


def decompress(text: str) -> str:
    return lzstring.decompressFromEncodedURIComponent(text)


def normalise(location: str) -> str:
    """Normalise a path and use forward slashes, for display purposes."""
    return path.normpath(location).replace("\\", "/")


def folder_display_name(location: str) -> str:
    """
    Get the last segment of a folder path, whichever separator it uses.

    Args:
        location (str): A folder path such as `C:\\Photos\\Keep` or `/home/me/keep/`.

    Returns:
        str: The final non-empty segment, or the path itself for a root.
    """
    # PureWindowsPath understands both `/` and `\`
    name = PureWindowsPath(location.rstrip("/\\")).name
    return name or location


def has_extension(location: str, extensions: tuple[str, ...]) -> bool:
    """Case-insensitive extension check"""
    return path.splitext(location)[1].lower() in extensions


def get_mounted_drives() -> list:
    """
    Get a list of mounted drives on the system.

    Returns:
        list: List of mounted drives.
    """
    drives = []
    try:
        partitions = psutil.disk_partitions(all=False)

        if platform.system() == "Windows":
            drives = [
                p.mountpoint.replace("\\", "/")
                for p in partitions
                if p.device and ":" in p.device
            ]
        else:
            drives = [
                p.mountpoint
                for p in partitions
                if p.fstype not in ("autofs", "devfs", "devtmpfs", "tmpfs")
            ]
    except Exception as e:
        print(f"Error getting mounted drives: {e}")
        print("Using fallback method")
        drives = [path.expanduser("~")]
    return drives
