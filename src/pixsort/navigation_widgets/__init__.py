from .buttons import NextButton, OpenFolderButton, PreviousButton, ReloadButton

__all__ = [
    "NextButton",
    "OpenFolderButton",
    "PreviousButton",
    "ReloadButton",
]
