from .folder_picker import FolderPicker
from .quick_folders import QuickFolders
from .settings import SettingsScreen

__all__ = ["FolderPicker", "QuickFolders", "SettingsScreen"]
