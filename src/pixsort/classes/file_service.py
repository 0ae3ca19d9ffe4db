import asyncio
import shutil
from dataclasses import dataclass
from os import makedirs, path, scandir
from typing import Awaitable, Callable

import ujson
from send2trash import send2trash
from textual import log

from pixsort.classes.configuration import Configuration
from pixsort.functions.path import has_extension
from pixsort.variables.constants import IMAGE_EXTENSIONS, Messages

FolderPrompt = Callable[[str | None], Awaitable[str | None]]


@dataclass
class OperationResult:
    """Outcome of a mutating file request."""

    success: bool
    error: str | None = None
    new_path: str | None = None


class FileAccessService:
    """Every filesystem and dialog operation the session needs.

    Requests are coroutines. Blocking work runs in a worker thread so the
    event loop keeps drawing; the service itself keeps no UI state.

    Attributes:
        config_path (str): Where the destinations JSON is read and written.
        folder_prompt (FolderPrompt | None): Coroutine function that asks the
            user for a folder. Without one, `pick_folder` always returns None.
    """

    def __init__(self, config_path: str, folder_prompt: FolderPrompt | None = None) -> None:
        self.config_path = config_path
        self.folder_prompt = folder_prompt

    async def load_config(self) -> Configuration | None:
        return await asyncio.to_thread(self._load_config)

    def _load_config(self) -> Configuration | None:
        try:
            with open(self.config_path, "r", encoding="utf-8") as f:
                return Configuration.from_dict(ujson.load(f))
        except FileNotFoundError:
            log(f"No configuration at {self.config_path}")
            return None
        except (OSError, ValueError) as e:
            log(f"Error loading config: {e}")
            return None

    async def save_config(self, config: Configuration) -> OperationResult:
        return await asyncio.to_thread(self._save_config, config)

    def _save_config(self, config: Configuration) -> OperationResult:
        try:
            folder = path.dirname(self.config_path)
            if folder:
                makedirs(folder, exist_ok=True)
            with open(self.config_path, "w", encoding="utf-8") as f:
                ujson.dump(
                    config.to_dict(),
                    f,
                    escape_forward_slashes=False,
                    ensure_ascii=False,
                    indent=2,
                )
        except OSError as e:
            log(f"Error saving config: {e}")
            return OperationResult(False, error=str(e))
        return OperationResult(True)

    async def list_images(self, folder: str) -> list[str]:
        return await asyncio.to_thread(self._list_images, folder)

    def _list_images(self, folder: str) -> list[str]:
        """Files of `folder` with a recognised image extension, in listing order."""
        folder = path.abspath(folder)
        try:
            with scandir(folder) as entries:
                return [
                    path.join(folder, entry.name)
                    for entry in entries
                    if has_extension(entry.name, IMAGE_EXTENSIONS) and entry.is_file()
                ]
        except OSError as e:
            log(f"Error loading images: {e}")
            return []

    async def move_file(self, source: str, destination_folder: str) -> OperationResult:
        return await asyncio.to_thread(self._move_file, source, destination_folder)

    def _move_file(self, source: str, destination_folder: str) -> OperationResult:
        try:
            if not path.exists(destination_folder):
                makedirs(destination_folder)
            destination = path.join(destination_folder, path.basename(source))
            if path.exists(destination):
                return OperationResult(False, error=Messages.collision)
            shutil.move(source, destination)
        except OSError as e:
            log(f"Error moving file: {e}")
            return OperationResult(False, error=str(e))
        return OperationResult(True, new_path=destination)

    async def trash_file(self, file_path: str) -> OperationResult:
        return await asyncio.to_thread(self._trash_file, file_path)

    def _trash_file(self, file_path: str) -> OperationResult:
        try:
            send2trash(file_path)
        except Exception as e:
            log(f"Error deleting file: {e}")
            return OperationResult(False, error=str(e) or type(e).__name__)
        return OperationResult(True)

    async def pick_folder(self, initial: str | None = None) -> str | None:
        """Ask the user for a folder. Cancelling is not an error."""
        if self.folder_prompt is None:
            return None
        chosen = await self.folder_prompt(initial)
        if not chosen:
            return None
        chosen = path.abspath(path.expanduser(chosen))
        if not path.isdir(chosen):
            log(f"Picked folder {chosen} does not exist")
            return None
        return chosen
