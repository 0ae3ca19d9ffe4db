import asyncio
from dataclasses import dataclass, field
from os import path
from typing import Callable, Literal

from textual import log

from pixsort.classes.configuration import Configuration, SettingsForm
from pixsort.classes.file_service import FileAccessService
from pixsort.classes.keymap import KeyBinding, build_keymap, find_key_conflicts
from pixsort.functions.path import folder_display_name
from pixsort.variables.constants import Messages

Severity = Literal["information", "warning", "error"]


@dataclass
class Notification:
    message: str
    severity: Severity = "information"


@dataclass
class DisplayUpdate:
    """What the viewer should show. `path` is None when there is no image."""

    path: str | None
    counter: str
    filename: str

    @property
    def is_empty(self) -> bool:
        return self.path is None


@dataclass
class SessionState:
    """Variables of a triage session.

    Attributes:
        images (list[str]): Absolute paths of the images being browsed, in the
            order the folder listing returned them.
        current_index (int): Index of the shown image. Between 0 and
            len(images) - 1 inclusive while images is non-empty.
        config (Configuration | None): The active configuration, or None if
            nothing has been stored yet.
    """

    images: list[str] = field(default_factory=list)
    current_index: int = 0
    config: Configuration | None = None

    @property
    def current_image(self) -> str | None:
        if not self.images:
            return None
        return self.images[self.current_index]


class SessionManager:
    """Interprets user commands against the session state.

    The manager never touches the filesystem itself; every such request goes
    through the file access service and is awaited. Commands run one at a
    time: each takes `_lock` for its whole duration, so a command never sees
    the half-applied result of another.

    Args:
        service (FileAccessService): Filesystem and dialog operations.
        on_display (Callable[[DisplayUpdate], None] | None): Called with a new
            projection whenever the shown image may have changed.
        on_notify (Callable[[Notification], None] | None): Called with
            transient status messages.
    """

    def __init__(
        self,
        service: FileAccessService,
        on_display: Callable[[DisplayUpdate], None] | None = None,
        on_notify: Callable[[Notification], None] | None = None,
    ) -> None:
        self.service = service
        self.state = SessionState()
        self.keymap: dict[str, KeyBinding] = build_keymap(None)
        self.on_display = on_display or (lambda update: None)
        self.on_notify = on_notify or (lambda notification: None)
        self._lock = asyncio.Lock()

    @property
    def config(self) -> Configuration | None:
        return self.state.config

    def display(self) -> DisplayUpdate:
        """Project the state into what the viewer shows."""
        image = self.state.current_image
        if image is None:
            return DisplayUpdate(None, "0 / 0", Messages.no_images)
        return DisplayUpdate(
            image,
            f"{self.state.current_index + 1} / {len(self.state.images)}",
            path.basename(image),
        )

    def notify(self, message: str, severity: Severity = "information") -> None:
        self.on_notify(Notification(message, severity))

    def _refresh(self) -> None:
        self.on_display(self.display())

    def _set_config(self, config: Configuration | None) -> None:
        self.state.config = config
        self.keymap = build_keymap(config)

    async def initialize(self) -> None:
        async with self._lock:
            self._set_config(await self.service.load_config())
            if self.state.config is None:
                self.state.images = []
                self.state.current_index = 0
                self._refresh()
                return
            await self._reload()

    async def reload(self) -> None:
        async with self._lock:
            await self._reload()

    async def _reload(self) -> None:
        config = self.state.config
        if config is None or not config.source_folder:
            images = []
        else:
            images = await self.service.list_images(config.source_folder)
        log(f"Loaded {len(images)} images")
        self.state.images = images
        self.state.current_index = 0
        self._refresh()

    async def next(self) -> None:
        async with self._lock:
            self._step(1)

    async def previous(self) -> None:
        async with self._lock:
            self._step(-1)

    def _step(self, offset: int) -> None:
        if not self.state.images:
            return
        self.state.current_index = (self.state.current_index + offset) % len(
            self.state.images
        )
        self._refresh()

    def _remove_current(self) -> None:
        """Drop the shown image from the working set and keep the index in range."""
        del self.state.images[self.state.current_index]
        if self.state.current_index >= len(self.state.images):
            self.state.current_index = max(len(self.state.images) - 1, 0)
        self._refresh()

    async def move_current_to(self, slot_key: str) -> bool:
        """
        Move the shown image into a destination folder.

        Args:
            slot_key (str): Slot of the destination in the configuration.

        Returns:
            bool: True if the file was moved and left the working set.
        """
        async with self._lock:
            return await self._move_current_to(slot_key)

    async def _move_current_to(self, slot_key: str) -> bool:
        image = self.state.current_image
        if image is None or self.state.config is None:
            return False
        destination = self.state.config.destination_folders.get(slot_key)
        if destination is None:
            return False
        if not destination.path:
            self.notify(
                f"No folder set for {destination.name or slot_key}", "warning"
            )
            return False
        result = await self.service.move_file(image, destination.path)
        if not result.success:
            self.notify(f"Error: {result.error}", "error")
            return False
        self._remove_current()
        self.notify(f"Moved to {destination.name}")
        return True

    async def delete_current(self) -> bool:
        """Send the shown image to the trash."""
        async with self._lock:
            return await self._delete_current()

    async def _delete_current(self) -> bool:
        image = self.state.current_image
        if image is None:
            return False
        result = await self.service.trash_file(image)
        if not result.success:
            self.notify(f"Error: {result.error}", "error")
            return False
        self._remove_current()
        self.notify(Messages.deleted)
        return True

    async def update_source_folder(self, folder: str) -> None:
        async with self._lock:
            config = self.state.config or Configuration.default()
            config.source_folder = folder
            self._set_config(config)
            result = await self.service.save_config(config)
            await self._reload()
            if not result.success:
                self.notify(f"Error: {result.error}", "error")
                return
            self.notify(Messages.source_updated)

    async def update_destination_slot(self, slot_key: str, folder: str) -> bool:
        """Point a slot at another folder, naming it after the folder."""
        async with self._lock:
            if self.state.config is None:
                return False
            destination = self.state.config.destination_folders.get(slot_key)
            if destination is None:
                return False
            previous = (destination.name, destination.path)
            destination.name = folder_display_name(folder)
            destination.path = folder
            result = await self.service.save_config(self.state.config)
            if not result.success:
                destination.name, destination.path = previous
                self.notify(f"Error: {result.error}", "error")
                return False
            return True

    async def save_configuration(self, form: SettingsForm) -> bool:
        """
        Replace the configuration with the contents of the settings form.

        Destinations missing from the form are dropped. Nothing changes if
        the form has conflicting shortcut keys or cannot be written.

        Args:
            form (SettingsForm): The submitted settings.

        Returns:
            bool: True if the new configuration is now active.
        """
        async with self._lock:
            conflicts = find_key_conflicts(form.entries)
            if conflicts:
                self.notify("\n".join(conflicts), "error")
                return False
            config = form.to_configuration()
            result = await self.service.save_config(config)
            if not result.success:
                self.notify(Messages.settings_error, "error")
                return False
            self._set_config(config)
            self.notify(Messages.settings_saved)
            await self._reload()
            return True

    async def handle_key(self, key: str) -> bool:
        """
        Run the command bound to a key.

        Args:
            key (str): A character, or a Textual key name for special keys.

        Returns:
            bool: Whether the key was bound to anything.
        """
        binding = self.keymap.get(key)
        if binding is None:
            return False
        match binding.action:
            case "next":
                await self.next()
            case "previous":
                await self.previous()
            case "delete":
                await self.delete_current()
            case "move":
                await self.move_current_to(binding.slot_key)
        return True
