from typing import Awaitable, Callable

from textual import events, on, work
from textual.app import ComposeResult
from textual.containers import HorizontalGroup, VerticalGroup, VerticalScroll
from textual.screen import ModalScreen
from textual.widgets import Button, Input, Label

from pixsort.classes.configuration import (
    Configuration,
    Destination,
    DestinationEntry,
    SettingsForm,
)
from pixsort.classes.keymap import find_key_conflicts
from pixsort.validators import IsShortcutKey, IsValidFilePath
from pixsort.variables.constants import DELETE_KEYS

PickFolder = Callable[[str | None], Awaitable[str | None]]


class DestinationRow(HorizontalGroup):
    """Inputs for one destination slot."""

    def __init__(self, slot_key: str, destination: Destination, **kwargs) -> None:
        super().__init__(classes="destination-row", **kwargs)
        self.slot_key = slot_key
        self.destination = destination

    def compose(self) -> ComposeResult:
        yield Input(
            value=self.destination.key,
            placeholder="key",
            max_length=1,
            classes="dest-key",
            validators=[IsShortcutKey(reserved=DELETE_KEYS)],
        )
        yield Input(value=self.destination.name, placeholder="name", classes="dest-name")
        yield Input(
            value=self.destination.path,
            placeholder="folder",
            classes="dest-path",
            validators=[IsValidFilePath()],
        )
        yield Button("Browse...", classes="browse")
        yield Button("✕", variant="error", classes="remove")

    def on_mount(self) -> None:
        self.border_title = f"Slot {self.slot_key}"

    def to_entry(self) -> DestinationEntry:
        return DestinationEntry(
            slot_key=self.slot_key,
            name=self.query_one(".dest-name", Input).value.strip(),
            path=self.query_one(".dest-path", Input).value.strip(),
            key=self.query_one(".dest-key", Input).value,
        )


class SettingsScreen(ModalScreen):
    """Screen to edit the source folder and the destination slots.

    Dismisses with a SettingsForm on save, None on cancel.
    """

    def __init__(self, config: Configuration | None, pick_folder: PickFolder, **kwargs) -> None:
        super().__init__(**kwargs)
        self.config = config or Configuration.default()
        self.pick_folder = pick_folder

    def compose(self) -> ComposeResult:
        with VerticalGroup(id="settings_group"):
            yield Label("Source folder")
            with HorizontalGroup(id="source_row"):
                yield Input(
                    value=self.config.source_folder,
                    id="source_folder",
                    validators=[IsValidFilePath()],
                )
                yield Button("Browse...", id="browse_source")
            yield Label("Destinations")
            with VerticalScroll(id="destination_rows"):
                for slot_key, destination in self.config.destination_folders.items():
                    yield DestinationRow(slot_key, destination)
            with HorizontalGroup(id="settings_buttons"):
                yield Button("Add destination", id="add_destination")
                yield Button("Save", variant="primary", id="save")
                yield Button("Cancel", variant="error", id="cancel")

    def on_mount(self) -> None:
        self.query_one("#settings_group").border_title = "Settings"
        self.query_one("#settings_group").border_subtitle = "Esc to cancel"
        self.query_one("#source_folder").focus()

    def next_slot_key(self) -> str:
        taken = {row.slot_key for row in self.query(DestinationRow)}
        index = 1
        while str(index) in taken:
            index += 1
        return str(index)

    def get_form(self) -> SettingsForm:
        return SettingsForm(
            source_folder=self.query_one("#source_folder", Input).value.strip(),
            entries=[row.to_entry() for row in self.query(DestinationRow)],
        )

    @on(Button.Pressed, "#browse_source")
    @work
    async def browse_source(self, event: Button.Pressed) -> None:
        source_input = self.query_one("#source_folder", Input)
        folder = await self.pick_folder(source_input.value or None)
        if folder:
            source_input.value = folder

    @on(Button.Pressed, ".browse")
    @work
    async def browse_destination(self, event: Button.Pressed) -> None:
        event.stop()
        row = event.button.parent
        path_input = row.query_one(".dest-path", Input)
        folder = await self.pick_folder(path_input.value or None)
        if folder:
            path_input.value = folder

    @on(Button.Pressed, ".remove")
    async def remove_destination(self, event: Button.Pressed) -> None:
        event.stop()
        await event.button.parent.remove()

    @on(Button.Pressed, "#add_destination")
    async def add_destination(self, event: Button.Pressed) -> None:
        slot_key = self.next_slot_key()
        row = DestinationRow(slot_key, Destination())
        await self.query_one("#destination_rows").mount(row)
        row.scroll_visible()
        row.query_one(".dest-key", Input).focus()

    def submit(self) -> None:
        form = self.get_form()
        conflicts = find_key_conflicts(form.entries)
        if conflicts:
            # stay open so the rows can be corrected
            self.notify("\n".join(conflicts), title="Settings", severity="error")
            return
        self.dismiss(form)

    @on(Button.Pressed, "#save")
    def save(self, event: Button.Pressed) -> None:
        self.submit()

    @on(Button.Pressed, "#cancel")
    def cancel(self, event: Button.Pressed) -> None:
        self.dismiss(None)

    def on_key(self, event: events.Key) -> None:
        """Handle key presses."""
        match event.key:
            case "escape":
                event.stop()
                self.dismiss(None)
            case "ctrl+s":
                event.stop()
                self.submit()
