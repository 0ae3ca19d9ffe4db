from typing import Awaitable, Callable

from textual import events, work
from textual.app import ComposeResult
from textual.containers import VerticalGroup
from textual.screen import ModalScreen
from textual.widgets import OptionList
from textual.widgets.option_list import Option

from pixsort.classes.configuration import Configuration
from pixsort.functions.path import compress, decompress
from pixsort.variables.constants import Messages


class QuickFolders(ModalScreen):
    """Lists the destination slots; selecting one picks a new folder for it."""

    def __init__(
        self,
        config: Configuration,
        pick_folder: Callable[[str | None], Awaitable[str | None]],
        update_slot: Callable[[str, str], Awaitable[bool]],
        **kwargs,
    ) -> None:
        super().__init__(**kwargs)
        self.config = config
        self.pick_folder = pick_folder
        self.update_slot = update_slot

    def compose(self) -> ComposeResult:
        with VerticalGroup(id="quick_folders_group"):
            yield OptionList(*self.get_options(), id="quick_folders")

    def on_mount(self) -> None:
        group = self.query_one("#quick_folders_group")
        group.border_title = "Destination folders"
        group.border_subtitle = "Enter to change, Esc to close"
        self.query_one("#quick_folders").focus()

    def get_options(self) -> list[Option]:
        width = max(
            (len(destination.name or Messages.not_set) for destination in self.config.destination_folders.values()),
            default=0,
        )
        return [
            Option(
                f" {destination.key or ' '}  {(destination.name or Messages.not_set).ljust(width)}  {destination.path}",
                id=compress(slot_key),
            )
            for slot_key, destination in self.config.destination_folders.items()
        ]

    def refresh_options(self) -> None:
        option_list = self.query_one("#quick_folders", OptionList)
        highlighted = option_list.highlighted
        option_list.clear_options()
        option_list.add_options(self.get_options())
        option_list.highlighted = highlighted

    @work(exclusive=True)
    async def on_option_list_option_selected(self, event: OptionList.OptionSelected) -> None:
        slot_key = decompress(event.option.id)
        destination = self.config.destination_folders.get(slot_key)
        if destination is None:
            return
        folder = await self.pick_folder(destination.path or None)
        if folder and await self.update_slot(slot_key, folder):
            self.refresh_options()

    def on_key(self, event: events.Key) -> None:
        """Handle key presses."""
        match event.key.lower():
            case "escape" | "q":
                event.stop()
                self.dismiss()
