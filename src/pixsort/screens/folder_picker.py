from os import path, scandir
from pathlib import Path
from typing import Iterable

from textual import events, on
from textual.app import ComposeResult
from textual.containers import HorizontalGroup, VerticalGroup
from textual.screen import ModalScreen
from textual.widgets import Button, DirectoryTree, Input, OptionList
from textual.widgets.option_list import Option
from textual_autocomplete import DropdownItem, PathAutoComplete, TargetState

from pixsort.functions.path import compress, decompress, get_mounted_drives
from pixsort.validators import IsExistingFolder
from pixsort.variables.constants import config


class PathDropdownItem(DropdownItem):
    def __init__(self, completion: str, path: Path) -> None:
        super().__init__(completion)
        self.path = path


class FolderAutoComplete(PathAutoComplete):
    def get_candidates(self, target_state: TargetState) -> list[DropdownItem]:
        """Get the candidates for the current path segment, folders only."""
        current_input = target_state.text[: target_state.cursor_position]

        if "/" in current_input:
            last_slash_index = current_input.rindex("/")
            path_segment = current_input[:last_slash_index] or "/"
            directory = self.path / path_segment if path_segment != "/" else Path("/")
        else:
            directory = self.path

        cache_key = str(directory)
        cached_entries = self._directory_cache.get(cache_key)

        if cached_entries is not None:
            entries = cached_entries
        else:
            try:
                entries = list(scandir(directory))
                self._directory_cache[cache_key] = entries
            except OSError:
                return []

        results: list[PathDropdownItem] = []
        for entry in entries:
            try:
                is_dir = entry.is_dir()
            except OSError:
                continue
            if not is_dir:
                continue
            completion = entry.name
            if not self.show_dotfiles and completion.startswith("."):
                continue
            results.append(PathDropdownItem(completion + "/", path=Path(entry.path)))

        if not results:
            return [DropdownItem("", prefix="No folders found")]

        results.sort(key=self.sort_key)
        return [
            DropdownItem(item.main, prefix=self.folder_prefix) for item in results
        ]


class FolderTree(DirectoryTree):
    def filter_paths(self, paths: Iterable[Path]) -> Iterable[Path]:
        show_hidden = config["settings"]["show_hidden_folders"]
        return [
            item
            for item in paths
            if item.is_dir() and (show_hidden or not item.name.startswith("."))
        ]


class FolderPicker(ModalScreen):
    """Screen with a dialog to choose a folder.

    Dismisses with the chosen absolute path, or None when cancelled.
    """

    def __init__(self, initial: str | None = None, border_title: str = "Select folder", **kwargs) -> None:
        super().__init__(**kwargs)
        if initial and path.isdir(initial):
            self.initial = path.abspath(initial)
        else:
            self.initial = path.expanduser("~")
        self.border_title = border_title

    def compose(self) -> ComposeResult:
        with VerticalGroup(id="picker_group"):
            folder_input = Input(
                value=self.initial.replace(path.sep, "/"),
                id="folder_input",
                validators=[IsExistingFolder()],
                validate_on=["changed", "submitted"],
            )
            yield folder_input
            yield FolderAutoComplete(
                target=folder_input,
                path=self.initial,
                show_dotfiles=config["settings"]["show_hidden_folders"],
            )
            with HorizontalGroup(id="picker_main"):
                yield OptionList(
                    *[
                        Option(f" {drive}", id=compress(drive))
                        for drive in get_mounted_drives()
                    ],
                    id="drives",
                )
                yield FolderTree(self.initial, id="folder_tree")
            with HorizontalGroup(id="picker_buttons"):
                yield Button("\\[S]elect", variant="primary", id="select")
                yield Button("\\[C]ancel", variant="error", id="cancel")

    def on_mount(self) -> None:
        self.query_one("#picker_group").border_title = self.border_title
        self.query_one("#drives").border_title = "Drives"
        self.query_one("#folder_tree").border_title = "Folders"
        self.query_one("#picker_group").border_subtitle = "Esc to cancel"
        self.query_one("#folder_tree").focus()

    @on(DirectoryTree.DirectorySelected)
    def on_directory_selected(self, event: DirectoryTree.DirectorySelected) -> None:
        event.stop()
        self.query_one("#folder_input", Input).value = str(event.path).replace(
            path.sep, "/"
        )

    @on(OptionList.OptionSelected, "#drives")
    def on_drive_selected(self, event: OptionList.OptionSelected) -> None:
        event.stop()
        drive = decompress(event.option.id)
        self.query_one("#folder_tree", FolderTree).path = drive
        self.query_one("#folder_input", Input).value = drive

    def on_input_submitted(self, event: Input.Submitted) -> None:
        event.stop()
        self.submit()

    @on(Button.Pressed, "#select")
    def on_select_pressed(self, event: Button.Pressed) -> None:
        self.submit()

    @on(Button.Pressed, "#cancel")
    def on_cancel_pressed(self, event: Button.Pressed) -> None:
        self.dismiss(None)

    def submit(self) -> None:
        folder_input = self.query_one("#folder_input", Input)
        if not folder_input.is_valid:
            self.notify(
                "Folder does not exist.", title="Select folder", severity="warning"
            )
            return
        self.dismiss(path.abspath(path.expanduser(folder_input.value)))

    def on_key(self, event: events.Key) -> None:
        """Handle key presses."""
        if self.focused is not None and isinstance(self.focused, Input):
            if event.key == "escape":
                event.stop()
                self.dismiss(None)
            return
        match event.key:
            case "escape" | "c":
                event.stop()
                self.dismiss(None)
            case "s":
                event.stop()
                self.submit()
            case "tab":
                event.stop()
                self.focus_next()
            case "shift+tab":
                event.stop()
                self.focus_previous()
