import asyncio
from os import path

from humanize import naturalsize
from PIL import Image as PILImage
from PIL import ImageOps
from textual import log, work
from textual.app import ComposeResult
from textual.containers import Container, Horizontal, HorizontalGroup, VerticalGroup
from textual.widgets import Label, OptionList
from textual.widgets.option_list import Option
from textual_image.widget import AutoImage

from pixsort.classes.configuration import Configuration
from pixsort.classes.session_manager import DisplayUpdate
from pixsort.functions.path import compress
from pixsort.variables.constants import DELETE_KEYS, Messages


class ImageViewer(Container):
    """Shows the current image, or a message when there is none."""

    def __init__(self, *args, **kwargs) -> None:
        super().__init__(*args, **kwargs)
        self._current_path: str | None = None

    def compose(self) -> ComposeResult:
        yield Label(Messages.no_images, id="no_image_msg")

    @work(exclusive=True)
    async def show_image(self, update: DisplayUpdate) -> None:
        """Swap the viewer's content for the image of `update`"""
        if update.path == self._current_path and self.children:
            return
        self._current_path = update.path
        await self.remove_children()
        if update.is_empty:
            self.border_title = ""
            await self.mount(Label(Messages.no_images, id="no_image_msg"))
            return
        try:
            image = await asyncio.to_thread(self.open_image, update.path)
        except (OSError, PILImage.DecompressionBombError) as e:
            log(f"Cannot preview {update.path}: {e}")
            await self.mount(
                Label(f"Cannot preview {update.filename}", id="no_image_msg")
            )
            return
        await self.mount(AutoImage(image, id="image_preview"))
        self.border_title = update.filename

    @staticmethod
    def open_image(image_path: str) -> PILImage.Image:
        with PILImage.open(image_path) as image:
            image.load()
            # respect the camera's orientation flag
            return ImageOps.exif_transpose(image)


class InfoBar(HorizontalGroup):
    """Counter, file name and file size of the current image"""

    def compose(self) -> ComposeResult:
        yield Label("0 / 0", id="image_counter")
        yield Label(Messages.no_images, id="filename")
        yield Label("", id="filesize")

    def update_info(self, update: DisplayUpdate) -> None:
        self.query_one("#image_counter", Label).update(update.counter)
        self.query_one("#filename", Label).update(update.filename)
        size = ""
        if update.path is not None:
            try:
                size = naturalsize(path.getsize(update.path))
            except OSError:
                size = ""
        self.query_one("#filesize", Label).update(size)


class ShortcutsPanel(VerticalGroup):
    """Side panel listing the fixed keys and each destination's key"""

    def compose(self) -> ComposeResult:
        with Horizontal():
            yield OptionList(id="shortcuts_keys")
            yield OptionList(id="shortcuts_descriptions")

    def on_mount(self) -> None:
        self.border_title = "Shortcuts"
        self.shortcuts_keys = self.query_one("#shortcuts_keys", OptionList)
        self.shortcuts_descriptions = self.query_one(
            "#shortcuts_descriptions", OptionList
        )
        self.shortcuts_keys.can_focus = False
        self.shortcuts_descriptions.can_focus = False

    def get_keybind_data(self, config: Configuration | None) -> list[tuple[str, str, str]]:
        keybind_data = [
            ("next", "→", "Next image"),
            ("previous", "←", "Previous image"),
            ("delete", "/".join(DELETE_KEYS), "Delete"),
        ]
        if config is not None:
            for slot_key, destination in config.destination_folders.items():
                if destination.key:
                    keybind_data.append(
                        (
                            compress(slot_key),
                            destination.key,
                            f"→ {destination.name or Messages.not_set}",
                        )
                    )
        return keybind_data

    def update_shortcuts(self, config: Configuration | None) -> None:
        self.shortcuts_keys.clear_options()
        self.shortcuts_descriptions.clear_options()
        for option_id, keys, description in self.get_keybind_data(config):
            self.shortcuts_keys.add_option(Option(f" {keys} ", id=option_id))
            self.shortcuts_descriptions.add_option(Option(f" {description} "))
