from textual.widgets import Button

from pixsort.variables.constants import config


class PreviousButton(Button):
    ALLOW_MAXIMIZE = False

    def __init__(self, *args, **kwargs) -> None:
        super().__init__("←", id="previous", classes="option", *args, **kwargs)
        self.can_focus = False

    def on_mount(self) -> None:
        if config["interface"]["tooltips"]:
            self.tooltip = "Previous image"

    async def on_button_pressed(self, event: Button.Pressed) -> None:
        await self.app.session.previous()


class NextButton(Button):
    ALLOW_MAXIMIZE = False

    def __init__(self, *args, **kwargs) -> None:
        super().__init__("→", id="next", classes="option", *args, **kwargs)
        self.can_focus = False

    def on_mount(self) -> None:
        if config["interface"]["tooltips"]:
            self.tooltip = "Next image"

    async def on_button_pressed(self, event: Button.Pressed) -> None:
        await self.app.session.next()


class ReloadButton(Button):
    ALLOW_MAXIMIZE = False

    def __init__(self, *args, **kwargs) -> None:
        super().__init__("⟳ Reload", id="reload", classes="option", *args, **kwargs)
        self.can_focus = False

    def on_mount(self) -> None:
        if config["interface"]["tooltips"]:
            self.tooltip = "List the source folder again"

    def on_button_pressed(self, event: Button.Pressed) -> None:
        self.app.reload_images()


class OpenFolderButton(Button):
    ALLOW_MAXIMIZE = False

    def __init__(self, *args, **kwargs) -> None:
        super().__init__("Open folder", id="open_folder", classes="option", *args, **kwargs)
        self.can_focus = False

    def on_mount(self) -> None:
        if config["interface"]["tooltips"]:
            self.tooltip = "Choose the folder to sort"

    def on_button_pressed(self, event: Button.Pressed) -> None:
        self.app.open_folder()
