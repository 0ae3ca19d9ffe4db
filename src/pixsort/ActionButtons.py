from textual.widgets import Button

from .variables.constants import config


class DeleteButton(Button):
    ALLOW_MAXIMIZE = False

    def __init__(self, *args, **kwargs):
        super().__init__(
            "✕ Delete", variant="error", classes="option", id="delete", *args, **kwargs
        )
        self.can_focus = False

    def on_mount(self):
        if config["interface"]["tooltips"]:
            self.tooltip = "Send the current image to the recycle bin"

    async def on_button_pressed(self, event: Button.Pressed) -> None:
        await self.app.session.delete_current()


class QuickFolderButton(Button):
    ALLOW_MAXIMIZE = False

    def __init__(self, *args, **kwargs):
        super().__init__(
            "Destinations", classes="option", id="quick_folders", *args, **kwargs
        )
        self.can_focus = False

    def on_mount(self):
        if config["interface"]["tooltips"]:
            self.tooltip = "Change where each shortcut sends images"

    def on_button_pressed(self, event: Button.Pressed) -> None:
        self.app.show_quick_folders()


class SettingsButton(Button):
    ALLOW_MAXIMIZE = False

    def __init__(self, *args, **kwargs):
        super().__init__("Settings", classes="option", id="settings", *args, **kwargs)
        self.can_focus = False

    def on_mount(self):
        if config["interface"]["tooltips"]:
            self.tooltip = "Edit source and destination folders"

    def on_button_pressed(self, event: Button.Pressed) -> None:
        self.app.show_settings()


class ShortcutsButton(Button):
    ALLOW_MAXIMIZE = False

    def __init__(self, *args, **kwargs):
        super().__init__("?", classes="option", id="toggle_shortcuts", *args, **kwargs)
        self.can_focus = False

    def on_mount(self):
        if config["interface"]["tooltips"]:
            self.tooltip = "Show or hide the shortcuts panel"

    def on_button_pressed(self, event: Button.Pressed) -> None:
        self.app.toggle_shortcuts()
