from os import path

from textual import events, work
from textual.app import App, ComposeResult
from textual.containers import HorizontalGroup, HorizontalScroll, Vertical
from textual.screen import ModalScreen
from textual.widgets import Header

from .ActionButtons import (
    DeleteButton,
    QuickFolderButton,
    SettingsButton,
    ShortcutsButton,
)
from .classes.file_service import FileAccessService
from .classes.keymap import key_of
from .classes.session_manager import DisplayUpdate, Notification, SessionManager
from .functions.config import USER_STYLE_PATH, destinations_path
from .navigation_widgets import (
    NextButton,
    OpenFolderButton,
    PreviousButton,
    ReloadButton,
)
from .screens import FolderPicker, QuickFolders, SettingsScreen
from .themes import get_custom_themes
from .variables.constants import Messages, buttons_that_depend_on_image, config
from .WidgetsCore import ImageViewer, InfoBar, ShortcutsPanel


class Application(App):
    CSS_PATH = ["style.tcss", USER_STYLE_PATH]

    HORIZONTAL_BREAKPOINTS = [(0, "-imageonly"), (70, "-all")]

    def __init__(
        self,
        startup_path: str = "",
        config_path: str | None = None,
        service: FileAccessService | None = None,
        *args,
        **kwargs,
    ) -> None:
        super().__init__(*args, **kwargs)
        self.startup_path = startup_path
        if service is None:
            service = FileAccessService(destinations_path(config, config_path))
        if service.folder_prompt is None:
            service.folder_prompt = self.prompt_for_folder
        self.service = service
        self.session = SessionManager(
            service,
            on_display=self.show_display,
            on_notify=self.show_notification,
        )

    def compose(self) -> ComposeResult:
        yield Header(
            name="pixsort",
            show_clock=config["interface"]["show_clock"],
            icon="▣",
        )
        with Vertical(id="root"):
            with HorizontalScroll(id="menu"):
                yield OpenFolderButton()
                yield ReloadButton()
                yield PreviousButton()
                yield NextButton()
                yield DeleteButton()
                yield QuickFolderButton()
                yield SettingsButton()
                yield ShortcutsButton()
            with HorizontalGroup(id="main"):
                yield ImageViewer(id="viewer")
                yield ShortcutsPanel(id="shortcuts")
            yield InfoBar(id="info")

    def on_mount(self) -> None:
        self.query_one("#menu").border_title = "Options"
        self.query_one("#menu").can_focus = False
        self.title = "pixsort"
        for theme in get_custom_themes():
            self.register_theme(theme)
        self.theme = config["interface"]["theme"]
        if not config["interface"]["show_shortcuts"]:
            self.query_one("#shortcuts").add_class("hide")
        self.initialize()

    @work
    async def initialize(self) -> None:
        await self.session.initialize()
        if self.startup_path:
            await self.session.update_source_folder(path.abspath(self.startup_path))
        self.refresh_shortcuts()
        if self.session.config is None:
            self.notify(
                "Nothing configured yet. Open a folder or the settings to begin.",
                title="pixsort",
                severity="warning",
            )

    async def prompt_for_folder(self, initial: str | None = None) -> str | None:
        """Show the folder picker and wait for it. Must run inside a worker."""
        return await self.push_screen_wait(FolderPicker(initial))

    def show_display(self, update: DisplayUpdate) -> None:
        self.query_one("#viewer", ImageViewer).show_image(update)
        self.query_one("#info", InfoBar).update_info(update)
        if update.path is not None:
            self.sub_title = path.dirname(update.path).replace(path.sep, "/")
        else:
            self.sub_title = Messages.no_images
        for selector in buttons_that_depend_on_image:
            self.query_one(selector).disabled = update.is_empty

    def show_notification(self, notification: Notification) -> None:
        self.notify(
            notification.message,
            severity=notification.severity,
            timeout=config["interface"]["status_timeout"],
        )

    def refresh_shortcuts(self) -> None:
        self.query_one("#shortcuts", ShortcutsPanel).update_shortcuts(
            self.session.config
        )

    @work
    async def open_folder(self) -> None:
        current = self.session.config.source_folder if self.session.config else None
        folder = await self.service.pick_folder(current or None)
        if folder:
            await self.session.update_source_folder(folder)
            self.refresh_shortcuts()

    @work
    async def reload_images(self) -> None:
        await self.session.reload()
        self.notify(Messages.reloaded, timeout=config["interface"]["status_timeout"])

    @work
    async def show_settings(self) -> None:
        form = await self.push_screen_wait(
            SettingsScreen(self.session.config, self.service.pick_folder)
        )
        if form is not None and await self.session.save_configuration(form):
            self.refresh_shortcuts()

    def show_quick_folders(self) -> None:
        if self.session.config is None:
            self.notify(
                "Save the settings first.", title="Destinations", severity="warning"
            )
            return
        self.push_screen(
            QuickFolders(
                self.session.config,
                self.service.pick_folder,
                self.session.update_destination_slot,
            ),
            callback=lambda _: self.refresh_shortcuts(),
        )

    def toggle_shortcuts(self) -> None:
        self.query_one("#shortcuts").toggle_class("hide")

    @work
    async def on_key(self, event: events.Key) -> None:
        # modal screens own the keyboard while they are open
        if isinstance(self.screen, ModalScreen):
            return
        match event.key:
            case key if key in config["keybinds"]["open_folder"]:
                self.open_folder()
            case key if key in config["keybinds"]["reload"]:
                self.reload_images()
            case key if key in config["keybinds"]["settings"]:
                self.show_settings()
            case key if key in config["keybinds"]["quick_folders"]:
                self.show_quick_folders()
            case key if key in config["keybinds"]["toggle_shortcuts"]:
                self.toggle_shortcuts()
            case _:
                await self.session.handle_key(key_of(event))
