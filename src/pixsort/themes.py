from dataclasses import dataclass, field

from textual.theme import Theme

from .variables.constants import config


@dataclass
class PixsortThemeClass(Theme):
    name: str
    primary: str
    secondary: str | None = None
    warning: str | None = None
    error: str | None = None
    success: str | None = None
    accent: str | None = None
    foreground: str | None = None
    background: str | None = None
    surface: str | None = None
    panel: str | None = None
    boost: str | None = None
    dark: bool = True
    luminosity_spread: float = 0.15
    text_alpha: float = 0.95
    variables: dict[str, str] = field(default_factory=dict)


def get_custom_themes() -> list:
    """
    Get the custom themes defined in the config file.

    Returns:
        list: A list of custom themes.
    """
    custom_themes = []
    for theme in config.get("custom_theme", []):
        custom_themes.append(
            PixsortThemeClass(
                name=theme["name"]
                .lower()
                .replace(" ", "-"),  # Keep it similar to default textual behaviour
                primary=theme["primary"],
                secondary=theme.get("secondary"),
                accent=theme.get("accent"),
                foreground=theme.get("foreground"),
                background=theme.get("background"),
                success=theme.get("success"),
                warning=theme.get("warning"),
                error=theme.get("error"),
                surface=theme.get("surface"),
                panel=theme.get("panel"),
                dark=theme.get("is_dark", True),
                variables=theme.get("variables", {}),
            )
        )
    return custom_themes
