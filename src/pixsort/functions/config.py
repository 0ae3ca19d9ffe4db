"""Loading of the application preferences (config.toml)"""

import sys
from os import makedirs, path

import toml
from platformdirs import PlatformDirs

dirs = PlatformDirs("pixsort", appauthor=False)

CONFIG_DIR = dirs.user_config_dir
DEFAULT_CONFIG_PATH = path.join(path.dirname(path.dirname(__file__)), "config", "config.toml")
USER_CONFIG_PATH = path.join(CONFIG_DIR, "config.toml")
USER_STYLE_PATH = path.join(CONFIG_DIR, "style.tcss")
DESTINATIONS_PATH = path.join(CONFIG_DIR, "destinations.json")


def deep_merge(base: dict, override: dict) -> dict:
    """Merge `override` into a copy of `base`, recursing into tables.

    Args:
        base (dict): The default values.
        override (dict): The user supplied values.

    Returns:
        dict: The merged dictionary. Neither argument is modified.
    """
    merged = dict(base)
    for key, value in override.items():
        if isinstance(value, dict) and isinstance(merged.get(key), dict):
            merged[key] = deep_merge(merged[key], value)
        else:
            merged[key] = value
    return merged


def config_setup() -> None:
    """Create the user config folder and empty override files if missing."""
    if not path.exists(CONFIG_DIR):
        makedirs(CONFIG_DIR)
    if not path.exists(USER_CONFIG_PATH):
        with open(USER_CONFIG_PATH, "w") as file:
            file.write("# overrides for pixsort's bundled config.toml\n")
    if not path.exists(USER_STYLE_PATH):
        with open(USER_STYLE_PATH, "a"):
            pass


def load_config(user_config_path: str = USER_CONFIG_PATH) -> dict:
    """
    Load the bundled preferences and layer the user's config.toml on top.

    Args:
        user_config_path (str): Path to the user's override file.

    Returns:
        dict: The merged preferences.
    """
    with open(DEFAULT_CONFIG_PATH, "r") as f:
        config = toml.loads(f.read())
    if not path.exists(user_config_path):
        return config
    try:
        with open(user_config_path, "r") as f:
            user_config = toml.loads(f.read())
    except (OSError, toml.TomlDecodeError) as e:
        print(f"Ignoring {user_config_path}: {e}", file=sys.stderr)
        return config
    return deep_merge(config, user_config)


def destinations_path(config: dict, override: str | None = None) -> str:
    """Where the destinations JSON lives, in order of precedence:
    command line, config.toml, then the user config folder."""
    if override:
        return path.abspath(path.expanduser(override))
    if config["settings"]["config_file"]:
        return path.abspath(path.expanduser(config["settings"]["config_file"]))
    return DESTINATIONS_PATH
