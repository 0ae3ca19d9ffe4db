from dataclasses import dataclass

from pixsort.functions.config import config_setup, load_config

# Initialize the config once at import time
if "config" not in globals():
    global config
    config_setup()
    config = load_config()


IMAGE_EXTENSIONS = (".jpg", ".jpeg", ".png", ".gif", ".bmp", ".webp")

NEXT_KEYS = ("right",)
PREVIOUS_KEYS = ("left",)
DELETE_KEYS = ("x", "X")


@dataclass
class Messages:
    deleted = "Deleted (moved to recycle bin)"
    collision = "File already exists in destination folder"
    source_updated = "Source folder updated"
    reloaded = "Images reloaded"
    settings_saved = "Settings saved"
    settings_error = "Error saving settings"
    no_images = "No images"
    not_set = "Not set"


buttons_that_depend_on_image = [
    "#previous",
    "#next",
    "#delete",
]
