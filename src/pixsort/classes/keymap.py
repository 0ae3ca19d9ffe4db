from dataclasses import dataclass
from typing import Literal

from textual import events, log

from pixsort.classes.configuration import Configuration, DestinationEntry
from pixsort.variables.constants import DELETE_KEYS, NEXT_KEYS, PREVIOUS_KEYS

Action = Literal["next", "previous", "delete", "move"]


@dataclass(frozen=True)
class KeyBinding:
    action: Action
    slot_key: str | None = None


FIXED_BINDINGS: dict[str, KeyBinding] = {
    **{key: KeyBinding("next") for key in NEXT_KEYS},
    **{key: KeyBinding("previous") for key in PREVIOUS_KEYS},
    **{key: KeyBinding("delete") for key in DELETE_KEYS},
}


def build_keymap(config: Configuration | None) -> dict[str, KeyBinding]:
    """
    Build the key to action table for a configuration.

    Fixed bindings are inserted first, then destinations in slot order. A
    destination whose key is empty or already taken is skipped, so the first
    inserted binding always wins.

    Args:
        config (Configuration | None): The active configuration.

    Returns:
        dict[str, KeyBinding]: Key (character or Textual key name) to binding.
    """
    keymap = dict(FIXED_BINDINGS)
    if config is None:
        return keymap
    for slot_key, destination in config.destination_folders.items():
        if not destination.key:
            continue
        if destination.key in keymap:
            log(
                f"Key {destination.key!r} of {slot_key!r} is already bound to "
                f"{keymap[destination.key]}, skipping"
            )
            continue
        keymap[destination.key] = KeyBinding("move", slot_key)
    return keymap


def find_key_conflicts(entries: list[DestinationEntry]) -> list[str]:
    """
    Check the shortcut keys of a settings form.

    Args:
        entries (list[DestinationEntry]): The submitted destination rows.

    Returns:
        list[str]: One message per problem; empty when the form is fine.
    """
    conflicts = []
    seen: dict[str, str] = {}
    for entry in entries:
        label = entry.name or entry.slot_key
        if not entry.key:
            continue
        if len(entry.key) != 1:
            conflicts.append(f"{label}: shortcut must be a single character")
        elif entry.key in FIXED_BINDINGS:
            conflicts.append(f"{label}: '{entry.key}' is reserved for delete")
        elif entry.key in seen:
            conflicts.append(
                f"{label}: '{entry.key}' is already used by {seen[entry.key]}"
            )
        else:
            seen[entry.key] = label
    return conflicts


def key_of(event: events.Key) -> str:
    """The keymap name of a key press: the typed character when printable,
    Textual's key name otherwise (`right`, `left`, ...)."""
    if event.is_printable and event.character:
        return event.character
    return event.key
