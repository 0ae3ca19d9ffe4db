from pixsort.classes.configuration import Configuration, Destination, DestinationEntry
from pixsort.classes.keymap import KeyBinding, build_keymap, find_key_conflicts


def make_config(*destinations: tuple[str, str]) -> Configuration:
    return Configuration(
        source_folder="/in",
        destination_folders={
            slot: Destination(name=f"dest {slot}", path=f"/out/{slot}", key=key)
            for slot, key in destinations
        },
    )


def test_fixed_bindings_without_config():
    keymap = build_keymap(None)
    assert keymap == {
        "right": KeyBinding("next"),
        "left": KeyBinding("previous"),
        "x": KeyBinding("delete"),
        "X": KeyBinding("delete"),
    }


def test_destinations_are_bound_by_their_key():
    keymap = build_keymap(make_config(("1", "a"), ("2", "b")))
    assert keymap["a"] == KeyBinding("move", "1")
    assert keymap["b"] == KeyBinding("move", "2")


def test_first_inserted_destination_wins_a_shared_key():
    keymap = build_keymap(make_config(("second", "k"), ("first", "k")))
    assert keymap["k"] == KeyBinding("move", "second")


def test_fixed_bindings_win_over_destinations():
    keymap = build_keymap(make_config(("1", "x"), ("2", "X")))
    assert keymap["x"] == KeyBinding("delete")
    assert keymap["X"] == KeyBinding("delete")
    assert KeyBinding("move", "1") not in keymap.values()


def test_unbound_destinations_are_skipped():
    keymap = build_keymap(make_config(("1", ""), ("2", "b")))
    assert "" not in keymap
    assert list(keymap.values()).count(KeyBinding("move", "2")) == 1


def test_keys_are_case_sensitive():
    keymap = build_keymap(make_config(("1", "a"), ("2", "A")))
    assert keymap["a"].slot_key == "1"
    assert keymap["A"].slot_key == "2"


def test_no_conflicts_for_distinct_keys():
    entries = [
        DestinationEntry("1", "Keep", "/keep", "k"),
        DestinationEntry("2", "Maybe", "/maybe", "m"),
        DestinationEntry("3", "Unbound", "/unbound", ""),
    ]
    assert find_key_conflicts(entries) == []


def test_conflicts_are_reported():
    entries = [
        DestinationEntry("1", "Keep", "/keep", "k"),
        DestinationEntry("2", "Also keep", "/keep2", "k"),
        DestinationEntry("3", "Trash", "/trash", "x"),
        DestinationEntry("4", "", "/long", "ab"),
    ]
    conflicts = find_key_conflicts(entries)
    assert len(conflicts) == 3
    assert "Also keep" in conflicts[0] and "Keep" in conflicts[0]
    assert "reserved" in conflicts[1]
    assert conflicts[2].startswith("4:")
