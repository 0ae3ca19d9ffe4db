import pytest

from pixsort.classes.configuration import (
    Configuration,
    Destination,
    DestinationEntry,
    SettingsForm,
)


def test_to_dict_uses_persisted_field_names():
    config = Configuration(
        source_folder="/photos/inbox",
        destination_folders={"1": Destination("Keep", "/photos/keep", "k")},
    )
    assert config.to_dict() == {
        "sourceFolder": "/photos/inbox",
        "destinationFolders": {
            "1": {"name": "Keep", "path": "/photos/keep", "key": "k"},
        },
    }


def test_from_dict_fills_missing_fields():
    config = Configuration.from_dict(
        {"destinationFolders": {"a": {"path": "/x"}, "b": {}}}
    )
    assert config.source_folder == ""
    assert config.destination_folders == {
        "a": Destination(name="", path="/x", key=""),
        "b": Destination(),
    }


def test_from_dict_treats_null_fields_as_empty():
    config = Configuration.from_dict(
        {
            "sourceFolder": None,
            "destinationFolders": {
                "1": {"name": None, "path": None, "key": None},
            },
        }
    )
    assert config.source_folder == ""
    assert config.destination_folders["1"] == Destination()


def test_from_dict_keeps_slot_order():
    config = Configuration.from_dict(
        {"destinationFolders": {"z": {}, "a": {}, "m": {}}}
    )
    assert list(config.destination_folders) == ["z", "a", "m"]


@pytest.mark.parametrize(
    "payload",
    [
        [],
        "config",
        {"destinationFolders": ["not", "a", "mapping"]},
        {"destinationFolders": {"1": "keep"}},
    ],
)
def test_from_dict_rejects_wrong_shapes(payload):
    with pytest.raises(ValueError):
        Configuration.from_dict(payload)


def test_default_has_three_numbered_slots():
    config = Configuration.default()
    assert config.source_folder == ""
    assert [(slot, d.key) for slot, d in config.destination_folders.items()] == [
        ("1", "1"),
        ("2", "2"),
        ("3", "3"),
    ]


def test_settings_form_replaces_destinations():
    form = SettingsForm(
        source_folder="/in",
        entries=[DestinationEntry("2", "Trip", "/trip", "t")],
    )
    config = form.to_configuration()
    assert config == Configuration(
        source_folder="/in",
        destination_folders={"2": Destination("Trip", "/trip", "t")},
    )
