from dataclasses import dataclass, field


@dataclass
class Destination:
    """A folder that images can be sent to with a single key."""

    name: str = ""
    path: str = ""
    key: str = ""

    def to_dict(self) -> dict[str, str]:
        return {"name": self.name, "path": self.path, "key": self.key}

    @classmethod
    def from_dict(cls, data: dict) -> "Destination":
        if not isinstance(data, dict):
            raise ValueError(f"Expected an object for a destination, got {data!r}")
        return cls(
            name=str(data.get("name") or ""),
            path=str(data.get("path") or ""),
            key=str(data.get("key") or ""),
        )


@dataclass
class Configuration:
    """The persisted settings: where images come from and where they can go.

    Attributes:
        source_folder (str): Folder that is listed for images. Empty if unset.
        destination_folders (dict[str, Destination]): Destinations keyed by their
            slot key. Insertion order is kept and decides which destination wins
            a shared shortcut key.
    """

    source_folder: str = ""
    destination_folders: dict[str, Destination] = field(default_factory=dict)

    @classmethod
    def default(cls) -> "Configuration":
        return cls(
            destination_folders={
                slot: Destination(key=slot) for slot in ("1", "2", "3")
            }
        )

    def to_dict(self) -> dict:
        return {
            "sourceFolder": self.source_folder,
            "destinationFolders": {
                slot: destination.to_dict()
                for slot, destination in self.destination_folders.items()
            },
        }

    @classmethod
    def from_dict(cls, data: dict) -> "Configuration":
        if not isinstance(data, dict):
            raise ValueError("Configuration must be a JSON object")
        folders = data.get("destinationFolders") or {}
        if not isinstance(folders, dict):
            raise ValueError("destinationFolders must be a JSON object")
        return cls(
            source_folder=str(data.get("sourceFolder") or ""),
            destination_folders={
                str(slot): Destination.from_dict(destination)
                for slot, destination in folders.items()
            },
        )


@dataclass
class DestinationEntry:
    """One row of the settings form."""

    slot_key: str
    name: str
    path: str
    key: str


@dataclass
class SettingsForm:
    source_folder: str
    entries: list[DestinationEntry] = field(default_factory=list)

    def to_configuration(self) -> Configuration:
        # rows replace the destinations wholesale, nothing is merged
        return Configuration(
            source_folder=self.source_folder,
            destination_folders={
                entry.slot_key: Destination(
                    name=entry.name, path=entry.path, key=entry.key
                )
                for entry in self.entries
            },
        )
