from os import mkdir
from pathlib import Path

from PIL import Image

from pixsort.classes.configuration import Configuration
from pixsort.classes.file_service import FileAccessService, OperationResult

TEST_FILE_CONTENT_1 = "file data"


# Let the exceptions roam wild
def setup_test_dir(*args: Path):
    for dir in args:
        mkdir(dir)


# Let the exceptions roam wild
def setup_test_files(*args: Path):
    for file in args:
        file.write_text(TEST_FILE_CONTENT_1)


def setup_test_images(*args: Path):
    for file in args:
        Image.new("RGB", (4, 4), "red").save(file, format="PNG")


class ScriptedService(FileAccessService):
    """A file service that works on lists instead of a disk.

    Attributes:
        listing (list[str]): What list_images returns.
        fail_with (str | None): When set, move and trash fail with this message.
        fail_saves (bool): When set, save_config fails.
    """

    def __init__(self, listing: list[str], config: Configuration | None = None) -> None:
        super().__init__(config_path="unused.json")
        self.listing = listing
        self.stored = config
        self.fail_with: str | None = None
        self.fail_saves = False
        self.moves: list[tuple[str, str]] = []
        self.trashed: list[str] = []
        self.saves = 0

    async def load_config(self) -> Configuration | None:
        return self.stored

    async def save_config(self, config: Configuration) -> OperationResult:
        if self.fail_saves:
            return OperationResult(False, error="disk full")
        self.saves += 1
        self.stored = Configuration.from_dict(config.to_dict())
        return OperationResult(True)

    async def list_images(self, folder: str) -> list[str]:
        return list(self.listing)

    async def move_file(self, source: str, destination_folder: str) -> OperationResult:
        if self.fail_with:
            return OperationResult(False, error=self.fail_with)
        self.moves.append((source, destination_folder))
        return OperationResult(True, new_path=f"{destination_folder}/{source}")

    async def trash_file(self, file_path: str) -> OperationResult:
        if self.fail_with:
            return OperationResult(False, error=self.fail_with)
        self.trashed.append(file_path)
        return OperationResult(True)
