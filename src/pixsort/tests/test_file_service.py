import tempfile
from os import path
from pathlib import Path

import pytest

import pixsort.classes.file_service as file_service
import pixsort.tests.utils as testutils
from pixsort.classes.configuration import Configuration, Destination
from pixsort.classes.file_service import FileAccessService
from pixsort.variables.constants import Messages


@pytest.mark.asyncio
async def test_list_images_filters_extensions_case_insensitively():
    with tempfile.TemporaryDirectory() as temp_dir:
        temp_dir = Path(path.realpath(temp_dir))
        testutils.setup_test_files(
            temp_dir / "a.png", temp_dir / "b.txt", temp_dir / "c.JPG"
        )
        service = FileAccessService(str(temp_dir / "config.json"))
        images = await service.list_images(str(temp_dir))
        assert sorted(images) == [str(temp_dir / "a.png"), str(temp_dir / "c.JPG")]


@pytest.mark.asyncio
async def test_list_images_skips_folders_with_image_names():
    with tempfile.TemporaryDirectory() as temp_dir:
        temp_dir = Path(path.realpath(temp_dir))
        testutils.setup_test_dir(temp_dir / "album.png")
        testutils.setup_test_files(temp_dir / "photo.webp")
        service = FileAccessService(str(temp_dir / "config.json"))
        assert await service.list_images(str(temp_dir)) == [
            str(temp_dir / "photo.webp")
        ]


@pytest.mark.asyncio
async def test_list_images_of_missing_folder_is_empty():
    with tempfile.TemporaryDirectory() as temp_dir:
        service = FileAccessService(path.join(temp_dir, "config.json"))
        assert await service.list_images(path.join(temp_dir, "nope")) == []


@pytest.mark.asyncio
async def test_move_file_creates_destination_folder():
    with tempfile.TemporaryDirectory() as temp_dir:
        temp_dir = Path(temp_dir)
        source = temp_dir / "a.png"
        testutils.setup_test_files(source)
        destination = temp_dir / "sorted" / "keep"
        service = FileAccessService(str(temp_dir / "config.json"))

        result = await service.move_file(str(source), str(destination))

        assert result.success, result.error
        assert result.new_path == str(destination / "a.png")
        assert not source.exists()
        assert (destination / "a.png").read_text() == testutils.TEST_FILE_CONTENT_1


@pytest.mark.asyncio
async def test_move_file_refuses_name_collision():
    with tempfile.TemporaryDirectory() as temp_dir:
        temp_dir = Path(temp_dir)
        destination = temp_dir / "keep"
        testutils.setup_test_dir(destination)
        source = temp_dir / "a.png"
        testutils.setup_test_files(source)
        (destination / "a.png").write_text("already here")
        service = FileAccessService(str(temp_dir / "config.json"))

        result = await service.move_file(str(source), str(destination))

        assert not result.success
        assert result.error == Messages.collision
        assert source.exists()
        assert (destination / "a.png").read_text() == "already here"


@pytest.mark.asyncio
async def test_move_missing_file_reports_error():
    with tempfile.TemporaryDirectory() as temp_dir:
        service = FileAccessService(path.join(temp_dir, "config.json"))
        result = await service.move_file(
            path.join(temp_dir, "ghost.png"), path.join(temp_dir, "keep")
        )
        assert not result.success
        assert result.error


@pytest.mark.asyncio
async def test_trash_file(monkeypatch):
    trashed = []
    monkeypatch.setattr(file_service, "send2trash", trashed.append)
    service = FileAccessService("config.json")

    result = await service.trash_file("/photos/a.png")

    assert result.success
    assert trashed == ["/photos/a.png"]


@pytest.mark.asyncio
async def test_trash_failure_is_reported(monkeypatch):
    def refuse(file_path):
        raise OSError("trash is not available")

    monkeypatch.setattr(file_service, "send2trash", refuse)
    service = FileAccessService("config.json")

    result = await service.trash_file("/photos/a.png")

    assert not result.success
    assert result.error == "trash is not available"


CONFIGURATIONS = [
    Configuration(),
    Configuration(
        source_folder="/photos/inbox",
        destination_folders={"1": Destination("Keep", "/photos/keep", "k")},
    ),
    Configuration(
        source_folder="C:\\Users\\me\\Pictures",
        destination_folders={
            "1": Destination("Keep", "C:\\Users\\me\\Keep", "1"),
            "work": Destination("Work stuff", "/mnt/work/é", "w"),
            "3": Destination("", "", ""),
        },
    ),
]


@pytest.mark.asyncio
@pytest.mark.parametrize("config", CONFIGURATIONS)
async def test_save_then_load_round_trips(config):
    with tempfile.TemporaryDirectory() as temp_dir:
        service = FileAccessService(path.join(temp_dir, "nested", "config.json"))
        result = await service.save_config(config)
        assert result.success, result.error
        assert await service.load_config() == config


@pytest.mark.asyncio
async def test_saved_file_matches_documented_shape():
    with tempfile.TemporaryDirectory() as temp_dir:
        config_path = Path(temp_dir) / "config.json"
        service = FileAccessService(str(config_path))
        await service.save_config(CONFIGURATIONS[1])
        text = config_path.read_text(encoding="utf-8")
        assert '"sourceFolder": "/photos/inbox"' in text
        assert '"destinationFolders"' in text


@pytest.mark.asyncio
async def test_load_missing_or_corrupt_config_is_none():
    with tempfile.TemporaryDirectory() as temp_dir:
        config_path = Path(temp_dir) / "config.json"
        service = FileAccessService(str(config_path))
        assert await service.load_config() is None
        config_path.write_text("{not json")
        assert await service.load_config() is None
        config_path.write_text("[1, 2, 3]")
        assert await service.load_config() is None


@pytest.mark.asyncio
async def test_save_into_unwritable_location_fails():
    with tempfile.TemporaryDirectory() as temp_dir:
        blocker = Path(temp_dir) / "file"
        testutils.setup_test_files(blocker)
        # a regular file where a folder is expected
        service = FileAccessService(str(blocker / "config.json"))
        result = await service.save_config(Configuration())
        assert not result.success
        assert result.error


@pytest.mark.asyncio
async def test_pick_folder():
    with tempfile.TemporaryDirectory() as temp_dir:
        answers = [temp_dir, None, path.join(temp_dir, "missing")]
        asked = []

        async def prompt(initial):
            asked.append(initial)
            return answers.pop(0)

        service = FileAccessService("config.json", folder_prompt=prompt)
        assert await service.pick_folder("/start") == path.abspath(temp_dir)
        assert await service.pick_folder() is None
        assert await service.pick_folder() is None
        assert asked == ["/start", None, None]


@pytest.mark.asyncio
async def test_pick_folder_without_prompt_is_cancelled():
    service = FileAccessService("config.json")
    assert await service.pick_folder() is None
