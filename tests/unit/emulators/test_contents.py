from datetime import datetime, timezone

import httpx
import orjson
import pytest

from kernelsim.emulators.contents import ContentsManagerEmulator
from kernelsim.models.contents import FileChange


@pytest.fixture
def contents() -> ContentsManagerEmulator:
    return ContentsManagerEmulator()


def collect(signal) -> list:
    received = []
    signal.connect(lambda sender, args: received.append(args))
    return received


async def test_new_untitled_notebook(contents: ContentsManagerEmulator):
    changes = collect(contents.file_changed)

    model = await contents.new_untitled(type="notebook", path="folder")

    assert model.type == "notebook"
    assert model.path == f"folder/{model.name}"
    assert model.name.endswith(".ipynb")
    assert orjson.loads(model.content) == {}
    assert model.created == model.last_modified
    assert changes == [FileChange(type="new", new_value=model)]


async def test_new_untitled_file(contents: ContentsManagerEmulator):
    first = await contents.new_untitled()
    second = await contents.new_untitled(ext=".py")

    assert first.type == "file"
    assert first.content == ""
    assert first.path == first.name
    assert first.name.endswith(".txt")
    assert second.name.endswith(".py")
    assert first.path != second.path


async def test_round_trip(contents: ContentsManagerEmulator, monkeypatch):
    clock = iter(datetime(2024, 1, 1, 12, minute, tzinfo=timezone.utc) for minute in range(10))
    monkeypatch.setattr("kernelsim.emulators.contents.utcnow", lambda: next(clock))

    created = await contents.new_untitled(type="notebook")
    changes = collect(contents.file_changed)

    saved = await contents.save(created.path, content="new content")
    fetched = await contents.get(created.path)

    assert fetched == saved
    assert fetched.content == "new content"
    assert fetched.type == "notebook"
    assert fetched.created == created.created
    assert saved.last_modified > created.last_modified
    assert changes == [FileChange(type="save", new_value=saved)]


async def test_save_new_path(contents: ContentsManagerEmulator):
    saved = await contents.save("/docs/readme.md", content="# hi", mimetype="text/markdown")

    assert saved.path == "docs/readme.md"
    assert saved.name == "readme.md"
    assert saved.mimetype == "text/markdown"
    assert isinstance(saved.last_modified, datetime)
    assert await contents.get("docs/readme.md") == saved


async def test_get_missing(contents: ContentsManagerEmulator):
    with pytest.raises(httpx.HTTPStatusError) as exc_info:
        await contents.get("nope.ipynb")
    assert exc_info.value.response.status_code == 404


async def test_delete(contents: ContentsManagerEmulator):
    created = await contents.new_untitled()
    changes = collect(contents.file_changed)

    await contents.delete(created.path)

    assert changes == [FileChange(type="delete", old_value=created)]
    with pytest.raises(httpx.HTTPStatusError):
        await contents.get(created.path)
    with pytest.raises(httpx.HTTPStatusError):
        await contents.delete(created.path)


async def test_checkpoints(contents: ContentsManagerEmulator):
    assert await contents.list_checkpoints("a.txt") == []

    first = await contents.create_checkpoint("a.txt")
    assert await contents.list_checkpoints("a.txt") == [first]

    second = await contents.create_checkpoint("a.txt")
    assert await contents.list_checkpoints("a.txt") == [second]
    assert second.id != first.id


def test_normalize(contents: ContentsManagerEmulator):
    assert contents.normalize("/a/b.txt") == "a/b.txt"
    assert contents.normalize("a/b.txt") == "a/b.txt"
    assert contents.normalize("/") == ""
    assert contents.local_path("a/b.txt") == "a/b.txt"


async def test_ready(contents: ContentsManagerEmulator):
    assert await contents.ready is None
