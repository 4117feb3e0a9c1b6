"""
In-memory stand-in for a Jupyter contents manager: files keyed by path, one checkpoint per path,
and a file_changed signal on every create / save / delete.

Missing files raise the same httpx.HTTPStatusError (404) that a real HTTP client would raise
from resp.raise_for_status(), so error handling in code under test takes its real path.
"""
from typing import Dict, List, NoReturn, Optional

import httpx
import orjson
import structlog

from kernelsim.emulators.base import resolved, utcnow
from kernelsim.models.contents import Checkpoint, FileChange, FileModel
from kernelsim.models.messages import new_id
from kernelsim.pathing import basename, ensure_relative_path, join_path
from kernelsim.signals import Signal

logger = structlog.get_logger(__name__)

CONTENTS_URL = "http://localhost:8888/api/contents/"


def _raise_not_found(path: str, method: str = "GET") -> NoReturn:
    request = httpx.Request(method, CONTENTS_URL + path)
    response = httpx.Response(
        404,
        request=request,
        json={"message": f"No such file or directory: {path}", "reason": None},
    )
    response.raise_for_status()
    # raise_for_status always raises on a 404, this is only here for type checkers
    raise AssertionError("unreachable")


class ContentsManagerEmulator:
    def __init__(self):
        self._files: Dict[str, FileModel] = {}
        self._checkpoints: Dict[str, Checkpoint] = {}
        self.file_changed: Signal[FileChange] = Signal(self, "file_changed")

    @property
    def ready(self):
        return resolved()

    def normalize(self, path: str) -> str:
        return ensure_relative_path(path)

    def local_path(self, path: str) -> str:
        return path

    async def new_untitled(
        self, path: str = "", type: str = "file", ext: Optional[str] = None
    ) -> FileModel:
        """
        Create an empty file with a unique name inside directory {path}. Notebooks start out as
        an empty JSON object.
        """
        if ext is None:
            ext = ".ipynb" if type == "notebook" else ".txt"
        name = new_id() + ext
        file_path = join_path(self.normalize(path), name)
        content = orjson.dumps({}).decode() if type == "notebook" else ""
        now = utcnow()
        model = FileModel(
            path=file_path,
            name=name,
            content=content,
            last_modified=now,
            created=now,
            writable=True,
            type=type,
            format="text",
            mimetype="plain/text",
        )
        self._files[file_path] = model
        logger.debug("Created untitled file", path=file_path, type=type)
        self.file_changed.emit(FileChange(type="new", new_value=model))
        return model

    async def get(self, path: str, **options) -> FileModel:
        path = self.normalize(path)
        if path not in self._files:
            _raise_not_found(path)
        return self._files[path]

    async def save(self, path: str, **options) -> FileModel:
        """
        Create or overwrite the file at {path}. Options are FileModel fields (content, type,
        format, ...) merged over the existing model. last_modified is always bumped.
        """
        path = self.normalize(path)
        now = utcnow()
        existing = self._files.get(path)
        if existing is not None:
            fields = {**existing.model_dump(), **options, "last_modified": now}
        else:
            fields = {
                "path": path,
                "name": basename(path),
                "content": "",
                "writable": True,
                "created": now,
                "type": "file",
                "format": "text",
                "mimetype": "plain/text",
                **options,
                "last_modified": now,
            }
        model = FileModel(**fields)
        self._files[path] = model
        logger.debug("Saved file", path=path, existed=existing is not None)
        self.file_changed.emit(FileChange(type="save", new_value=model))
        return model

    async def delete(self, path: str) -> None:
        path = self.normalize(path)
        if path not in self._files:
            _raise_not_found(path, method="DELETE")
        old = self._files.pop(path)
        self._checkpoints.pop(path, None)
        self.file_changed.emit(FileChange(type="delete", old_value=old))

    async def create_checkpoint(self, path: str) -> Checkpoint:
        # Only the latest checkpoint is kept per path
        checkpoint = Checkpoint.now()
        self._checkpoints[self.normalize(path)] = checkpoint
        return checkpoint

    async def list_checkpoints(self, path: str) -> List[Checkpoint]:
        checkpoint = self._checkpoints.get(self.normalize(path))
        return [checkpoint] if checkpoint else []
