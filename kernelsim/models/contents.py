"""Document store records, shaped like the Jupyter contents REST API models"""
from datetime import datetime, timezone
from typing import Any, Literal, Optional

from pydantic import BaseModel

from kernelsim.models.messages import new_id


class FileModel(BaseModel):
    path: str
    name: str
    content: Any = ""
    last_modified: datetime
    created: datetime
    writable: bool = True
    type: Literal["file", "notebook", "directory"] = "file"
    format: Optional[str] = "text"
    mimetype: Optional[str] = "plain/text"


class Checkpoint(BaseModel):
    id: str
    last_modified: datetime

    @classmethod
    def now(cls) -> "Checkpoint":
        return cls(id=new_id(), last_modified=datetime.now(timezone.utc))


class FileChange(BaseModel):
    type: Literal["new", "save", "delete", "rename"]
    old_value: Optional[FileModel] = None
    new_value: Optional[FileModel] = None
