"""
Jupyter messaging protocol records. These never go over a wire, they're handed directly to
signal callbacks, but they keep the real shape so client code under test can read
msg.header.msg_type, msg.parent_header["msg_id"], msg.content["execution_state"] and so on.

See https://jupyter-client.readthedocs.io/en/latest/messaging.html
"""
import uuid
from datetime import datetime, timezone
from typing import Any, Dict, List, Literal, Optional

from pydantic import BaseModel, Field

PROTOCOL_VERSION = "5.3"

Channel = Literal["shell", "iopub", "stdin", "control"]


def new_id() -> str:
    """Unique id for messages, sessions, kernels and checkpoints"""
    return str(uuid.uuid4())


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class MessageHeader(BaseModel):
    msg_id: str = Field(default_factory=new_id)
    msg_type: str
    session: str
    username: str = ""
    date: datetime = Field(default_factory=_utcnow)
    version: str = PROTOCOL_VERSION


class Message(BaseModel):
    header: MessageHeader
    # Left as a plain dict because it starts out empty and gets stamped with session / msg_id
    # by the kernel that broadcasts the message
    parent_header: Dict[str, Any] = Field(default_factory=dict)
    metadata: Dict[str, Any] = Field(default_factory=dict)
    content: Dict[str, Any] = Field(default_factory=dict)
    channel: Channel
    buffers: List[bytes] = Field(default_factory=list)

    @property
    def msg_id(self) -> str:
        return self.header.msg_id

    @property
    def msg_type(self) -> str:
        return self.header.msg_type


def create_message(
    msg_type: str,
    channel: Channel,
    session: str,
    username: str = "",
    msg_id: Optional[str] = None,
    content: Optional[Dict[str, Any]] = None,
    metadata: Optional[Dict[str, Any]] = None,
    parent_header: Optional[Dict[str, Any]] = None,
) -> Message:
    header = MessageHeader(
        msg_id=msg_id or new_id(),
        msg_type=msg_type,
        session=session,
        username=username,
    )
    return Message(
        header=header,
        channel=channel,
        content=content or {},
        metadata=metadata or {},
        parent_header=parent_header or {},
    )
