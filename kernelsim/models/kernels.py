"""Kernel identity, kernel spec, and status models."""
import enum
from typing import Any, Dict, List

from pydantic import BaseModel, ConfigDict, Field


@enum.unique
class KernelStatus(str, enum.Enum):
    """Execution state of a kernel, as reported in iopub status messages"""

    unknown = "unknown"
    starting = "starting"
    idle = "idle"
    busy = "busy"
    terminating = "terminating"
    restarting = "restarting"
    autorestarting = "autorestarting"
    dead = "dead"


@enum.unique
class ConnectionStatus(str, enum.Enum):
    """State of the (simulated) websocket between a client and its kernel"""

    connected = "connected"
    connecting = "connecting"
    disconnected = "disconnected"


class KernelModel(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: str
    name: str


class KernelSpec(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str
    display_name: str
    language: str
    argv: List[str] = Field(default_factory=list)
    metadata: Dict[str, Any] = Field(default_factory=dict)
    resources: Dict[str, Any] = Field(default_factory=dict)


class KernelSpecs(BaseModel):
    default: str
    kernelspecs: Dict[str, KernelSpec]
