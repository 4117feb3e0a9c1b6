from typing import Literal, Optional

from pydantic import BaseModel, Field

from kernelsim.models.kernels import KernelModel
from kernelsim.models.messages import new_id


class SessionModel(BaseModel):
    # Mutable on purpose: path/name/type change through the session's setters and kernel
    # changes when the bound kernel is switched
    id: str = Field(default_factory=new_id)
    path: str = ""
    name: str = ""
    type: str = ""
    kernel: Optional[KernelModel] = None


class KernelChangedArgs(BaseModel):
    name: Literal["kernel"] = "kernel"
    old_value: Optional[KernelModel] = None
    new_value: Optional[KernelModel] = None
