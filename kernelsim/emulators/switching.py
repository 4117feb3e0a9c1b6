"""
Kernel switching for session and session context emulators.

RUNNING_KERNELS mirrors kernelsim.catalog.KERNEL_MODELS index-for-index, it's the pool of
"already running" kernels a switch can point at. A switch doesn't start anything, it rebinds the
current kernel's identity to the chosen slot.
"""
from typing import List, Optional

import structlog

from kernelsim.catalog import KERNEL_MODELS
from kernelsim.emulators.kernel import KernelEmulator
from kernelsim.errors import KernelChangeError
from kernelsim.models.kernels import KernelModel

logger = structlog.get_logger(__name__)

RUNNING_KERNELS: List[KernelEmulator] = [KernelEmulator(model=model) for model in KERNEL_MODELS]


def _find_index(attr: str, value: str) -> int:
    for idx, model in enumerate(KERNEL_MODELS):
        if getattr(model, attr) == value:
            return idx
    return -1


def change_kernel(
    kernel: KernelEmulator, id: Optional[str] = None, name: Optional[str] = None
) -> KernelModel:
    """
    Point {kernel} at a running kernel chosen by id, or by name when no id is given. The first
    match in KERNEL_MODELS order wins.

    - by id: kernel.model becomes the matched model and kernel.id the requested id
    - by name: kernel.model becomes the matched model and kernel.id is set to the (empty) id

    Raises KernelChangeError when there is no match or no selector at all.
    """
    if id:
        idx = _find_index("id", id)
        if idx == -1:
            raise KernelChangeError(f"Unable to change kernel to one with id: {id}")
    elif name:
        idx = _find_index("name", name)
        if idx == -1:
            raise KernelChangeError(f"Unable to change kernel to one with name: {name}")
    else:
        raise KernelChangeError("Unable to change kernel, no id or name given")

    # The slot's original model. RUNNING_KERNELS[idx].model itself may have been rebound
    new_model = KERNEL_MODELS[idx]
    kernel.model = new_model
    kernel.id = id
    logger.debug(
        "Changed kernel", kernel_id=id, kernel_name=new_model.name, running_kernel_index=idx
    )
    return new_model
