"""
Static catalog data the emulators draw from: available kernel specs, the identities of the
"running" kernels that kernel switches can target, and some notebook paths per kernel name.

KERNEL_MODELS order matters. Kernel switches pick the first match in this order, and
kernelsim.emulators.switching.RUNNING_KERNELS is built index-for-index from it.
"""
from typing import Dict, List, Optional

from kernelsim.models.kernels import KernelModel, KernelSpec
from kernelsim.models.messages import new_id

_IPYKERNEL_ARGV = [
    "/Users/someuser/miniconda3/envs/jupyterlab/bin/python",
    "-m",
    "ipykernel_launcher",
    "-f",
    "{connection_file}",
]

KERNELSPECS: List[KernelSpec] = [
    KernelSpec(
        name="python3",
        display_name="Python 3",
        language="python",
        argv=_IPYKERNEL_ARGV,
    ),
    KernelSpec(
        name="irkernel",
        display_name="R",
        language="python",
        argv=_IPYKERNEL_ARGV,
    ),
]

KERNEL_MODELS: List[KernelModel] = [
    KernelModel(name="python3", id=new_id()),
    KernelModel(name="r", id=new_id()),
    KernelModel(name="python3", id=new_id()),
]

NOTEBOOK_PATHS: Dict[str, List[str]] = {
    "python3": ["Untitled.ipynb", "Untitled1.ipynb", "Untitled2.ipynb"],
    "r": ["Visualization.ipynb", "Analysis.ipynb", "Conclusion.ipynb"],
}


def kernel_spec_for_name(name: str) -> Optional[KernelSpec]:
    for spec in KERNELSPECS:
        if spec.name == name:
            return spec
    return None
