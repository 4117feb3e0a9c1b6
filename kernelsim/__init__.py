"""
kernelsim: in-memory stand-ins for a Jupyter-style kernel, session, session context and
contents backend, so client code can be tested without a live kernel process or server.
"""
from kernelsim.catalog import KERNEL_MODELS, KERNELSPECS, NOTEBOOK_PATHS
from kernelsim.emulators.contents import ContentsManagerEmulator
from kernelsim.emulators.context import (
    SessionContextEmulator,
    create_simple_session_context,
    emit_iopub_message,
    update_kernel_status,
)
from kernelsim.emulators.kernel import KernelEmulator, ShellFuture, clone_kernel
from kernelsim.emulators.managers import (
    KernelSpecManagerEmulator,
    ServiceManagerEmulator,
    SessionManagerEmulator,
)
from kernelsim.emulators.session import SessionConnectionEmulator
from kernelsim.emulators.switching import RUNNING_KERNELS, change_kernel

__all__ = [
    "KERNEL_MODELS",
    "KERNELSPECS",
    "NOTEBOOK_PATHS",
    "RUNNING_KERNELS",
    "ContentsManagerEmulator",
    "KernelEmulator",
    "KernelSpecManagerEmulator",
    "ServiceManagerEmulator",
    "SessionConnectionEmulator",
    "SessionContextEmulator",
    "SessionManagerEmulator",
    "ShellFuture",
    "change_kernel",
    "clone_kernel",
    "create_simple_session_context",
    "emit_iopub_message",
    "update_kernel_status",
]
