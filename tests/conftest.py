import pytest

from kernelsim.config import ENV_VARS
from kernelsim.emulators.context import SessionContextEmulator, create_simple_session_context
from kernelsim.emulators.kernel import KernelEmulator
from kernelsim.emulators.session import SessionConnectionEmulator
from kernelsim.emulators.switching import RUNNING_KERNELS


@pytest.fixture(autouse=True)
def clean_environ(monkeypatch):
    for var in ENV_VARS.values():
        monkeypatch.delenv(var, raising=False)


@pytest.fixture(autouse=True)
def restore_running_kernels():
    # Kernel switches from a session context without a kernel rebind RUNNING_KERNELS[0]
    saved = [(kernel.model, kernel.id) for kernel in RUNNING_KERNELS]
    yield
    for kernel, (model, id) in zip(RUNNING_KERNELS, saved):
        kernel.model = model
        kernel.id = id


@pytest.fixture
def kernel() -> KernelEmulator:
    return KernelEmulator()


@pytest.fixture
def session(kernel) -> SessionConnectionEmulator:
    return SessionConnectionEmulator(model={"path": "Untitled.ipynb"}, kernel=kernel)


@pytest.fixture
def context() -> SessionContextEmulator:
    return create_simple_session_context({"path": "Untitled.ipynb", "type": "notebook"})
