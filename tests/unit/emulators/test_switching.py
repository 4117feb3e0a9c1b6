import pytest

from kernelsim.catalog import KERNEL_MODELS
from kernelsim.emulators.kernel import KernelEmulator
from kernelsim.emulators.switching import RUNNING_KERNELS, change_kernel
from kernelsim.errors import KernelChangeError


def test_running_kernels_mirror_catalog():
    assert len(RUNNING_KERNELS) == len(KERNEL_MODELS)
    for kernel, model in zip(RUNNING_KERNELS, KERNEL_MODELS):
        assert kernel.model == model


@pytest.mark.parametrize("idx", range(len(KERNEL_MODELS)))
def test_change_by_id(kernel: KernelEmulator, idx: int):
    model = change_kernel(kernel, id=KERNEL_MODELS[idx].id)
    assert model == KERNEL_MODELS[idx]
    assert kernel.model == KERNEL_MODELS[idx]
    assert kernel.id == KERNEL_MODELS[idx].id


def test_change_by_name_leaves_id_as_given(kernel: KernelEmulator):
    model = change_kernel(kernel, name="r")
    assert model == KERNEL_MODELS[1]
    assert kernel.name == "r"
    assert kernel.id is None


def test_id_takes_precedence_over_name(kernel: KernelEmulator):
    model = change_kernel(kernel, id=KERNEL_MODELS[2].id, name="r")
    assert model == KERNEL_MODELS[2]


@pytest.mark.parametrize(
    "selector",
    [{"id": "missing"}, {"name": "missing"}, {}, {"id": None, "name": None}],
)
def test_change_fails(kernel: KernelEmulator, selector: dict):
    model = kernel.model
    with pytest.raises(KernelChangeError):
        change_kernel(kernel, **selector)
    assert kernel.model == model


def test_change_emits_nothing(kernel: KernelEmulator):
    received = []
    kernel.status_changed.connect(lambda sender, args: received.append(args))
    kernel.iopub_message.connect(lambda sender, args: received.append(args))

    change_kernel(kernel, name="r")

    assert received == []
