from kernelsim.catalog import KERNELSPECS
from kernelsim.emulators.contents import ContentsManagerEmulator
from kernelsim.emulators.managers import (
    KernelSpecManagerEmulator,
    ServiceManagerEmulator,
    SessionManagerEmulator,
)
from kernelsim.emulators.session import SessionConnectionEmulator


async def test_start_new_and_running():
    manager = SessionManagerEmulator()
    assert list(manager.running()) == []

    first = await manager.start_new(path="a.ipynb", type="notebook", name="a")
    second = await manager.start_new(path="b.ipynb", kernel={"name": "r"})

    assert isinstance(first, SessionConnectionEmulator)
    assert second.kernel.name == "r"
    assert list(manager.running()) == [first.model, second.model]
    await manager.refresh_running()
    assert len(list(manager.running())) == 2


def test_connect_to():
    manager = SessionManagerEmulator()
    session = manager.connect_to({"path": "c.ipynb", "kernel": {"name": "r"}})

    assert session.path == "c.ipynb"
    assert session.kernel.name == "r"
    assert list(manager.running()) == []

    again = manager.connect_to(session.model)
    assert again.id == session.id
    assert again.kernel is not session.kernel


async def test_kernelspecs():
    manager = KernelSpecManagerEmulator()
    await manager.refresh_specs()

    assert manager.specs.default == "python3"
    assert list(manager.specs.kernelspecs.values()) == KERNELSPECS


async def test_service_manager():
    services = ServiceManagerEmulator()
    await services.ready

    assert isinstance(services.contents, ContentsManagerEmulator)
    assert isinstance(services.sessions, SessionManagerEmulator)
    assert isinstance(services.kernelspecs, KernelSpecManagerEmulator)

    model = await services.contents.new_untitled(type="notebook")
    session = await services.sessions.start_new(path=model.path, type="notebook")
    assert session.path == model.path


async def test_start_new_keeps_session_defaults():
    manager = SessionManagerEmulator()

    session = await manager.start_new(path="d.ipynb")

    assert session.path == "d.ipynb"
    assert (session.type, session.name) == ("notebook", "foo")
