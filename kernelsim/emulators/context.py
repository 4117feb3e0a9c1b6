"""
SessionContextEmulator is the handle application code holds, wrapping a
SessionConnectionEmulator the way a Jupyter session context wraps a session connection.

path / type / name / kernel are captured when the context is built. Later changes reach
listeners through the relayed kernel_changed and property_changed signals, not by re-reading these
attributes.

Also home to the module-level helpers tests use to drive a context:
create_simple_session_context, update_kernel_status and emit_iopub_message.
"""
from typing import Any, Dict, Optional, Union

import structlog

from kernelsim.emulators import switching
from kernelsim.emulators.base import resolved
from kernelsim.emulators.kernel import KernelEmulator
from kernelsim.emulators.session import SessionConnectionEmulator
from kernelsim.models.kernels import KernelModel, KernelStatus
from kernelsim.models.messages import Message
from kernelsim.models.sessions import KernelChangedArgs
from kernelsim.signals import Signal

logger = structlog.get_logger(__name__)


class SessionContextEmulator:
    def __init__(
        self,
        session: Optional[SessionConnectionEmulator] = None,
        path: str = "",
        type: str = "",
        name: str = "",
    ):
        self._owns_session = session is None
        if session is None:
            session = SessionConnectionEmulator(model={"path": path, "type": type, "name": name})
        self.session: Optional[SessionConnectionEmulator] = session
        self.path = session.path
        self.type = session.type
        self.name = session.name
        self.kernel: Optional[KernelEmulator] = session.kernel
        self.is_disposed = False

        self.status_changed: Signal[KernelStatus] = Signal(self, "status_changed")
        self.kernel_changed: Signal[KernelChangedArgs] = Signal(self, "kernel_changed")
        self.iopub_message: Signal[Message] = Signal(self, "iopub_message")
        self.property_changed: Signal[str] = Signal(self, "property_changed")
        self.disposed: Signal[None] = Signal(self, "disposed")

        session.status_changed.connect(self._on_session_status)
        session.iopub_message.connect(self._on_session_iopub)
        session.kernel_changed.connect(self._on_session_kernel_changed)
        session.property_changed.connect(self._on_session_property_changed)

    def __repr__(self):
        return f"<SessionContextEmulator path={self.path} session={self.session}>"

    @property
    def ready(self):
        """Awaitable that is already resolved, there is no startup negotiation to wait on"""
        return resolved()

    async def initialize(self) -> None:
        pass

    def _on_session_status(self, sender: SessionConnectionEmulator, status: KernelStatus):
        self.status_changed.emit(status)

    def _on_session_iopub(self, sender: SessionConnectionEmulator, msg: Message):
        self.iopub_message.emit(msg)

    def _on_session_kernel_changed(
        self, sender: SessionConnectionEmulator, args: KernelChangedArgs
    ):
        self.kernel_changed.emit(args)

    def _on_session_property_changed(self, sender: SessionConnectionEmulator, prop: str):
        self.property_changed.emit(prop)

    async def change_kernel(
        self, id: Optional[str] = None, name: Optional[str] = None
    ) -> KernelModel:
        """
        Switch kernels by id or name. Goes through the wrapped session when it has a kernel, so
        kernel_changed is relayed out of this context too. Without one, the first running kernel
        is the one that gets rebound.
        """
        if self.session is not None and self.session.kernel is not None:
            return await self.session.change_kernel(id=id, name=name)
        logger.debug("No session kernel, changing the first running kernel instead")
        return switching.change_kernel(switching.RUNNING_KERNELS[0], id=id, name=name)

    async def shutdown(self) -> None:
        pass

    def dispose(self) -> None:
        """
        Stop relaying session events. Safe to call more than once. A session handed in by the
        caller is left alone, one this context built is disposed with it.
        """
        if self.is_disposed:
            return
        self.is_disposed = True
        self.disposed.emit(None)

        session = self.session
        if session is not None:
            session.status_changed.disconnect(self._on_session_status)
            session.iopub_message.disconnect(self._on_session_iopub)
            session.kernel_changed.disconnect(self._on_session_kernel_changed)
            session.property_changed.disconnect(self._on_session_property_changed)
            if self._owns_session:
                session.dispose()

        for signal in (
            self.status_changed,
            self.kernel_changed,
            self.iopub_message,
            self.property_changed,
            self.disposed,
        ):
            signal.disconnect_all()


def create_simple_session_context(
    model: Optional[Dict[str, Any]] = None,
) -> SessionContextEmulator:
    """
    Build a kernel -> session -> context stack from a partial session model, e.g.
    create_simple_session_context({"path": "a.ipynb", "kernel": {"name": "r"}})
    """
    model = dict(model or {})
    kernel = KernelEmulator(model=model.get("kernel") or {})
    session = SessionConnectionEmulator(model=model, kernel=kernel)
    return SessionContextEmulator(session=session)


def update_kernel_status(
    context: SessionContextEmulator, status: Union[KernelStatus, str]
) -> None:
    """
    Force the status of the context's kernel. The kernel emits status_changed and an iopub
    status message, both of which are relayed through the session and out of the context.
    """
    context.session.kernel.status = status


def emit_iopub_message(context: SessionContextEmulator, msg: Message) -> None:
    """
    Broadcast {msg} from the context's kernel, stamped with the kernel's client id and last
    request id. Build msg with kernelsim.models.messages.create_message(channel="iopub", ...)
    """
    context.session.kernel.emit_iopub_message(msg)
