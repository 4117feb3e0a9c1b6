"""
SessionConnectionEmulator binds one KernelEmulator to a document (path / name / type).

It subscribes to the kernel's status_changed and iopub_message signals when it's built and
re-emits every event on its own signals of the same name, so a listener on the session sees each
kernel event exactly once and in kernel order.
"""
from typing import Any, Dict, Optional

import structlog

from kernelsim.config import get_config
from kernelsim.emulators import switching
from kernelsim.emulators.kernel import KernelEmulator
from kernelsim.errors import KernelChangeError
from kernelsim.models.kernels import ConnectionStatus, KernelModel, KernelStatus
from kernelsim.models.messages import Message
from kernelsim.models.sessions import KernelChangedArgs, SessionModel
from kernelsim.signals import Signal

logger = structlog.get_logger(__name__)

# Used for any path / type / name not given at construction
DEFAULT_SESSION_FIELDS = {"path": "foo", "type": "notebook", "name": "foo"}


class SessionConnectionEmulator:
    def __init__(
        self,
        model: Optional[Dict[str, Any]] = None,
        kernel: Optional[KernelEmulator] = None,
    ):
        """
        - model is a partial session model: id, path, type, name, and optionally a partial
          kernel model whose name is used when no kernel is handed in
        - kernel, if given, is used as-is and stays owned by the caller. Otherwise a kernel is
          created (and owned, i.e. disposed along with this session)
        """
        model = dict(model or {})
        kernel_options = model.pop("kernel", None) or {}
        if isinstance(kernel_options, KernelModel):
            kernel_options = kernel_options.model_dump()

        self._owns_kernel = kernel is None
        if kernel is None:
            name = kernel_options.get("name") or get_config().default_kernel_name
            kernel = KernelEmulator(model={"name": name})
        self.kernel: Optional[KernelEmulator] = kernel

        fields = {**DEFAULT_SESSION_FIELDS, **model}
        self.model = SessionModel(**fields, kernel=kernel.model)
        self.connection_status = ConnectionStatus.connected
        self.is_disposed = False

        self.status_changed: Signal[KernelStatus] = Signal(self, "status_changed")
        self.connection_status_changed: Signal[ConnectionStatus] = Signal(
            self, "connection_status_changed"
        )
        self.kernel_changed: Signal[KernelChangedArgs] = Signal(self, "kernel_changed")
        self.iopub_message: Signal[Message] = Signal(self, "iopub_message")
        self.unhandled_message: Signal[Message] = Signal(self, "unhandled_message")
        self.property_changed: Signal[str] = Signal(self, "property_changed")
        self.disposed: Signal[None] = Signal(self, "disposed")

        kernel.status_changed.connect(self._on_kernel_status)
        kernel.iopub_message.connect(self._on_kernel_iopub)

    def __repr__(self):
        return f"<SessionConnectionEmulator id={self.id} path={self.path} kernel={self.kernel}>"

    # Read-through accessors for the session model
    @property
    def id(self) -> str:
        return self.model.id

    @property
    def path(self) -> str:
        return self.model.path

    @property
    def name(self) -> str:
        return self.model.name

    @property
    def type(self) -> str:
        return self.model.type

    def _on_kernel_status(self, sender: KernelEmulator, status: KernelStatus):
        self.status_changed.emit(status)

    def _on_kernel_iopub(self, sender: KernelEmulator, msg: Message):
        self.iopub_message.emit(msg)

    async def change_kernel(
        self, id: Optional[str] = None, name: Optional[str] = None
    ) -> KernelModel:
        """
        Switch the bound kernel to a running kernel by id or name. The session model is updated
        before kernel_changed is emitted, so listeners never see a half-switched session.
        """
        if self.kernel is None:
            raise KernelChangeError(f"Session {self.id} has no kernel to change")
        old_model = self.model.kernel
        new_model = switching.change_kernel(self.kernel, id=id, name=name)
        self.model.kernel = new_model
        self.kernel_changed.emit(KernelChangedArgs(old_value=old_model, new_value=new_model))
        return new_model

    def select_kernel(self) -> None:
        # A real frontend would show a kernel picker here
        pass

    async def _set_property(self, prop: str, value: str) -> None:
        if getattr(self.model, prop) == value:
            return
        setattr(self.model, prop, value)
        self.property_changed.emit(prop)

    async def set_path(self, path: str) -> None:
        await self._set_property("path", path)

    async def set_name(self, name: str) -> None:
        await self._set_property("name", name)

    async def set_type(self, type: str) -> None:
        await self._set_property("type", type)

    async def shutdown(self) -> None:
        pass

    def dispose(self) -> None:
        """
        Release the session. Safe to call more than once. Stops relaying kernel events, disposes
        the kernel if this session created it, and unbinds it.
        """
        if self.is_disposed:
            return
        self.is_disposed = True
        self.connection_status = ConnectionStatus.disconnected
        self.connection_status_changed.emit(self.connection_status)
        self.disposed.emit(None)

        kernel = self.kernel
        if kernel is not None:
            kernel.status_changed.disconnect(self._on_kernel_status)
            kernel.iopub_message.disconnect(self._on_kernel_iopub)
            if self._owns_kernel:
                kernel.dispose()
        self.kernel = None

        for signal in (
            self.status_changed,
            self.connection_status_changed,
            self.kernel_changed,
            self.iopub_message,
            self.unhandled_message,
            self.property_changed,
            self.disposed,
        ):
            signal.disconnect_all()
        logger.debug("Session disposed", session_id=self.id)
