"""
KernelEmulator stands in for a kernel connection. It never runs code. It keeps the state a
client can observe (status, execution count, identity) and broadcasts the same iopub messages a
real kernel would for status changes and execute requests.

Every iopub message goes out through .emit_iopub_message(), which stamps parent_header with this
kernel's client_id and the id of the most recent request it was sent. That's the same
parent/child linkage client code uses to match output to the request that caused it.
"""
from typing import Any, Dict, Optional, Union

import structlog

from kernelsim.catalog import kernel_spec_for_name
from kernelsim.config import get_config
from kernelsim.errors import KernelDisposed, KernelSpecNotFound
from kernelsim.models.kernels import KernelModel, KernelSpec, KernelStatus
from kernelsim.models.messages import PROTOCOL_VERSION, Message, create_message, new_id
from kernelsim.signals import Signal

logger = structlog.get_logger(__name__)


class ShellFuture:
    """
    Returned from .request_execute(). The simulated request is finished the moment it's made,
    so awaiting the future (or .done()) returns immediately.
    """

    def __init__(self, msg: Message):
        self.msg = msg

    @property
    def is_done(self) -> bool:
        return True

    async def done(self) -> None:
        return None

    def __await__(self):
        return self.done().__await__()


class KernelEmulator:
    def __init__(
        self,
        model: Union[KernelModel, Dict[str, Any], None] = None,
        client_id: Optional[str] = None,
        username: Optional[str] = None,
    ):
        """
        - model can be a KernelModel or a partial dict of one. A missing name falls back to the
          configured default kernel name, a missing id gets a fresh unique id
        - client_id plays the role of the Jupyter session id stamped on every message header
        - status starts at idle, there is no simulated startup
        """
        if isinstance(model, KernelModel):
            model = model.model_dump()
        model = dict(model or {})
        config = get_config()
        self.model = KernelModel(
            id=model.get("id") or new_id(),
            name=model.get("name") or config.default_kernel_name,
        )
        # Tracked separately from .model because a kernel switch by name clears it
        self.id: Optional[str] = self.model.id
        self.client_id = client_id or new_id()
        self.username = username or config.username or new_id()

        self.execution_count = 0
        # Id of the most recent request sent to this kernel, stamped on broadcast messages
        self.last_msg_id = ""
        self._status = KernelStatus.idle
        self.is_disposed = False

        self.status_changed: Signal[KernelStatus] = Signal(self, "status_changed")
        self.iopub_message: Signal[Message] = Signal(self, "iopub_message")
        self.disposed: Signal[None] = Signal(self, "disposed")

    def __repr__(self):
        return f"<KernelEmulator id={self.id} name={self.name} status={self._status.value}>"

    @property
    def name(self) -> str:
        return self.model.name

    @property
    def status(self) -> KernelStatus:
        return self._status

    @status.setter
    def status(self, status: Union[KernelStatus, str]):
        """
        Force a status change. Observers see a status_changed emission followed by an iopub
        'status' message carrying the new execution_state.
        """
        status = KernelStatus(status)
        self._status = status
        self._emit(self.status_changed, status)
        msg = create_message(
            msg_type="status",
            channel="iopub",
            session=self.client_id,
            username=self.username,
            content={"execution_state": status.value},
        )
        self.emit_iopub_message(msg)

    def _emit(self, signal: Signal, args: Any) -> None:
        if self.is_disposed:
            logger.debug(
                "Dropping emission from disposed kernel", kernel_id=self.id, signal=signal.name
            )
            return
        signal.emit(args)

    def emit_iopub_message(self, msg: Message) -> None:
        """Stamp msg.parent_header to correlate with the last request, then broadcast it"""
        msg.parent_header["session"] = self.client_id
        msg.parent_header["msg_id"] = self.last_msg_id
        self._emit(self.iopub_message, msg)

    async def spec(self) -> KernelSpec:
        spec = kernel_spec_for_name(self.name)
        if spec is None:
            raise KernelSpecNotFound(self.name)
        return spec

    async def info(self) -> Message:
        spec = await self.spec()
        return create_message(
            msg_type="kernel_info_reply",
            channel="shell",
            session=self.client_id,
            username=self.username,
            content={
                "status": "ok",
                "protocol_version": PROTOCOL_VERSION,
                "implementation": "kernelsim",
                "implementation_version": "0.1.0",
                "language_info": {"name": spec.language},
                "banner": spec.display_name,
                "help_links": [],
            },
        )

    async def request_history(self, **options) -> Message:
        return create_message(
            msg_type="history_reply",
            channel="shell",
            session=self.client_id,
            username=self.username,
            content={"history": [], "status": "ok"},
        )

    def request_execute(self, code: str, **options) -> ShellFuture:
        """
        Simulate sending an execute_request. Nothing runs, but the execution count is bumped and
        the execute_input broadcast a real kernel would send is emitted before returning.
        Extra options (silent, store_history, ...) are kept on the request message only.
        """
        if self.is_disposed:
            raise KernelDisposed(self.id)
        request = create_message(
            msg_type="execute_request",
            channel="shell",
            session=self.client_id,
            username=self.username,
            content={"code": code, **options},
        )
        self.execution_count += 1
        self.last_msg_id = request.msg_id
        logger.debug(
            "Simulated execute request",
            kernel_id=self.id,
            msg_id=request.msg_id,
            execution_count=self.execution_count,
        )
        msg = create_message(
            msg_type="execute_input",
            channel="iopub",
            session=self.client_id,
            username=self.username,
            content={"code": code, "execution_count": self.execution_count},
        )
        self.emit_iopub_message(msg)
        return ShellFuture(request)

    def clone(self) -> "KernelEmulator":
        """
        Another connection to the same backend kernel. The clone gets its own id and can be
        disposed on its own, but its status changes and iopub messages also show up on this
        kernel's signals (clone -> original only).
        """
        other = KernelEmulator(
            model={"name": self.name},
            client_id=self.client_id,
            username=self.username,
        )

        def relay_iopub(sender: "KernelEmulator", msg: Message):
            self._emit(self.iopub_message, msg)

        def relay_status(sender: "KernelEmulator", status: KernelStatus):
            self._status = status
            self._emit(self.status_changed, status)

        other.iopub_message.connect(relay_iopub)
        other.status_changed.connect(relay_status)
        return other

    async def shutdown(self) -> None:
        self.status = KernelStatus.dead

    def dispose(self) -> None:
        """
        Release the kernel. Safe to call more than once. Everything connected to this kernel's
        signals (including session relays) is disconnected, and nothing is emitted afterwards.
        """
        if self.is_disposed:
            return
        self.is_disposed = True
        self.disposed.emit(None)
        for signal in (self.status_changed, self.iopub_message, self.disposed):
            signal.disconnect_all()
        logger.debug("Kernel disposed", kernel_id=self.id)


def clone_kernel(kernel: KernelEmulator) -> KernelEmulator:
    return kernel.clone()
