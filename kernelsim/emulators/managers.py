"""
Manager-level emulators, and ServiceManagerEmulator which bundles them into the same shape as a
Jupyter service manager (contents / sessions / kernelspecs / ready) for drop-in substitution.
"""
from typing import Any, Dict, Iterator, List, Optional, Union

from kernelsim.catalog import KERNELSPECS
from kernelsim.emulators.base import resolved
from kernelsim.emulators.contents import ContentsManagerEmulator
from kernelsim.emulators.session import SessionConnectionEmulator
from kernelsim.models.kernels import KernelSpecs
from kernelsim.models.sessions import SessionModel


class SessionManagerEmulator:
    def __init__(self):
        self._sessions: List[SessionModel] = []

    @property
    def ready(self):
        return resolved()

    async def start_new(
        self,
        path: Optional[str] = None,
        type: Optional[str] = None,
        name: Optional[str] = None,
        kernel: Optional[Dict[str, Any]] = None,
    ) -> SessionConnectionEmulator:
        """
        Start a session with its own kernel and list it in .running(). Fields left as None keep
        the session defaults.
        """
        options = {"path": path, "type": type, "name": name, "kernel": kernel}
        session = SessionConnectionEmulator(
            model={key: value for key, value in options.items() if value is not None}
        )
        self._sessions.append(session.model)
        return session

    def connect_to(self, model: Union[SessionModel, Dict[str, Any]]) -> SessionConnectionEmulator:
        """Connect to an existing session model. Nothing is added to .running()"""
        if isinstance(model, SessionModel):
            model = model.model_dump()
        return SessionConnectionEmulator(model=model)

    async def refresh_running(self) -> None:
        pass

    def running(self) -> Iterator[SessionModel]:
        return iter(list(self._sessions))


class KernelSpecManagerEmulator:
    def __init__(self):
        self.specs = KernelSpecs(
            default=KERNELSPECS[0].name,
            kernelspecs={spec.name: spec for spec in KERNELSPECS},
        )

    @property
    def ready(self):
        return resolved()

    async def refresh_specs(self) -> None:
        pass


class ServiceManagerEmulator:
    def __init__(self):
        self.contents = ContentsManagerEmulator()
        self.sessions = SessionManagerEmulator()
        self.kernelspecs = KernelSpecManagerEmulator()

    @property
    def ready(self):
        return resolved()
