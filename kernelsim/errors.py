from typing import Optional


class KernelsimError(Exception):
    pass


class KernelChangeError(KernelsimError):
    """
    Raised when a kernel switch names no target or a target that isn't in the running kernel
    registry. This is a fixture authoring mistake, never something to retry.
    """

    pass


class KernelSpecNotFound(KernelsimError, LookupError):
    def __init__(self, name: str):
        self.name = name

    def __str__(self):
        return f"No kernel spec named {self.name!r}"


class KernelDisposed(KernelsimError):
    def __init__(self, kernel_id: Optional[str]):
        self.kernel_id = kernel_id

    def __str__(self):
        return f"Kernel {self.kernel_id} is disposed"
