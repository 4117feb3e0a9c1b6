"""
Emulator settings. Values come from environment variables so a test run can be tuned
without touching fixtures, e.g. KERNELSIM_DEFAULT_KERNEL=r pytest
"""
import os
from typing import Dict, Optional

from pydantic import BaseModel

from kernelsim.catalog import KERNEL_MODELS

# field name -> environment variable
ENV_VARS: Dict[str, str] = {
    "default_kernel_name": "KERNELSIM_DEFAULT_KERNEL",
    "username": "KERNELSIM_USERNAME",
    "log_level": "KERNELSIM_LOG_LEVEL",
}


class EmulatorConfig(BaseModel):
    """User settable knobs for the emulators"""

    # Kernel name used when neither a kernel nor a kernel name is supplied
    default_kernel_name: str = KERNEL_MODELS[0].name
    # When unset, every kernel gets a random username like a fresh Jupyter client would
    username: Optional[str] = None
    log_level: str = "INFO"

    @classmethod
    def from_env(cls) -> "EmulatorConfig":
        values = {field: os.environ[var] for field, var in ENV_VARS.items() if os.environ.get(var)}
        return cls(**values)


def get_config() -> EmulatorConfig:
    # Read on every call so monkeypatched environments take effect immediately
    return EmulatorConfig.from_env()
