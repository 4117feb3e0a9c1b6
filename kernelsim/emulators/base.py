"""Small pieces shared by the emulators."""
from datetime import datetime, timezone


async def resolved() -> None:
    """
    Coroutine that finishes without suspending. Emulator .ready properties return a fresh one so
    `await manager.ready` works like it does against a real service.
    """
    return None


def utcnow() -> datetime:
    return datetime.now(timezone.utc)
