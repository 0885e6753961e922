"""
Smart Plug Service Interface.

Defines the contract for the smart plug a coffee machine is plugged into,
plus a stub that returns fixed values until a real device API is wired in.
"""
import logging
from abc import ABC, abstractmethod

from pydantic import BaseModel

logger = logging.getLogger(__name__)


class SmartPlugStatus(BaseModel):
    is_on: bool
    # Total ON time in seconds since the last reset
    on_time_seconds: int


class SmartPlugProvider(ABC):
    @abstractmethod
    async def get_status(self, device_id: str) -> SmartPlugStatus:
        pass

    @abstractmethod
    async def set_power(self, device_id: str, is_on: bool) -> None:
        pass


class StubSmartPlugProvider(SmartPlugProvider):
    """
    Temporary Stub: reports every plug as OFF with one hour of ON time,
    and accepts power commands without doing anything.
    """
    async def get_status(self, device_id: str) -> SmartPlugStatus:
        return SmartPlugStatus(is_on=False, on_time_seconds=3600)

    async def set_power(self, device_id: str, is_on: bool) -> None:
        logger.info(f"Smart plug {device_id}: power {'ON' if is_on else 'OFF'} requested (stub)")


def format_duration(total_seconds: float) -> str:
    """
    Human-readable ON time: "1h 5m", "1h 0m", "12m", "42s".
    Seconds are only shown for durations under a minute.
    """
    total_seconds = max(0, int(total_seconds))
    hours, remainder = divmod(total_seconds, 3600)
    minutes, seconds = divmod(remainder, 60)

    if hours:
        return f"{hours}h {minutes}m"
    if minutes:
        return f"{minutes}m"
    return f"{seconds}s"
