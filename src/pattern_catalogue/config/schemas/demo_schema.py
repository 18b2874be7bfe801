"""Demonstration settings schema."""
from pydantic import BaseModel, Field


class DemoConfig(BaseModel):
    """Tunable capacities and paths used by the demonstration drivers."""

    observer_capacity: int = Field(10, ge=1, description="Maximum observers per subject")
    remote_slots: int = Field(7, ge=1, description="Command slots on the remote control")
    command_history_size: int = Field(10, ge=1, description="Commands kept for history display")
    list_size: int = Field(100, ge=1, description="Capacity of the iterator demo list")
    singleton_log_file: str = Field("app.log", description="File the singleton logger appends to")
    singleton_workers: int = Field(5, ge=1, description="Concurrent threads in the singleton demo")
