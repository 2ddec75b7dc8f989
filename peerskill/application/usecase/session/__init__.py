"""Session use cases."""

from .my_sessions import MySessionsUseCase
from .schedule_session import ScheduleSessionUseCase

__all__ = ["MySessionsUseCase", "ScheduleSessionUseCase"]
