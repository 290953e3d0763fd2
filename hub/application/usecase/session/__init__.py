"""Session use cases."""

from .complete_session import CompleteSessionUseCase
from .get_session import GetSessionUseCase
from .sign_out import SignOutUseCase

__all__ = ["CompleteSessionUseCase", "GetSessionUseCase", "SignOutUseCase"]
