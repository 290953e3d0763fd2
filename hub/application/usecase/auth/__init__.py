"""Provider login use cases."""

from .begin_login import BeginLoginUseCase
from .handle_callback import HandleCallbackUseCase

__all__ = ["BeginLoginUseCase", "HandleCallbackUseCase"]
