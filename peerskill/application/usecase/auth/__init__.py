"""Authentication use cases."""

from .login import LoginUseCase
from .signup import SignupUseCase

__all__ = ["LoginUseCase", "SignupUseCase"]
