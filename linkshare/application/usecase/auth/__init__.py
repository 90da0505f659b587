"""Authentication use cases."""

from .login import AuthResponse, LoginRequest, LoginUseCase
from .signup import SignupRequest, SignupUseCase

__all__ = [
    "AuthResponse",
    "LoginRequest",
    "LoginUseCase",
    "SignupRequest",
    "SignupUseCase",
]
