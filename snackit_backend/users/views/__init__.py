from .auth import GoogleCallbackView, GoogleLoginView, LogoutView
from .me import CurrentUserView

__all__ = [
    "GoogleLoginView",
    "GoogleCallbackView",
    "LogoutView",
    "CurrentUserView",
]
