"""Model-View-Controller - user records, interchangeable views, validating controller."""
from .controller import UserController
from .model import User, UserModel
from .views import ConsoleView, FramedView, JsonView, UserView

__all__ = [
    "ConsoleView",
    "FramedView",
    "JsonView",
    "User",
    "UserController",
    "UserModel",
    "UserView",
]
