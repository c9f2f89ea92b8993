from .password import ChangePasswordView, ForgotPasswordView
from .session import LoginView, RefreshView

__all__ = ["ChangePasswordView", "ForgotPasswordView", "LoginView", "RefreshView"]
