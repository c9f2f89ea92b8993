from .password import ChangePasswordSerializer, ForgotPasswordSerializer

__all__ = ["ChangePasswordSerializer", "ForgotPasswordSerializer"]
