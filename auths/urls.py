from django.urls import path

from .views.password import ChangePasswordView, ForgotPasswordView
from .views.session import LoginView, RefreshView

urlpatterns = [
    path('session/', LoginView.as_view(), name='token_obtain_pair'),
    path("refresh/", RefreshView.as_view(), name="token_refresh"),
    path("change-password/", ChangePasswordView.as_view(), name="auth-change-password"),
    path("forgot-password/", ForgotPasswordView.as_view(), name="forgot_password"),
]
