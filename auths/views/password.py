import logging

from django.conf import settings
from django.contrib.auth import get_user_model
from django.core.mail import send_mail
from django.db import transaction
from django.template.loader import render_to_string
from rest_framework import status
from rest_framework.permissions import AllowAny, IsAuthenticated
from rest_framework.throttling import ScopedRateThrottle
from rest_framework.views import APIView

from codejudge.responses import api_response
from ..serializers.password import ChangePasswordSerializer, ForgotPasswordSerializer
from ..services import generate_temp_password

logger = logging.getLogger(__name__)

User = get_user_model()

FORGOT_PASSWORD_MESSAGE = "If the e-mail is registered, a temporary password has been sent."


def send_temp_password_email(to_email: str, temp_password: str):
    message = render_to_string(
        "emails/send_temp_password.txt",
        {"temp_password": temp_password},
    )
    send_mail(
        subject="Your temporary password",
        message=message,
        from_email=getattr(settings, "DEFAULT_FROM_EMAIL", "no-reply@example.com"),
        recipient_list=[to_email],
        fail_silently=False,
    )


class ChangePasswordView(APIView):
    permission_classes = [IsAuthenticated]

    def post(self, request):
        serializer = ChangePasswordSerializer(
            data=request.data,
            context={"request": request},
        )
        if not serializer.is_valid():
            return api_response(
                data=serializer.errors,
                message="Invalid password.",
                status_code=400,
            )

        serializer.save()
        return api_response(
            data=None,
            message="Password changed successfully.",
            status_code=200,
        )


class ForgotPasswordView(APIView):
    """
    POST /auth/forgot-password/

    Replaces the password of the account owning ``email`` with a temporary
    one and mails it. The answer never reveals whether the account exists.
    """
    permission_classes = [AllowAny]
    throttle_classes = [ScopedRateThrottle]
    throttle_scope = "send_email"

    def post(self, request):
        serializer = ForgotPasswordSerializer(data=request.data)
        if not serializer.is_valid():
            return api_response(
                data=serializer.errors,
                message="Invalid e-mail.",
                status_code=status.HTTP_400_BAD_REQUEST,
            )

        email = serializer.validated_data["email"]
        user = User.objects.filter(email__iexact=email).first()
        if user is None:
            logger.info("forgot-password requested for unknown e-mail")
            return api_response(data=None, message=FORGOT_PASSWORD_MESSAGE, status_code=status.HTTP_200_OK)

        temp_password = generate_temp_password()
        with transaction.atomic():
            user.set_password(temp_password)
            user.must_change_password = True
            user.save(update_fields=["password", "must_change_password"])

        send_temp_password_email(to_email=user.email, temp_password=temp_password)
        logger.info("temporary password issued for user %s", user.pk)

        return api_response(data=None, message=FORGOT_PASSWORD_MESSAGE, status_code=status.HTTP_200_OK)
