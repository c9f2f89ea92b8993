import logging

from django.contrib.auth import get_user_model
from django.db.models import Q
from rest_framework import generics, status
from rest_framework.permissions import IsAuthenticated
from rest_framework.views import APIView

from codejudge.responses import api_response
from .permissions import IsPlatformAdmin
from .serializers import (
    MeUpdateSerializer,
    ProfessorCreateSerializer,
    ProfessorUpdateSerializer,
    StudentCreateSerializer,
    StudentUpdateSerializer,
    UserSerializer,
)

User = get_user_model()
logger = logging.getLogger(__name__)


class AccountListCreateView(generics.GenericAPIView):
    """
    GET  lists accounts of one identity (search by name / email)
    POST creates an account of that identity
    """
    permission_classes = [IsPlatformAdmin]
    identity = None
    create_serializer_class = None

    def get_queryset(self):
        qs = User.objects.filter(identity=self.identity).select_related("profile").order_by("real_name")
        search = self.request.query_params.get("search")
        if search:
            qs = qs.filter(Q(real_name__icontains=search) | Q(email__icontains=search))
        return qs

    def get(self, request, *args, **kwargs):
        serializer = UserSerializer(self.get_queryset(), many=True)
        return api_response(data=serializer.data, message="Success.")

    def post(self, request, *args, **kwargs):
        serializer = self.create_serializer_class(data=request.data)
        if not serializer.is_valid():
            return api_response(
                data=serializer.errors,
                message="Invalid data.",
                status_code=status.HTTP_400_BAD_REQUEST,
            )
        user = serializer.save()
        logger.info(f"Created {self.identity} account {user.id}")
        return api_response(
            data=UserSerializer(user).data,
            message="Success.",
            status_code=status.HTTP_201_CREATED,
        )


class AccountDetailView(generics.GenericAPIView):
    """
    GET / PATCH / DELETE one account of a given identity.
    """
    permission_classes = [IsPlatformAdmin]
    identity = None
    update_serializer_class = None
    not_found_message = "User not found."

    def _get_account(self, user_id):
        try:
            return User.objects.select_related("profile").get(pk=user_id, identity=self.identity)
        except User.DoesNotExist:
            return None

    def get(self, request, user_id):
        account = self._get_account(user_id)
        if account is None:
            return api_response(message=self.not_found_message, status_code=status.HTTP_404_NOT_FOUND)
        return api_response(data=UserSerializer(account).data, message="Success.")

    def patch(self, request, user_id):
        account = self._get_account(user_id)
        if account is None:
            return api_response(message=self.not_found_message, status_code=status.HTTP_404_NOT_FOUND)

        serializer = self.update_serializer_class(instance=account, data=request.data, partial=True)
        if not serializer.is_valid():
            return api_response(
                data=serializer.errors,
                message="Invalid data.",
                status_code=status.HTTP_400_BAD_REQUEST,
            )
        account = serializer.save()
        return api_response(data=UserSerializer(account).data, message="Success.")

    put = patch

    def delete(self, request, user_id):
        account = self._get_account(user_id)
        if account is None:
            return api_response(message=self.not_found_message, status_code=status.HTTP_404_NOT_FOUND)
        account.delete()
        return api_response(message="Success.")


class StudentListCreateView(AccountListCreateView):
    identity = User.Identity.STUDENT
    create_serializer_class = StudentCreateSerializer


class StudentDetailView(AccountDetailView):
    identity = User.Identity.STUDENT
    update_serializer_class = StudentUpdateSerializer
    not_found_message = "Student not found."


class ProfessorListCreateView(AccountListCreateView):
    identity = User.Identity.TEACHER
    create_serializer_class = ProfessorCreateSerializer


class ProfessorDetailView(AccountDetailView):
    identity = User.Identity.TEACHER
    update_serializer_class = ProfessorUpdateSerializer
    not_found_message = "Professor not found."


class MeView(APIView):
    permission_classes = [IsAuthenticated]

    def get(self, request):
        return api_response(data=UserSerializer(request.user).data, message="Get current user")

    def patch(self, request):
        serializer = MeUpdateSerializer(instance=request.user, data=request.data)
        if not serializer.is_valid():
            return api_response(
                data=serializer.errors,
                message="Invalid data.",
                status_code=status.HTTP_400_BAD_REQUEST,
            )
        user = serializer.save()
        return api_response(data=UserSerializer(user).data, message="Success.")
