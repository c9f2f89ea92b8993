from django.db.models import Q
from rest_framework import generics, permissions, status
from rest_framework.exceptions import ErrorDetail

from codejudge.responses import api_response
from ..models import Courses
from ..serializers import CourseCreateSerializer, CourseListSerializer


class CourseListCreateView(generics.GenericAPIView):
    """
    GET /course/ : courses the user teaches (professor), joined (student), or all (admin)
    POST /course/: create a course owned by the calling professor
    """

    permission_classes = [permissions.IsAuthenticated]

    def get_serializer_class(self):
        if self.request.method == "GET":
            return CourseListSerializer
        return CourseCreateSerializer

    def get_queryset(self):
        user = self.request.user
        qs = Courses.objects.select_related("teacher").order_by("-created_at")
        if getattr(user, "is_platform_admin", False):
            return qs
        return qs.filter(Q(teacher=user) | Q(members__user=user)).distinct()

    def get(self, request, *args, **kwargs):
        serializer = self.get_serializer(self.get_queryset(), many=True)
        return api_response(
            data={"courses": serializer.data},
            message="Success.",
            status_code=status.HTTP_200_OK,
        )

    def post(self, request, *args, **kwargs):
        user = request.user
        if getattr(user, "identity", None) != "teacher":
            return api_response(message="Forbidden.", status_code=status.HTTP_403_FORBIDDEN)

        serializer = self.get_serializer(data=request.data)
        if not serializer.is_valid():
            detail = self._extract_error_detail(serializer.errors)
            return api_response(
                data=serializer.errors,
                message=str(detail) if detail else "Invalid data.",
                status_code=status.HTTP_400_BAD_REQUEST,
            )

        course = serializer.save(teacher=user)
        return api_response(
            data=CourseListSerializer(course).data,
            message="Success.",
            status_code=status.HTTP_201_CREATED,
        )

    @classmethod
    def _extract_error_detail(cls, errors):
        if isinstance(errors, dict):
            for value in errors.values():
                detail = cls._extract_error_detail(value)
                if detail is not None:
                    return detail
        elif isinstance(errors, list):
            for item in errors:
                detail = cls._extract_error_detail(item)
                if detail is not None:
                    return detail
        elif isinstance(errors, ErrorDetail):
            return errors
        return None
