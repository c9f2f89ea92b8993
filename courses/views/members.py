import logging

from django.contrib.auth import get_user_model
from django.db.models import Q
from rest_framework import generics, permissions, status
from rest_framework.pagination import PageNumberPagination
from rest_framework.response import Response

from codejudge.responses import api_response
from ..models import Course_members
from ..serializers import StudentSerializer
from .course_courseid import get_course_or_response

User = get_user_model()
logger = logging.getLogger(__name__)


class AvailableStudentPagination(PageNumberPagination):
    page_size = 10


class AvailableStudentsView(generics.ListAPIView):
    """
    GET /course/<course_id>/available-students/?search=
    Students not yet enrolled, matched by name prefix (case-insensitive) or email prefix.
    """

    permission_classes = [permissions.IsAuthenticated]
    serializer_class = StudentSerializer
    pagination_class = AvailableStudentPagination

    def get_queryset(self):
        enrolled = Course_members.objects.filter(course=self.course).values_list("user_id", flat=True)
        qs = (
            User.objects.filter(identity=User.Identity.STUDENT)
            .exclude(pk__in=enrolled)
            .order_by("real_name")
        )
        search = self.request.query_params.get("search")
        if search:
            qs = qs.filter(Q(real_name__istartswith=search) | Q(email__startswith=search))
        return qs

    def list(self, request, course_id, *args, **kwargs):
        course = get_course_or_response(course_id)
        if isinstance(course, Response):
            return course
        if not course.is_staff_member(request.user):
            return api_response(message="Forbidden.", status_code=status.HTTP_403_FORBIDDEN)

        self.course = course
        return super().list(request, *args, **kwargs)


class CourseStudentView(generics.GenericAPIView):
    """
    POST   /course/<course_id>/students/<student_id>/: enroll (no-op when already enrolled)
    DELETE /course/<course_id>/students/<student_id>/: remove from the course
    """

    permission_classes = [permissions.IsAuthenticated]

    def _load(self, request, course_id):
        course = get_course_or_response(course_id)
        if isinstance(course, Response):
            return course
        if not course.is_staff_member(request.user):
            return api_response(message="Forbidden.", status_code=status.HTTP_403_FORBIDDEN)
        return course

    @staticmethod
    def _get_student(student_id):
        return User.objects.filter(pk=student_id, identity=User.Identity.STUDENT).first()

    def post(self, request, course_id, student_id, *args, **kwargs):
        course = self._load(request, course_id)
        if isinstance(course, Response):
            return course

        student = self._get_student(student_id)
        if student is None:
            return api_response(message="Student not found.", status_code=status.HTTP_404_NOT_FOUND)

        _, created = Course_members.objects.get_or_create(course=course, user=student)
        if created:
            logger.info(f"Student {student.pk} enrolled in course {course.pk}")
        return api_response(message="Student enrolled.", status_code=status.HTTP_200_OK)

    def delete(self, request, course_id, student_id, *args, **kwargs):
        course = self._load(request, course_id)
        if isinstance(course, Response):
            return course

        student = self._get_student(student_id)
        if student is None:
            return api_response(message="Student not found.", status_code=status.HTTP_404_NOT_FOUND)

        Course_members.objects.filter(course=course, user=student).delete()
        return api_response(message="Student removed.", status_code=status.HTTP_200_OK)
