import logging

from rest_framework import generics, permissions, status
from rest_framework.response import Response

from codejudge.responses import api_response
from ..models import Courses
from ..serializers import CourseDetailSerializer, CourseListSerializer, CourseUpdateSerializer

logger = logging.getLogger(__name__)


def get_course_or_response(course_id):
    try:
        return Courses.objects.select_related("teacher").get(pk=course_id)
    except (Courses.DoesNotExist, ValueError):
        return api_response(message="Course not found.", status_code=status.HTTP_404_NOT_FOUND)


class CourseDetailView(generics.GenericAPIView):
    """
    GET    /course/<course_id>/: course with its students (members, owner or admin)
    PUT    /course/<course_id>/: rename (owner or admin)
    DELETE /course/<course_id>/: remove (owner or admin)
    """

    permission_classes = [permissions.IsAuthenticated]
    serializer_class = CourseDetailSerializer

    def get(self, request, course_id, *args, **kwargs):
        course = get_course_or_response(course_id)
        if isinstance(course, Response):
            return course

        if not (course.is_staff_member(request.user) or course.has_student(request.user)):
            return api_response(
                message="You are not in this course.",
                status_code=status.HTTP_403_FORBIDDEN,
            )

        serializer = self.get_serializer(course)
        return api_response(data=serializer.data, message="Success.", status_code=status.HTTP_200_OK)

    def put(self, request, course_id, *args, **kwargs):
        course = get_course_or_response(course_id)
        if isinstance(course, Response):
            return course
        if not course.is_staff_member(request.user):
            return api_response(message="Forbidden.", status_code=status.HTTP_403_FORBIDDEN)

        serializer = CourseUpdateSerializer(instance=course, data=request.data)
        if not serializer.is_valid():
            return api_response(
                data=serializer.errors,
                message="Invalid data.",
                status_code=status.HTTP_400_BAD_REQUEST,
            )
        course = serializer.save()
        return api_response(
            data=CourseListSerializer(course).data,
            message="Success.",
            status_code=status.HTTP_200_OK,
        )

    def delete(self, request, course_id, *args, **kwargs):
        course = get_course_or_response(course_id)
        if isinstance(course, Response):
            return course
        if not course.is_staff_member(request.user):
            return api_response(message="Forbidden.", status_code=status.HTTP_403_FORBIDDEN)

        logger.info(f"Deleting course {course.pk} by {request.user.pk}")
        course.delete()
        return Response(status=status.HTTP_204_NO_CONTENT)
