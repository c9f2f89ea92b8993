# assignments/views.py
import logging

from django.core.exceptions import ValidationError
from django.db.models import Q
from rest_framework import status
from rest_framework.views import APIView

from assignments.models import Assignments
from codejudge.responses import api_response
from courses.models import Courses
from .serializers import (
    HomeworkDetailSerializer,
    HomeworkListSerializer,
    HomeworkWriteSerializer,
)

logger = logging.getLogger(__name__)


# --------- permissions & helpers ---------
def is_course_member(user, course) -> bool:
    return course.is_staff_member(user) or course.has_student(user)


def require_course_staff(user, course):
    """
    Returns None when the user owns the course (or is an admin),
    otherwise the 403 response to send back.
    """
    if course.is_staff_member(user):
        return None
    return api_response(
        message="User must be the teacher of this course.",
        status_code=status.HTTP_403_FORBIDDEN,
    )


def invalid_response(errors):
    return api_response(
        data=errors,
        message="Invalid data.",
        status_code=status.HTTP_400_BAD_REQUEST,
    )


# --------- GET/POST /homework/ ---------
class HomeworkListCreateView(APIView):
    def get(self, request):
        user = request.user
        queryset = Assignments.objects.select_related("course", "problem").order_by("due_time")

        course_id = request.query_params.get("course_id")
        if course_id:
            try:
                course = Courses.objects.get(pk=course_id)
            except (Courses.DoesNotExist, ValidationError):
                # a malformed UUID raises ValidationError
                return api_response(message="Course not found.", status_code=status.HTTP_404_NOT_FOUND)
            if not is_course_member(user, course):
                return api_response(
                    message="You are not in this course.",
                    status_code=status.HTTP_403_FORBIDDEN,
                )
            queryset = queryset.filter(course=course)
        elif not getattr(user, "is_platform_admin", False):
            queryset = queryset.filter(
                Q(course__teacher=user) | Q(course__members__user=user)
            ).distinct()

        data = HomeworkListSerializer(queryset, many=True).data
        return api_response(data=data, message="Success.")

    def post(self, request):
        ser = HomeworkWriteSerializer(data=request.data, context={"request": request})
        if not ser.is_valid():
            return invalid_response(ser.errors)

        denied = require_course_staff(request.user, ser.validated_data["_course"])
        if denied is not None:
            return denied

        hw = ser.save(creator=request.user)
        logger.info(f"Homework {hw.id} created in course {hw.course_id}")
        return api_response(
            data=HomeworkListSerializer(hw).data,
            message="Success.",
            status_code=status.HTTP_201_CREATED,
        )


# --------- GET/PUT/PATCH/DELETE /homework/<id>/ ---------
class HomeworkDetailView(APIView):
    def _get_hw(self, homework_id):
        return (
            Assignments.objects.select_related("course", "problem", "problem__creator")
            .filter(pk=homework_id)
            .first()
        )

    def get(self, request, homework_id: int):
        hw = self._get_hw(homework_id)
        if hw is None:
            return api_response(message="Homework not found.", status_code=status.HTTP_404_NOT_FOUND)
        if not is_course_member(request.user, hw.course):
            return api_response(
                message="You are not in this course.",
                status_code=status.HTTP_403_FORBIDDEN,
            )

        data = HomeworkDetailSerializer(hw, context={"request": request}).data
        return api_response(data=data, message="Success.")

    def put(self, request, homework_id: int):
        return self._update(request, homework_id, partial=False)

    def patch(self, request, homework_id: int):
        return self._update(request, homework_id, partial=True)

    def _update(self, request, homework_id, partial):
        hw = self._get_hw(homework_id)
        if hw is None:
            return api_response(message="Homework not found.", status_code=status.HTTP_404_NOT_FOUND)
        denied = require_course_staff(request.user, hw.course)
        if denied is not None:
            return denied

        ser = HomeworkWriteSerializer(
            instance=hw, data=request.data, partial=partial, context={"request": request}
        )
        if not ser.is_valid():
            return invalid_response(ser.errors)

        # moving the homework requires staff rights on the target course too
        denied = require_course_staff(request.user, ser.validated_data["_course"])
        if denied is not None:
            return denied

        hw = ser.save()
        return api_response(data=HomeworkListSerializer(hw).data, message="Success.")

    def delete(self, request, homework_id: int):
        hw = self._get_hw(homework_id)
        if hw is None:
            return api_response(message="Homework not found.", status_code=status.HTTP_404_NOT_FOUND)
        denied = require_course_staff(request.user, hw.course)
        if denied is not None:
            return denied

        logger.info(f"Homework {hw.id} deleted by {request.user.pk}")
        hw.delete()
        return api_response(message="Homework deleted.")
