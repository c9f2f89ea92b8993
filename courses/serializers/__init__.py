from .courses import (
    TeacherSerializer,
    CourseCreateSerializer,
    CourseListSerializer,
    CourseUpdateSerializer,
)
from .course_courseid import (
    StudentSerializer,
    CourseDetailSerializer,
)

__all__ = [
    "TeacherSerializer",
    "CourseCreateSerializer",
    "CourseListSerializer",
    "CourseUpdateSerializer",
    "StudentSerializer",
    "CourseDetailSerializer",
]
