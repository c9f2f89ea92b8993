from django.urls import path

from .views import course_courseid as detail_views
from .views import courses as course_views
from .views import members as member_views

app_name = "courses"

urlpatterns = [
    path("", course_views.CourseListCreateView.as_view(), name="list"),
    path("<uuid:course_id>/", detail_views.CourseDetailView.as_view(), name="detail"),
    path(
        "<uuid:course_id>/available-students/",
        member_views.AvailableStudentsView.as_view(),
        name="available-students",
    ),
    path(
        "<uuid:course_id>/students/<uuid:student_id>/",
        member_views.CourseStudentView.as_view(),
        name="student",
    ),
]
