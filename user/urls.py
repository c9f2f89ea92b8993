from django.urls import path

from . import views

urlpatterns = [
    path("me/", views.MeView.as_view(), name="me"),
    path("students/", views.StudentListCreateView.as_view(), name="student-list"),
    path("students/<uuid:user_id>/", views.StudentDetailView.as_view(), name="student-detail"),
    path("professors/", views.ProfessorListCreateView.as_view(), name="professor-list"),
    path("professors/<uuid:user_id>/", views.ProfessorDetailView.as_view(), name="professor-detail"),
]
