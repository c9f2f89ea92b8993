# assignments/urls.py
from django.urls import path
from . import views

app_name = "assignments"

urlpatterns = [
    # GET/POST /homework/
    path("", views.HomeworkListCreateView.as_view(), name="homework-list"),

    # GET/PUT/PATCH/DELETE /homework/<id>/
    path("<int:homework_id>/", views.HomeworkDetailView.as_view(), name="homework-detail"),
]
