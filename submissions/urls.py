from django.urls import path
from . import views

app_name = 'submissions'

urlpatterns = [
    path('', views.SubmissionListCreateView.as_view(), name='submission-list-create'),
    path('<uuid:id>/', views.SubmissionDetailView.as_view(), name='submission-detail'),
]
