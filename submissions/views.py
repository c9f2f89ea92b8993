import logging

from django.db import transaction
from rest_framework import generics, status
from rest_framework.pagination import PageNumberPagination

from codejudge.responses import api_response
from .models import Submission
from .serializers import (
    SubmissionCreateSerializer,
    SubmissionDetailSerializer,
    SubmissionListSerializer,
)
from .tasks import submit_to_judge0_task

logger = logging.getLogger(__name__)


def can_view_all_submissions(user) -> bool:
    return bool(
        getattr(user, 'is_superuser', False)
        or getattr(user, 'identity', None) in ('teacher', 'admin')
    )


class SubmissionPagination(PageNumberPagination):
    page_size = 20
    page_size_query_param = 'page_size'
    max_page_size = 100


class SubmissionListCreateView(generics.ListCreateAPIView):
    """
    GET /submission/ - own submissions (teachers and admins see all)
    POST /submission/ - submit code; judging starts once the row is committed
    """
    pagination_class = SubmissionPagination

    def get_serializer_class(self):
        if self.request.method == 'POST':
            return SubmissionCreateSerializer
        return SubmissionListSerializer

    def get_queryset(self):
        user = self.request.user
        queryset = Submission.objects.select_related('user').order_by('-created_at')
        if not can_view_all_submissions(user):
            queryset = queryset.filter(user=user)

        problem_id = self.request.query_params.get('problem_id')
        status_filter = self.request.query_params.get('status')

        if problem_id:
            try:
                queryset = queryset.filter(problem_id=int(problem_id))
            except ValueError:
                queryset = queryset.none()

        if status_filter:
            if status_filter == 'pending':
                queryset = queryset.filter(status__isnull=True)
            else:
                try:
                    queryset = queryset.filter(status=int(status_filter))
                except ValueError:
                    queryset = queryset.none()

        return queryset

    def create(self, request, *args, **kwargs):
        serializer = self.get_serializer(data=request.data)
        if not serializer.is_valid():
            return api_response(
                data=serializer.errors,
                message='Invalid data.',
                status_code=status.HTTP_400_BAD_REQUEST,
            )

        with transaction.atomic():
            submission = serializer.save()
            submission_id = str(submission.id)
            transaction.on_commit(lambda: submit_to_judge0_task.delay(submission_id))

        logger.info(f'Submission {submission_id} created by {request.user.pk}')
        return api_response(
            data=SubmissionListSerializer(submission).data,
            message='Submission received.',
            status_code=status.HTTP_201_CREATED,
        )


class SubmissionDetailView(generics.RetrieveAPIView):
    """GET /submission/<uuid>/ - one submission with its corrections"""
    serializer_class = SubmissionDetailSerializer
    lookup_field = 'id'

    def get_queryset(self):
        user = self.request.user
        queryset = Submission.objects.select_related('user').prefetch_related('corrections__test_case')
        if not can_view_all_submissions(user):
            queryset = queryset.filter(user=user)
        return queryset
