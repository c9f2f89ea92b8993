import logging

from rest_framework import viewsets
from rest_framework.pagination import PageNumberPagination

from ..models import Problems
from ..permissions import IsOwnerOrReadOnly, IsTeacherOrAdminOrReadOnly
from ..serializers import ProblemSerializer

logger = logging.getLogger(__name__)


class ProblemPagination(PageNumberPagination):
    page_size = 20
    page_size_query_param = 'page_size'
    max_page_size = 100


class ProblemsViewSet(viewsets.ModelViewSet):
    """
    /problem/       GET list (public + own), POST create (teacher/admin)
    /problem/<id>/  GET, PUT/PATCH and DELETE (creator or admin)
    """
    serializer_class = ProblemSerializer
    permission_classes = [IsTeacherOrAdminOrReadOnly, IsOwnerOrReadOnly]
    pagination_class = ProblemPagination

    def get_queryset(self):
        queryset = (
            Problems.objects.visible_to(self.request.user)
            .select_related("creator")
            .prefetch_related("test_cases")
            .order_by("-created_at")
        )
        title = self.request.query_params.get("title")
        if title:
            queryset = queryset.filter(title__icontains=title)
        return queryset

    def perform_create(self, serializer):
        problem = serializer.save(creator=self.request.user)
        logger.info(f"Problem {problem.id} created by {self.request.user.pk}")

    def perform_destroy(self, instance):
        logger.info(f"Problem {instance.id} deleted by {self.request.user.pk}")
        instance.delete()
