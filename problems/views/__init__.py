from .api import (
    ProblemPagination,
    ProblemsViewSet,
)

__all__ = [
    'ProblemPagination',
    'ProblemsViewSet',
]
