from .core import (
    TestCaseSerializer,
    ProblemSerializer,
)

__all__ = [
    'TestCaseSerializer',
    'ProblemSerializer',
]
