from django.db import models
from django.conf import settings
import uuid


class Status(models.IntegerChoices):
    """Judge0 status ids, shared by Submission and Correction."""
    IN_QUEUE = 1, 'In Queue'
    PROCESSING = 2, 'Processing'
    ACCEPTED = 3, 'Accepted'
    WRONG_ANSWER = 4, 'Wrong Answer'
    TIME_LIMIT_EXCEEDED = 5, 'Time Limit Exceeded'
    COMPILATION_ERROR = 6, 'Compilation Error'
    RUNTIME_ERROR_SIGSEGV = 7, 'Runtime Error (SIGSEGV)'
    RUNTIME_ERROR_SIGXFSZ = 8, 'Runtime Error (SIGXFSZ)'
    RUNTIME_ERROR_SIGFPE = 9, 'Runtime Error (SIGFPE)'
    RUNTIME_ERROR_SIGABRT = 10, 'Runtime Error (SIGABRT)'
    RUNTIME_ERROR_NZEC = 11, 'Runtime Error (NZEC)'
    RUNTIME_ERROR_OTHER = 12, 'Runtime Error (Other)'
    INTERNAL_ERROR = 13, 'Internal Error'
    EXEC_FORMAT_ERROR = 14, 'Exec Format Error'


# 1 and 2 are the only statuses Judge0 will still move away from
TRANSIENT_STATUSES = (Status.IN_QUEUE, Status.PROCESSING)


def is_transient(status_id) -> bool:
    return status_id in TRANSIENT_STATUSES


class Submission(models.Model):
    # Language choices - enum (0=C, 1=C++, 2=Python, 3=Java, 4=JavaScript)
    LANGUAGE_CHOICES = [
        (0, 'C'),
        (1, 'C++'),
        (2, 'Python'),
        (3, 'Java'),
        (4, 'JavaScript'),
    ]

    # Primary key - UUID
    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)

    # Foreign keys
    problem = models.ForeignKey(
        'problems.Problems', on_delete=models.CASCADE, related_name='submissions'
    )
    user = models.ForeignKey(
        settings.AUTH_USER_MODEL, on_delete=models.CASCADE, related_name='submissions'
    )
    assignment = models.ForeignKey(
        'assignments.Assignments',
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name='submissions',
    )

    # Core fields
    language_type = models.IntegerField(choices=LANGUAGE_CHOICES)
    source_code = models.TextField()

    # NULL until every correction reached a terminal status; written once
    status = models.IntegerField(choices=Status.choices, null=True, blank=True)

    # Timestamps
    created_at = models.DateTimeField(auto_now_add=True)
    judged_at = models.DateTimeField(null=True, blank=True)

    class Meta:
        indexes = [
            models.Index(fields=['user', 'problem', 'created_at'], name='submissions_user_id_3b1c2d_idx'),
            models.Index(fields=['status', 'created_at'], name='submissions_status_8f0a4e_idx'),
        ]
        ordering = ['-created_at']
        db_table = 'submissions'

    def __str__(self):
        return f"Submission {self.id} - {self.user_id} - {self.get_status_display() or 'Pending'}"

    @property
    def is_judged(self):
        return self.status is not None


class Correction(models.Model):
    """One Judge0 run of a submission against one test case."""

    submission = models.ForeignKey(Submission, on_delete=models.CASCADE, related_name='corrections')
    test_case = models.ForeignKey(
        'problems.Test_cases',
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name='corrections',
    )
    token = models.CharField(max_length=64, db_index=True)
    status = models.IntegerField(choices=Status.choices, default=Status.IN_QUEUE)

    created_at = models.DateTimeField(auto_now_add=True)
    judged_at = models.DateTimeField(null=True, blank=True)

    class Meta:
        ordering = ['id']
        db_table = 'submission_corrections'

    def __str__(self):
        return f"Correction {self.token} - {self.get_status_display()}"

    @property
    def is_pending(self):
        return is_transient(self.status)
