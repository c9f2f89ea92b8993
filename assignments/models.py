# assignments/models.py
from django.conf import settings
from django.db import models


class Assignments(models.Model):
    """An activity: one problem handed to a course with a due date."""

    id = models.AutoField(primary_key=True)
    title = models.CharField(max_length=255)
    description = models.TextField(blank=True)

    course = models.ForeignKey(
        "courses.Courses", on_delete=models.CASCADE, related_name="assignments"
    )
    problem = models.ForeignKey(
        "problems.Problems", on_delete=models.PROTECT, related_name="assignments"
    )
    creator = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.PROTECT,
        related_name="assignments_created",
    )

    due_time = models.DateTimeField()

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = "assignments"
        ordering = ["-created_at"]

    def __str__(self):
        return f"{self.title} ({self.course})"
