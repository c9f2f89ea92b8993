from django.conf import settings
from django.core.validators import MinValueValidator
from django.db import models
from django.db.models import Q
from django.utils import timezone


class ProblemQuerySet(models.QuerySet):
    def visible_to(self, user):
        """Public problems plus the ones the user created; admins see everything."""
        if getattr(user, "is_platform_admin", False):
            return self
        return self.filter(Q(is_private=False) | Q(creator=user))


class Problems(models.Model):
    id = models.AutoField(primary_key=True)
    title = models.CharField(max_length=200)
    # HTML produced by the rich text editor, stored as-is
    description = models.TextField()
    time_limit_ms = models.PositiveIntegerField(validators=[MinValueValidator(1)])
    memory_limit_mb = models.PositiveIntegerField(validators=[MinValueValidator(1)])
    is_private = models.BooleanField(default=True, db_index=True)
    creator = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name="created_problems",
    )
    created_at = models.DateTimeField(default=timezone.now)
    updated_at = models.DateTimeField(auto_now=True)

    objects = ProblemQuerySet.as_manager()

    class Meta:
        db_table = "problems"
        ordering = ["-created_at"]

    def __str__(self):
        return self.title

    def can_manage(self, user) -> bool:
        if not user or not user.is_authenticated:
            return False
        return self.creator_id == user.pk or getattr(user, "is_platform_admin", False)


class Test_cases(models.Model):
    problem = models.ForeignKey(Problems, on_delete=models.CASCADE, related_name="test_cases")
    idx = models.PositiveIntegerField()
    input_data = models.TextField(blank=True, default="")
    expected_output = models.TextField()
    is_private = models.BooleanField(default=False)
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        db_table = "problem_test_cases"
        ordering = ["problem", "idx"]
        unique_together = ("problem", "idx")

    def __str__(self):
        return f"{self.problem_id}#{self.idx}"
