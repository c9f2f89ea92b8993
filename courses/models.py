import uuid
from django.db import models
from django.conf import settings


class Courses(models.Model):
    """A class (turma) taught by one professor."""
    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)

    name = models.CharField(max_length=200)
    description = models.TextField(blank=True)

    teacher = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.PROTECT,
        related_name="courses_taught",
    )

    students = models.ManyToManyField(
        settings.AUTH_USER_MODEL,
        through="Course_members",
        related_name="courses_joined",
        blank=True,
    )

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = "courses"
        ordering = ["-created_at"]

    def __str__(self):
        return self.name

    def is_staff_member(self, user) -> bool:
        """Owner professor or platform admin."""
        if not user or not user.is_authenticated:
            return False
        return self.teacher_id == user.pk or getattr(user, "is_platform_admin", False)

    def has_student(self, user) -> bool:
        return Course_members.objects.filter(course=self, user=user).exists()


class Course_members(models.Model):
    course = models.ForeignKey(
        Courses,
        on_delete=models.CASCADE,
        related_name="members",
    )
    user = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name="course_memberships",
    )
    joined_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        db_table = "course_members"
        unique_together = ("course", "user")

    def __str__(self):
        return f"{self.user} in {self.course}"
