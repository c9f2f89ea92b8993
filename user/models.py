import uuid
from django.db import models
from django.contrib.auth.models import AbstractUser
from django.conf import settings


class User(AbstractUser):
    """
    Custom user:
    - UUID primary key
    - unique email, used for password recovery
    - real_name shown across the platform
    - identity decides what the account may manage
    - must_change_password is raised after a temporary password is issued
    """
    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)

    email = models.EmailField(max_length=254, unique=True)
    real_name = models.CharField(max_length=150)

    class Identity(models.TextChoices):
        TEACHER = 'teacher', 'Teacher'
        ADMIN   = 'admin',   'Admin'
        STUDENT = 'student', 'Student'
    identity = models.CharField(max_length=16, choices=Identity.choices, default=Identity.STUDENT)

    must_change_password = models.BooleanField(default=False)

    @property
    def is_teacher(self) -> bool:
        return self.identity == self.Identity.TEACHER

    @property
    def is_student(self) -> bool:
        return self.identity == self.Identity.STUDENT

    @property
    def is_platform_admin(self) -> bool:
        return self.identity == self.Identity.ADMIN or self.is_superuser

    def __str__(self):
        return f"{self.username} ({self.identity})"


class UserProfile(models.Model):
    """
    Academic data kept next to the account.

    registration / program belong to students, field_of_work to professors.
    """
    user = models.OneToOneField(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        primary_key=True,
        related_name='profile',
    )
    registration = models.CharField(max_length=50, unique=True, null=True, blank=True)
    program = models.CharField(max_length=150, blank=True)
    field_of_work = models.CharField(max_length=150, blank=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = 'user_profiles'

    def __str__(self):
        return f"Profile<{self.user.username}>"
