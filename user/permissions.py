from rest_framework.permissions import BasePermission


class IsPlatformAdmin(BasePermission):
    """Only admins manage student and professor accounts."""
    message = "Forbidden."

    def has_permission(self, request, view):
        user = request.user
        if not user or not user.is_authenticated:
            return False
        return bool(user.is_superuser or getattr(user, "identity", None) == "admin")


class IsTeacherOrAdmin(BasePermission):
    """
    Allows teachers and admins; login required.
    - custom user identity in (teacher, admin)
    - or is_staff / superuser
    """
    message = "Forbidden."

    def has_permission(self, request, view):
        user = request.user
        if not user or not user.is_authenticated:
            return False
        identity = getattr(user, "identity", None)
        return bool(
            getattr(user, "is_superuser", False)
            or getattr(user, "is_staff", False)
            or identity in ("teacher", "admin")
        )
