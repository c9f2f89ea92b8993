from rest_framework.permissions import BasePermission, SAFE_METHODS

from user.permissions import IsTeacherOrAdmin


class IsTeacherOrAdminOrReadOnly(IsTeacherOrAdmin):
    """Reads for any logged-in user; writes for teachers and admins."""

    def has_permission(self, request, view):
        if request.method in SAFE_METHODS:
            return bool(request.user and request.user.is_authenticated)
        return super().has_permission(request, view)


class IsOwnerOrReadOnly(BasePermission):
    """
    Reads (GET/HEAD/OPTIONS) for anyone who can see the problem;
    writes (PUT/PATCH/DELETE) only for its creator or an admin.
    """
    message = "Forbidden."

    def has_object_permission(self, request, view, obj):
        if request.method in SAFE_METHODS:
            return True
        return obj.can_manage(request.user)
