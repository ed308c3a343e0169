"""
Custom permission classes for HeBrews
"""
from rest_framework import permissions


def HasRole(*roles):
    """
    Build a permission class that admits authenticated users whose role is
    one of ``roles``. Compose it per view, e.g. ``ReadOnly | HasRole('ADMIN')``.
    """
    allowed_roles = frozenset(roles)

    class _HasRole(permissions.BasePermission):
        message = 'You do not have the required role to perform this action.'

        def has_permission(self, request, view):
            return bool(
                request.user and
                request.user.is_authenticated and
                getattr(request.user, 'role', None) in allowed_roles
            )

    _HasRole.__name__ = 'HasRole_' + '_'.join(sorted(allowed_roles))
    return _HasRole


IsAdminRole = HasRole('ADMIN')


class ReadOnly(permissions.BasePermission):
    """
    Allow read-only access (GET, HEAD, OPTIONS requests)
    """
    def has_permission(self, request, view):
        return request.method in permissions.SAFE_METHODS
