from functools import wraps
from flask import abort
from flask_login import current_user


def has_permission(required_roles) -> bool:
    """True when the signed-in user's role is one of ``required_roles``."""
    if not current_user.is_authenticated:
        return False
    role = getattr(current_user, "role", None)
    return role is not None and role in {getattr(r, "value", r) for r in required_roles}


def roles_required(*roles):
    def decorator(view):
        @wraps(view)
        def wrapped(*args, **kwargs):
            if not current_user.is_authenticated:
                abort(401)
            if not has_permission(roles):
                abort(403)
            return view(*args, **kwargs)
        return wrapped
    return decorator


def admin_required(view):
    return roles_required("admin")(view)
