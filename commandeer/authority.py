"""
Access gate.

The core never interprets roles or permissions. It asks an Authority, supplied by
the host application, two yes/no questions, always in the same order: the role
first, then the permission. A caller failing the role check is never asked about
the permission, so the reported denial is unambiguous.
"""
from enum import Enum


class Access(Enum):
    GRANTED = "granted"
    WRONG_ROLE = "wrong-role"
    NO_PERMISSION = "no-permission"

    def __bool__(self):
        return self is Access.GRANTED


class Authority:
    """
    Base authorization collaborator: grants everything.

    Subclass and override check_role()/check_permission() to plug in a real model:

        class Roles(Authority):
            def check_role(self, caller, role):
                return role is None or role in caller.roles
    """

    def check_role(self, caller, role):
        return True

    def check_permission(self, caller, permission):
        return True


def screen(authority, caller, entry, /):
    """
    Run the gate for `entry` and return the Access outcome.

    order
    - check_role(caller, entry.role) first; a failure stops here (WRONG_ROLE).
    - then check_permission(caller, entry.permission) (NO_PERMISSION on failure).
    """
    if not authority.check_role(caller, entry.role):
        return Access.WRONG_ROLE
    if not authority.check_permission(caller, entry.permission):
        return Access.NO_PERMISSION
    return Access.GRANTED


__all__ = (
    "Access",
    "Authority",
    "screen",
)
