"""
Dispatcher: one entry point per incoming invocation.

Every dispatch() call ends in exactly one of:
- nomatch(tokens, caller, context)   no registered path prefixes the input
- wrongrole(resolution, caller)      the caller fails the role check
- nopermission(resolution, caller)   the caller passes the role check but not the permission check
- command.execute(caller, context, args)

Callbacks are given to the constructor or installed once with the decorator methods:

    dispatcher = Dispatcher(registry, Roles())

    @dispatcher.wrongrole
    def wrongrole(resolution, caller):
        caller.send("only players can run %s" % resolution.entry.name)

Handler exceptions are not caught.
"""
import logging

from .authority import Access, Authority, screen
from .completion import Completer
from .resolver import Resolver
from .utils import Unset, coalesce

logger = logging.getLogger(__name__)


def _nomatch(tokens, caller, context):
    return False


def _denied(resolution, caller):
    return None


class Dispatcher:
    def __init__(self, registry, authority=None, *, nomatch=Unset, wrongrole=Unset, nopermission=Unset):
        self._registry = registry
        self._authority = authority if authority is not None else Authority()
        self._resolver = Resolver(registry)
        self._completer = Completer(registry, self._authority, self._resolver)
        self._nomatch = Unset
        self._wrongrole = Unset
        self._nopermission = Unset

        if nomatch is not Unset:
            self.nomatch(nomatch)
        if wrongrole is not Unset:
            self.wrongrole(wrongrole)
        if nopermission is not Unset:
            self.nopermission(nopermission)

    @property
    def registry(self):
        return self._registry

    @property
    def authority(self):
        return self._authority

    @property
    def resolver(self):
        return self._resolver

    def _install(self, slot, callback):
        if not callable(callback):
            raise TypeError(f"{type(self).__name__} {slot} callback must be callable")
        if getattr(self, "_" + slot) is not Unset:
            raise TypeError(f"{type(self).__name__} {slot} callback cannot be overridden")
        setattr(self, "_" + slot, callback)
        return callback

    def nomatch(self, callback, /):
        """Install the no-match callback: (tokens, caller, context) -> bool. Decorator-friendly."""
        return self._install("nomatch", callback)

    def wrongrole(self, callback, /):
        """Install the wrong-role callback: (resolution, caller) -> None. Decorator-friendly."""
        return self._install("wrongrole", callback)

    def nopermission(self, callback, /):
        """Install the no-permission callback: (resolution, caller) -> None. Decorator-friendly."""
        return self._install("nopermission", callback)

    def dispatch(self, tokens, caller, context=None):
        """
        Resolve `tokens`, gate the match, and run it.

        returns
        - the no-match callback's answer when nothing matches (False by default),
        - True when access was denied (the matching callback was notified),
        - the command's own answer otherwise.
        """
        tokens = tuple(tokens)
        resolution = self._resolver.resolve(tokens)
        if resolution is None:
            return bool(coalesce(self._nomatch, _nomatch)(tokens, caller, context))

        match screen(self._authority, caller, resolution.entry):
            case Access.WRONG_ROLE:
                logger.debug("%r denied to %r: wrong role", resolution.entry.name, caller)
                coalesce(self._wrongrole, _denied)(resolution, caller)
                return True
            case Access.NO_PERMISSION:
                logger.debug("%r denied to %r: missing permission", resolution.entry.name, caller)
                coalesce(self._nopermission, _denied)(resolution, caller)
                return True

        return bool(resolution.command.execute(caller, context, resolution.args))

    def complete(self, tokens, caller, context=None):
        """Suggestions for the last token of `tokens` (see Completer.complete)."""
        return self._completer.complete(tokens, caller, context)


__all__ = (
    "Dispatcher",
)
