"""
Sub-command registry.

The registry owns the mapping PathKey -> SubCommandEntry. It is built once at
startup, append-only, and read-only once frozen:

    registry = Registry()
    registry.register("config set", set_value)
    registry.register(["config", "get"], get_value)
    registry.freeze()

Registration problems raise InvalidRegistrationError subclasses synchronously;
the application is expected to fail fast on them.
"""
import logging
from types import MappingProxyType
from typing import NamedTuple

from .commands import SubCommand, subcommand
from .faults import (
    DuplicatedPathError,
    EmptyPathError,
    FaultCode,
    FrozenRegistryError,
    MalformedPathError,
    getdoc,
)
from .paths import PathKey

logger = logging.getLogger(__name__)


class SubCommandEntry(NamedTuple):
    """A registered command together with the path it was registered under."""
    path: PathKey
    command: SubCommand

    @property
    def name(self):
        return str(self.path)

    @property
    def role(self):
        return self.command.role

    @property
    def permission(self):
        return self.command.permission

    @property
    def completable(self):
        return self.command.completable


class Registry:
    """
    Append-only mapping of command paths to registered sub-commands.

    Invariants
    - every key has at least one token.
    - no two registrations share an equal PathKey (case-insensitive).
    - iteration follows registration order.
    """

    def __init__(self):
        self._entries = {}
        self._frozen = False

    @property
    def frozen(self):
        return self._frozen

    def register(self, path, command, /):
        """
        Register `command` under `path` and return the new entry.

        Parameters
        - path: str | Iterable[str]
          "config set" or ["config", "set"]; tokens are lower-cased.
        - command: SubCommand | Callable
          plain callables are wrapped with subcommand().

        Raises
        - TypeError: when command is neither a SubCommand nor callable, or is already registered.
        - EmptyPathError, MalformedPathError, DuplicatedPathError, FrozenRegistryError.
        """
        if not isinstance(command, SubCommand):
            if not callable(command):
                raise TypeError("register() command must be a subcommand or a callable")
            command = subcommand(command)

        if self._frozen:
            raise FrozenRegistryError(
                "registry is frozen, cannot register %r" % (path,),
                title="frozen registry",
                code=FaultCode.FROZEN_REGISTRY,
                path=path,
                hint="register every command before freezing the registry",
                docs=getdoc(FaultCode.FROZEN_REGISTRY),
            )

        try:
            key = PathKey(path)
        except (TypeError, ValueError) as exception:
            raise MalformedPathError(
                "malformed path %r for %s" % (path, type(command).__name__),
                title="malformed path",
                code=FaultCode.MALFORMED_PATH,
                path=path,
                hint=str(exception),
                docs=getdoc(FaultCode.MALFORMED_PATH),
            ) from exception

        if not key:
            raise EmptyPathError(
                "empty path for %s" % type(command).__name__,
                title="empty path",
                code=FaultCode.EMPTY_PATH,
                path=key,
                hint="give the command at least one token",
                docs=getdoc(FaultCode.EMPTY_PATH),
            )

        if key in self._entries:
            raise DuplicatedPathError(
                "path %r is already registered" % str(key),
                title="duplicated path",
                code=FaultCode.DUPLICATED_PATH,
                path=key,
                hint="pick another path for %s" % type(command).__name__,
                docs=getdoc(FaultCode.DUPLICATED_PATH),
            )

        command.__stamp__(str(key))
        entry = self._entries[key] = SubCommandEntry(key, command)
        logger.debug("registered %r -> %s", str(key), type(command).__name__)
        return entry

    def freeze(self):
        """Reject any further registration; the map is read-only from here on."""
        self._frozen = True
        logger.debug("registry frozen with %d commands", len(self._entries))

    def entries(self):
        """Read-only view of the PathKey -> SubCommandEntry mapping, in registration order."""
        return MappingProxyType(self._entries)

    def get(self, path, default=None, /):
        try:
            return self._entries.get(PathKey(path), default)
        except (TypeError, ValueError):
            return default

    def __contains__(self, path):
        return self.get(path) is not None

    def __iter__(self):
        return iter(self._entries)

    def __len__(self):
        return len(self._entries)

    def __repr__(self):
        return "%s(%s)" % (type(self).__name__, ", ".join(map(repr, map(str, self._entries))))


__all__ = (
    "SubCommandEntry",
    "Registry",
)
