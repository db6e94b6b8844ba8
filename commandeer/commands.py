"""
Commandeer command layer: the handler contract of registered sub-commands.

What this module provides
- SubCommand: base class for handlers. Subclasses implement execute() and may
  implement complete() to offer dynamic (tab) suggestions for their arguments.
  • role / permission: access requirements declared at construction and handed,
    untouched, to the host's Authority.
  • name: stamped once by the registry with the space-joined registration path.
  • completable: capability flag fixed at construction, never probed at call time.

- subcommand(...): wrap a plain callable into a SubCommand, directly or as a decorator.

Quick start
    from commandeer import Registry, SubCommand, subcommand

    registry = Registry()

    @subcommand(permission="config.set")
    def set_value(caller, context, args):
        print("set", *args)
        return True

    @set_value.completer
    def set_value_keys(caller, context, args):
        return ["color", "depth"]

    class About(SubCommand):
        def execute(self, caller, context, args):
            print("commandeer")
            return True

    registry.register("config set", set_value)
    registry.register("about", About())
"""
from .utils import Unset, coalesce, rename, view


class SubCommand:
    """
    A registrable sub-command.

    Contract
    - execute(caller, context, args) -> bool: run the command; args are the tokens left
      after the matched path. The returned value is what Dispatcher.dispatch() reports.
    - complete(caller, context, args) -> Iterable[str] | None: optional; overriding it
      makes instances completable.

    Notes
    - role and permission default to None; the core never interprets them.
    - an instance is registered once; the registry stamps its name and a second
      registration raises TypeError.
    """

    __introspectable__ = (
        "name",
        "role",
        "permission",
        "completable",
    )

    name = view("name")
    role = view("role")
    permission = view("permission")
    completable = view("completable")

    def __init__(self, *, role=None, permission=None):
        self._name = None
        self._role = role
        self._permission = permission
        self._completable = type(self).complete is not SubCommand.complete
        self._registered = False

    def execute(self, caller, context, args):
        raise NotImplementedError(f"{type(self).__name__}.execute() is not implemented")

    def complete(self, caller, context, args):
        return ()

    def __stamp__(self, name):
        """
        record the canonical name given by the registry; an instance is registered once.
        """
        if self._registered:
            raise TypeError(f"subcommand {self.name!r} is already registered")
        self._name = name
        self._registered = True

    def __repr__(self):
        return "%s(%s)" % (type(self).__name__, ", ".join("%s=%r" % pair for pair in self.__rich_repr__()))

    def __rich_repr__(self):
        for name in type(self).__introspectable__:
            yield name, getattr(self, name)


class Callback(SubCommand):
    """
    SubCommand backed by plain callables (see subcommand()).

    The callback receives (caller, context, args). A completer, when given at
    construction or attached with @command.completer before registration, makes the
    command completable.
    """

    def __init__(self, callback, /, *, role=None, permission=None, completer=Unset):
        if not callable(callback):
            raise TypeError("subcommand 'callback' must be callable")
        if completer is not Unset and not callable(completer):
            raise TypeError("subcommand 'completer' must be callable")
        super().__init__(role=role, permission=permission)
        self._callback = callback
        self._completer = coalesce(completer)
        self._completable = completer is not Unset

    def execute(self, caller, context, args):
        return self._callback(caller, context, args)

    def complete(self, caller, context, args):
        if self._completer is None:
            return ()
        return self._completer(caller, context, args)

    def completer(self, completer, /):
        """
        Attach the dynamic completer; usable as a decorator: @command.completer

        Rules
        - Must be callable.
        - Can be set only once, and only before the command is registered.
        """
        if not callable(completer):
            raise TypeError("subcommand completer must be callable")
        if self._completer is not None:
            raise TypeError("subcommand completer cannot be overridden")
        if self._registered:
            raise TypeError(f"subcommand {self.name!r} is already registered")
        self._completer = completer
        self._completable = True
        return completer

    def __call__(self, caller, context, args):
        return self.execute(caller, context, args)


def subcommand(source=Unset, /, **kwargs):
    """
    Create a SubCommand from a callable or return a decorator to build it later.

    Invocation modes
    - Direct: cmd = subcommand(func, role="player", permission="x.y")
    - Decorator: @subcommand(permission="x.y") / @subcommand

    Parameters
    - source: Unset | Callable
    - **kwargs: role, permission, completer (forwarded to Callback).
    """
    @rename("subcommand")
    def wrapper(source, /):
        if not callable(source):
            raise TypeError("@subcommand() must be applied to a callable")
        return Callback(source, **kwargs)

    return wrapper(source) if source is not Unset else wrapper


__all__ = (
    "SubCommand",
    "Callback",
    "subcommand",
)
