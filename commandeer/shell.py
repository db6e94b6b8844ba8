"""
Shell adapter: wire a registry to raw user input and rich-rendered notices.

The dispatcher core never prints. Shell is the thin host layer that:
- turns argv / shell-like strings / iterables into tokens (see utils.tokenize),
- owns a Dispatcher whose callbacks render notices via faults.trigger(),
- splits readline-style lines for completion.

Runtime flags
- shell:    print notices (True) or emit them through warnings (False).
- fancy:    wrap notices in rich panels.
- colorful: style notices (see __styles__ in __main__ for overrides).

Example
    shell = Shell(registry, Roles(), name="admin", colorful=True)
    shell.invoke("config set color red", caller=user)
    shell.suggest("config s", caller=user)   # ["set"]
"""
import difflib
import shlex

from .authority import Authority
from .dispatcher import Dispatcher
from .faults import (
    FaultCode,
    MissingPermissionWarning,
    UnknownSubcommandWarning,
    WrongRoleWarning,
    getdoc,
    trigger,
)
from .utils import Unset, tokenize, view


class Shell:
    __introspectable__ = (
        "name",
        "shell",
        "fancy",
        "colorful",
    )

    name = view("name")
    shell = view("shell")
    fancy = view("fancy")
    colorful = view("colorful")

    def __init__(self, registry, authority=None, *, name="commandeer", shell=True, fancy=False, colorful=False):
        if not isinstance(name, str) or not (name := name.strip()):
            raise TypeError(f"{type(self).__name__} 'name' must be a non-empty string")
        self._name = name
        self._shell = bool(shell)
        self._fancy = bool(fancy)
        self._colorful = bool(colorful)
        self._dispatcher = Dispatcher(
            registry,
            authority if authority is not None else Authority(),
            nomatch=self._nomatch,
            wrongrole=self._wrongrole,
            nopermission=self._nopermission,
        )

    @property
    def dispatcher(self):
        return self._dispatcher

    def trigger(self, fault, /, **options):
        trigger(fault, **options, tool=self, shell=self.shell, fancy=self.fancy, colorful=self.colorful, deferred=True)

    def _nomatch(self, tokens, caller, context):
        input = tokens[0] if tokens else ""
        heads = dict.fromkeys(key[0] for key in self._dispatcher.registry)
        suggestions = difflib.get_close_matches(input.lower(), heads, 5)
        try:
            hint = "did you mean %r?" % suggestions[0]
        except IndexError:
            hint = "available commands: %s" % (", ".join(heads) or "none")

        self.trigger(UnknownSubcommandWarning(
            "unknown command %r" % " ".join(tokens),
            title="unknown command",
            code=FaultCode.UNKNOWN_SUBCOMMAND,
            tokens=tokens,
            suggestions=suggestions,
            hint=hint,
            docs=getdoc(FaultCode.UNKNOWN_SUBCOMMAND),
        ))
        return False

    def _wrongrole(self, resolution, caller):
        self.trigger(WrongRoleWarning(
            "%r cannot be run by this caller" % resolution.entry.name,
            title="wrong role",
            code=FaultCode.WRONG_ROLE,
            resolution=resolution,
            hint="required role: %s" % resolution.entry.role,
            docs=getdoc(FaultCode.WRONG_ROLE),
        ))

    def _nopermission(self, resolution, caller):
        self.trigger(MissingPermissionWarning(
            "missing permission to run %r" % resolution.entry.name,
            title="missing permission",
            code=FaultCode.MISSING_PERMISSION,
            resolution=resolution,
            hint="required permission: %s" % resolution.entry.permission,
            docs=getdoc(FaultCode.MISSING_PERMISSION),
        ))

    def invoke(self, prompt=Unset, /, caller=None, context=None):
        """
        Dispatch a prompt.

        Parameters
        - prompt: Unset (sys.argv[1:]) | str (shlex-split) | Iterable[str]
        - caller, context: handed to the authority, callbacks and command untouched.
        """
        return self._dispatcher.dispatch(tokenize(prompt), caller, context)

    def suggest(self, line, /, caller=None, context=None):
        """
        Complete the last word of a raw input line.

        A line ending in whitespace completes a new, empty token. Unbalanced quotes
        fall back to plain whitespace splitting.
        """
        if not isinstance(line, str):
            raise TypeError("suggest() argument must be a string")
        try:
            tokens = shlex.split(line)
        except ValueError:
            tokens = line.split()
        if not line or line[-1].isspace():
            tokens.append("")
        return self._dispatcher.complete(tokens, caller, context)

    def __repr__(self):
        return "%s(%s)" % (type(self).__name__, ", ".join("%s=%r" % (name, getattr(self, name)) for name in self.__introspectable__))


__all__ = (
    "Shell",
)
