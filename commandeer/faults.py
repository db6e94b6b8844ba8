"""
Commandeer faults (errors and notices) and rendering.

Scope
- FaultCode: canonical, stable numeric identifiers for every user-facing issue.
  Codes are grouped by domain to keep copy consistent and make logs/searches predictable.
- CommandException / CommandWarning: base types that carry message + options and
  know how to render themselves in a friendly, lowercased, and actionable way.
- trigger(): central entry point to surface any fault (respecting shell/deferred/fancy/colorful).
- getdoc(): optional description lookup for a code from the host application.

Error taxonomy
- registration errors (InvalidRegistrationError and subclasses) are raised synchronously
  by Registry.register() and are meant to stop startup.
- routing and access notices (CommandWarning subclasses) are never raised by the core;
  the shell adapter surfaces them from its dispatcher callbacks.

Integration
- In non-shell mode, exceptions are raised and warnings go through the warnings module.
- In shell mode, both are rendered via rich on stderr.
"""
import inspect
import sys
import warnings
from collections import defaultdict
from enum import IntEnum
from types import MappingProxyType

from rich.console import Console, Group
from rich.panel import Panel
from rich.text import Text

from .utils import Unset

console = Console(stderr=True)


class FaultCode(IntEnum):
    """
    canonical fault codes used across the dispatcher (stable identifiers).

    grouping (by high-level domain)
    - routing (111xx)
      • UNKNOWN_SUBCOMMAND
    - gating (112xx)
      • WRONG_ROLE, MISSING_PERMISSION
    - registration (113xx)
      • EMPTY_PATH, MALFORMED_PATH, DUPLICATED_PATH, FROZEN_REGISTRY
    """
    # --- routing notices (111xx) ---
    UNKNOWN_SUBCOMMAND          = 11102

    # --- gating notices (112xx) ---
    WRONG_ROLE                  = 11201
    MISSING_PERMISSION          = 11202

    # --- registration errors (113xx) ---
    EMPTY_PATH                  = 11301
    MALFORMED_PATH              = 11302
    DUPLICATED_PATH             = 11303
    FROZEN_REGISTRY             = 11304

    def normalize(self):
        """
        return a host-normalized string for this code.

        the host application can provide a __codes__ mapping in __main__
        to override numeric ids with friendlier labels. when no mapping
        is present, the numeric value is returned as a string.
        """
        return str(getattr(__import__("__main__"), "__codes__", {}).get(self, self.value))


def _render(fault, palette):
    """
    build the rich renderable shared by exceptions and warnings.

    layout
    - header: "[ prog — code | title ]"
    - body: the message, then a hint line led by an arrow.
    - fancy mode wraps body in a Panel titled by the header.
    """
    main = __import__("__main__")
    options = fault.options
    colorful = options.get("colorful", False)
    fancy = options.get("fancy", False)

    styles = defaultdict(str, palette | getattr(main, "__styles__", {}))

    def styler(style):
        return styles[style] if colorful else ""

    def text(fragment, style=""):
        if not fragment:
            return Text("")
        if not colorful:
            return Text(str(fragment))
        if isinstance(fragment, Text):
            return fragment
        return Text(str(fragment), style)

    tool = options.get("tool")
    prog = text(getattr(main, "__prog__", getattr(tool, "name", "commandeer")), styler("prog-name"))

    header = Text.assemble(
        "[ ",
        prog,
        " — ",
        text(options["code"].normalize() if "code" in options else "", styler("code")),
        " | ",
        text(str(options.get("title", "")).title(), styler("title")),
        " ]"
    )
    message = text(fault.message or "", styler("message"))
    hint = Text.assemble(text(" → ", styler("hint-arrow")), text(options.get("hint", ""), styler("hint")))

    if fancy:
        width = console.width - 4
        try:
            width = int(width * options["ratio"])
        except KeyError:
            width = None
        return Panel(Group(message, hint), title=header, title_align="left", width=width)

    return Group(header, message, hint)


class CommandException(Exception):
    def __init__(self, message=Unset, /, **options):
        assert isinstance(message, str | Unset)
        super().__init__(*(() if message is Unset else (message,)))
        self.message = message
        self.options = MappingProxyType(options)

    def __rich__(self):
        return _render(self, {
            # header parts
            "prog-name": "bold #E6E6F0",  # near-white program name
            "code": "bold #00E5FF",  # neon cyan fault code
            "title": "bold #FF4DA6",  # friendly pinky title

            # body
            "message": "#C8C8D0",  # soft light gray message
            "hint-arrow": "#9CE19C dim",  # gentle green arrow
            "hint": "italic #9CE19C",  # gentle green hint text
        })

    def __trigger__(self) -> None:
        if not self.options.get("shell", False):
            raise self from None
        console.print(self)
        if self.options.get("deferred", False):
            return
        sys.exit(1)

    def __replace__(self, *unused, **overrides):
        assert not unused, "unused arguments are not allowed"
        return type(self)(self.message, **{**self.options, **overrides})


class InvalidRegistrationError(CommandException): ...
class EmptyPathError(InvalidRegistrationError): ...
class MalformedPathError(InvalidRegistrationError): ...
class DuplicatedPathError(InvalidRegistrationError): ...
class FrozenRegistryError(InvalidRegistrationError): ...


class CommandWarning(Warning):
    def __init__(self, message=Unset, /, **options):
        assert isinstance(message, str | Unset)
        super().__init__(*(() if message is Unset else (message,)))
        self.message = message
        self.options = MappingProxyType(options)

    def __rich__(self):
        return _render(self, {
            # header parts
            "prog-name": "bold #E6E6F0",  # near-white program name
            "code": "bold #FFB400",  # amber fault code for notices
            "title": "bold #FFC2E0",  # softer pinky title for notices

            # body
            "message": "#D6D6DE",  # slightly lighter gray body
            "hint-arrow": "#B8EFAF dim",  # softer green arrow
            "hint": "italic #B8EFAF",  # softer green hint text
        })

    def __trigger__(self) -> None:
        if not self.options.get("shell", False):
            return warnings.warn(self, stacklevel=len(inspect.stack()))
        console.print(self)

    def __replace__(self, *unused, **overrides):
        assert not unused, "positional arguments are not allowed"
        return type(self)(self.message, **{**self.options, **overrides})


class UnknownSubcommandWarning(CommandWarning): ...
class WrongRoleWarning(CommandWarning): ...
class MissingPermissionWarning(CommandWarning): ...


def trigger(fault, /, **options):
    """
    surface a fault with the given runtime options.

    contract
    - fault must provide __trigger__ and __replace__ methods (see base classes).
    - options are merged into the fault via __replace__(**options) before triggering.
    - in shell mode, rendering happens via rich console; otherwise, exceptions are
      raised and warnings are emitted.

    typical options
    - tool, shell, fancy, colorful, deferred, title, code, hint, docs, and any other
      context the reporter may want to show (e.g., path/tokens/resolution).
    """
    if (
        not hasattr(fault, "__trigger__") or
        not callable(fault.__trigger__) or
        not hasattr(fault, "__replace__") or
        not callable(fault.__replace__)
    ):
        raise TypeError("trigger() argument must have a __trigger__ and __replace__ methods")
    fault.__replace__(**options).__trigger__()


def getdoc(code, /):
    """
    optional documentation fetch for a fault code.

    lookup
    - the host application may expose a __docs__ mapping in __main__ where keys
      are FaultCode instances and values are short documentation strings.
    - when not found, returns None (renderers treat docs as optional).
    """
    if not isinstance(code, FaultCode):
        raise TypeError("getdoc() argument must be a fault-code")
    try:
        return getattr(__import__("__main__"), "__docs__", {})[code]
    except KeyError:
        return None


__all__ = (
    "CommandException",
    "InvalidRegistrationError",
    "EmptyPathError",
    "MalformedPathError",
    "DuplicatedPathError",
    "FrozenRegistryError",
    "CommandWarning",
    "UnknownSubcommandWarning",
    "WrongRoleWarning",
    "MissingPermissionWarning",
    "FaultCode",
    "trigger",
    "getdoc",
)
