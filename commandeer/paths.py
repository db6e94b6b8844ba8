"""
Command paths.

A PathKey is the registry key of a sub-command: an immutable, ordered sequence of
lowercase tokens such as ("config", "set"). It is a tuple, so equality and hashing
are by full content and two keys built from differently-cased tokens are equal.
"""
import re
from collections.abc import Iterable


class PathKey(tuple):
    """
    immutable lowercase token path.

    construction
    - PathKey("config set") splits on whitespace.
    - PathKey(["Config", "SET"]) lower-cases each token.

    rules
    - every token is a non-empty str without whitespace.
    - an empty key is constructible (so callers can report it), but the registry rejects it.
    """
    __slots__ = ()

    def __new__(cls, tokens=(), /):
        if isinstance(tokens, str):
            tokens = tokens.split()
        elif not isinstance(tokens, Iterable):
            raise TypeError("PathKey() argument must be a string or an iterable of strings")

        normalized = []
        for token in tokens:
            if not isinstance(token, str):
                raise TypeError("PathKey() tokens must be strings")
            if not token or re.search(r"\s", token):
                raise ValueError(f"PathKey() token {token!r} must be non-empty and without whitespace")
            normalized.append(token.lower())
        return super().__new__(cls, normalized)

    def prefixes(self, tokens, /):
        """
        tell whether this key is a token-wise prefix of `tokens`.

        the comparison lower-cases the input tokens; `tokens` may be longer than the key.
        """
        if len(self) > len(tokens):
            return False
        return all(token == other.lower() for token, other in zip(self, tokens))

    def __str__(self):
        return " ".join(self)

    def __repr__(self):
        return f"{type(self).__name__}({str(self)!r})"

    def __rich_repr__(self):
        yield str(self)


__all__ = (
    "PathKey",
)
