"""
Longest-prefix resolution of input tokens against the registry.

A registered path K is a candidate for input I when K is a token-wise prefix of I
(input tokens compared lower-cased). The longest candidate wins; the remaining
arguments are I[len(K):], untouched.

Two candidates of the same length would both equal I[:n] lower-cased, i.e. be equal
keys, which the registry forbids; so a tie cannot happen. Entries are still walked in
registration order and the best is only replaced by a strictly longer candidate.
"""
import logging
from typing import NamedTuple

from .registry import SubCommandEntry

logger = logging.getLogger(__name__)


class Resolution(NamedTuple):
    """
    A matched entry and the arguments left after its path.

    Example: with "config set" registered, ["config", "set", "Color", "red"]
    resolves to entry "config set" with args ("Color", "red").
    """
    entry: SubCommandEntry
    args: tuple

    @property
    def command(self):
        return self.entry.command


class Resolver:
    def __init__(self, registry):
        self._registry = registry

    def resolve(self, tokens):
        """
        Return the Resolution of the most specific registered path, or None.

        Complexity is O(R·L) for R registered paths of average length L.
        """
        tokens = tuple(tokens)
        best = None
        for key, entry in self._registry.entries().items():
            if (best is None or len(key) > len(best.path)) and key.prefixes(tokens):
                best = entry

        if best is None:
            logger.debug("no command matches %r", tokens)
            return None

        logger.debug("resolved %r to %r", tokens, best.name)
        return Resolution(best, tokens[len(best.path):])


__all__ = (
    "Resolution",
    "Resolver",
)
