"""
Tab completion.

Suggestions for the last (partial) token come from two sources, in this order:
- static: registered paths exactly one token deeper than the typed prefix, whose
  next token starts with the partial token;
- dynamic: the completer of the command the whole input resolves to, fed with the
  remaining arguments, lower-cased like the rest of the completion input.

Commands the caller may not run (role or permission) are invisible to both sources.
"""
import logging

from .authority import screen
from .resolver import Resolver

logger = logging.getLogger(__name__)


class CompletionContext:
    """Per-call completion state; suggestions keep insertion order."""

    __slots__ = ("tokens", "index", "suggestions")

    def __init__(self, tokens):
        self.tokens = tuple(token.lower() for token in tokens) or ("",)
        self.index = len(self.tokens) - 1
        self.suggestions = []

    @property
    def prefix(self):
        return self.tokens[:self.index]

    @property
    def partial(self):
        return self.tokens[self.index]

    def __repr__(self):
        return f"{type(self).__name__}(tokens={self.tokens!r}, index={self.index!r})"


class Completer:
    def __init__(self, registry, authority, resolver=None):
        self._registry = registry
        self._authority = authority
        self._resolver = resolver if resolver is not None else Resolver(registry)

    def complete(self, tokens, caller, context=None):
        """
        Return the suggestions for the last token of `tokens`.

        An empty input completes the first token. Duplicates are kept.
        """
        tokens = tuple(tokens)
        completion = CompletionContext(tokens)
        self._suggest_paths(completion, caller)
        self._suggest_arguments(completion, tokens, caller, context)
        logger.debug("completed %r with %d suggestions", completion.tokens, len(completion.suggestions))
        return completion.suggestions

    def _suggest_paths(self, completion, caller):
        depth = completion.index + 1
        for key, entry in self._registry.entries().items():
            if len(key) != depth or key[:completion.index] != completion.prefix:
                continue
            if not key[completion.index].startswith(completion.partial):
                continue
            if screen(self._authority, caller, entry):
                completion.suggestions.append(key[completion.index])

    def _suggest_arguments(self, completion, tokens, caller, context):
        resolution = self._resolver.resolve(tokens)
        if resolution is None or not resolution.entry.completable:
            return
        if not screen(self._authority, caller, resolution.entry):
            return
        args = completion.tokens[len(resolution.entry.path):]
        suggestions = resolution.command.complete(caller, context, args)
        if suggestions is not None:
            completion.suggestions.extend(suggestions)


__all__ = (
    "CompletionContext",
    "Completer",
)
