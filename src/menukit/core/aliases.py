"""
Alias registry and placeholder substitution.

String arguments may embed ``{{word}}`` markers; a registered alias
replaces the marker before the argument reaches the host.
"""

import re
from typing import Any, Dict, Mapping, Optional, Tuple

from ..events.event_bus import AliasRegisteredEvent, EventBus
from ..logging import logger
from ..models.errors import ErrorKind
from .reporting import ErrorReporter

ALIAS_PATTERN = re.compile(r"\{\{(\S+?)\}\}")


def resolve_aliases(text: Any, aliases: Mapping[str, str]) -> Any:
    """
    Replace the first registered ``{{word}}`` marker in ``text``.

    Markers naming unregistered words are left as literal text. Non-string
    input is returned unchanged.
    """
    if not isinstance(text, str):
        return text

    for match in ALIAS_PATTERN.finditer(text):
        word = match.group(1)
        if word in aliases:
            return text[:match.start()] + aliases[word] + text[match.end():]
    return text


class AliasRegistry:
    """
    Append-only word -> replacement mapping.

    Registering an existing word, or a word containing whitespace, is a
    reported error and leaves the registry untouched.
    """

    def __init__(
        self,
        reporter: Optional[ErrorReporter] = None,
        events: Optional[EventBus] = None,
    ):
        self._aliases: Dict[str, str] = {}
        self._reporter = reporter or ErrorReporter(events)
        self._events = events

    def register(self, word: str, replacement: Any) -> Optional[Tuple[str, str]]:
        """
        Register an alias.

        Returns:
            The (word, replacement) pair, or None if registration was rejected
        """
        if not isinstance(word, str) or not word:
            return self._reporter.report(
                ErrorKind.USAGE,
                "Invalid usage, please use: menu.alias(word, replacement)",
            )
        if any(c.isspace() for c in word):
            return self._reporter.report(
                ErrorKind.REGISTRATION,
                f"Alias '{word}' must not contain whitespace",
            )
        if word in self._aliases:
            return self._reporter.report(
                ErrorKind.REGISTRATION,
                f"Alias '{word}' is already registered as '{self._aliases[word]}'",
            )

        replacement = str(replacement)
        self._aliases[word] = replacement
        logger.debug(f"Registered alias {{{{{word}}}}} -> '{replacement}'")
        if self._events is not None:
            self._events.emit(AliasRegisteredEvent(word=word, replacement=replacement))
        return word, replacement

    def resolve(self, text: Any) -> Any:
        """Substitute the first registered marker in ``text``."""
        resolved = resolve_aliases(text, self._aliases)
        if resolved != text:
            logger.debug(f"Alias substitution: '{text}' -> '{resolved}'")
        return resolved

    def get(self, word: str) -> Optional[str]:
        return self._aliases.get(word)

    def as_dict(self) -> Dict[str, str]:
        return dict(self._aliases)

    def __contains__(self, word: object) -> bool:
        return word in self._aliases

    def __len__(self) -> int:
        return len(self._aliases)
