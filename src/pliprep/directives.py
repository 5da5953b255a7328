"""The preprocessor directive vocabulary."""

from __future__ import annotations

from enum import Enum, auto

from pliprep.tokens import DIRECTIVE_SIGIL


class DirectiveKind(Enum):
    CONTROL_FLOW = auto()  # %IF %THEN %ELSE %ENDIF
    COMMENT = auto()  # %COMMENT


# Upper-cased keyword, sigil included -> kind
DIRECTIVES: dict[str, DirectiveKind] = {
    "%IF": DirectiveKind.CONTROL_FLOW,
    "%THEN": DirectiveKind.CONTROL_FLOW,
    "%ELSE": DirectiveKind.CONTROL_FLOW,
    "%ENDIF": DirectiveKind.CONTROL_FLOW,
    "%COMMENT": DirectiveKind.COMMENT,
}


def recognize_directive(text: str) -> DirectiveKind | None:
    """Return the kind of directive ``text`` names, or None.

    Matching is case-insensitive and exact: ``%ifx`` is not ``%IF``.
    """
    if not text.startswith(DIRECTIVE_SIGIL):
        return None
    return DIRECTIVES.get(text.upper())
