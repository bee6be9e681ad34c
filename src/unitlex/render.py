"""
Debug Token Rendering
=====================

Turns a token stream back into approximate source text, the way the
debug tool prints a definitions file after scanning it:

| Token      | Rendered as                          |
|------------|--------------------------------------|
| IDENT      | name followed by a space             |
| NUMBER     | integer[.fraction][eexponent] + " "  |
| operators  | their literal character              |
| ERROR      | <error: message>                     |
| NEWLINE    | line break                           |
| EOF        | nothing                              |

For error-free input, scanning the rendering again gives the same tokens.
"""

from typing import Iterable

from unitlex.lexer.tokens import OPERATOR_TEXT, Token, TokenType


def render_token(token: Token) -> str:
    """Render a single token in debug form."""
    if token.type is TokenType.IDENT or token.type is TokenType.NUMBER:
        return f"{token.value} "
    if token.type is TokenType.NEWLINE:
        return "\n"
    if token.type is TokenType.ERROR:
        return f"<error: {token.value}>"
    if token.type is TokenType.EOF:
        return ""
    return OPERATOR_TEXT[token.type]


def render_tokens(token_list: Iterable[Token]) -> str:
    """Render a token sequence in debug form."""
    return "".join(render_token(token) for token in token_list)


def describe_tokens(token_list: Iterable[Token]) -> str:
    """
    One line per token: location, type and payload.

    Example:
        1:1     IDENT     'foot'
        1:7     NUMBER    12
        1:10    NEWLINE
    """
    lines = []
    for token in token_list:
        location = f"{token.line}:{token.column}"
        line = f"{location:<8}{token.type.name:<10}"
        if token.value is not None:
            value = token.value if token.type is TokenType.NUMBER else repr(token.value)
            line += f"{value}"
        lines.append(line.rstrip())
    return "\n".join(lines)
