"""Naming helpers for turning API names into Go identifiers."""

from __future__ import annotations

from collections.abc import Sequence

GO_KEYWORDS = frozenset(
    {
        "break",
        "case",
        "chan",
        "const",
        "continue",
        "default",
        "defer",
        "else",
        "fallthrough",
        "for",
        "func",
        "go",
        "goto",
        "if",
        "import",
        "interface",
        "map",
        "package",
        "range",
        "return",
        "select",
        "struct",
        "switch",
        "type",
        "var",
    }
)

OPTS_SUFFIX = "Opts"


def sanitize_name(name: str) -> str:
    """Sanitize a name to avoid Go keywords.

    If the name is a Go keyword, append an underscore.
    E.g. 'type' becomes 'type_', 'range' becomes 'range_'.

    Args:
        name (str): The original name.

    Returns:
        str: The sanitized name.
    """
    if name in GO_KEYWORDS:
        return f"{name}_"
    return name


def export_name(name: str) -> str:
    """Turn a name into its exported Go form by upper-casing the first character.

    E.g. `sendMessage` becomes `SendMessage`. This is the single naming policy for public Go identifiers.

    Args:
        name (str): The original name.

    Returns:
        str: The exported name.
    """
    return name[:1].upper() + name[1:]


def snake_to_title(name: str) -> str:
    """Converts a snake_case name to TitleCase.

    E.g. `reply_to_message_id` becomes `ReplyToMessageId`.

    Args:
        name (str): The snake_case name.

    Returns:
        str: The TitleCase name.
    """
    return "".join(export_name(part) for part in name.split("_"))


def snake_to_camel(name: str) -> str:
    """Converts a snake_case name to camelCase.

    E.g. `reply_to_message_id` becomes `replyToMessageId`.

    Args:
        name (str): The snake_case name.

    Returns:
        str: The camelCase name.
    """
    title = snake_to_title(name)
    return title[:1].lower() + title[1:]


def title_to_snake(name: str) -> str:
    """Converts a TitleCase name to snake_case.

    E.g. `ChatMember` becomes `chat_member`.

    Args:
        name (str): The TitleCase name.

    Returns:
        str: The snake_case name.
    """
    out = []
    for i, c in enumerate(name):
        if c.isupper() and i > 0:
            out.append("_")
        out.append(c.lower())

    return "".join(out)


def receiver_name(type_name: str) -> str:
    """The variable name a type's helper methods use for their receiver.

    E.g. `Chat` becomes `chat`, `CallbackQuery` becomes `callbackQuery`.
    """
    return sanitize_name(type_name[:1].lower() + type_name[1:])


def parameter_name(field_name: str) -> str:
    """The Go parameter name for a method field, e.g. `user_id` becomes `userId`."""
    return sanitize_name(snake_to_camel(field_name))


def opts_name(method_name: str) -> str:
    """The name of the options struct of a method, e.g. `sendMessage` becomes `SendMessageOpts`."""
    return f"{export_name(method_name)}{OPTS_SUFFIX}"


def access_expression(receiver: str, path: Sequence[str]) -> str:
    """Build the Go expression reading a (nested) field from a receiver.

    E.g. receiver `message` with path `("chat", "id")` becomes `message.Chat.Id`.

    Args:
        receiver (str): The receiver variable name.
        path (Sequence[str]): The snake_case field names to follow, outermost first.

    Returns:
        str: The Go access expression.
    """
    return ".".join([receiver, *(snake_to_title(part) for part in path)])
