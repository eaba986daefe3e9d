"""Matching of method fields against values a receiver type already holds."""

from __future__ import annotations

import logging

from api_helper_generator import go_types, helper
from api_helper_generator.schema import APIDescription, MethodDescription, TypeDescription
from api_helper_generator.writer_dto import MatchSet

logger = logging.getLogger(__name__)

ID_FIELD = "id"
MESSAGE_ID_FIELD = "message_id"
FILE_ID_FIELD = "file_id"
CHAT_ID_FIELD = "chat_id"
FROM_CHAT_ID_FIELD = "from_chat_id"

# Always resolved through message_id; matching it would bind reply_to_message_id to the replied message.
REPLY_TO_MESSAGE_FIELD = "reply_to_message"


def canonical_id_field(type_name: str) -> str:
    """The field that identifies an instance of a type."""
    if type_name == go_types.TG_TYPE_MESSAGE:
        return MESSAGE_ID_FIELD
    if type_name == go_types.TG_TYPE_FILE:
        return FILE_ID_FIELD
    return ID_FIELD


def _has_id_field(api: APIDescription, type_name: str, id_field: str) -> bool:
    tg_type = api.types.get(type_name)
    return tg_type is not None and tg_type.get_field(id_field) is not None


def get_type_matches(api: APIDescription, method: MethodDescription, tg_type: TypeDescription) -> MatchSet:
    """Find the method fields that take the identifier of the type itself.

    A field matches when it is named `<type_in_snake_case>_id` or `id`. It is bound to the canonical
    identifier of the type. Types without that identifier field yield no matches.

    Args:
        api: The API description.
        method: The method whose fields are matched.
        tg_type: The receiver type.

    Returns:
        The direct matches, keyed by method field name.
    """
    type_id_name = helper.title_to_snake(tg_type.name) + "_id"
    id_field = canonical_id_field(tg_type.name)

    fields: MatchSet = {}
    for f in method.fields:
        if f.name != type_id_name and f.name != ID_FIELD:
            continue

        if not _has_id_field(api, tg_type.name, id_field):
            logger.debug("Not binding %s.%s: %s has no %s field.", method.name, f.name, tg_type.name, id_field)
            continue

        fields[f.name] = (id_field,)

    return fields


def get_subtype_matches(
    api: APIDescription,
    method: MethodDescription,
    tg_type: TypeDescription,
    repl: str,
    has_from_chat: bool,
) -> tuple[MatchSet, str]:
    """Find the method fields that take the identifier of a value nested in the type.

    A type field `chat` of declared type `Chat` matches the method field `chat_id` and binds it to
    `chat.id`. The nested type's name is then removed from the candidate helper name. When the method
    also has a `from_chat_id` field, a `chat_id` match fills `from_chat_id` instead.

    Args:
        api: The API description.
        method: The method whose fields are matched.
        tg_type: The receiver type.
        repl: The candidate helper name.
        has_from_chat: Whether the method has a `from_chat_id` field.

    Raises:
        SchemaResolutionError: If a field of the type cannot be resolved.

    Returns:
        The subtype matches and the candidate helper name with matched type names removed.
    """
    fields: MatchSet = {}
    for f in tg_type.fields:
        if f.name == REPLY_TO_MESSAGE_FIELD:
            continue

        pref_type = go_types.get_preferred_type(api, f, f"{tg_type.name} (while matching {method.name})")
        if not pref_type.references_declared_type:
            continue

        for mf in method.fields:
            if f.name + "_id" != mf.name:
                continue

            id_field = canonical_id_field(pref_type.type_name)
            if not _has_id_field(api, pref_type.type_name, id_field):
                logger.debug(
                    "Not binding %s.%s: %s has no %s field.", method.name, mf.name, pref_type.type_name, id_field
                )
                continue

            repl = repl.replace(pref_type.type_name, "")

            if has_from_chat and mf.name == CHAT_ID_FIELD:
                fields[FROM_CHAT_ID_FIELD] = (f.name, id_field)
            else:
                fields[mf.name] = (f.name, id_field)

    return fields, repl


def match_fields(
    api: APIDescription,
    method: MethodDescription,
    tg_type: TypeDescription,
    repl: str,
    has_from_chat: bool,
) -> tuple[MatchSet, str]:
    """Compute every method field a receiver of the given type can supply.

    Subtype matches are only looked for once the type itself matches; a pair without a direct match
    yields an empty match set and an unchanged name.

    Args:
        api: The API description.
        method: The method whose fields are matched.
        tg_type: The receiver type.
        repl: The candidate helper name, with the type name already removed.
        has_from_chat: Whether the method has a `from_chat_id` field.

    Raises:
        SchemaResolutionError: If a field of the type cannot be resolved.

    Returns:
        The combined match set and the (possibly further shortened) candidate name.
    """
    fields = get_type_matches(api, method, tg_type)
    if not fields:
        return {}, repl

    subtype_fields, repl = get_subtype_matches(api, method, tg_type, repl, has_from_chat)
    fields.update(subtype_fields)
    return fields, repl
