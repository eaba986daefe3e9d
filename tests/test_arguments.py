"""Tests for building helper signatures and delegated calls."""

from __future__ import annotations

import pytest

from api_helper_generator.arguments import build_arguments
from api_helper_generator.errors import SchemaResolutionError
from api_helper_generator.go_types import TG_TYPE_FILE
from api_helper_generator.matcher import FROM_CHAT_ID_FIELD, match_fields
from api_helper_generator.schema import ordered_methods, ordered_types
from api_helper_generator.writer_dto import DefaultFill
from conftest import (
    FORWARD_MESSAGE,
    SEND_CHAT_ACTION,
    SEND_MESSAGE,
    UNPIN_CHAT_MESSAGE,
    make_api,
    make_field,
    make_method,
    make_type,
)


def test_required_match_goes_to_call(api):
    arguments = build_arguments(api, SEND_CHAT_ACTION, "chat", {"chat_id": ("id",)})

    assert arguments.params == ("b *Bot", "action string", "opts *SendChatActionOpts")
    assert arguments.call_args == ("chat.Id", "action", "opts")
    assert arguments.defaults == ()


def test_send_message_shape(api):
    arguments = build_arguments(api, SEND_MESSAGE, "chat", {"chat_id": ("id",)})

    assert arguments.params == ("b *Bot", "text string", "opts *SendMessageOpts")
    assert arguments.call_args == ("chat.Id", "text", "opts")


def test_unmatched_required_in_declared_order(api):
    arguments = build_arguments(api, FORWARD_MESSAGE, "message", {"message_id": ("message_id",)})

    assert arguments.params == ("b *Bot", "chatId int64", "fromChatId int64", "opts *ForwardMessageOpts")
    assert arguments.call_args == ("chatId", "fromChatId", "message.MessageId", "opts")


def test_optional_match_becomes_default_fill(api):
    fields = {"chat_id": ("chat", "id"), "message_id": ("message_id",)}
    arguments = build_arguments(api, UNPIN_CHAT_MESSAGE, "message", fields)

    assert arguments.params == ("b *Bot", "opts *UnpinChatMessageOpts")
    assert arguments.call_args == ("message.Chat.Id", "opts")
    assert arguments.defaults == (
        DefaultFill(field="MessageId", zero_value="0", expression="message.MessageId", pointer=False),
    )


def test_pointer_default_fill():
    thread = make_type("Thread", make_field("id", "Integer"))
    method = make_method("closeThreadTopic", make_field("thread_id", "Thread", required=False))
    api = make_api(thread, method)

    arguments = build_arguments(api, method, "thread", {"thread_id": ("id",)})

    assert arguments.defaults == (DefaultFill(field="ThreadId", zero_value="nil", expression="thread.Id", pointer=True),)


def test_keyword_parameter_names(api):
    method = make_method("setChatType", make_field("chat_id", "Integer"), make_field("type"))
    arguments = build_arguments(api, method, "chat", {"chat_id": ("id",)})

    assert arguments.params == ("b *Bot", "type_ string", "opts *SetChatTypeOpts")
    assert arguments.call_args == ("chat.Id", "type_", "opts")


def test_unresolvable_method_field(api):
    method = make_method("sendChatSticker", make_field("chat_id", "Integer"), make_field("sticker", "Sticker"))

    with pytest.raises(SchemaResolutionError, match="field sticker of sendChatSticker"):
        build_arguments(api, method, "chat", {"chat_id": ("id",)})


def test_signature_properties(bot_api):
    """Bound fields never reach the signature; unmatched required fields always do, in order."""
    checked = 0
    for method_name in ordered_methods(bot_api):
        method = bot_api.methods[method_name]
        for type_name in ordered_types(bot_api):
            if type_name == TG_TYPE_FILE:
                continue

            repl = method.name.replace(type_name, "", 1)
            if repl == method.name:
                continue

            has_from_chat = method.has_field(FROM_CHAT_ID_FIELD)
            fields, _ = match_fields(bot_api, method, bot_api.types[type_name], repl, has_from_chat)
            if not fields:
                continue

            arguments = build_arguments(bot_api, method, "recv", fields)
            param_names = [p.split(" ")[0] for p in arguments.params[1:-1]]
            expected = [f.name for f in method.fields if f.required and f.name not in fields]

            assert len(param_names) == len(expected)
            for name, field_name in zip(param_names, expected):
                assert name.lower() == field_name.replace("_", "")
            assert arguments.params[0] == "b *Bot"
            assert arguments.params[-1].startswith("opts *")
            assert arguments.call_args[-1] == "opts"
            checked += 1

    assert checked == 8
