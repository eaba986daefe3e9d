"""Pytest configuration and fixtures for the helper generator tests."""

from __future__ import annotations

from pathlib import Path

import pytest

from api_helper_generator.schema import (
    APIDescription,
    Field,
    MethodDescription,
    TypeDescription,
    load_api_description,
)

# Test directory structure
TESTS_DIR = Path(__file__).parent
SCHEMAS_DIR = TESTS_DIR / "schemas"

API_JSON = SCHEMAS_DIR / "api.json"
EXPECTED_HELPERS = SCHEMAS_DIR / "gen_helpers.go"


def make_field(name: str, *types: str, required: bool = True) -> Field:
    """Shorthand for a field; a single String type if none is given."""
    return Field(name=name, types=types or ("String",), required=required)


def make_method(name: str, *fields: Field, returns: tuple[str, ...] = ("Boolean",)) -> MethodDescription:
    return MethodDescription(name=name, fields=fields, returns=returns)


def make_type(name: str, *fields: Field, subtypes: tuple[str, ...] = ()) -> TypeDescription:
    return TypeDescription(name=name, fields=fields, subtypes=subtypes)


CHAT = make_type(
    "Chat",
    make_field("id", "Integer"),
    make_field("type"),
    make_field("pinned_message", "Message", required=False),
)

MESSAGE = make_type(
    "Message",
    make_field("message_id", "Integer"),
    make_field("from", "User", required=False),
    make_field("chat", "Chat"),
    make_field("reply_to_message", "Message", required=False),
)

USER = make_type("User", make_field("id", "Integer"), make_field("first_name"))

INPUT_FILE = make_type("InputFile")

SEND_MESSAGE = make_method(
    "sendMessage",
    make_field("chat_id", "Integer", "String"),
    make_field("text"),
    make_field("reply_to_message_id", "Integer", required=False),
    returns=("Message",),
)

SEND_CHAT_ACTION = make_method(
    "sendChatAction",
    make_field("chat_id", "Integer", "String"),
    make_field("message_thread_id", "Integer", required=False),
    make_field("action"),
)

FORWARD_MESSAGE = make_method(
    "forwardMessage",
    make_field("chat_id", "Integer", "String"),
    make_field("from_chat_id", "Integer", "String"),
    make_field("message_id", "Integer"),
    make_field("disable_notification", "Boolean", required=False),
    returns=("Message",),
)

UNPIN_CHAT_MESSAGE = make_method(
    "unpinChatMessage",
    make_field("chat_id", "Integer", "String"),
    make_field("message_id", "Integer", required=False),
)

GET_ME = make_method("getMe", returns=("User",))


def make_api(*descriptions: MethodDescription | TypeDescription) -> APIDescription:
    """Build an API description from a mix of method and type descriptors."""
    methods = [d for d in descriptions if isinstance(d, MethodDescription)]
    types = [d for d in descriptions if isinstance(d, TypeDescription)]
    return APIDescription.from_descriptions(methods, types)


@pytest.fixture
def api() -> APIDescription:
    """A small hand-built API with chats, messages and users."""
    return make_api(
        CHAT,
        MESSAGE,
        USER,
        INPUT_FILE,
        SEND_MESSAGE,
        SEND_CHAT_ACTION,
        FORWARD_MESSAGE,
        UNPIN_CHAT_MESSAGE,
        GET_ME,
    )


@pytest.fixture(scope="session")
def bot_api() -> APIDescription:
    """The API description loaded from the bundled JSON schema."""
    return load_api_description(API_JSON)


@pytest.fixture(scope="session")
def expected_helpers() -> str:
    """The helper file expected for the bundled JSON schema."""
    return EXPECTED_HELPERS.read_text(encoding="utf8")
