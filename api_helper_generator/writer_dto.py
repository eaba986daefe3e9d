"""Data Transfer Objects passed between the synthesis steps and the emitter.

These records separate what is computed for a helper (matches, arguments, names)
from how it is rendered, so each step can be tested on its own.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from api_helper_generator import helper

if TYPE_CHECKING:
    from api_helper_generator.schema import MethodDescription, TypeDescription


# Method field name -> path of snake_case field names read from the receiver, e.g. {"chat_id": ("chat", "id")}
MatchSet = dict[str, tuple[str, ...]]


@dataclass(frozen=True)
class DefaultFill:
    """An options-struct field filled in from the receiver when the caller left it unset.

    Attributes:
        field: The Go name of the options field, e.g. "MessageId".
        zero_value: The Go zero value the field is compared against.
        expression: The receiver expression assigned to it, e.g. "message.MessageId".
        pointer: Whether the field holds a pointer, so the address of the expression is assigned.
    """

    field: str
    zero_value: str
    expression: str
    pointer: bool = False


@dataclass(frozen=True)
class HelperArguments:
    """Signature and call data of one helper.

    Attributes:
        params: The Go parameter declarations, client first and options last.
        call_args: The arguments passed on to the delegated method, options last.
        defaults: Options fields filled in from the receiver.
    """

    params: tuple[str, ...]
    call_args: tuple[str, ...]
    defaults: tuple[DefaultFill, ...] = ()


@dataclass(frozen=True)
class HelperRenderData:
    """Everything the emitter needs to render one helper method.

    Attributes:
        receiver: The receiver variable name, e.g. "chat".
        type_name: The type the helper is attached to, e.g. "Chat".
        helper_name: The exported helper name, e.g. "SendAction".
        method_name: The exported name of the delegated client method, e.g. "SendChatAction".
        return_types: The Go return types of the delegated method, without the trailing error.
        params: The helper parameter declarations.
        defaults: Options fields filled in from the receiver.
        opts_name: The options struct type of the delegated method.
        call_args: The arguments of the delegated call.
    """

    receiver: str
    type_name: str
    helper_name: str
    method_name: str
    return_types: tuple[str, ...]
    params: tuple[str, ...]
    defaults: tuple[DefaultFill, ...]
    opts_name: str
    call_args: tuple[str, ...]

    @classmethod
    def create(
        cls,
        tg_type: TypeDescription,
        method: MethodDescription,
        helper_name: str,
        return_types: list[str],
        arguments: HelperArguments,
    ) -> HelperRenderData:
        """Factory method deriving the receiver and method related names.

        Args:
            tg_type: The type hosting the helper.
            method: The delegated API method.
            helper_name: The exported helper name.
            return_types: The Go return types of the method.
            arguments: The signature and call data.

        Returns:
            A fully initialized HelperRenderData.
        """
        return cls(
            receiver=helper.receiver_name(tg_type.name),
            type_name=tg_type.name,
            helper_name=helper_name,
            method_name=helper.export_name(method.name),
            return_types=tuple(return_types),
            params=arguments.params,
            defaults=arguments.defaults,
            opts_name=helper.opts_name(method.name),
            call_args=arguments.call_args,
        )
