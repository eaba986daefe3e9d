"""Synthesize helper methods for every (method, type) pair of an API description."""

from __future__ import annotations

import logging
from collections.abc import Iterator

from api_helper_generator import emitter, go_types, helper
from api_helper_generator.arguments import build_arguments
from api_helper_generator.matcher import FROM_CHAT_ID_FIELD, match_fields
from api_helper_generator.schema import (
    APIDescription,
    MethodDescription,
    TypeDescription,
    ordered_methods,
    ordered_types,
)
from api_helper_generator.writer_dto import HelperRenderData

logger = logging.getLogger(__name__)


class Writer:
    """A class that handles writing the helper file, based on a provided API description."""

    def __init__(self, api: APIDescription, package: str = emitter.DEFAULT_PACKAGE):
        """Initialize the helper writer with an API description.

        Args:
            api (APIDescription): The API description to derive helpers from.
            package (str): The Go package the generated file belongs to.
        """
        self._api = api
        self.package = package

        self._helpers: list[str] = []
        self.helper_count = 0

    def synthesize_helper(
        self,
        method: MethodDescription,
        tg_type: TypeDescription,
        has_from_chat: bool,
    ) -> HelperRenderData | None:
        """Derive the helper of a method on a type, if there is one.

        Args:
            method (MethodDescription): The API method to delegate to.
            tg_type (TypeDescription): The candidate receiver type.
            has_from_chat (bool): Whether the method has a `from_chat_id` field.

        Raises:
            SchemaResolutionError: If a field or return type involved cannot be resolved.

        Returns:
            HelperRenderData | None: The render data, or None if the type is unrelated to the method.
        """
        new_method_name = method.name.replace(tg_type.name, "", 1)
        if new_method_name == method.name:
            return None

        fields, new_method_name = match_fields(self._api, method, tg_type, new_method_name, has_from_chat)
        if not fields:
            return None

        helper_name = helper.export_name(new_method_name)
        return_types = go_types.get_return_types(self._api, method)
        arguments = build_arguments(self._api, method, helper.receiver_name(tg_type.name), fields)

        return HelperRenderData.create(tg_type, method, helper_name, return_types, arguments)

    def synthesize_method(self, method: MethodDescription) -> Iterator[HelperRenderData]:
        """Yield the helpers of a method across all types, in type order.

        Args:
            method (MethodDescription): The API method to derive helpers for.

        Yields:
            HelperRenderData: One render data object per type that gets a helper.
        """
        has_from_chat = method.has_field(FROM_CHAT_ID_FIELD)

        for type_name in ordered_types(self._api):
            if type_name == go_types.TG_TYPE_FILE:
                continue

            data = self.synthesize_helper(method, self._api.types[type_name], has_from_chat)
            if data is None:
                continue

            logger.debug("Generated %s.%s for %s.", data.type_name, data.helper_name, method.name)
            yield data

    def generate_all(self) -> None:
        """Render the helpers of every method, in method order."""
        self._helpers = []
        self.helper_count = 0

        for method_name in ordered_methods(self._api):
            for data in self.synthesize_method(self._api.methods[method_name]):
                self._helpers.append(emitter.render_helper(data))
                self.helper_count += 1

        logger.info("Generated %d helper method(s) for %d API method(s).", self.helper_count, len(self._api.methods))

    def dumps(self) -> str:
        """Generates string output for the helper file.

        Returns:
            str: The output string.
        """
        out = [emitter.render_header(self.package)]
        out.extend(self._helpers)
        return "".join(out)
