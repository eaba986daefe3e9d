"""Building the signature and delegated call of a helper method."""

from __future__ import annotations

from api_helper_generator import go_types, helper
from api_helper_generator.schema import APIDescription, MethodDescription
from api_helper_generator.writer_dto import DefaultFill, HelperArguments, MatchSet

CLIENT_PARAM = "b *Bot"
OPTS_ARG = "opts"


def build_arguments(
    api: APIDescription,
    method: MethodDescription,
    receiver: str,
    fields: MatchSet,
) -> HelperArguments:
    """Split the method fields into receiver-derived values, parameters and options.

    Walking the fields in declared order:
    - matched optional fields are filled into the options struct when the caller left them unset,
    - matched required fields are passed to the delegated call straight from the receiver,
    - unmatched optional fields stay reachable through the options struct only,
    - unmatched required fields become helper parameters.

    Args:
        api: The API description.
        method: The delegated method.
        receiver: The receiver variable name.
        fields: The match set of the method against the receiver type.

    Raises:
        SchemaResolutionError: If a method field cannot be resolved.

    Returns:
        The helper parameters, the delegated call arguments and the default fills.
    """
    params = [CLIENT_PARAM]
    call_args = []
    defaults = []

    for mf in method.fields:
        pref_type = go_types.get_preferred_type(api, mf, method.name)

        path = fields.get(mf.name)
        if path is not None:
            expression = helper.access_expression(receiver, path)
            if not mf.required:
                defaults.append(
                    DefaultFill(
                        field=helper.snake_to_title(mf.name),
                        zero_value=pref_type.zero_value,
                        expression=expression,
                        pointer=pref_type.pointer,
                    )
                )
                continue

            call_args.append(expression)
            continue

        if not mf.required:
            continue

        name = helper.parameter_name(mf.name)
        params.append(f"{name} {pref_type}")
        call_args.append(name)

    params.append(f"{OPTS_ARG} *{helper.opts_name(method.name)}")
    call_args.append(OPTS_ARG)

    return HelperArguments(params=tuple(params), call_args=tuple(call_args), defaults=tuple(defaults))
