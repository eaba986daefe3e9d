"""Rendering of helper methods into Go source.

Templates are compiled once at import time and reused for every render.
"""

from __future__ import annotations

from jinja2 import Environment, StrictUndefined, TemplateError

from api_helper_generator.errors import RenderError
from api_helper_generator.writer_dto import HelperRenderData

DEFAULT_PACKAGE = "gotgbot"

HEADER = """\
// THIS FILE IS AUTOGENERATED. DO NOT EDIT.
// Regen by running 'go generate' in the repo root.

package {{ package }}
"""

HELPER_FUNC = """
// {{ data.helper_name }} Helper method for Bot.{{ data.method_name }}
func ({{ data.receiver }} {{ data.type_name }}) {{ data.helper_name }}({{ data.params | join(", ") }}) \
({{ data.return_types | join(", ") }}, error) {
{% if data.defaults %}
	if opts == nil {
		opts = &{{ data.opts_name }}{}
	}
{% for fill in data.defaults %}
	if opts.{{ fill.field }} == {{ fill.zero_value }} {
		opts.{{ fill.field }} = {{ "&" if fill.pointer else "" }}{{ fill.expression }}
	}
{% endfor %}

{% endif %}
	return b.{{ data.method_name }}({{ data.call_args | join(", ") }})
}
"""

_environment = Environment(
    undefined=StrictUndefined,
    trim_blocks=True,
    lstrip_blocks=True,
    keep_trailing_newline=True,
    autoescape=False,
)

header_template = _environment.from_string(HEADER)
helper_func_template = _environment.from_string(HELPER_FUNC)


def render_header(package: str = DEFAULT_PACKAGE) -> str:
    """Render the fixed header that marks the file as generated."""
    return header_template.render(package=package)


def render_helper(data: HelperRenderData) -> str:
    """Render one helper method.

    Args:
        data: The render data of the helper.

    Raises:
        RenderError: If the template cannot be rendered with the given data.

    Returns:
        The Go source of the helper, starting with a blank line.
    """
    try:
        return helper_func_template.render(data=data)
    except TemplateError as e:
        raise RenderError(
            f"failed to execute template to generate {data.helper_name} helper method on {data.type_name}: {e}"
        ) from e
