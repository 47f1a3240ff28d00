"""Compiled markdown templates for command outcome comments."""

from __future__ import annotations

from jinja2 import StrictUndefined, Template
from jinja2.sandbox import ImmutableSandboxedEnvironment

# Markdown is emitted verbatim, so autoescaping stays off.
_ENVIRONMENT = ImmutableSandboxedEnvironment(
    autoescape=False,
    undefined=StrictUndefined,
    keep_trailing_newline=True,
)

LOG_TEMPLATE_TEXT = (
    "{% if verbose %}\n"
    "<details><summary>Log</summary>\n"
    "  <p>\n\n"
    "```\n"
    "{{ log }}```\n"
    "</p></details>{% endif %}\n"
)
ERROR_TEMPLATE_TEXT = "**{{ command }} Error**\n```\n{{ error }}\n```\n"
FAILURE_TEMPLATE_TEXT = "**{{ command }} Failed**: {{ failure }}\n"


def _compile(source: str) -> Template:
    return _ENVIRONMENT.from_string(source)


SINGLE_PROJECT_TEMPLATE = _compile(
    "{% for result in results.values() %}{{ result }}{% endfor %}\n" + LOG_TEMPLATE_TEXT
)
MULTI_PROJECT_TEMPLATE = _compile(
    "Ran {{ command }} in {{ results | length }} directories:\n"
    "{% for path in results %}"
    " * `{{ path }}`\n"
    "{% endfor %}\n"
    "{% for path, result in results.items() %}"
    "## {{ path }}/\n"
    "{{ result }}\n"
    "---\n"
    "{% endfor %}" + LOG_TEMPLATE_TEXT
)
PLAN_SUCCESS_TEMPLATE = _compile(
    "```diff\n"
    "{{ terraform_output }}\n"
    "```\n\n"
    "* To **discard** this plan click [here]({{ lock_url }})."
)
APPLY_SUCCESS_TEMPLATE = _compile("```diff\n{{ output }}\n```")
ERROR_TEMPLATE = _compile(ERROR_TEMPLATE_TEXT)
ERROR_WITH_LOG_TEMPLATE = _compile(ERROR_TEMPLATE_TEXT + LOG_TEMPLATE_TEXT)
FAILURE_TEMPLATE = _compile(FAILURE_TEMPLATE_TEXT)
FAILURE_WITH_LOG_TEMPLATE = _compile(FAILURE_TEMPLATE_TEXT + LOG_TEMPLATE_TEXT)
