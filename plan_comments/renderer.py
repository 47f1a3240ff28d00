"""Markdown rendering of command outcomes for pull request comments."""

from __future__ import annotations

import logging
from collections.abc import Callable, Mapping, Sequence
from typing import Any

from jinja2 import Template, TemplateError

from plan_comments.schema import (
    ApplySuccess,
    CommandError,
    CommandFailure,
    CommandName,
    CommandOutcome,
    PlanSuccess,
    PresentationContext,
    ProjectError,
    ProjectFailure,
    ProjectResult,
    ProjectResults,
)
from plan_comments.templates import (
    APPLY_SUCCESS_TEMPLATE,
    ERROR_TEMPLATE,
    ERROR_WITH_LOG_TEMPLATE,
    FAILURE_TEMPLATE,
    FAILURE_WITH_LOG_TEMPLATE,
    MULTI_PROJECT_TEMPLATE,
    PLAN_SUCCESS_TEMPLATE,
    SINGLE_PROJECT_TEMPLATE,
)

logger = logging.getLogger(__name__)

LockURLBuilder = Callable[[str], str]

NO_TEMPLATE_FOUND = "Found no template. This is a bug!"
TEMPLATE_FAILURE_PREFIX = "Failed to render template, this is a bug"


class MarkdownRenderer:
    """Render command outcomes as markdown comment bodies.

    The renderer holds no mutable state; one instance can serve concurrent
    callers as long as ``lock_url_builder`` is itself safe to share.
    """

    def __init__(self, lock_url_builder: LockURLBuilder) -> None:
        self._lock_url_builder = lock_url_builder

    def render(
        self,
        outcome: CommandOutcome,
        command_name: CommandName,
        log: str = "",
        verbose: bool = False,
    ) -> str:
        """Render one command outcome into a single markdown document."""
        context = PresentationContext(command=command_name.label, verbose=verbose, log=log)
        common = context.model_dump()
        match outcome:
            case CommandError(message=message):
                return self._render_template(ERROR_WITH_LOG_TEMPLATE, {**common, "error": message})
            case CommandFailure(message=message):
                return self._render_template(
                    FAILURE_WITH_LOG_TEMPLATE, {**common, "failure": message}
                )
            case ProjectResults(results=results):
                return self._render_project_results(results, context)
            case _:
                logger.warning("Unrecognized command outcome type %s", type(outcome).__name__)
                return NO_TEMPLATE_FOUND

    def _render_project_results(
        self, project_results: Sequence[ProjectResult], context: PresentationContext
    ) -> str:
        results: dict[str, str] = {}
        for project_result in project_results:
            results[project_result.path] = self._render_project_fragment(
                project_result, context.command
            )

        template = SINGLE_PROJECT_TEMPLATE if len(results) == 1 else MULTI_PROJECT_TEMPLATE
        return self._render_template(template, {**context.model_dump(), "results": results})

    def _render_project_fragment(self, project_result: ProjectResult, command: str) -> str:
        """Render the markdown fragment for one project's outcome."""
        outcome = project_result.outcome
        match outcome:
            case ProjectError(message=message):
                return self._render_template(ERROR_TEMPLATE, {"command": command, "error": message})
            case ProjectFailure(message=message):
                return self._render_template(
                    FAILURE_TEMPLATE, {"command": command, "failure": message}
                )
            case PlanSuccess(terraform_output=terraform_output, lock_key=lock_key):
                lock_url = self._lock_url_builder(lock_key)
                logger.debug("Built lock URL for %s: %s", project_result.path, lock_url)
                return self._render_template(
                    PLAN_SUCCESS_TEMPLATE,
                    {"terraform_output": terraform_output, "lock_url": lock_url},
                )
            case ApplySuccess(output=output):
                return self._render_template(APPLY_SUCCESS_TEMPLATE, {"output": output})
            case _:
                logger.warning(
                    "No template for project %s with outcome %r", project_result.path, outcome
                )
                return NO_TEMPLATE_FOUND

    def _render_template(self, template: Template, data: Mapping[str, Any]) -> str:
        try:
            return template.render(data)
        except TemplateError as error:
            logger.error("Template rendering failed: %s", error)
            return f"{TEMPLATE_FAILURE_PREFIX}: {error}"
