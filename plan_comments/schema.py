"""Input models for rendering command outcomes as markdown."""

from __future__ import annotations

from enum import StrEnum
from typing import Annotated, Literal

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter


class CommandName(StrEnum):
    """Commands whose outcomes can be rendered."""

    PLAN = "plan"
    APPLY = "apply"

    @property
    def label(self) -> str:
        """Title-cased display form used in rendered headings."""
        return self.value.title()


class _FrozenModel(BaseModel):
    model_config = ConfigDict(extra="forbid", frozen=True)


class ProjectError(_FrozenModel):
    """The command could not run in one project."""

    kind: Literal["error"] = "error"
    message: str


class ProjectFailure(_FrozenModel):
    """The command ran in one project but failed."""

    kind: Literal["failure"] = "failure"
    message: str


class PlanSuccess(_FrozenModel):
    """Successful plan output plus the key of the lock it holds."""

    kind: Literal["plan_success"] = "plan_success"
    terraform_output: str
    lock_key: str


class ApplySuccess(_FrozenModel):
    """Successful apply output."""

    kind: Literal["apply_success"] = "apply_success"
    output: str


ProjectOutcome = Annotated[
    ProjectError | ProjectFailure | PlanSuccess | ApplySuccess,
    Field(discriminator="kind"),
]


class ProjectResult(_FrozenModel):
    """Outcome of the command in one project directory.

    ``outcome`` is ``None`` when the executor produced no result for the path.
    """

    path: str = Field(min_length=1)
    outcome: ProjectOutcome | None = None


class CommandError(_FrozenModel):
    """The whole command could not run."""

    kind: Literal["error"] = "error"
    message: str


class CommandFailure(_FrozenModel):
    """The command ran but failed outright."""

    kind: Literal["failure"] = "failure"
    message: str


class ProjectResults(_FrozenModel):
    """Per-project results, in the order the projects were run."""

    kind: Literal["results"] = "results"
    results: tuple[ProjectResult, ...] = ()


CommandOutcome = Annotated[
    CommandError | CommandFailure | ProjectResults,
    Field(discriminator="kind"),
]

COMMAND_OUTCOME_ADAPTER: TypeAdapter[CommandError | CommandFailure | ProjectResults] = (
    TypeAdapter(CommandOutcome)
)


class PresentationContext(_FrozenModel):
    """Data shared by every document-level template."""

    command: str
    verbose: bool = False
    log: str = ""
