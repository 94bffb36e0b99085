"""Result types returned by the launcher."""

from typing import Literal

from pydantic import BaseModel, Field

from .platform import PlatformFamily


LaunchStatus = Literal["opened", "failed", "unsupported", "skipped"]
LaunchMethod = Literal["native", "command", "none"]


class LaunchOutcome(BaseModel):
    """What happened when a single URL was handed to an opener."""

    url: str
    status: LaunchStatus
    method: LaunchMethod = "none"
    command: list[str] | None = None  # argv for command launches
    error: str | None = None
    detail: str | None = None  # Full traceback text, when there is one

    @property
    def ok(self) -> bool:
        return self.status == "opened"

    @classmethod
    def opened(cls, url: str, method: LaunchMethod, command: list[str] | None = None) -> "LaunchOutcome":
        return cls(url=url, status="opened", method=method, command=command)

    @classmethod
    def failed(
        cls,
        url: str,
        error: str,
        method: LaunchMethod = "none",
        command: list[str] | None = None,
        detail: str | None = None,
    ) -> "LaunchOutcome":
        return cls(url=url, status="failed", method=method, command=command, error=error, detail=detail)


class LaunchReport(BaseModel):
    """Per-call report: one outcome per normalized URL, in input order."""

    os_name: str | None = None
    platform_family: PlatformFamily | None = None
    outcomes: list[LaunchOutcome] = Field(default_factory=list)
    input_error: str | None = None

    @property
    def ok(self) -> bool:
        return self.input_error is None and all(outcome.ok for outcome in self.outcomes)

    @property
    def failures(self) -> list[LaunchOutcome]:
        return [outcome for outcome in self.outcomes if not outcome.ok]
