"""Search primitives for finding the minimum supported Rust version.

The search space is ordered from most to least recent toolchain.
"""

from __future__ import annotations

import enum
from collections.abc import Iterable, Iterator, Sequence
from contextlib import contextmanager
from dataclasses import dataclass, field, replace
from typing import Any, Protocol

import semver

from msrvkit.toolchain import ToolchainSpec

__all__ = [
    "SearchMethod",
    "ScopeMarker",
    "CheckOutcome",
    "MsrvResult",
    "Progress",
    "FindMsrv",
    "NoToolchainsToTryError",
    "Checker",
    "Reporter",
    "AcceptListChecker",
    "RecordingReporter",
    "Linear",
]


class SearchMethod(enum.Enum):
    LINEAR = "linear"
    BISECT = "bisect"


class ScopeMarker(enum.Enum):
    START = "start"
    END = "end"


@dataclass(frozen=True)
class CheckOutcome:
    """Result of checking one toolchain."""

    toolchain: ToolchainSpec
    is_success: bool
    error_message: str | None = None

    @classmethod
    def succeeded(cls, toolchain: ToolchainSpec) -> CheckOutcome:
        return cls(toolchain, True)

    @classmethod
    def failed(cls, toolchain: ToolchainSpec, error_message: str) -> CheckOutcome:
        return cls(toolchain, False, error_message)


@dataclass(frozen=True)
class MsrvResult:
    """The minimal compatible toolchain, or ``None`` when none was compatible."""

    toolchain: ToolchainSpec | None = None

    @property
    def is_found(self) -> bool:
        return self.toolchain is not None

    @property
    def version(self) -> semver.Version | None:
        return None if self.toolchain is None else self.toolchain.version

    def unwrap_version(self) -> semver.Version:
        """Return the found version, raising ``LookupError`` if there is none."""
        if self.toolchain is None:
            raise LookupError("no compatible toolchain was found")
        return self.toolchain.version


@dataclass(frozen=True)
class Progress:
    """Progress of a search: ``current`` index out of ``total``, at ``iteration``."""

    current: int
    total: int
    iteration: int


@dataclass(frozen=True)
class FindMsrv:
    """Marks the start or end of an MSRV search."""

    search_method: SearchMethod
    marker: ScopeMarker = ScopeMarker.START

    @contextmanager
    def scoped(self, reporter: Reporter) -> Iterator[None]:
        """Report the start of the search, and its end however it finishes."""
        reporter.report_event(replace(self, marker=ScopeMarker.START))
        try:
            yield
        finally:
            reporter.report_event(replace(self, marker=ScopeMarker.END))


class NoToolchainsToTryError(Exception):
    """The search space was empty."""

    def __init__(self, minimum: Any = None, maximum: Any = None) -> None:
        self.minimum = minimum
        self.maximum = maximum
        super().__init__(self._message())

    @property
    def has_clues(self) -> bool:
        return self.minimum is not None or self.maximum is not None

    def _message(self) -> str:
        base = "No Rust releases to check: the filtered search space is empty."
        limits = []
        if self.minimum is not None:
            limits.append(f"min Rust '{self.minimum}'")
        if self.maximum is not None:
            limits.append(f"max Rust '{self.maximum}'")
        if not limits:
            return base
        return f"{base} Search space limited by user to {', and '.join(limits)}"


class Checker(Protocol):
    def check(self, toolchain: ToolchainSpec) -> CheckOutcome: ...


class Reporter(Protocol):
    def report_event(self, event: Any) -> None: ...


class AcceptListChecker:
    """Checker that accepts exactly the versions it was given."""

    def __init__(self, target: str, accept: Iterable[semver.Version]) -> None:
        self.target = target
        self.accept = frozenset(accept)

    def check(self, toolchain: ToolchainSpec) -> CheckOutcome:
        spec = ToolchainSpec(toolchain.version, self.target)
        if toolchain.version in self.accept:
            return CheckOutcome.succeeded(spec)
        return CheckOutcome.failed(spec, "f")


@dataclass
class RecordingReporter:
    """Reporter that keeps every event in order."""

    events: list[Any] = field(default_factory=list)

    def report_event(self, event: Any) -> None:
        self.events.append(event)


class Linear:
    """Walk from the most recent toolchain downwards until one fails."""

    def __init__(self, checker: Checker) -> None:
        self.checker = checker

    def find_toolchain(
        self, search_space: Sequence[ToolchainSpec], reporter: Reporter
    ) -> MsrvResult:
        if not search_space:
            raise NoToolchainsToTryError()

        with FindMsrv(SearchMethod.LINEAR).scoped(reporter):
            total = len(search_space)
            last_compatible: ToolchainSpec | None = None

            for current, toolchain in enumerate(search_space):
                reporter.report_event(Progress(current, total, current + 1))
                if not self.checker.check(toolchain).is_success:
                    break
                last_compatible = toolchain

            return MsrvResult(last_compatible)