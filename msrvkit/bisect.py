"""Binary search for the minimum supported Rust version.

Each step halves the remaining search space, which is ordered from most to
least recent toolchain.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

from msrvkit.search import (
    Checker,
    FindMsrv,
    MsrvResult,
    NoToolchainsToTryError,
    Progress,
    Reporter,
    SearchMethod,
)
from msrvkit.toolchain import ToolchainSpec

__all__ = ["Bisect"]


@dataclass(frozen=True)
class _Indices:
    """Inclusive bounds of the part of the search space still undecided."""

    left: int
    right: int

    @property
    def middle(self) -> int:
        return (self.left + self.right) // 2

    @property
    def converged(self) -> bool:
        return self.left == self.right

    def toward_older(self) -> _Indices:
        return _Indices(self.middle + 1, self.right)

    def toward_newer(self) -> _Indices:
        return _Indices(self.left, self.middle)


class Bisect:
    """Find the MSRV by bisecting the search space."""

    def __init__(self, checker: Checker) -> None:
        self.checker = checker

    def _is_compatible(self, toolchain: ToolchainSpec) -> bool:
        return self.checker.check(toolchain).is_success

    def find_toolchain(
        self, search_space: Sequence[ToolchainSpec], reporter: Reporter
    ) -> MsrvResult:
        """Return the least recent compatible toolchain in ``search_space``."""
        with FindMsrv(SearchMethod.BISECT).scoped(reporter):
            if not search_space:
                raise NoToolchainsToTryError()

            total = len(search_space)
            indices = _Indices(0, total - 1)
            iteration = 0
            last_compatible: int | None = None

            while not indices.converged:
                middle = indices.middle
                compatible = self._is_compatible(search_space[middle])
                iteration += 1
                reporter.report_event(Progress(middle, total, iteration))

                if compatible:
                    last_compatible = middle
                    indices = indices.toward_older()
                else:
                    indices = indices.toward_newer()

            converged = indices.middle
            # The least recent release is never checked by the loop itself.
            if converged == total - 1:
                reporter.report_event(Progress(converged, total, iteration + 1))
                if self._is_compatible(search_space[converged]):
                    last_compatible = converged

            if last_compatible is None:
                return MsrvResult()
            return MsrvResult(search_space[last_compatible])