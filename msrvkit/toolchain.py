"""Toolchain specifications: a Rust version paired with a target triple."""

from __future__ import annotations

from dataclasses import dataclass

import semver

__all__ = ["ToolchainSpec", "make_toolchain_spec"]


def make_toolchain_spec(version: semver.Version, target: str) -> str:
    """Return the rustup toolchain name for ``version`` on ``target``."""
    return f"{version}-{target}"


@dataclass(frozen=True)
class ToolchainSpec:
    """A toolchain identified by its version and target."""

    version: semver.Version
    target: str

    def spec(self) -> str:
        """The toolchain name, for example ``1.2.3-x86_64-unknown-linux-gnu``."""
        return make_toolchain_spec(self.version, self.target)

    def __str__(self) -> str:
        return self.spec()