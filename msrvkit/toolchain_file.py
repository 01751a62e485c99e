"""Write the minimal toolchain to the crate's rust-toolchain file."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

import semver

from msrvkit.search import Reporter

__all__ = [
    "AuxiliaryOutput",
    "ToolchainFileWriteError",
    "TOOLCHAIN_FILE",
    "TOOLCHAIN_FILE_TOML",
    "toolchain_file",
    "format_toolchain_file",
    "write_toolchain_file",
]

TOOLCHAIN_FILE = "rust-toolchain"
TOOLCHAIN_FILE_TOML = "rust-toolchain.toml"


@dataclass(frozen=True)
class AuxiliaryOutput:
    """A file written besides the main result, such as a toolchain file."""

    destination: Path
    item: str = "toolchain_file"
    kind: str = "toml"


class ToolchainFileWriteError(OSError):
    """The toolchain file could not be written."""

    def __init__(self, path: Path, cause: OSError) -> None:
        self.path = path
        self.cause = cause
        super().__init__(f"Unable to write file '{path}', caused by: {cause}")


def toolchain_file(crate_root: str | Path) -> Path:
    """The toolchain file to write in ``crate_root``.

    An existing ``rust-toolchain`` takes precedence over an existing
    ``rust-toolchain.toml``; if neither exists, ``rust-toolchain`` is used.
    """
    root = Path(crate_root)
    without_extension = root / TOOLCHAIN_FILE
    if without_extension.exists():
        return without_extension
    with_extension = root / TOOLCHAIN_FILE_TOML
    if with_extension.exists():
        return with_extension
    return without_extension


def format_toolchain_file(channel: object) -> str:
    """The contents of a toolchain file pinning ``channel``."""
    return f'[toolchain]\nchannel = "{channel}"\n'


def write_toolchain_file(
    reporter: Reporter, version: semver.Version, crate_root: str | Path
) -> Path:
    """Write a toolchain file pinning ``version`` and return its path."""
    path = toolchain_file(crate_root)
    try:
        path.write_text(format_toolchain_file(version), encoding="utf-8")
    except OSError as exc:
        raise ToolchainFileWriteError(path, exc) from exc

    reporter.report_event(AuxiliaryOutput(path))
    return path