"""Set the MSRV of a crate in its Cargo manifest."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from pathlib import Path

import semver
import tomlkit

from msrvkit.manifest_msrv import BareVersion, check_workspace, set_or_override_msrv
from msrvkit.search import Reporter

__all__ = [
    "InvalidMsrvSetError",
    "SetResult",
    "UnableToConfirmValidReleaseVersion",
    "has_release",
    "set_msrv",
    "run_set",
    "write_msrv",
]

MANIFEST_FILE = "Cargo.toml"


class InvalidMsrvSetError(Exception):
    """The requested MSRV does not match any known Rust release."""

    def __init__(self, msrv: BareVersion, search_space: Sequence[semver.Version]) -> None:
        self.msrv = msrv
        self.search_space = list(search_space)
        super().__init__(
            f"Unable to set MSRV to '{msrv}': it is not a known Rust release"
        )


@dataclass(frozen=True)
class SetResult:
    """The MSRV was written to the manifest at ``manifest_path``."""

    version: BareVersion
    manifest_path: Path


@dataclass(frozen=True)
class UnableToConfirmValidReleaseVersion:
    """No release index was available to confirm the MSRV is a real release."""


def _matches_release(msrv: BareVersion, release: semver.Version) -> bool:
    return (
        release.major == msrv.major
        and release.minor == msrv.minor
        and (msrv.patch is None or release.patch == msrv.patch)
    )


def has_release(msrv: BareVersion, releases: Iterable[semver.Version]) -> bool:
    """Whether any of ``releases`` matches ``msrv``; a missing patch matches any."""
    return any(_matches_release(msrv, release) for release in releases)


def set_msrv(manifest_path: str | Path, msrv: BareVersion, reporter: Reporter) -> None:
    """Rewrite the manifest at ``manifest_path`` so that its MSRV is ``msrv``."""
    path = Path(manifest_path)
    contents = path.read_text(encoding="utf-8")
    if contents and not contents.endswith("\n"):
        contents += "\n"

    document = tomlkit.parse(contents)
    check_workspace(document)
    set_or_override_msrv(document, msrv)

    path.write_text(tomlkit.dumps(document), encoding="utf-8")
    reporter.report_event(SetResult(msrv, path))


def run_set(
    manifest_path: str | Path,
    msrv: BareVersion,
    releases: Sequence[semver.Version] | None,
    reporter: Reporter,
) -> None:
    """Set the MSRV after confirming it is a known release, if ``releases`` is given."""
    if releases is None:
        reporter.report_event(UnableToConfirmValidReleaseVersion())
    elif not has_release(msrv, releases):
        raise InvalidMsrvSetError(msrv, releases)
    set_msrv(manifest_path, msrv, reporter)


def write_msrv(
    reporter: Reporter,
    msrv: BareVersion,
    releases: Sequence[semver.Version] | None,
    crate_path: str | Path,
) -> None:
    """Write ``msrv`` to the Cargo manifest of the crate at ``crate_path``."""
    run_set(Path(crate_path) / MANIFEST_FILE, msrv, releases, reporter)