"""Reading and rewriting the MSRV fields of a Cargo manifest document.

Since Rust 1.56 the MSRV lives in ``package.rust-version``; for older
versions it is stored in ``package.metadata.msrv`` instead.
"""

from __future__ import annotations

from collections.abc import MutableMapping
from dataclasses import dataclass

import semver
import tomlkit
from tomlkit.items import InlineTable

__all__ = [
    "BareVersion",
    "SetMsrvError",
    "WorkspaceFoundError",
    "RUST_VERSION_SUPPORTED_SINCE",
    "check_workspace",
    "discard_current_msrv",
    "insert_new_msrv",
    "set_or_override_msrv",
]

RUST_VERSION_SUPPORTED_SINCE = semver.Version(1, 56, 0)


@dataclass(frozen=True)
class BareVersion:
    """A two-component (``1.56``) or three-component (``1.56.1``) Rust version."""

    major: int
    minor: int
    patch: int | None = None

    def to_semver(self) -> semver.Version:
        """The version as a full semantic version; a missing patch counts as 0."""
        return semver.Version(self.major, self.minor, self.patch or 0)

    def __str__(self) -> str:
        if self.patch is None:
            return f"{self.major}.{self.minor}"
        return f"{self.major}.{self.minor}.{self.patch}"


class SetMsrvError(Exception):
    """The MSRV could not be written into the manifest."""


class WorkspaceFoundError(Exception):
    """The manifest describes a virtual workspace rather than a package."""

    def __init__(self) -> None:
        super().__init__(
            "The MSRV can not be set on a workspace manifest without a [package] table"
        )


def _is_table(item: object) -> bool:
    return isinstance(item, MutableMapping)


def check_workspace(document: MutableMapping) -> None:
    """Raise ``WorkspaceFoundError`` for a workspace manifest without a package."""
    if "package" not in document and "workspace" in document:
        raise WorkspaceFoundError()


def discard_current_msrv(document: MutableMapping) -> None:
    """Remove ``package.rust-version`` and ``package.metadata.msrv`` if present.

    A ``package.metadata`` table left empty afterwards is removed as well.
    """
    package = document.get("package")
    if not _is_table(package):
        return

    if "rust-version" in package:
        del package["rust-version"]

    metadata = package.get("metadata")
    if not _is_table(metadata):
        return
    if "msrv" in metadata:
        del metadata["msrv"]
    if len(metadata) == 0:
        del package["metadata"]


def _package_table(document: MutableMapping) -> MutableMapping:
    if "package" not in document:
        document["package"] = tomlkit.table()
    package = document["package"]
    if not _is_table(package):
        raise SetMsrvError("Unable to set the MSRV: 'package' is not a table")
    return package


def insert_new_msrv(document: MutableMapping, msrv: BareVersion) -> None:
    """Write ``msrv`` to ``rust-version``, or to ``metadata.msrv`` before 1.56."""
    package = _package_table(document)
    value = str(msrv)

    if msrv.to_semver() >= RUST_VERSION_SUPPORTED_SINCE:
        package["rust-version"] = value
        return

    metadata = package.get("metadata")
    if metadata is None:
        # An explicit table, so it is written as [package.metadata].
        package["metadata"] = tomlkit.table()
        package["metadata"]["msrv"] = value
    elif isinstance(metadata, InlineTable) or _is_table(metadata):
        metadata["msrv"] = value
    else:
        raise SetMsrvError(
            "Unable to set the MSRV: 'package.metadata' is not a table"
        )


def set_or_override_msrv(document: MutableMapping, msrv: BareVersion) -> None:
    """Replace any MSRV already in the manifest by ``msrv``."""
    discard_current_msrv(document)
    insert_new_msrv(document, msrv)