# msrvkit

A library for searching for and recording the minimum supported toolchain
version (MSRV) of a Cargo crate.

## Modules

- **`msrvkit.toolchain`**: `ToolchainSpec(version, target)` is a frozen
  dataclass that pairs a `semver.Version` with a target triple. `spec()` and
  `str()` both return `"<version>-<target>"`, for example `"1.2.3-x"`.
  `make_toolchain_spec(version, target)` builds the same string.

- **`msrvkit.search`**: the building blocks for a search.
  - `Checker` and `Reporter` are protocols. A checker's `check(toolchain)`
    returns a `CheckOutcome`. A reporter's `report_event(event)` receives
    progress events.
  - `CheckOutcome.succeeded(...)` and `CheckOutcome.failed(...)` create
    outcomes.
  - `MsrvResult` holds the toolchain that was found, or `None`. Its members
    are `is_found`, `version` and `unwrap_version()`; `unwrap_version()`
    raises `LookupError` when nothing was found.
  - `Progress(current, total, iteration)` reports how far a search has got.
    `FindMsrv(search_method).scoped(reporter)` reports the start and end of a
    search.
  - `AcceptListChecker(target, accept)` accepts exactly the versions it is
    given. `RecordingReporter` keeps every event in its `events` list.
  - `Linear(checker).find_toolchain(search_space, reporter)` walks the search
    space from the most recent toolchain down. It stops at the first failure
    and returns the last compatible toolchain. It raises
    `NoToolchainsToTryError` when the search space is empty.

- **`msrvkit.bisect`**: `Bisect(checker).find_toolchain(search_space,
  reporter)` finds the least recent compatible toolchain by binary search.
  Like `Linear`, it raises `NoToolchainsToTryError` when the search space is
  empty.

  For both searches the search space is a sequence of `ToolchainSpec`,
  ordered from most to least recent.

- **`msrvkit.manifest_msrv`**: edits a parsed `tomlkit` manifest document.
  - `BareVersion(major, minor, patch=None)` prints as `1.56` or `1.56.1`.
  - `set_or_override_msrv(document, msrv)` first calls
    `discard_current_msrv`. That function removes `package.rust-version` and
    `package.metadata.msrv`, and drops a `metadata` table left empty. It then
    calls `insert_new_msrv`.
  - `insert_new_msrv` writes versions from 1.56 onwards to
    `package.rust-version`. Older versions go to `package.metadata.msrv`,
    and an existing inline or regular metadata table keeps its style.
  - `check_workspace(document)` raises `WorkspaceFoundError` for a manifest
    that has a `[workspace]` table but no `[package]` table.
  - `SetMsrvError` is raised when `package` or `package.metadata` is not a
    table.

- **`msrvkit.set_command`**: rewrites `Cargo.toml` on disk.
  - `set_msrv(manifest_path, msrv, reporter)` rewrites the file and reports
    `SetResult`.
  - `run_set(manifest_path, msrv, releases, reporter)` first checks `msrv`
    against `releases` with `has_release`; a missing patch matches any patch.
    It raises `InvalidMsrvSetError` if no release matches. If `releases` is
    `None`, it reports `UnableToConfirmValidReleaseVersion` and writes the
    MSRV anyway.
  - `write_msrv(reporter, msrv, releases, crate_path)` does the same for
    `<crate_path>/Cargo.toml`.

- **`msrvkit.toolchain_file`**: writes a toolchain file.
  - `format_toolchain_file(channel)` returns
    `[toolchain]\nchannel = "<channel>"\n`.
  - `toolchain_file(crate_root)` picks the file to write. An existing
    `rust-toolchain` comes first, then an existing `rust-toolchain.toml`, and
    otherwise `rust-toolchain`.
  - `write_toolchain_file(reporter, version, crate_root)` writes the file,
    reports an `AuxiliaryOutput` and returns the path. It raises
    `ToolchainFileWriteError` if the file cannot be written.

- **`msrvkit.typed_bool`**: `dump_true()` and `dump_false()` serialize the
  JSON constants. `load_true(text)` and `load_false(text)` raise
  `TypedBoolError` unless the text is exactly that boolean, for example
  `Value 'false' must be 'true'`.

## Example

```python
import semver
from msrvkit.bisect import Bisect
from msrvkit.search import AcceptListChecker, RecordingReporter
from msrvkit.toolchain import ToolchainSpec

target = "x86_64-unknown-linux-gnu"
versions = [semver.Version(1, minor, 0) for minor in (58, 57, 56, 55)]
search_space = [ToolchainSpec(version, target) for version in versions]

checker = AcceptListChecker(target, versions[:3])
reporter = RecordingReporter()

result = Bisect(checker).find_toolchain(search_space, reporter)
print(result.unwrap_version())  # 1.56.0
```

## What it does not do

- There is no command-line program.
- Nothing here installs toolchains or runs builds against them. To test real
  toolchains, supply your own `Checker`.
- The package does not fetch the list of Rust releases; you pass the search
  space and release lists in yourself.
- There is no verify, show or list operation.

## Running the tests

```
pip install -e ".[test]"
pytest
```