import pytest
import semver

from msrvkit.manifest_msrv import BareVersion
from msrvkit.search import RecordingReporter
from msrvkit.toolchain_file import (
    AuxiliaryOutput,
    ToolchainFileWriteError,
    format_toolchain_file,
    toolchain_file,
    write_toolchain_file,
)


def expected_contents(channel):
    return f'[toolchain]\nchannel = "{channel}"\n'


def test_no_toolchain_file_yet(tmp_path):
    target = tmp_path / "rust-toolchain"
    assert not target.exists()

    write_toolchain_file(RecordingReporter(), semver.Version(1, 22, 44), tmp_path)

    assert target.read_text() == '[toolchain]\nchannel = "1.22.44"\n'
    assert not (tmp_path / "rust-toolchain.toml").exists()


def test_pre_existing_without_extension(tmp_path):
    target = tmp_path / "rust-toolchain"
    target.write_text("")
    assert target.stat().st_size == 0

    write_toolchain_file(RecordingReporter(), semver.Version(1, 33, 55), tmp_path)

    assert target.read_text() == '[toolchain]\nchannel = "1.33.55"\n'
    assert not (tmp_path / "rust-toolchain.toml").exists()


def test_pre_existing_with_extension(tmp_path):
    target = tmp_path / "rust-toolchain.toml"
    target.write_text("")
    assert target.stat().st_size == 0

    write_toolchain_file(RecordingReporter(), semver.Version(1, 44, 66), tmp_path)

    assert target.read_text() == '[toolchain]\nchannel = "1.44.66"\n'
    assert not (tmp_path / "rust-toolchain").exists()


def test_without_extension_takes_precedence(tmp_path):
    plain = tmp_path / "rust-toolchain"
    toml = tmp_path / "rust-toolchain.toml"
    plain.write_text("")
    toml.write_text("")

    write_toolchain_file(RecordingReporter(), semver.Version(1, 55, 77), tmp_path)

    assert plain.read_text() == '[toolchain]\nchannel = "1.55.77"\n'
    assert toml.stat().st_size == 0


def test_check_reporter_event(tmp_path):
    reporter = RecordingReporter()

    returned = write_toolchain_file(reporter, semver.Version(2, 0, 5), tmp_path)

    expected = AuxiliaryOutput(tmp_path / "rust-toolchain")
    assert reporter.events == [expected]
    assert returned == tmp_path / "rust-toolchain"
    assert reporter.events[0].item == "toolchain_file"
    assert reporter.events[0].kind == "toml"


def test_write_failure(tmp_path):
    (tmp_path / "rust-toolchain").mkdir()
    reporter = RecordingReporter()

    with pytest.raises(ToolchainFileWriteError) as info:
        write_toolchain_file(reporter, semver.Version(2, 0, 5), tmp_path)

    expected_path = tmp_path / "rust-toolchain"
    assert info.value.path == expected_path
    assert f"Unable to write file '{expected_path}'" in str(info.value)
    assert reporter.events == []


def test_toolchain_file_without_extension(tmp_path):
    (tmp_path / "rust-toolchain").write_text("")
    assert toolchain_file(tmp_path) == tmp_path / "rust-toolchain"


def test_toolchain_file_with_extension(tmp_path):
    (tmp_path / "rust-toolchain.toml").write_text("")
    assert toolchain_file(tmp_path) == tmp_path / "rust-toolchain.toml"


def test_toolchain_file_default(tmp_path):
    assert toolchain_file(tmp_path) == tmp_path / "rust-toolchain"


def test_toolchain_file_accepts_string_path(tmp_path):
    assert toolchain_file(str(tmp_path)) == tmp_path / "rust-toolchain"


@pytest.mark.parametrize(
    "channel",
    [
        "1.36.0",
        semver.Version(1, 36, 0),
        BareVersion(1, 36, 0),
    ],
    ids=["str_value", "semver", "bare_version"],
)
def test_values_which_format_as_channel(channel):
    assert format_toolchain_file(channel) == '[toolchain]\nchannel = "1.36.0"\n'


def test_format_two_component_bare_version():
    assert format_toolchain_file(BareVersion(1, 56)) == expected_contents("1.56")