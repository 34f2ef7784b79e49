import pytest

from spkg.cli import Command, CommandKind, CommandOptions, parse_args
from spkg.errors import InvalidArgument


def test_no_arguments_is_help():
    command = parse_args([])
    assert command.kind is CommandKind.HELP


def test_unknown_command_is_help():
    assert parse_args(["frobnicate"]).kind is CommandKind.HELP


@pytest.mark.parametrize(
    "name, kind",
    [
        ("install", CommandKind.INSTALL),
        ("install-bin", CommandKind.INSTALL_BIN),
        ("binstall", CommandKind.INSTALL_BIN),
        ("install-src", CommandKind.INSTALL_SOURCE),
        ("download", CommandKind.DOWNLOAD),
    ],
)
def test_package_list_commands(name, kind):
    command = parse_args([name, "alpha", "beta"])
    assert command.kind is kind
    assert command.arguments == ("alpha", "beta")


def test_install_without_packages_keeps_empty_list():
    command = parse_args(["install"])
    assert command.kind is CommandKind.INSTALL
    assert command.arguments == ()
    assert command.error is None


@pytest.mark.parametrize("name, kind", [("info", CommandKind.INFO), ("spec", CommandKind.SPEC)])
def test_single_package_commands(name, kind):
    command = parse_args([name, "alpha", "ignored"])
    assert command.kind is kind
    assert command.arguments == ("alpha",)


@pytest.mark.parametrize("name", ["info", "spec"])
def test_single_package_commands_need_argument(name):
    command = parse_args([name])
    assert command.kind is CommandKind.ERR
    assert isinstance(command.error, InvalidArgument)
    assert command.error.message == "Argument cannot be empty"


def test_sync_list_dummy():
    assert parse_args(["sync"]).kind is CommandKind.SYNC
    assert parse_args(["list"]).kind is CommandKind.LIST
    assert parse_args(["dummy"]).kind is CommandKind.DUMMY


def test_options_are_collected():
    command = parse_args(["list", "--installed", "-s", "--arch", "aarch64"])
    assert command.options == CommandOptions(sandbox=True, installed=True, arch="aarch64")


def test_short_arch_option_consumes_value():
    command = parse_args(["-a", "x86_64", "info", "alpha"])
    assert command.options.arch == "x86_64"
    assert command.kind is CommandKind.INFO
    assert command.arguments == ("alpha",)


def test_arch_without_value_reports_error(capsys):
    command = parse_args(["list", "--arch"])
    assert command.options.arch is None
    assert command.kind is CommandKind.LIST
    assert capsys.readouterr().err.strip() == "error"


def test_unrecognized_option_warns(capsys):
    command = parse_args(["sync", "--bogus"])
    assert command.kind is CommandKind.SYNC
    assert "Warning: Unrecognized option --bogus" in capsys.readouterr().err


def test_plugin_receives_raw_arguments():
    command = parse_args(["plugin", "list", "--sandbox"])
    assert command.kind is CommandKind.PLUGIN
    assert command.arguments == ("list", "--sandbox")


def test_plugin_skips_only_first_raw_argument():
    command = parse_args(["-s", "plugin", "info"])
    assert command.kind is CommandKind.PLUGIN
    assert command.arguments == ("plugin", "info")


def test_default_command_fields():
    command = Command(CommandKind.SYNC)
    assert command.arguments == ()
    assert command.options == CommandOptions()
    assert command.error is None


def test_reads_sys_argv(monkeypatch):
    monkeypatch.setattr("sys.argv", ["spkg", "info", "alpha"])
    command = parse_args()
    assert command.kind is CommandKind.INFO
    assert command.arguments == ("alpha",)