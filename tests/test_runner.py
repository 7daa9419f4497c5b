import pytest

from bureau.errors import CommandFailed
from bureau.runner import MISSING_COMMAND, Runner, dnf_install, flatpak_install
from tests._helpers import FakeRunner


class TestRunner:
    """The real runner against harmless local commands."""

    def test_success_returns_result(self):
        result = Runner()(["sh", "-c", "echo hello"], capture=True)
        assert result.ok
        assert result.stdout.strip() == "hello"

    def test_must_succeed_failure_raises(self):
        with pytest.raises(CommandFailed) as exc:
            Runner()(["sh", "-c", "exit 3"])
        assert exc.value.result.returncode == 3

    def test_ignorable_failure_is_returned(self):
        result = Runner()(["sh", "-c", "exit 4"], check=False)
        assert not result.ok
        assert result.returncode == 4

    def test_missing_binary_maps_to_127(self):
        result = Runner()(["bureau-no-such-binary-xyz"], check=False)
        assert result.returncode == MISSING_COMMAND

    def test_missing_binary_raises_when_required(self):
        with pytest.raises(CommandFailed):
            Runner()(["bureau-no-such-binary-xyz"])

    def test_shell_pipeline(self):
        result = Runner()("printf 'a\\nb\\n' | wc -l", shell=True, capture=True)
        assert result.stdout.strip() == "2"

    def test_input_is_fed_to_stdin(self):
        result = Runner()(["cat"], input="payload", capture=True)
        assert result.stdout == "payload"

    def test_dry_run_executes_nothing(self, tmp_path):
        marker = tmp_path / "touched"
        result = Runner(dry_run=True)(["touch", str(marker)], sudo=True)
        assert result.ok
        assert result.args == ("sudo", "touch", str(marker))
        assert not marker.exists()


class TestPackageHelpers:

    def test_dnf_install_uses_sudo(self):
        runner = FakeRunner()
        dnf_install(runner, ["gimp", "krita"])
        assert runner.calls == [("sudo", "dnf", "install", "-y", "gimp", "krita")]

    def test_flatpak_install_targets_flathub(self):
        runner = FakeRunner()
        flatpak_install(runner, "com.spotify.Client")
        assert runner.calls == [("flatpak", "install", "-y", "flathub", "com.spotify.Client")]

    def test_ignorable_dnf_failure(self):
        runner = FakeRunner(failing=[("dnf",)])
        result = dnf_install(runner, ["unrar"], check=False)
        assert not result.ok
