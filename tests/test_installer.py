import pytest

from bureau import installer
from bureau.errors import CommandFailed, PreflightError
from bureau.installer import install
from bureau.preflight import is_fedora, is_gnome, run_preflight
from bureau.runner import CommandResult
from bureau.stages import STAGE_NAMES, STAGES, Stage, run_stages, select_stages
from tests._helpers import ScriptedReporter

FEDORA = {"NAME": "Fedora Linux", "ID": "fedora", "PRETTY_NAME": "Fedora Linux 41 (Workstation Edition)"}
UBUNTU = {"NAME": "Ubuntu", "ID": "ubuntu", "PRETTY_NAME": "Ubuntu 24.04 LTS"}
GNOME_ENV = {"XDG_CURRENT_DESKTOP": "GNOME"}


def recording_stage(name, log, error=None):
    def run(ctx):
        log.append(name)
        if error is not None:
            raise error
    return Stage(name, f"Stage {name}", run)


def passing_preflight(ctx):
    pass


class TestInstall:

    def test_declined_confirmation_runs_nothing(self, ctx, console):
        ctx.ui = ScriptedReporter(console, confirms=[False])
        log = []
        code = install(ctx, [recording_stage("a", log)], preflight=passing_preflight)
        assert code == 0
        assert log == []
        assert "Installation cancelled." in ctx.ui.output

    def test_preflight_failure_aborts_with_1(self, ctx):
        log = []

        def failing(ctx):
            raise PreflightError("No internet connection")

        assert install(ctx, [recording_stage("a", log)], preflight=failing) == 1
        assert log == []
        assert "No internet connection" in ctx.ui.output

    def test_no_network_aborts_before_any_stage(self, ctx):
        log = []

        def offline(ctx):
            run_preflight(ctx, env=GNOME_ENV, os_release=FEDORA, network=False, free_space=100)

        assert install(ctx, [recording_stage("a", log)], preflight=offline) == 1
        assert log == []
        assert ctx.runner.calls == []

    def test_stages_run_in_order_and_summary_printed(self, ctx):
        log = []
        stages = [recording_stage(n, log) for n in ("one", "two", "three")]
        assert install(ctx, stages, preflight=passing_preflight) == 0
        assert log == ["one", "two", "three"]
        assert "Bureau is installed. Welcome, creator." in ctx.ui.output
        assert "did not complete" not in ctx.ui.output

    def test_failing_stage_does_not_stop_the_rest(self, ctx):
        log = []
        broken = CommandFailed(CommandResult(("dnf", "install"), 1))
        stages = [
            recording_stage("one", log),
            recording_stage("two", log, error=broken),
            recording_stage("three", log, error=PermissionError("denied")),
            recording_stage("four", log),
        ]
        assert install(ctx, stages, preflight=passing_preflight) == 0
        assert log == ["one", "two", "three", "four"]
        assert "Some stages did not complete: two, three" in ctx.ui.output


class TestRunStages:

    def test_returns_failed_names(self, ctx):
        log = []
        stages = [recording_stage("a", log, error=OSError("disk")), recording_stage("b", log)]
        assert run_stages(ctx, stages) == ["a"]

    def test_unexpected_errors_propagate(self, ctx):
        with pytest.raises(KeyError):
            run_stages(ctx, [recording_stage("a", [], error=KeyError("bug"))])


class TestSelectStages:

    def test_all_by_default(self):
        assert select_stages() == STAGES
        assert select_stages([]) == STAGES

    def test_only_keeps_run_order(self):
        assert [s.name for s in select_stages(["cleanup", "update"])] == ["update", "cleanup"]

    def test_unknown_stage(self):
        with pytest.raises(ValueError, match="bogus"):
            select_stages(["update", "bogus"])

    def test_stage_order(self):
        assert STAGE_NAMES == [
            "update", "repos", "core", "creative", "apps", "fonts", "gnome", "theme",
            "extensions", "branding", "ai", "affinity", "terminal", "tablet", "colour",
            "menu", "cleanup",
        ]


class TestPreflight:

    def test_all_checks_pass(self, ctx):
        run_preflight(ctx, env=GNOME_ENV, os_release=FEDORA, network=True, free_space=100)
        assert "Fedora detected" in ctx.ui.output
        assert "Disk space OK (100GB free)" in ctx.ui.output

    def test_not_fedora_declined(self, ctx, console):
        ctx.ui = ScriptedReporter(console, confirms=[False])
        with pytest.raises(PreflightError):
            run_preflight(ctx, env=GNOME_ENV, os_release=UBUNTU, network=True, free_space=100)
        assert "Ubuntu 24.04 LTS" in ctx.ui.output

    def test_not_gnome_accepted(self, ctx, console):
        ctx.ui = ScriptedReporter(console, confirms=[True])
        run_preflight(ctx, env={"XDG_CURRENT_DESKTOP": "KDE"}, os_release=FEDORA, network=True, free_space=100)
        assert ctx.ui.asked == ["Continue anyway?"]

    def test_low_disk_declined(self, ctx, console):
        ctx.ui = ScriptedReporter(console, confirms=[False])
        with pytest.raises(PreflightError, match="3GB"):
            run_preflight(ctx, env=GNOME_ENV, os_release=FEDORA, network=True, free_space=3)

    def test_probes_skipped_when_earlier_check_aborts(self, ctx, console, monkeypatch):
        from bureau import preflight

        def boom(*args, **kwargs):
            raise AssertionError("probe should not run")

        monkeypatch.setattr(preflight, "has_network", boom)
        monkeypatch.setattr(preflight, "free_gb", boom)
        ctx.ui = ScriptedReporter(console, confirms=[False])
        with pytest.raises(PreflightError):
            run_preflight(ctx, env=GNOME_ENV, os_release=UBUNTU)

    @pytest.mark.parametrize("env, expected", [
        ({"XDG_CURRENT_DESKTOP": "GNOME"}, True),
        ({"XDG_CURRENT_DESKTOP": "ubuntu:GNOME"}, True),
        ({"DESKTOP_SESSION": "gnome"}, True),
        ({"XDG_CURRENT_DESKTOP": "KDE"}, False),
        ({}, False),
    ])
    def test_is_gnome(self, env, expected):
        assert is_gnome(env) is expected

    def test_is_fedora(self):
        assert is_fedora(FEDORA)
        assert not is_fedora(UBUNTU)
        assert not is_fedora({})


class TestMain:

    def test_list_stages(self, capsys, monkeypatch, tmp_path):
        monkeypatch.setenv("HOME", str(tmp_path))
        monkeypatch.delenv("XDG_CONFIG_HOME", raising=False)
        assert installer.main(["--list-stages"]) == 0
        out = capsys.readouterr().out
        assert out.index("update") < out.index("cleanup")

    def test_unknown_stage_exits_2(self, monkeypatch, tmp_path):
        monkeypatch.setenv("HOME", str(tmp_path))
        monkeypatch.delenv("XDG_CONFIG_HOME", raising=False)
        assert installer.main(["--only", "bogus"]) == 2
