import pytest

from bureau import assets, branding, gnome, system
from bureau.config import AFFINITY_GUIDE, DAVINCI_GUIDE, EXTENSIONS_LIST, WALLPAPER_DARK
from bureau.context import InstallContext
from bureau.errors import CommandFailed
from bureau.files import BLOCK_END, BLOCK_START
from bureau.runner import CommandResult, Runner


@pytest.fixture
def which_nothing(monkeypatch):
    monkeypatch.setattr(branding.shutil, "which", lambda name: None)


class TestSystemStages:

    def test_update_uses_sudo_dnf(self, ctx, runner):
        system.update_system(ctx)
        assert runner.calls == [("sudo", "dnf", "upgrade", "-y", "--refresh")]

    def test_update_failure_raises(self, ctx, runner):
        runner.failing.append(("dnf",))
        with pytest.raises(CommandFailed):
            system.update_system(ctx)

    def test_repos(self, ctx, runner):
        runner.results[("rpm", "-E")] = CommandResult(("rpm",), 0, "41\n")
        system.setup_repos(ctx)

        rpmfusion = runner.calls[1]
        assert rpmfusion[:4] == ("sudo", "dnf", "install", "-y")
        assert any("rpmfusion-free-release-41" in arg for arg in rpmfusion)
        assert any("rpmfusion-nonfree-release-41" in arg for arg in rpmfusion)
        assert ("flatpak", "remote-add", "--if-not-exists", "flathub", system.FLATHUB) in runner.calls
        assert ("sudo", "tee", system.CHROME_REPO_FILE) in runner.calls

    def test_repos_without_release_skips_rpmfusion(self, ctx, ui, runner):
        runner.results[("rpm", "-E")] = CommandResult(("rpm",), 0, "%fedora\n")
        system.setup_repos(ctx)
        assert runner.commands("dnf") == []
        assert "skipping RPM Fusion" in ui.output

    def test_creative_suite_writes_davinci_guide(self, ctx, runner, paths):
        system.install_creative_suite(ctx)
        assert paths.guide(DAVINCI_GUIDE).read_text() == assets.DAVINCI_GUIDE
        installed = [c[4:] for c in runner.commands("dnf")]
        assert ("gimp", "gimp-data-extras") in installed
        assert ("ImageMagick",) in installed

    def test_fonts_download_failure_is_not_fatal(self, ctx, ui, runner):
        runner.failing.append(("curl",))
        system.install_fonts(ctx)
        assert runner.calls[-1] == ("fc-cache", "-f")
        assert runner.commands("unzip") == []
        assert "Could not download DM Sans" in ui.output

    def test_fonts_unpacked_per_family(self, ctx, runner, paths):
        system.install_fonts(ctx)
        unzips = runner.commands("unzip")
        assert len(unzips) == len(system.DOWNLOADED_FONTS)
        assert unzips[0][-1] == str(paths.font_dir / "dm-sans")

    def test_cleanup_never_raises(self, ctx, runner):
        runner.failing.extend([("dnf",), ("rm",)])
        system.cleanup(ctx)
        assert ("sudo", "dnf", "clean", "all") in runner.calls


class TestGnomeStages:

    def test_configure_gnome_writes_every_setting(self, ctx, runner):
        runner.failing.append(("gsettings", "set", "org.gnome.nautilus.preferences"))
        gnome.configure_gnome(ctx)
        assert len(runner.commands("gsettings")) == len(gnome.DESKTOP_SETTINGS)

    def test_extensions_falls_back_to_pip(self, ctx, runner, paths):
        runner.failing.append(("pipx",))
        gnome.install_extensions(ctx)
        assert ("pip", "install", "--user", "gnome-extensions-cli") in runner.calls
        assert paths.guide(EXTENSIONS_LIST).read_text() == assets.RECOMMENDED_EXTENSIONS


class TestBrandingStages:

    def test_theme_css(self, ctx, paths):
        branding.install_theme(ctx)
        assert paths.gtk4_css.is_file()
        assert paths.gtk3_css.is_file()

    def test_branding_sets_background_when_generated(self, ctx, runner, paths, which_nothing):
        paths.wallpaper_dir.mkdir(parents=True)
        (paths.wallpaper_dir / WALLPAPER_DARK).write_bytes(b"png")

        branding.install_branding(ctx)

        converts = runner.commands("convert")
        assert len(converts) == len(branding.styles.WALLPAPERS)
        uri = (paths.wallpaper_dir / WALLPAPER_DARK).as_uri()
        assert ("gsettings", "set", gnome.BACKGROUND, "picture-uri", f"'{uri}'") in runner.calls

    def test_branding_without_wallpaper_warns(self, ctx, ui, runner, which_nothing):
        runner.failing.append(("convert",))
        branding.install_branding(ctx)
        assert runner.commands("gsettings") == []
        assert "wallpapers will generate on next run" in ui.output

    def test_ai_stage(self, ctx, ui, runner, paths, which_nothing):
        runner.failing.append(("npm",))
        branding.install_ai(ctx)

        for file_id, *_ in assets.WEB_APPS:
            entry = (paths.applications_dir / f"{file_id}.desktop").read_text()
            assert entry.startswith("[Desktop Entry]")
        assert ("sudo", "dnf", "install", "-y", "nodejs", "npm") in runner.calls
        assert "Claude Code install failed" in ui.output
        assert assets.LOCAL_BIN_PATH in paths.bashrc.read_text()

    def test_affinity_guide(self, ctx, paths):
        branding.setup_affinity(ctx)
        assert paths.guide(AFFINITY_GUIDE).read_text() == assets.AFFINITY_GUIDE

    def test_terminal_is_idempotent(self, ctx, paths):
        paths.bashrc.write_text("# user stuff\nalias ll='ls -l'\n")

        branding.setup_terminal(ctx)
        first = paths.bashrc.read_text()
        branding.setup_terminal(ctx)
        second = paths.bashrc.read_text()

        assert first == second
        assert second.count(BLOCK_START) == 1
        assert second.count(BLOCK_END) == 1
        assert second.count(assets.STARSHIP_INIT) == 1
        assert second.startswith("# user stuff\nalias ll='ls -l'\n")
        assert paths.starship_config.is_file()

    def test_starship_installed_through_shell(self, ctx, runner):
        branding.setup_terminal(ctx)
        assert ("sh", "-c", branding.STARSHIP_INSTALL) in runner.calls

    def test_menu_records_version(self, ctx, paths):
        from bureau import __version__

        branding.install_menu(ctx)
        assert paths.version_file.read_text().strip() == __version__


class TestDryRun:

    def test_nothing_written_or_executed(self, paths, ui, monkeypatch):
        def no_subprocess(*args, **kwargs):
            raise AssertionError("subprocess ran during dry run")

        monkeypatch.setattr("bureau.runner.subprocess.run", no_subprocess)
        ctx = InstallContext(paths=paths, runner=Runner(dry_run=True), ui=ui)

        branding.install_theme(ctx)
        branding.setup_terminal(ctx)
        system.install_fonts(ctx)

        assert not paths.gtk4_css.exists()
        assert not paths.bashrc.exists()
        assert not paths.font_dir.exists()
