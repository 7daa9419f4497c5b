from pathlib import Path

from bureau import __version__
from bureau.config import Paths, load_config, read_version, save_config


class TestPaths:

    def test_defaults_under_home(self, tmp_path):
        paths = Paths.from_env(env={}, home=tmp_path)
        assert paths.config_dir == tmp_path / ".config" / "bureau"
        assert paths.wallpaper_dir == tmp_path / ".local" / "share" / "backgrounds" / "bureau"
        assert paths.bashrc == tmp_path / ".bashrc"
        assert paths.config_file.name == "config.json"

    def test_xdg_overrides(self, tmp_path):
        env = {"XDG_CONFIG_HOME": "/xdg/config", "XDG_DATA_HOME": "/xdg/data"}
        paths = Paths.from_env(env=env, home=tmp_path)
        assert paths.config_dir == Path("/xdg/config/bureau")
        assert paths.applications_dir == Path("/xdg/data/applications")
        assert paths.gtk4_css == Path("/xdg/config/gtk-4.0/gtk.css")

    def test_home_from_env(self):
        paths = Paths.from_env(env={"HOME": "/home/designer"})
        assert paths.zshrc == Path("/home/designer/.zshrc")


class TestConfigFile:

    def test_missing_is_empty(self, paths):
        assert load_config(paths) == {}

    def test_non_object_is_empty(self, paths):
        paths.config_dir.mkdir(parents=True)
        paths.config_file.write_text("[1, 2]")
        assert load_config(paths) == {}

    def test_round_trip(self, paths):
        save_config(paths, {"a": 1})
        assert load_config(paths) == {"a": 1}

    def test_version_falls_back_to_package(self, paths):
        assert read_version(paths) == __version__
