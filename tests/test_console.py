import pytest

from bureau.console import Reporter


class TestReporter:

    @pytest.mark.parametrize("method", ["step", "substep", "success", "warn"])
    def test_brackets_are_printed_literally(self, console, method):
        reporter = Reporter(console)
        getattr(reporter, method)("API key saved to /home/me/[work]/config.json")
        assert "/home/me/[work]/config.json" in console.file.getvalue()

    def test_echo_is_verbatim(self, console):
        Reporter(console).echo("[bold]not bold[/bold] :smile:")
        assert console.file.getvalue() == "[bold]not bold[/bold] :smile:\n"

    def test_assume_yes_skips_prompt(self, console):
        assert Reporter(console, assume_yes=True).confirm("Continue?", default=False) is True
        assert console.file.getvalue() == ""
