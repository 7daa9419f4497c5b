import logging

from rich.console import Console
from rich.logging import RichHandler
from rich.markdown import Markdown
from rich.markup import escape
from rich.prompt import Confirm, Prompt

BANNER = r"""  ____
 | __ ) _   _ _ __ ___  __ _ _   _
 |  _ \| | | |  __/ _ \/ _` | | | |
 | |_) | |_| | | |  __/ (_| | |_| |
 |____/ \__,_|_|  \___|\__,_|\__,_|"""

TAGLINE = "Beautiful, Opinionated Fedora for Creatives"


class Reporter:
    """Bauhaus-coloured progress output shared by every Bureau command."""

    def __init__(self, console=None, assume_yes=False):
        self.console = console or Console(highlight=False)
        self.assume_yes = assume_yes

    def banner(self, version=None):
        self.console.print(BANNER, style="red", markup=False)
        self.console.print()
        self.console.print(f"  {TAGLINE}", style="bright_black")
        if version:
            self.console.print(f"  v{version}", style="bright_black")
        self.console.print()

    def step(self, text):
        self.console.print(f"\n[yellow]▸[/yellow] [bold]{escape(text)}[/bold]")

    def substep(self, text):
        self.console.print(f"  [bright_black]→[/bright_black] {escape(text)}")

    def success(self, text):
        self.console.print(f"  [blue]✓[/blue] {escape(text)}")

    def warn(self, text):
        self.console.print(f"  [red]⚠[/red] {escape(text)}")

    def echo(self, text=""):
        """Print text exactly as given: no markup, no wrapping, no emoji codes."""
        self.console.print(text, markup=False, highlight=False, emoji=False, soft_wrap=True)

    def markdown(self, text):
        self.console.print(Markdown(text))

    def confirm(self, question, default=True) -> bool:
        if self.assume_yes:
            return True
        self.console.print(f"\n[yellow]{question}[/yellow]")
        return Confirm.ask("  Continue?", default=default, console=self.console)

    def secret(self, question) -> str:
        return Prompt.ask(question, password=True, console=self.console, default="", show_default=False)


def setup_logging(paths=None, verbose=False):
    """Configure the root logger: a log file in the config dir, plus stderr when verbose."""
    root = logging.getLogger()
    root.setLevel(logging.DEBUG)
    for handler in list(root.handlers):
        root.removeHandler(handler)

    if paths is not None:
        try:
            paths.config_dir.mkdir(parents=True, exist_ok=True)
            fh = logging.FileHandler(paths.log_file, encoding="utf-8")
        except OSError:
            fh = None
        if fh is not None:
            fh.setLevel(logging.DEBUG)
            fh.setFormatter(logging.Formatter('%(asctime)s - %(name)s - %(levelname)s - %(message)s'))
            root.addHandler(fh)

    if verbose:
        rh = RichHandler(console=Console(stderr=True), show_path=False)
        rh.setLevel(logging.DEBUG)
        root.addHandler(rh)

    logging.getLogger("httpx").setLevel(logging.WARNING)
    logging.getLogger("httpcore").setLevel(logging.WARNING)
