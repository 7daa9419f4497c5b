import logging
import shlex
import subprocess
from dataclasses import dataclass

from .errors import CommandFailed

logger = logging.getLogger(__name__)

MISSING_COMMAND = 127


@dataclass(frozen=True)
class CommandResult:
    args: tuple
    returncode: int
    stdout: str = ""
    stderr: str = ""

    @property
    def ok(self) -> bool:
        return self.returncode == 0


class Runner:
    """Executes external commands for every stage and subcommand.

    check=True marks a must-succeed call and raises CommandFailed on a non-zero
    exit. check=False marks a failure the caller is willing to ignore: the
    result comes back and a warning is logged.
    """

    def __init__(self, dry_run=False):
        self.dry_run = dry_run

    def __call__(self, cmd, *, check=True, sudo=False, capture=False, shell=False, input=None, cwd=None):
        # Pipelines go through an explicit `sh -c`
        args = ("sh", "-c", cmd) if shell else tuple(str(c) for c in cmd)
        if sudo:
            args = ("sudo",) + args
        printable = shlex.join(args)

        if self.dry_run:
            logger.info("[dry-run] %s", printable)
            return CommandResult(args, 0)

        logger.debug("Running: %s", printable)
        try:
            proc = subprocess.run(
                list(args),
                input=input,
                capture_output=capture,
                text=True,
                cwd=cwd,
            )
            result = CommandResult(args, proc.returncode, proc.stdout or "", proc.stderr or "")
        except FileNotFoundError:
            result = CommandResult(args, MISSING_COMMAND, "", f"{args[0]}: command not found")

        if not result.ok:
            if check:
                logger.error("Command failed (rc=%s): %s", result.returncode, printable)
                raise CommandFailed(result)
            logger.warning("Ignoring failure (rc=%s): %s", result.returncode, printable)
        return result


def dnf_install(runner, packages, check=True):
    return runner(["dnf", "install", "-y", *packages], sudo=True, check=check)


def flatpak_install(runner, app_id, check=True):
    return runner(["flatpak", "install", "-y", "flathub", app_id], check=check)
