class BureauError(Exception):
    """Base class for everything Bureau raises on purpose."""


class CommandFailed(BureauError):
    """A must-succeed external command exited non-zero."""

    def __init__(self, result):
        self.result = result
        cmd = " ".join(result.args)
        super().__init__(f"'{cmd}' failed with exit code {result.returncode}")


class PreflightError(BureauError):
    """A pre-flight check failed and the operator did not override it."""
