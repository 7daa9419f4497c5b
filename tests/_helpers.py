"""Test doubles for the runner, the settings store and the prompts."""

from bureau.console import Reporter
from bureau.errors import CommandFailed
from bureau.runner import CommandResult


class FakeRunner:
    """Records every command and answers from a table of canned results.

    `results` maps a command prefix (tuple) to a CommandResult; `failing`
    lists prefixes that exit 1. Unknown commands succeed with no output.
    """

    def __init__(self, results=None, failing=()):
        self.dry_run = False
        self.calls = []
        self.results = dict(results or {})
        self.failing = [tuple(p) for p in failing]

    def __call__(self, cmd, *, check=True, sudo=False, capture=False, shell=False, input=None, cwd=None):
        args = ("sh", "-c", cmd) if shell else tuple(str(c) for c in cmd)
        if sudo:
            args = ("sudo",) + args
        self.calls.append(args)

        plain = args[1:] if sudo else args
        result = CommandResult(args, 0)
        for prefix, canned in self.results.items():
            if plain[: len(prefix)] == tuple(prefix):
                result = CommandResult(args, canned.returncode, canned.stdout, canned.stderr)
        if any(plain[: len(p)] == p for p in self.failing):
            result = CommandResult(args, 1, "", "boom")
        if check and not result.ok:
            raise CommandFailed(result)
        return result

    def commands(self, program):
        return [c for c in self.calls if program in c[:2]]


class FakeSettings:
    """In-memory stand-in for the gsettings store."""

    def __init__(self):
        self.store = {}
        self.writes = []

    def set(self, schema, key, value, check=True):
        self.writes.append((schema, key, value))
        self.store[(schema, key)] = value

    def get(self, schema, key):
        return self.store.get((schema, key))

    def reset(self, schema, key, check=False):
        self.store.pop((schema, key), None)


class ScriptedReporter(Reporter):
    """Reporter whose prompts are answered from lists instead of stdin."""

    def __init__(self, console, confirms=None, secrets=None):
        super().__init__(console)
        self.confirms = list(confirms or [])
        self.secrets = list(secrets or [])
        self.asked = []

    def confirm(self, question, default=True):
        self.asked.append(question)
        return self.confirms.pop(0) if self.confirms else default

    def secret(self, question):
        self.asked.append(question)
        return self.secrets.pop(0) if self.secrets else ""

    @property
    def output(self):
        return self.console.file.getvalue()
