"""Shell gateway: external tool availability."""

from gh_signoff.gateway.shell.abc import Shell as Shell
from gh_signoff.gateway.shell.fake import FakeShell as FakeShell
from gh_signoff.gateway.shell.real import RealShell as RealShell
