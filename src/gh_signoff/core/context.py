"""Application context with dependency injection."""

import os
from dataclasses import dataclass
from pathlib import Path

from gh_signoff.core.config import SignoffConfig, load_config
from gh_signoff.gateway.git.abc import Git
from gh_signoff.gateway.git.real import RealGit
from gh_signoff.gateway.github.abc import GitHub
from gh_signoff.gateway.github.real import RealGitHub
from gh_signoff.gateway.shell.abc import Shell
from gh_signoff.gateway.shell.real import RealShell


@dataclass(frozen=True)
class SignoffContext:
    """Immutable context holding all dependencies for signoff operations.

    Created at CLI entry point and threaded through the application via Click's
    context system. Frozen to prevent accidental modification at runtime.
    """

    git: Git
    github: GitHub
    shell: Shell
    cwd: Path  # Current working directory at CLI invocation
    config: SignoffConfig

    @staticmethod
    def for_test(
        git: Git | None = None,
        github: GitHub | None = None,
        shell: Shell | None = None,
        cwd: Path | None = None,
        config: SignoffConfig | None = None,
    ) -> "SignoffContext":
        """Create test context with optional pre-configured gateways.

        Any gateway not supplied is an empty fake. cwd defaults to
        Path("/test/repo").

        Example:
            >>> git = FakeGit(head_shas={Path("/test/repo"): "abc123"})
            >>> ctx = SignoffContext.for_test(git=git, github=FakeGitHub())
        """
        from gh_signoff.gateway.git.fake import FakeGit
        from gh_signoff.gateway.github.fake import FakeGitHub
        from gh_signoff.gateway.shell.fake import FakeShell

        if git is None:
            git = FakeGit()

        if github is None:
            github = FakeGitHub()

        if shell is None:
            shell = FakeShell()

        if config is None:
            config = SignoffConfig(debug=False, version="0.0.0.dev0")

        return SignoffContext(
            git=git,
            github=github,
            shell=shell,
            cwd=cwd or Path("/test/repo"),
            config=config,
        )


def create_context(*, debug: bool) -> SignoffContext:
    """Create production context with real implementations.

    Called at CLI entry point to create the context for the entire
    command execution.

    Args:
        debug: Value of the --debug flag; the environment can also enable debug mode
    """
    return SignoffContext(
        git=RealGit(),
        github=RealGitHub(),
        shell=RealShell(),
        cwd=Path.cwd(),
        config=load_config(os.environ, debug_flag=debug),
    )
