"""Git gateway: local repository queries."""

from gh_signoff.gateway.git.abc import Git as Git
from gh_signoff.gateway.git.fake import FakeGit as FakeGit
from gh_signoff.gateway.git.real import RealGit as RealGit
