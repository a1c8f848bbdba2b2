"""GitHub gateway: commit statuses and branch protection via gh api."""

from gh_signoff.gateway.github.abc import GitHub as GitHub
from gh_signoff.gateway.github.fake import FakeGitHub as FakeGitHub
from gh_signoff.gateway.github.real import RealGitHub as RealGitHub
