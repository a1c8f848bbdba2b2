"""Value types exchanged with the GitHub gateway."""

from dataclasses import dataclass
from typing import Any, Literal

SIGNOFF_CONTEXT = "signoff"

CommitState = Literal["error", "failure", "pending", "success"]


@dataclass(frozen=True)
class CommitStatus:
    """A commit status as created via POST /repos/{owner}/{repo}/statuses/{sha}.

    Attributes:
        commit_sha: Full SHA of the commit the status is attached to
        state: Status state; signoff always uses "success"
        context: Status context label shown on the commit
        description: Human-readable description
    """

    commit_sha: str
    state: CommitState
    context: str
    description: str


@dataclass(frozen=True)
class BranchProtection:
    """The parts of a branch protection rule signoff reads.

    Attributes:
        branch: Protected branch name
        required_contexts: Contexts listed under required_status_checks.contexts
    """

    branch: str
    required_contexts: frozenset[str]

    @property
    def requires_signoff(self) -> bool:
        return SIGNOFF_CONTEXT in self.required_contexts


def parse_branch_protection(branch: str, data: dict[str, Any]) -> BranchProtection:
    """Build BranchProtection from a GET .../branches/{branch}/protection response.

    A missing or null required_status_checks block yields no required contexts.
    """
    checks = data.get("required_status_checks") or {}
    contexts = checks.get("contexts") or []
    return BranchProtection(branch=branch, required_contexts=frozenset(str(c) for c in contexts))


def build_protection_payload(contexts: list[str]) -> dict[str, Any]:
    """Build the PUT .../branches/{branch}/protection request body.

    The request replaces the whole protection object: required status checks are
    set to the given contexts with strict mode off, and admin enforcement, pull
    request review requirements, and push restrictions are cleared.
    """
    return {
        "required_status_checks": {
            "strict": False,
            "contexts": contexts,
        },
        "enforce_admins": None,
        "required_pull_request_reviews": None,
        "restrictions": None,
    }
