"""Static shell completion scripts for gh-signoff."""

from typing import Literal

ShellName = Literal["bash", "zsh", "fish"]

SUPPORTED_SHELLS: tuple[ShellName, ...] = ("bash", "zsh", "fish")

# (verb, description) in the order shown to users
VERBS: tuple[tuple[str, str], ...] = (
    ("create", "Sign off on the current commit"),
    ("install", "Require signoff on a branch"),
    ("uninstall", "Remove branch protection"),
    ("check", "Check whether a branch requires signoff"),
    ("version", "Show the gh-signoff version"),
    ("completion", "Print a shell completion script"),
    ("help", "Show usage"),
)

BRANCH_VERBS = ("install", "uninstall", "check")


def _bash_script() -> str:
    verbs = " ".join(verb for verb, _ in VERBS)
    branch_verbs = "|".join(BRANCH_VERBS)
    shells = " ".join(SUPPORTED_SHELLS)
    return f"""\
# bash completion for gh-signoff
_gh_signoff() {{
    local cur="${{COMP_WORDS[COMP_CWORD]}}"
    if [[ ${{COMP_CWORD}} -eq 1 ]]; then
        COMPREPLY=($(compgen -W "{verbs} -f -h --help" -- "$cur"))
        return
    fi
    case "${{COMP_WORDS[1]}}" in
        create)
            COMPREPLY=($(compgen -W "-f" -- "$cur"))
            ;;
        {branch_verbs})
            COMPREPLY=($(compgen -W "$(git branch --format='%(refname:short)' 2>/dev/null)" -- "$cur"))
            ;;
        completion)
            COMPREPLY=($(compgen -W "{shells}" -- "$cur"))
            ;;
    esac
}}
complete -F _gh_signoff gh-signoff
"""


def _zsh_script() -> str:
    verb_lines = "\n".join(f"        '{verb}:{description}'" for verb, description in VERBS)
    branch_verbs = "|".join(BRANCH_VERBS)
    shells = " ".join(SUPPORTED_SHELLS)
    return f"""\
#compdef gh-signoff
_gh_signoff() {{
    local -a verbs
    verbs=(
{verb_lines}
    )
    if (( CURRENT == 2 )); then
        _describe 'command' verbs
        return
    fi
    case "$words[2]" in
        create)
            _arguments '-f[sign off even if the repository is not clean]'
            ;;
        {branch_verbs})
            local -a branches
            branches=(${{(f)"$(git branch --format='%(refname:short)' 2>/dev/null)"}})
            _describe 'branch' branches
            ;;
        completion)
            _values 'shell' {shells}
            ;;
    esac
}}
compdef _gh_signoff gh-signoff
"""


def _fish_script() -> str:
    lines = ["# fish completion for gh-signoff", "complete -c gh-signoff -f"]
    for verb, description in VERBS:
        lines.append(
            f"complete -c gh-signoff -n '__fish_use_subcommand' -a {verb} -d '{description}'"
        )
    lines.append(
        "complete -c gh-signoff -n '__fish_seen_subcommand_from create' "
        "-s f -d 'Sign off even if the repository is not clean'"
    )
    lines.append(
        f"complete -c gh-signoff -n '__fish_seen_subcommand_from {' '.join(BRANCH_VERBS)}' "
        "-a '(__fish_git_branches)'"
    )
    lines.append(
        "complete -c gh-signoff -n '__fish_seen_subcommand_from completion' "
        f"-a '{' '.join(SUPPORTED_SHELLS)}'"
    )
    return "\n".join(lines) + "\n"


def completion_script(shell: ShellName) -> str:
    """Get the completion script for a shell."""
    if shell == "bash":
        return _bash_script()
    if shell == "zsh":
        return _zsh_script()
    return _fish_script()
