import importlib.metadata
from collections.abc import Mapping
from dataclasses import dataclass

DEBUG_ENV_VAR = "GH_SIGNOFF_DEBUG"
PACKAGE_NAME = "gh-signoff"

_TRUTHY = frozenset({"1", "true", "yes", "on"})


@dataclass(frozen=True)
class SignoffConfig:
    """Process-wide settings, resolved once at startup.

    Attributes:
        debug: Emit diagnostic log lines on stderr
        version: Installed gh-signoff version
    """

    debug: bool
    version: str


def get_current_version() -> str:
    """Get the currently installed version of gh-signoff."""
    return importlib.metadata.version(PACKAGE_NAME)


def is_debug_enabled(environ: Mapping[str, str]) -> bool:
    """Check the debug environment variable (1/true/yes/on, case-insensitive)."""
    return environ.get(DEBUG_ENV_VAR, "").strip().lower() in _TRUTHY


def load_config(environ: Mapping[str, str], *, debug_flag: bool) -> SignoffConfig:
    """Build SignoffConfig from the environment and the --debug flag.

    Either source enables debug mode.
    """
    return SignoffConfig(
        debug=debug_flag or is_debug_enabled(environ),
        version=get_current_version(),
    )
