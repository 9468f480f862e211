"""Error taxonomy for the Xorshift32 generator."""


class PRNGError(Exception):
    """Base class for every error raised by xorshift_prng."""


class InvalidStateError(PRNGError, RuntimeError):
    """Raised when an advance is attempted while the state is zero."""


class InvalidRangeError(PRNGError, ValueError):
    """Raised when a ranged draw receives ``maximum <= minimum``."""


class ConfigError(PRNGError, ValueError):
    """Raised when a draw session configuration cannot be run."""


InvalidState = InvalidStateError
InvalidRange = InvalidRangeError
