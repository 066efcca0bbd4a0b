import logging
from functools import lru_cache
from importlib.metadata import PackageNotFoundError, version

DISTRIBUTION = "clean-code-react-mcp"
FALLBACK_VERSION = "0.0.0"

logger = logging.getLogger("clean_code_react.version")


@lru_cache(maxsize=1)
def get_version() -> str:
    """Installed package version, or 0.0.0 when running from a bare checkout."""
    try:
        return version(DISTRIBUTION)
    except PackageNotFoundError:
        logger.warning("Could not read version of %s, using %s", DISTRIBUTION, FALLBACK_VERSION)
        return FALLBACK_VERSION
