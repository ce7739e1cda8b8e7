"""Package version, read from config.json."""

from candicolor.config import get_config

__version__: str = get_config()["version"]
