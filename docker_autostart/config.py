import os
import shutil
from dataclasses import dataclass
from docker_autostart.utils.logging import logger
from docker_autostart.utils.constants import (
    DEFAULT_DOCKER_CMD, DEFAULT_TIMEOUT, ENV_REAL_DOCKER_CMD, ORIGINAL_DOCKER_CMD
)

def resolve_docker_cmd() -> str:
    """Find the real docker client the wrapper forwards to.

    Checks the environment override first, then the ``docker-original`` name the
    installer leaves behind when the wrapper takes over ``docker``.
    """
    env_cmd = os.environ.get(ENV_REAL_DOCKER_CMD)
    if env_cmd:
        logger.debug("Using real docker from environment variable: %s", env_cmd)
        return env_cmd

    original = shutil.which(ORIGINAL_DOCKER_CMD)
    if original:
        logger.debug("Using real docker at: %s", original)
        return original

    return DEFAULT_DOCKER_CMD

@dataclass(frozen=True)
class AutostartConfig:
    """Settings for one invocation, read once at startup."""
    timeout: int = DEFAULT_TIMEOUT
    verbose: bool = False
    quiet: bool = False
    docker_cmd: str = DEFAULT_DOCKER_CMD

    @classmethod
    def from_args(cls, args) -> "AutostartConfig":
        return cls(
            timeout=args.timeout,
            verbose=args.verbose,
            quiet=args.quiet,
            docker_cmd=resolve_docker_cmd(),
        )
