import subprocess
from typing import List, Optional
from docker_autostart.utils.logging import logger
from docker_autostart.config import AutostartConfig
from docker_autostart.readiness import ReadinessProbe, ReadinessWaiter
from docker_autostart.desktop_handler.base import DesktopLauncher, LaunchError
from docker_autostart.desktop_handler.launchers import get_launcher

class DockerHandler:
    def __init__(self, config: AutostartConfig, launcher: Optional[DesktopLauncher] = None,
                 waiter: Optional[ReadinessWaiter] = None):
        self.config = config
        self.launcher = launcher or get_launcher()
        self.waiter = waiter or ReadinessWaiter(ReadinessProbe(config.docker_cmd))
        logger.debug("DockerHandler initialized with real docker at: %s", config.docker_cmd)

    def ensure_running(self) -> bool:
        """Start Docker Desktop if needed and wait until it answers.

        Returns:
            bool: True if docker is usable, False on launch failure or timeout
        """
        if self.launcher.is_running():
            logger.debug("Docker Desktop is already running")
            return True

        logger.info("Docker Desktop is not running. Starting it...")
        try:
            self.launcher.launch()
        except LaunchError as e:
            logger.error("Failed to start Docker Desktop: %s", e)
            return False

        logger.info("Waiting for Docker to be ready (timeout: %ds)...", self.config.timeout)
        ready = self.waiter.wait(self.config.timeout)
        self.launcher.reap()
        if not ready:
            logger.error("Docker failed to start within %d seconds", self.config.timeout)
            return False

        logger.info("Docker is ready!")
        return True

    def _execute_command(self, args: List[str]) -> int:
        """Run the real docker client with inherited stdio and return its exit code."""
        cmd = [self.config.docker_cmd] + args
        logger.debug("Executing docker command: %s", args)
        try:
            process = subprocess.Popen(cmd)
        except OSError as e:
            logger.error("Error executing docker command: %s", e)
            return 1

        while True:
            try:
                returncode = process.wait()
                break
            except KeyboardInterrupt:
                # The terminal already sent SIGINT to docker, let it finish
                logger.debug("Interrupted, waiting for docker to exit")

        if returncode < 0:
            # Killed by a signal, report it the way a shell would
            logger.debug("Docker command killed by signal %d", -returncode)
            return 128 - returncode
        if returncode != 0:
            logger.debug("Docker command failed with exit code %d", returncode)
        return returncode

    def run(self, args: List[str]) -> int:
        """Make sure docker is up, then forward the command."""
        if not self.ensure_running():
            return 1
        return self._execute_command(args)
