import subprocess
from typing import List, Optional
from docker_autostart.utils.logging import logger
from docker_autostart.utils.constants import DETECT_TIMEOUT

class LaunchError(RuntimeError):
    """Raised when Docker Desktop cannot be started."""

class DesktopLauncher:
    """
    Detects and starts Docker Desktop on one platform.

    Subclasses set ``detect_cmd`` to the process table query for their platform
    and implement ``launch``. Launching never waits for the engine to answer,
    that is the readiness waiter's job.
    """

    platform_name = ""
    detect_cmd: Optional[List[str]] = None
    process: Optional[subprocess.Popen] = None

    def is_running(self) -> bool:
        """Check whether Docker Desktop shows up in the process table.

        Any failure of the query itself counts as not running.
        """
        if not self.detect_cmd:
            return False

        try:
            result = subprocess.run(self.detect_cmd, capture_output=True, text=True,
                                    check=False, timeout=DETECT_TIMEOUT)
        except (OSError, subprocess.SubprocessError) as e:
            logger.debug("Error checking Docker Desktop: %s", e)
            return False

        if result.returncode != 0:
            logger.debug("Error checking Docker Desktop: %s exited with %d",
                         self.detect_cmd[0], result.returncode)
            return False

        running = len(result.stdout.strip()) > 0
        logger.debug("Docker Desktop running: %s", running)
        return running

    def launch(self) -> None:
        raise NotImplementedError

    def _start(self, cmd: List[str], **popen_kwargs) -> subprocess.Popen:
        """Start the launch command without waiting for it."""
        logger.debug("Starting Docker Desktop with command: %s", cmd)
        try:
            self.process = subprocess.Popen(cmd, **popen_kwargs)
        except OSError as e:
            raise LaunchError(f"could not run {cmd[0]}: {e}") from e
        return self.process

    def reap(self) -> Optional[int]:
        """Collect the exit status of the launch command if it has finished.

        Launchers that are the desktop app itself keep running on their own
        after the wrapper exits; those are left alone.
        """
        if self.process is None:
            return None
        returncode = self.process.poll()
        if returncode is None:
            logger.debug("Launch command %s still running, leaving it", self.process.args)
        else:
            logger.debug("Launch command exited with %d", returncode)
        return returncode
