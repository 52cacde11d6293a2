import subprocess
import time
from typing import Callable, List, Optional
from docker_autostart.utils.logging import logger
from docker_autostart.utils.constants import (
    DEFAULT_DOCKER_CMD, POLL_INTERVAL, PROBE_TIMEOUT, READINESS_PROBES
)

class ReadinessProbe:
    """Asks the docker client whether the engine accepts commands."""

    def __init__(self, docker_cmd: str = DEFAULT_DOCKER_CMD, probes: Optional[List[List[str]]] = None,
                 probe_timeout: float = PROBE_TIMEOUT, clock: Callable[[], float] = time.monotonic):
        self.docker_cmd = docker_cmd
        self.probes = probes or READINESS_PROBES
        self.probe_timeout = probe_timeout
        self._clock = clock

    def _run(self, args: List[str], timeout: float) -> bool:
        try:
            result = subprocess.run([self.docker_cmd] + args, stdout=subprocess.DEVNULL,
                                    stderr=subprocess.DEVNULL, check=False,
                                    timeout=timeout)
        except (OSError, subprocess.SubprocessError) as e:
            logger.debug("Probe %s failed: %s", " ".join(args), e)
            return False
        return result.returncode == 0

    def __call__(self, time_left: Optional[float] = None) -> bool:
        """Run the probes in order, the first one that succeeds means ready.

        Args:
            time_left: Optional budget in seconds shared by all probe commands.
        """
        end = None if time_left is None else self._clock() + time_left
        for i, args in enumerate(self.probes):
            timeout = self.probe_timeout
            if end is not None:
                remaining = end - self._clock()
                if remaining <= 0:
                    logger.debug("Probe budget used up before %s", " ".join(args))
                    return False
                timeout = min(timeout, remaining)
            if self._run(args, timeout):
                logger.debug("Docker ready check passed (method %d: %s)", i + 1, " ".join(args))
                return True
        return False

class ReadinessWaiter:
    """
    Polls a probe on a fixed interval until it succeeds or a timeout expires.

    The first probe runs one interval after the wait starts. A tick that falls
    exactly on the deadline is still probed; the timeout only wins when it comes
    strictly before the next tick. Ticks missed while a slow probe was running
    are dropped rather than fired back to back. Each probe gets a budget that
    ends one interval after the deadline, so a wait never overruns by more.
    """

    def __init__(self, probe: Callable[[float], bool], interval: float = POLL_INTERVAL,
                 clock: Callable[[], float] = time.monotonic,
                 sleep: Callable[[float], None] = time.sleep):
        self.probe = probe
        self.interval = interval
        self._clock = clock
        self._sleep = sleep

    def wait(self, timeout: float) -> bool:
        """Block until the probe succeeds (True) or timeout seconds pass (False)."""
        if timeout <= 0:
            logger.debug("Non-positive timeout %s, not waiting", timeout)
            return False

        start = self._clock()
        deadline = start + timeout
        next_tick = start + self.interval

        while True:
            now = self._clock()
            if next_tick > deadline:
                if deadline > now:
                    self._sleep(deadline - now)
                logger.debug("Timeout reached after %.1fs", self._clock() - start)
                return False

            if next_tick > now:
                self._sleep(next_tick - now)

            if self.probe(deadline + self.interval - self._clock()):
                logger.debug("Docker ready after %.1fs", self._clock() - start)
                return True

            now = self._clock()
            logger.debug("Still waiting... (%.1fs elapsed)", now - start)
            next_tick += self.interval
            while next_tick <= now:
                next_tick += self.interval
