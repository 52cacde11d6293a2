import ntpath
import os
import platform
from typing import Optional
from docker_autostart.utils.logging import logger
from docker_autostart.utils.constants import (
    DETECT_COMMANDS, DARWIN_LAUNCH_CMD, LINUX_LAUNCH_CMD,
    WINDOWS_INSTALL_PATHS, WINDOWS_NO_WINDOW_FLAG
)
from docker_autostart.desktop_handler.base import DesktopLauncher, LaunchError

class WindowsLauncher(DesktopLauncher):
    platform_name = "Windows"
    detect_cmd = DETECT_COMMANDS["Windows"]

    def __init__(self, install_paths=None):
        self.install_paths = install_paths or WINDOWS_INSTALL_PATHS

    def find_executable(self) -> Optional[str]:
        """Return the first Docker Desktop install location that exists."""
        for path in self.install_paths:
            # %VAR% style expansion regardless of the host os.path flavour
            expanded_path = ntpath.expandvars(path)
            if os.path.isfile(expanded_path):
                logger.debug("Found Docker Desktop at: %s", expanded_path)
                return expanded_path
        return None

    def launch(self) -> None:
        docker_path = self.find_executable()
        if not docker_path:
            logger.debug("Docker Desktop not found in standard paths")
            raise LaunchError("Docker Desktop not found. Please ensure Docker Desktop is installed")

        self._start([docker_path], creationflags=WINDOWS_NO_WINDOW_FLAG)

class DarwinLauncher(DesktopLauncher):
    platform_name = "Darwin"
    detect_cmd = DETECT_COMMANDS["Darwin"]

    def launch(self) -> None:
        self._start(DARWIN_LAUNCH_CMD)

class LinuxLauncher(DesktopLauncher):
    """Linux has no desktop app to open, the docker service is started instead."""

    platform_name = "Linux"
    detect_cmd = DETECT_COMMANDS["Linux"]

    def launch(self) -> None:
        self._start(LINUX_LAUNCH_CMD)

class UnsupportedLauncher(DesktopLauncher):
    def __init__(self, platform_name: str):
        self.platform_name = platform_name

    def launch(self) -> None:
        raise LaunchError(f"unsupported platform: {self.platform_name or 'unknown'}")

LAUNCHERS = {
    "Windows": WindowsLauncher,
    "Darwin": DarwinLauncher,
    "Linux": LinuxLauncher,
}

def get_launcher(system: Optional[str] = None) -> DesktopLauncher:
    """Pick the launcher for the given platform.system() name, defaulting to the current one."""
    if system is None:
        system = platform.system()
    launcher_cls = LAUNCHERS.get(system)
    if launcher_cls is None:
        logger.debug("No Docker Desktop support for platform %s", system)
        return UnsupportedLauncher(system)
    return launcher_cls()
