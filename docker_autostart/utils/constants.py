"""Constants used across the docker-autostart codebase."""

# Environment variables
ENV_REAL_DOCKER_CMD = "DOCKER_AUTOSTART_REAL_DOCKER"
ENV_LOG_LEVEL = "DOCKER_AUTOSTART_LOG_LEVEL"
ENV_LOG_FILE = "DOCKER_AUTOSTART_LOG_FILE"

# Docker client
DEFAULT_DOCKER_CMD = "docker"
# Name the installer gives the client it replaces
ORIGINAL_DOCKER_CMD = "docker-original"

# Readiness polling
DEFAULT_TIMEOUT = 120
POLL_INTERVAL = 2.0
PROBE_TIMEOUT = 10
DETECT_TIMEOUT = 10

# Tried in order, first success wins
READINESS_PROBES = [
    ["info"],
    ["version"],
    ["ps"],
]

# Process table queries, keyed on platform.system()
DETECT_COMMANDS = {
    "Windows": ["powershell", "-Command", "Get-Process 'Docker Desktop' -ErrorAction SilentlyContinue"],
    "Darwin": ["pgrep", "-f", "Docker Desktop"],
    "Linux": ["pgrep", "-f", "docker-desktop"],
}

# Launch commands
DARWIN_LAUNCH_CMD = ["open", "-a", "Docker Desktop"]
LINUX_LAUNCH_CMD = ["sudo", "systemctl", "start", "docker"]

WINDOWS_INSTALL_PATHS = [
    r"C:\Program Files\Docker\Docker\Docker Desktop.exe",
    r"C:\Program Files (x86)\Docker\Docker\Docker Desktop.exe",
    r"%LOCALAPPDATA%\Programs\Docker\Docker\Docker Desktop.exe",
]

# CREATE_NO_WINDOW, only defined by subprocess on Windows
WINDOWS_NO_WINDOW_FLAG = 0x08000000

# Logging
LOGGER_NAME = "docker_autostart"
DEFAULT_LOG_LEVEL = "INFO"
