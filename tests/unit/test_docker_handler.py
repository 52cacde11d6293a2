import os
import sys
import pytest
from unittest.mock import patch, MagicMock, Mock

# Add project root to path
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '../..')))

# Create mock logger
mock_logger = MagicMock()

@pytest.fixture(autouse=True)
def mock_logger_fixture():
    """Mock logger for all tests."""
    mock_logger.reset_mock()
    with patch('docker_autostart.docker_handler.logger', mock_logger):
        yield mock_logger

from docker_autostart.config import AutostartConfig
from docker_autostart.docker_handler import DockerHandler
from docker_autostart.readiness import ReadinessWaiter
from docker_autostart.desktop_handler.base import DesktopLauncher, LaunchError

@pytest.fixture
def launcher():
    launcher = Mock(spec=DesktopLauncher)
    launcher.is_running.return_value = True
    return launcher

@pytest.fixture
def waiter():
    waiter = Mock(spec=ReadinessWaiter)
    waiter.wait.return_value = True
    return waiter

@pytest.fixture
def handler(launcher, waiter):
    config = AutostartConfig(timeout=30, docker_cmd='docker')
    return DockerHandler(config, launcher=launcher, waiter=waiter)

@pytest.fixture
def mock_popen():
    with patch('docker_autostart.docker_handler.subprocess.Popen') as mock:
        mock.return_value.wait.return_value = 0
        yield mock

def test_already_running_forwards_immediately(handler, launcher, waiter, mock_popen):
    assert handler.run(['ps', '-a']) == 0
    launcher.launch.assert_not_called()
    waiter.wait.assert_not_called()
    mock_popen.assert_called_once_with(['docker', 'ps', '-a'])

@pytest.mark.parametrize("exit_code", [1, 2, 42, 125])
def test_propagates_exit_code(handler, mock_popen, exit_code):
    mock_popen.return_value.wait.return_value = exit_code
    assert handler.run(['run', 'missing-image']) == exit_code

def test_starts_and_waits_when_not_running(handler, launcher, waiter, mock_popen):
    launcher.is_running.return_value = False
    assert handler.run(['ps']) == 0
    launcher.launch.assert_called_once_with()
    waiter.wait.assert_called_once_with(30)
    mock_popen.assert_called_once_with(['docker', 'ps'])

def test_launch_failure(handler, launcher, waiter, mock_popen):
    launcher.is_running.return_value = False
    launcher.launch.side_effect = LaunchError("unsupported platform: Plan9")
    assert handler.run(['ps']) == 1
    waiter.wait.assert_not_called()
    mock_popen.assert_not_called()
    mock_logger.error.assert_called_once_with("Failed to start Docker Desktop: %s", launcher.launch.side_effect)

def test_readiness_timeout(handler, launcher, waiter, mock_popen):
    launcher.is_running.return_value = False
    waiter.wait.return_value = False
    assert handler.run(['ps']) == 1
    mock_popen.assert_not_called()
    mock_logger.error.assert_called_once_with("Docker failed to start within %d seconds", 30)

def test_docker_binary_cannot_start(handler, mock_popen):
    mock_popen.side_effect = FileNotFoundError("docker")
    assert handler.run(['ps']) == 1
    assert mock_logger.error.called

def test_killed_by_signal(handler, mock_popen):
    mock_popen.return_value.wait.return_value = -9
    assert handler.run(['logs', '-f', 'web']) == 137

def test_interrupt_waits_for_docker(handler, mock_popen):
    mock_popen.return_value.wait.side_effect = [KeyboardInterrupt(), 130]
    assert handler.run(['logs', '-f', 'web']) == 130
    assert mock_popen.return_value.wait.call_count == 2

def test_uses_configured_docker_binary(launcher, waiter, mock_popen):
    config = AutostartConfig(docker_cmd='/usr/local/bin/docker-original')
    DockerHandler(config, launcher=launcher, waiter=waiter).run(['version'])
    mock_popen.assert_called_once_with(['/usr/local/bin/docker-original', 'version'])

def test_default_collaborators():
    config = AutostartConfig(timeout=7, docker_cmd='/opt/docker')
    with patch('docker_autostart.docker_handler.get_launcher') as mock_get_launcher:
        handler = DockerHandler(config)
        assert handler.launcher is mock_get_launcher.return_value
        assert isinstance(handler.waiter, ReadinessWaiter)
        assert handler.waiter.probe.docker_cmd == '/opt/docker'

def test_launch_process_reaped_after_wait(handler, launcher, waiter, mock_popen):
    launcher.is_running.return_value = False
    assert handler.run(['ps']) == 0
    launcher.reap.assert_called_once_with()

def test_launch_process_reaped_after_timeout(handler, launcher, waiter, mock_popen):
    launcher.is_running.return_value = False
    waiter.wait.return_value = False
    assert handler.run(['ps']) == 1
    launcher.reap.assert_called_once_with()

def test_running_engine_has_nothing_to_reap(handler, launcher, mock_popen):
    handler.run(['ps'])
    launcher.reap.assert_not_called()
