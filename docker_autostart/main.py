#!/usr/bin/env python3
import sys
from docker_autostart.autostart_cli import parse_args, print_usage
from docker_autostart.config import AutostartConfig
from docker_autostart.docker_handler import DockerHandler
from docker_autostart.utils.constants import LOGGER_NAME
from docker_autostart.utils.logging import logger, setup_logger, verbosity_level

def main(argv=None):
    """
    Main entry point for the docker-autostart wrapper.
    Makes sure Docker Desktop is up, then hands the command to docker.
    """
    args = parse_args(argv)
    if not args.command:
        print_usage()
        return 1

    setup_logger(LOGGER_NAME, level=verbosity_level(args.verbose, args.quiet))

    try:
        config = AutostartConfig.from_args(args)
        handler = DockerHandler(config)
        exit_code = handler.run(args.command)
        logger.debug("Command processing completed with exit code: %d", exit_code)
        return exit_code
    except KeyboardInterrupt:
        logger.error("Interrupted")
        return 130
    except Exception as e:
        logger.error(f"Fatal error: {str(e)}")
        return 1

if __name__ == "__main__":
    sys.exit(main())
