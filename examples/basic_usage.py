#!/usr/bin/env python3
"""Basic usage example"""

from pattern_logger import LoggerBuilder, LogLevel

def main():
    # Create logger with builder pattern
    logger = (LoggerBuilder()
        .with_name("example.app")
        .with_level(LogLevel.DEBUG)
        .with_console(colored=True)
        .with_file("logs/example.log")
        .with_pattern("%d{ABSOLUTE} [%-5p] %c{1} (%M:%L): %m")
        .with_location()
        .with_async(True)
        .build())

    # Log messages
    logger.trace("This is trace")
    logger.debug("This is debug")
    logger.info("Application started", extra={"user": "admin"})
    logger.warn("This is warning")

    try:
        1 / 0
    except ZeroDivisionError:
        logger.exception("Division failed")

    logger.critical("This is critical")

    # Flush and shutdown
    logger.flush()
    logger.shutdown()

if __name__ == "__main__":
    main()
