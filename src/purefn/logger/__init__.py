from purefn.logger.logger import (
    get_logger,
    logger,
    package_handler,
    set_level,
    setup_logger,
)

__all__ = ["logger", "setup_logger", "get_logger", "set_level", "package_handler"]
