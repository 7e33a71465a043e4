from hunting_engine.common.logging_utils import get_logger, configure_logging
from hunting_engine.config import LOG_DIR, get_log_level

# configure_logging checks for existing handlers, so importing this module
# from several entrypoints is safe
configure_logging(
    level=get_log_level(),
    log_dir=LOG_DIR,
    logger_name="hunting_engine",
)

logger = get_logger("hunting_engine")
