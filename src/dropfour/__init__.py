from loguru import logger

# Library default: silent until an entry point (or host app) enables it.
logger.disable("dropfour")
