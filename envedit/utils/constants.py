APP_NAME = "envedit"
APP_DIR = "envedit"
DIST_NAME = "envedit"

CONFIG_FILE = "config.ini"
DEFAULT_ENV_FILE = ".env"

DEFAULT_LOG_LEVEL = "WARNING"
LOG_FORMAT = "%(levelname)s %(name)s: %(message)s"
