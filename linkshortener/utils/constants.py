# Short identifier defaults
DEFAULT_SHORT_ID_LENGTH = 6
COLLISIONS_BEFORE_GROWTH = 32  # consecutive collisions tolerated before the short id grows by one character

# Storage defaults
DEFAULT_DATA_DIR = './data'
DEFAULT_FILE_NAME = 'links.json'

# HTTP defaults
DEFAULT_BASE_PATH = '/share'
DEFAULT_ADD_LINK_FIELD = 'longLink'
LOCAL_BASE_URL = 'http://localhost:3000'

# Application environment
APP_ENV_ENV = 'APP_ENV'
LOG_LEVEL_ENV = 'LOG_LEVEL'

# Configuration sources
CONFIG_PATH_ENV = 'LINKSHORTENER_CONFIG'
DATA_DIR_ENV = 'LINKSHORTENER_DATA_DIR'
FILE_NAME_ENV = 'LINKSHORTENER_FILE_NAME'
ALLOWED_DOMAIN_ENV = 'LINKSHORTENER_ALLOWED_DOMAIN'
SHORT_ID_LENGTH_ENV = 'LINKSHORTENER_SHORT_ID_LENGTH'
BASE_PATH_ENV = 'LINKSHORTENER_BASE_PATH'
