APP_NAME = "kvtool"
ENV_PREFIX = "KVTOOL_CONFIG__"

DEFAULT_DRIVER = "lmdb"
DEFAULT_BUCKET = "bucket"
DEFAULT_CODEC = "none"
