import os

class Config:
    PERMITTED = os.environ.get("YAMLVIEW_PERMITTED", "date").split(",")
    ALIASES = os.environ.get("YAMLVIEW_ALIASES", "1").lower() in ("1", "true", "yes")
    LOG_LEVEL = os.environ.get("YAMLVIEW_LOG_LEVEL", "INFO").upper()
