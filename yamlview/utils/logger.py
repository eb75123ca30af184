import logging
from yamlview.config import Config

def resolve_level(name):
    level = logging.getLevelName(name)
    return level if isinstance(level, int) else logging.INFO

logging.basicConfig(level=resolve_level(Config.LOG_LEVEL), format="%(levelname)s: %(message)s")
logger = logging.getLogger("yamlview")
