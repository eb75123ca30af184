from yamlview.services.yaml_service import YamlService
from yamlview.utils.logger import logger

class ParseService:
    def __init__(self, yaml_service: YamlService):
        self.yaml_service = yaml_service

    def load_file(self, path, fallback=None):
        logger.info(f"ParseService: loading file {path}")
        with open(path, encoding="utf-8") as f:
            text = f.read()
        return self.yaml_service.load(text, fallback=fallback)

    def load_stream(self, path):
        """Yield the documents of ``path`` one at a time; the file stays open until the generator ends."""
        logger.info(f"ParseService: streaming documents from {path}")
        with open(path, encoding="utf-8") as f:
            yield from self.yaml_service.load_all(f)
