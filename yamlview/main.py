import argparse
import logging
import sys
from pprint import pprint

import yaml

from yamlview.config import Config
from yamlview.services.parse_service import ParseService
from yamlview.services.yaml_service import PERMITTED_TYPES, YamlService, resolve_permitted
from yamlview.utils.logger import logger


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Print the data in a YAML file using a restricted safe loader.")
    parser.add_argument("path", help="Path to the YAML file")
    parser.add_argument("--stream", action="store_true", help="Print each document in the file one at a time")
    parser.add_argument("--permit", action="append", choices=sorted(PERMITTED_TYPES),
                        help="Value type to allow (repeatable, overrides YAMLVIEW_PERMITTED)")
    parser.add_argument("--no-aliases", action="store_true", help="Refuse files that use aliases")
    parser.add_argument("--debug", action="store_true", help="Log every loaded document")
    return parser


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)
    level = logger.level
    if args.debug:
        logger.setLevel(logging.DEBUG)

    names = args.permit if args.permit is not None else Config.PERMITTED
    aliases = Config.ALIASES and not args.no_aliases

    try:
        service = ParseService(YamlService(resolve_permitted(names), aliases=aliases))
        if args.stream:
            for i, data in enumerate(service.load_stream(args.path)):
                logger.debug("document %d: %r", i, data)
                pprint(data)
        else:
            pprint(service.load_file(args.path))
    except (OSError, yaml.YAMLError, ValueError) as e:
        logger.error("could not load %s", args.path)
        print(f"[ERROR] {e}")
        return 1
    finally:
        logger.setLevel(level)
    return 0


if __name__ == "__main__":
    sys.exit(main())
