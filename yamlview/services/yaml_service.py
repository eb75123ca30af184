from __future__ import annotations

import datetime
from typing import Iterable, Tuple

import yaml
from yaml.composer import ComposerError
from yaml.constructor import ConstructorError

from yamlview.utils.logger import logger

PERMITTED_TYPES = {
    "date": datetime.date,
    "datetime": datetime.datetime,
}

class DisallowedTypeError(ConstructorError):
    pass

class AliasNotAllowedError(ComposerError):
    pass

class RestrictedLoader(yaml.SafeLoader):
    permitted_types: Tuple[type, ...] = ()
    allow_aliases = False

    def compose_node(self, parent, index):
        if not self.allow_aliases and self.check_event(yaml.AliasEvent):
            event = self.peek_event()
            raise AliasNotAllowedError(
                None, None,
                f"found alias *{event.anchor}, but aliases are not allowed",
                event.start_mark,
            )
        return super().compose_node(parent, index)

    def construct_permitted_timestamp(self, node):
        value = self.construct_yaml_timestamp(node)
        # datetime subclasses date, so compare exact types
        if type(value) not in self.permitted_types:
            raise DisallowedTypeError(
                None, None,
                f"Tried to load unspecified class: {type(value).__name__}",
                node.start_mark,
            )
        return value

    def construct_disallowed(self, node):
        raise DisallowedTypeError(
            None, None,
            f"Tried to load unspecified class: {node.tag}",
            node.start_mark,
        )

RestrictedLoader.add_constructor("tag:yaml.org,2002:timestamp", RestrictedLoader.construct_permitted_timestamp)
RestrictedLoader.add_constructor(None, RestrictedLoader.construct_disallowed)

def resolve_permitted(names: Iterable[str]) -> Tuple[type, ...]:
    types = []
    for name in names:
        key = name.strip().lower()
        if not key:
            continue
        if key not in PERMITTED_TYPES:
            raise ValueError(f"unknown permitted type {name!r} (choose from {', '.join(sorted(PERMITTED_TYPES))})")
        types.append(PERMITTED_TYPES[key])
    return tuple(types)

class YamlService:
    def __init__(self, permitted_types: Iterable[type] = (), aliases: bool = False):
        self.loader = type(
            "YamlServiceLoader",
            (RestrictedLoader,),
            {"permitted_types": tuple(permitted_types), "allow_aliases": aliases},
        )

    def load(self, stream, fallback=None):
        """Load the single document in ``stream``; an empty stream gives ``fallback``."""
        logger.info("YamlService: loading single document")
        loader = self.loader(stream)
        try:
            if not loader.check_data():
                return fallback
            data = loader.get_data()
            if loader.check_data():
                event = loader.peek_event()
                raise ComposerError(
                    "expected a single document in the stream", None,
                    "but found another document", event.start_mark,
                )
            return data
        finally:
            loader.dispose()

    def load_all(self, stream):
        logger.info("YamlService: loading document stream")
        yield from yaml.load_all(stream, Loader=self.loader)
