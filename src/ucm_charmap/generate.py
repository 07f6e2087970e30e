"""Build every configured encoding in one pass."""

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable

from ucm_charmap.config.definitions import EncodingDefinition
from ucm_charmap.core.charmap import Charmap
from ucm_charmap.io.reader import load_mapping
from ucm_charmap.table.builder import build_charmap

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class GeneratedCharmap:
    """A built charmap together with the definition it came from."""
    definition: EncodingDefinition
    charmap: Charmap


def generate_one(
    definition: EncodingDefinition,
    base_dir: str | Path | None = None,
) -> GeneratedCharmap:
    """Fetch, parse and build a single encoding."""
    mapping = load_mapping(definition.mapping, base_dir=base_dir)
    charmap = build_charmap(mapping, definition.name, definition.replacement)
    return GeneratedCharmap(definition=definition, charmap=charmap)


def generate(
    definitions: Iterable[EncodingDefinition],
    base_dir: str | Path | None = None,
) -> list[GeneratedCharmap]:
    """
    Build all encodings in order.

    The first failure propagates; callers only ever see complete results.
    """
    results = []
    for definition in definitions:
        logger.info("Building %s from %s", definition.name, definition.mapping)
        results.append(generate_one(definition, base_dir=base_dir))
    return results
