"""Encoding definitions: which tables to build and from where."""

import json
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from ucm_charmap.core.constants import DEFAULT_REPLACEMENT


@dataclass(frozen=True)
class EncodingDefinition:
    """
    One encoding to generate.

    ``var_name`` may list aliases separated by commas; the first is the
    name the table is emitted under, the rest only join the listing.
    """
    name: str
    mapping: str
    var_name: str
    replacement: int = DEFAULT_REPLACEMENT
    comment: str = ""

    @property
    def var_names(self) -> list[str]:
        return [v.strip() for v in self.var_name.split(",") if v.strip()]

    @property
    def primary_var_name(self) -> str:
        return self.var_names[0]

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "EncodingDefinition":
        """Create from a JSON object; ``replacement`` may be "0x3f"."""
        replacement = data.get("replacement", DEFAULT_REPLACEMENT)
        if isinstance(replacement, str):
            replacement = int(replacement, 0)
        var_name = data.get("var_name") or data.get("varName")
        if not var_name:
            var_name = data["name"].replace("-", "_").upper()
        return cls(
            name=data["name"],
            mapping=data["mapping"],
            var_name=var_name,
            replacement=replacement,
            comment=data.get("comment", ""),
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "name": self.name,
            "mapping": self.mapping,
            "var_name": self.var_name,
            "replacement": f"0x{self.replacement:02x}",
            "comment": self.comment,
        }


DEFAULT_ENCODINGS: tuple[EncodingDefinition, ...] = (
    EncodingDefinition(
        name="EBCDIC-K",
        mapping="file:ebcdic-k.ucm",
        var_name="EBCDIC_K",
        replacement=0x3F,
    ),
)


def load_definitions(path: str | Path) -> list[EncodingDefinition]:
    """
    Load encoding definitions from a JSON file.

    Accepts either a list of objects or ``{"encodings": [...]}``.
    """
    path = Path(path)
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except (OSError, json.JSONDecodeError) as e:
        raise ValueError(f"{path}: cannot read definitions: {e}") from e

    if isinstance(data, dict):
        data = data.get("encodings")
    if not isinstance(data, list):
        raise ValueError(f"{path}: expected a list of encodings")

    definitions = []
    for i, item in enumerate(data):
        if not isinstance(item, dict):
            raise ValueError(f"{path}: encoding #{i} must be an object")
        try:
            definition = EncodingDefinition.from_dict(item)
        except (KeyError, TypeError, ValueError) as e:
            raise ValueError(f"{path}: encoding #{i} is invalid: {e}") from e
        if not 0 <= definition.replacement <= 0xFF:
            raise ValueError(f"{path}: encoding #{i} replacement out of range")
        definitions.append(definition)
    return definitions
