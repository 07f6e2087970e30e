"""Render charmaps to JSON.

Example output:
{
  "charmaps": [
    {
      "name": "EBCDIC-K",
      "varNames": ["EBCDIC_K"],
      "asciiSuperset": false,
      "low": 0,
      "replacement": 63,
      "decode": [[1, "000000"], ...],
      "encode": ["0x00000000", ...]
    }
  ]
}
"""

import json
from typing import TYPE_CHECKING, Any, Sequence

if TYPE_CHECKING:
    from ucm_charmap.generate import GeneratedCharmap


class JsonRenderer:
    """Render charmaps as a JSON document."""

    def __init__(self, indent: int | None = 2):
        self.indent = indent

    def render(self, charmaps: "Sequence[GeneratedCharmap]") -> str:
        return json.dumps(self.to_dict(charmaps), indent=self.indent) + "\n"

    def to_dict(self, charmaps: "Sequence[GeneratedCharmap]") -> dict[str, Any]:
        return {"charmaps": [self.charmap_dict(g) for g in charmaps]}

    @staticmethod
    def charmap_dict(generated: "GeneratedCharmap") -> dict[str, Any]:
        charmap = generated.charmap
        return {
            "name": charmap.name,
            "varNames": generated.definition.var_names,
            "comment": generated.definition.comment,
            "asciiSuperset": charmap.ascii_superset,
            "low": charmap.low,
            "replacement": charmap.replacement,
            "decode": [[e.length, e.data.hex()] for e in charmap.decode],
            "encode": [f"0x{k:08x}" for k in charmap.encode],
        }
