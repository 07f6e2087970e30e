"""Render charmaps as an importable Python module."""

from typing import TYPE_CHECKING, Sequence

if TYPE_CHECKING:
    from ucm_charmap.generate import GeneratedCharmap


class PythonRenderer:
    """Render charmaps as module-level dicts plus an ``ALL`` tuple."""

    def render(self, charmaps: "Sequence[GeneratedCharmap]") -> str:
        lines = [
            '"""Charmap tables generated by ucm-charmap. Do not edit."""',
            "",
        ]
        names: list[str] = []
        for generated in charmaps:
            var_name = generated.definition.primary_var_name.upper()
            names.extend(v.upper() for v in generated.definition.var_names)
            lines.extend(self.render_charmap(var_name, generated))
            for alias in generated.definition.var_names[1:]:
                lines.append(f"{alias.upper()} = {var_name}")
            lines.append("")

        lines.append("ALL = (")
        lines.extend(f"    {name}," for name in names)
        lines.append(")")
        lines.append("")
        return "\n".join(lines)

    def render_charmap(self, var_name: str, generated: "GeneratedCharmap") -> list[str]:
        charmap = generated.charmap
        lines = []
        if generated.definition.comment:
            lines.append(f"# {generated.definition.comment}")
        lines.extend([
            f"{var_name} = {{",
            f"    'name': {charmap.name!r},",
            f"    'ascii_superset': {charmap.ascii_superset!r},",
            f"    'low': 0x{charmap.low:02x},",
            f"    'replacement': 0x{charmap.replacement:02x},",
            "    'decode': (",
        ])
        for i in range(0, len(charmap.decode), 4):
            row = " ".join(
                f"({e.length}, {e.data!r}),"
                for e in charmap.decode[i:i + 4]
            )
            lines.append(f"        {row}")
        lines.append("    ),")
        lines.append("    'encode': (")
        for i in range(0, len(charmap.encode), 8):
            row = " ".join(f"0x{k:08x}," for k in charmap.encode[i:i + 8])
            lines.append(f"        {row}")
        lines.append("    ),")
        lines.append("}")
        return lines
