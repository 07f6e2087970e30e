"""Render charmaps as Go source for golang.org/x/text/encoding/charmap."""

from typing import TYPE_CHECKING, Sequence

if TYPE_CHECKING:
    from ucm_charmap.generate import GeneratedCharmap


def lower_var_name(var_name: str) -> str:
    """Lower-case the leading upper-case run: ``EBCDIC_K`` -> ``ebcdic_K``."""
    n = 0
    while n < len(var_name) and "A" <= var_name[n] <= "Z":
        n += 1
    return var_name[:n].lower() + var_name[n:]


class GoRenderer:
    """
    Render charmaps as a Go file declaring ``Charmap`` values.

    Each encoding gets an exported pointer variable, an unexported struct
    value holding the tables, and a place in ``listAll``.
    """

    def __init__(self, package: str = "charmap"):
        self.package = package

    def render(self, charmaps: "Sequence[GeneratedCharmap]") -> str:
        """Render the complete Go file."""
        out: list[str] = [
            "// Code generated by ucm-charmap. DO NOT EDIT.\n\n",
            f"package {self.package}\n\n",
            "import (\n",
            '\t"golang.org/x/text/encoding"\n',
            ")\n\n",
        ]

        all_names: list[str] = []
        size = 0
        for generated in charmaps:
            all_names.extend(generated.definition.var_names)
            out.append(self.render_charmap(generated))
            size += generated.charmap.table_size

        out.append("var listAll = []encoding.Encoding{\n")
        for name in all_names:
            out.append(f"\t{name},\n")
        out.append("}\n\n")
        out.append(f"// Total table size {size} bytes ({size // 1024}KiB)\n")
        return "".join(out)

    def render_charmap(self, generated: "GeneratedCharmap") -> str:
        """Render the declarations for one encoding."""
        definition, charmap = generated.definition, generated.charmap
        var_name = definition.primary_var_name
        lower_name = lower_var_name(var_name)

        out: list[str] = [f"// {var_name} is the {definition.name} encoding.\n"]
        if definition.comment:
            out.append(f"//\n// {definition.comment}\n")
        out.append(f"var {var_name} *Charmap = &{lower_name}\n\n")
        out.append(f"var {lower_name} = Charmap{{\n")
        out.append(f"\tname:          {go_quote(charmap.name)},\n")
        out.append(f"\tasciiSuperset: {'true' if charmap.ascii_superset else 'false'},\n")
        out.append(f"\tlow:           0x{charmap.low:02x},\n")
        out.append(f"\treplacement:   0x{charmap.replacement:02x},\n")

        out.append("\tdecode: [256]utf8Enc{\n")
        for i, entry in enumerate(charmap.decode):
            if i % 2 == 0:
                out.append("\t\t")
            b0, b1, b2 = entry.data
            out.append(f"{{{entry.length}, [3]byte{{0x{b0:02x}, 0x{b1:02x}, 0x{b2:02x}}}}},")
            out.append("\n" if i % 2 == 1 else " ")
        out.append("\t},\n")

        out.append("\tencode: [256]uint32{\n")
        for i, key in enumerate(charmap.encode):
            if i % 8 == 0:
                out.append("\t\t")
            out.append(f"0x{key:08x},")
            out.append("\n" if i % 8 == 7 else " ")
        out.append("\t},\n}\n\n")
        return "".join(out)


def go_quote(s: str) -> str:
    """Quote a string as a Go interpreted string literal."""
    out = ['"']
    for char in s:
        if char in ('"', "\\"):
            out.append("\\" + char)
        elif char == "\n":
            out.append("\\n")
        elif char == "\t":
            out.append("\\t")
        elif ord(char) < 0x20 or ord(char) == 0x7F:
            out.append(f"\\x{ord(char):02x}")
        else:
            out.append(char)
    out.append('"')
    return "".join(out)
