"""Shared fixtures: synthetic UCM sources and optional external files."""

import os
from pathlib import Path
from typing import Optional

import pytest

from ucm_charmap.core.constants import SENTINEL


def make_ucm(
    mapping: dict[int, str],
    name: str = "test-page",
    extra_lines: tuple[str, ...] = (),
) -> str:
    """Render a ``{byte: char}`` dict as UCM text with a realistic header."""
    lines = [
        "# Synthetic mapping table for tests",
        f'<code_set_name>               "{name}"',
        "<mb_cur_max>                  1",
        "<mb_cur_min>                  1",
        "<uconv_class>                 \"SBCS\"",
        "",
        "CHARMAP",
    ]
    for byte, char in sorted(mapping.items()):
        lines.append(f"<U{ord(char):04X}>  \\x{byte:02X} |0")
    lines.extend(extra_lines)
    lines.append("END CHARMAP")
    return "\n".join(lines) + "\n"


def ascii_with_euro() -> dict[int, str]:
    """ASCII below 0x80, euro at 0x80, everything else explicitly unmapped."""
    mapping = {b: chr(b) for b in range(0x80)}
    mapping[0x80] = "€"
    for b in range(0x81, 0x100):
        mapping[b] = SENTINEL
    return mapping


def latin1() -> dict[int, str]:
    return {b: chr(b) for b in range(0x100)}


def cp037() -> dict[int, str]:
    """IBM EBCDIC (US/Canada), which is not an ASCII superset."""
    return {b: bytes([b]).decode("cp037") for b in range(0x100)}


@pytest.fixture
def euro_ucm() -> str:
    return make_ucm(ascii_with_euro(), name="ascii-euro")


@pytest.fixture
def latin1_ucm() -> str:
    return make_ucm(latin1(), name="iso-8859-1")


@pytest.fixture
def cp037_ucm() -> str:
    return make_ucm(cp037(), name="ibm-37")


@pytest.fixture
def euro_ucm_file(tmp_path: Path, euro_ucm: str) -> Path:
    """The ASCII + euro mapping written to a temporary .ucm file."""
    path = tmp_path / "ascii-euro.ucm"
    path.write_text(euro_ucm, encoding="ascii")
    return path


def get_test_ucm_dir() -> Optional[Path]:
    """
    External directory of real .ucm files, if any.

    Set UCM_CHARMAP_TEST_DIR to run the external tests.
    """
    if env_path := os.environ.get("UCM_CHARMAP_TEST_DIR"):
        path = Path(env_path).expanduser()
        if path.exists():
            return path
    return None


def pytest_generate_tests(metafunc: pytest.Metafunc) -> None:
    """Parametrize ``ucm_file`` over the external directory."""
    if "ucm_file" in metafunc.fixturenames:
        ucm_dir = get_test_ucm_dir()
        files = sorted(ucm_dir.glob("*.ucm"))[:50] if ucm_dir else []
        if files:
            metafunc.parametrize("ucm_file", files, ids=lambda p: p.name)
        else:
            metafunc.parametrize(
                "ucm_file",
                [pytest.param(None, marks=pytest.mark.skip(reason="UCM_CHARMAP_TEST_DIR not set"))],
            )
