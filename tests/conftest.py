"""Shared pytest fixtures for memalloc tests."""

import os
import tempfile
from contextlib import contextmanager

import pytest

from elf_builder import SectionSpec, SymbolSpec, build_elf
from memalloc.core.regions import DRAM_BASE, IRAM_BASE


@contextmanager
def elf_file_context(data: bytes):
    """
    Context manager that writes an ELF image to a temporary file.

    Args:
        data: Raw bytes of the image

    Yields:
        The path to the temporary file
    """
    with tempfile.NamedTemporaryFile(suffix='.elf', delete=False) as f:
        f.write(data)
        elf_path = f.name

    try:
        yield elf_path
    finally:
        os.unlink(elf_path)


def make_firmware_image(**overrides) -> bytes:
    """
    Build an image resembling a small ESP32-C3 firmware.

    Keyword Args:
        dram_sections: SectionSpec list placed in DRAM
        iram_sections: SectionSpec list placed in IRAM
        symbols: SymbolSpec list

    Returns:
        Raw bytes of the image
    """
    defaults = {
        'dram_sections': [
            SectionSpec('.data', DRAM_BASE, 0x104, align=4),
            SectionSpec('.bss', DRAM_BASE + 0x110, 0x400, align=16),
        ],
        'iram_sections': [
            SectionSpec('.rwtext', IRAM_BASE, 0x800, align=4),
        ],
        'symbols': [
            SymbolSpec('_sdata', DRAM_BASE),
            SymbolSpec('_edata', DRAM_BASE + 0x104),
            SymbolSpec('_sbss', DRAM_BASE + 0x110),
        ],
    }
    config = {**defaults, **overrides}
    sections = list(config['dram_sections']) + list(config['iram_sections'])
    return build_elf(sections, config['symbols'])


@pytest.fixture
def firmware_elf():
    """Path to a small firmware image with DRAM and IRAM sections."""
    with elf_file_context(make_firmware_image()) as elf_path:
        yield elf_path
