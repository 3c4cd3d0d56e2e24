#!/usr/bin/env python3
"""
ELF backed object source.

Reads the whole image into memory once and uses pyelftools to walk its
section headers and symbol tables. Names are decoded from the raw string
table bytes with strict UTF-8 so that undecodable names surface as ``None``
instead of being silently replaced.
"""

import io
import logging
from pathlib import Path
from typing import List, Optional

from elftools.common.exceptions import ELFError
from elftools.common.utils import parse_cstring_from_stream
from elftools.elf.elffile import ELFFile
from elftools.elf.sections import SymbolTableSection

from ..core.models import Section, Symbol
from ..exceptions import ELFLoadError
from .source import ObjectSource

logger = logging.getLogger(__name__)

SHN_UNDEF = 0
SHN_XINDEX = 0xFFFF


class ELFObjectSource(ObjectSource):
    """ObjectSource over an in-memory ELF image"""

    def __init__(self, data: bytes, name: str = '<memory>'):
        """Parse an ELF image.

        Args:
            data: Raw bytes of the ELF file
            name: Label used in error messages

        Raises:
            ELFLoadError: If the data is not a valid ELF image
        """
        self.name = name
        try:
            self._elffile = ELFFile(io.BytesIO(data))
        except ELFError as e:
            raise ELFLoadError(f"Invalid ELF file format {name}: {e}") from e

    @classmethod
    def from_path(cls, elf_path: str) -> 'ELFObjectSource':
        """Read an ELF file from disk and parse it.

        Raises:
            ELFLoadError: If the file cannot be read or is not a valid ELF file
        """
        path = Path(elf_path)
        try:
            data = path.read_bytes()
        except OSError as e:
            raise ELFLoadError(f"Failed to read ELF file {path}: {e}") from e
        logger.debug("Read %d bytes from %s", len(data), path)
        return cls(data, name=str(path))

    def symbols(self) -> List[Symbol]:
        """Return the symbols of every SHT_SYMTAB section."""
        symbols = []
        try:
            for section in self._elffile.iter_sections():
                if not isinstance(section, SymbolTableSection):
                    continue
                if section['sh_type'] != 'SHT_SYMTAB':
                    continue
                for symbol in section.iter_symbols():
                    symbols.append(Symbol(
                        address=symbol['st_value'],
                        name=self._read_name(section.stringtable, symbol['st_name']),
                        descriptor=symbol,
                    ))
        except ELFError as e:
            raise ELFLoadError(
                f"Invalid ELF file format {self.name} during symbol extraction: {e}") from e
        return symbols

    def sections(self) -> List[Section]:
        """Return every section header of the image."""
        sections = []
        try:
            names = self._section_name_table()
            for section in self._elffile.iter_sections():
                name = self._read_name(names, section['sh_name']) if names is not None else None
                sections.append(Section(
                    address=section['sh_addr'],
                    size=section['sh_size'],
                    # 0 and 1 both mean no alignment constraint
                    align=section['sh_addralign'] or 1,
                    name=name,
                ))
        except ELFError as e:
            raise ELFLoadError(
                f"Invalid ELF file format {self.name} during section analysis: {e}") from e
        return sections

    def _section_name_table(self):
        """Section holding the section header names, or None if absent."""
        index = self._elffile['e_shstrndx']
        if index == SHN_XINDEX:
            index = self._elffile.get_section(0)['sh_link']
        if index == SHN_UNDEF:
            return None
        return self._elffile.get_section(index)

    def _read_name(self, strtab, offset: int) -> Optional[str]:
        """Decode a NUL terminated name from a string table.

        Returns:
            The name, or None if it is not valid UTF-8
        """
        raw = parse_cstring_from_stream(self._elffile.stream, strtab['sh_offset'] + offset)
        if raw is None:
            logger.debug("Name at offset 0x%x is not NUL terminated", offset)
            return None
        try:
            return raw.decode('utf-8')
        except UnicodeDecodeError:
            logger.debug("Name at offset 0x%x is not valid UTF-8: %r", offset, raw)
            return None
