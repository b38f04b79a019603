"""Explicit registry of the available point readers and writers."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional, TextIO, Type

from routeclean.core.stream import CsvPointReader, PointReader, StdinCsvPointReader
from routeclean.errors import UnsupportedFormatError, UnsupportedInputError
from routeclean.output.writers import CsvPointWriter, GeoJsonPointWriter, PointWriter


@dataclass
class FormatRegistry:
    """Ordered lists of reader and writer classes; the first capable one wins."""

    readers: List[Type[PointReader]] = field(default_factory=list)
    writers: List[Type[PointWriter]] = field(default_factory=list)

    def reader_for(self, source: str, **kwargs) -> PointReader:
        for reader_cls in self.readers:
            if reader_cls.can_read(source):
                return reader_cls(source, **kwargs)
        raise UnsupportedInputError(source)

    def writer_class_for(self, fmt: str) -> Type[PointWriter]:
        for writer_cls in self.writers:
            if writer_cls.can_write(fmt):
                return writer_cls
        raise UnsupportedFormatError(fmt)

    def writer_for(self, fmt: str, out: Optional[TextIO] = None) -> PointWriter:
        return self.writer_class_for(fmt)(out)

    @property
    def output_formats(self) -> List[str]:
        return [writer_cls.format_name for writer_cls in self.writers]


def default_registry() -> FormatRegistry:
    return FormatRegistry(
        readers=[CsvPointReader, StdinCsvPointReader],
        writers=[CsvPointWriter, GeoJsonPointWriter],
    )
