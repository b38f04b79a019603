import io

import pytest

from routeclean.core.stream import CsvPointReader, StdinCsvPointReader
from routeclean.errors import UnsupportedFormatError, UnsupportedInputError
from routeclean.output.writers import CsvPointWriter, GeoJsonPointWriter
from routeclean.registry import FormatRegistry, default_registry


def test_reader_selection(reference_csv):
    registry = default_registry()
    reader = registry.reader_for(str(reference_csv))
    assert isinstance(reader, CsvPointReader)
    assert len(list(reader)) == 7

    assert isinstance(registry.reader_for("-"), StdinCsvPointReader)


def test_reader_options_are_passed_through(reference_csv):
    reader = default_registry().reader_for(str(reference_csv), has_header=True)
    assert reader.has_header


def test_unsupported_input():
    with pytest.raises(UnsupportedInputError, match="Unable to handle input source: route.gpx") as exc:
        default_registry().reader_for("route.gpx")
    assert exc.value.source == "route.gpx"


def test_writer_selection():
    registry = default_registry()
    out = io.StringIO()
    writer = registry.writer_for("csv", out)
    assert isinstance(writer, CsvPointWriter)
    assert writer.out is out
    assert registry.writer_class_for("geojson") is GeoJsonPointWriter
    assert registry.output_formats == ["csv", "geojson"]


def test_unsupported_format():
    with pytest.raises(UnsupportedFormatError, match="Unsupported output format: xml"):
        default_registry().writer_for("xml")


def test_registries_are_independent():
    empty = FormatRegistry()
    with pytest.raises(UnsupportedFormatError):
        empty.writer_for("csv")
    assert default_registry().writer_class_for("csv") is CsvPointWriter
