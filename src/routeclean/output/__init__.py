from .writers import PointWriter, CsvPointWriter, GeoJsonPointWriter
