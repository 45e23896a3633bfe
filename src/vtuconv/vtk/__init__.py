"""VTK XML unstructured-grid support for vtuconv.

This module loads and exports ``.vtu`` files, using the codec for binary
``DataArray`` sections.
"""

from __future__ import annotations

from .convert import convert
from .data_array import check_type, format_data_array, parse_data_array
from .models import DataArrayHeader, DataFormat, Settings, VtkFile
from .reader import load, validate
from .writer import export, to_xml

__all__ = [
    # Models
    "VtkFile",
    "DataArrayHeader",
    "DataFormat",
    "Settings",
    # I/O
    "load",
    "export",
    "to_xml",
    "validate",
    "convert",
    # DataArray dispatch
    "check_type",
    "parse_data_array",
    "format_data_array",
]
