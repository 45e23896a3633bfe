"""VTK XML unstructured-grid writer."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Union
from xml.sax.saxutils import quoteattr

from ..codec.framing import DataType
from ..exceptions import VtkFileError
from .data_array import format_data_array
from .models import VtkFile

logger = logging.getLogger(__name__)

PathLike = Union[str, Path]


def to_xml(vtk_file: VtkFile) -> str:
    """Render a VtkFile as VTK XML text.

    Point and cell data sections are written empty, and no RangeMin/RangeMax
    attributes are emitted.

    Args:
        vtk_file: Grid to render

    Returns:
        XML document text, tab indented, ending with a newline

    Raises:
        EncodeError: If an array value does not fit its VTK type
    """
    grid = vtk_file.vtype

    def data_array(name: str, values: list, data_type: DataType, extra: str = "") -> list[str]:
        text = format_data_array(values, data_type, vtk_file.format, vtk_file.endianness)
        return [
            f'\t\t\t\t<DataArray type="{data_type.value}" Name="{name}"{extra} '
            f'format="{vtk_file.format.value}">',
            f"\t\t\t\t\t{text}",
            "\t\t\t\t</DataArray>",
        ]

    lines = [
        f"<VTKFile type={quoteattr(grid)} version={quoteattr(vtk_file.version)} "
        f'byte_order="{vtk_file.endianness.value}" header_type="UInt64">',
        f"\t<{grid}>",
        f'\t\t<Piece NumberOfPoints="{vtk_file.npoints}" NumberOfCells="{vtk_file.ncells}">',
        "\t\t\t<PointData>",
        "\t\t\t</PointData>",
        "\t\t\t<CellData>",
        "\t\t\t</CellData>",
        "\t\t\t<Points>",
        *data_array(
            "Points",
            vtk_file.points,
            DataType.FLOAT32,
            extra=f' NumberOfComponents="{vtk_file.ncomponents}"',
        ),
        "\t\t\t</Points>",
        "\t\t\t<Cells>",
        *data_array("connectivity", vtk_file.connectivity, DataType.INT64),
        *data_array("offsets", vtk_file.offsets, DataType.INT64),
        *data_array("types", vtk_file.types, DataType.UINT8),
        "\t\t\t</Cells>",
        "\t\t</Piece>",
        f"\t</{grid}>",
        "</VTKFile>",
    ]

    return "\n".join(lines) + "\n"


def export(vtk_file: VtkFile, path: PathLike) -> None:
    """Write a VtkFile to disk as VTK XML.

    Args:
        vtk_file: Grid to write
        path: Destination ``.vtu`` file

    Raises:
        VtkFileError: If the file cannot be written
        EncodeError: If an array value does not fit its VTK type
    """
    logger.info('Exporting VTK file "%s"', path)

    document = to_xml(vtk_file)

    try:
        Path(path).write_text(document, encoding="utf-8")
    except OSError as e:
        raise VtkFileError(f'Cannot export VTK file "{path}": {e}') from e
