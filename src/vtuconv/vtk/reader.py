"""VTK XML unstructured-grid reader.

This module loads ``.vtu`` files whose ``DataArray`` sections are base64
binary with an 8-byte (``UInt64``) length header.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Union
from xml.etree import ElementTree

from ..codec.framing import Endianness
from ..exceptions import UnsupportedFormatError, VtkFileError
from .data_array import EXPECTED_TYPES, check_type, parse_data_array
from .models import UNSTRUCTURED_GRID, DataArrayHeader, VtkFile

logger = logging.getLogger(__name__)

VTK_FILE = "VTKFile"
PIECE = "Piece"
DATA_ARRAY = "DataArray"

# Containers whose own attributes and text carry nothing we read
STRUCTURAL_TAGS = frozenset({UNSTRUCTURED_GRID, "Points", "Cells", "PointData", "CellData"})

SUPPORTED_HEADER_TYPE = "UInt64"

PathLike = Union[str, Path]


def load(path: PathLike) -> VtkFile:
    """Load a VTK unstructured grid from an XML file.

    Args:
        path: ``.vtu`` file to read

    Returns:
        Loaded VtkFile

    Raises:
        VtkFileError: If the file cannot be read or parsed, is not an
            unstructured grid, or its arrays are shorter than declared
        TypeMismatchError: If a known DataArray has the wrong type
        UnsupportedFormatError: If a DataArray is not base64 binary, or the
            file uses a header type or compressor this package cannot read
        CodecError: If binary text is malformed
    """
    logger.info('Loading VTK file "%s"', path)

    try:
        root = ElementTree.parse(path).getroot()
    except (OSError, ElementTree.ParseError) as e:
        raise VtkFileError(f'Cannot load VTK file "{path}": {e}') from e

    if root.tag != VTK_FILE:
        raise VtkFileError(f'Cannot load VTK file "{path}": root tag is {root.tag!r}, not {VTK_FILE}')

    vtk_file = VtkFile()
    _read_file_header(root, vtk_file)

    for element in root.iter():
        if element is root:
            continue

        if element.tag == PIECE:
            vtk_file.npoints = _parse_count(element, "NumberOfPoints", vtk_file.npoints)
            vtk_file.ncells = _parse_count(element, "NumberOfCells", vtk_file.ncells)
        elif element.tag == DATA_ARRAY:
            _read_data_array(element, vtk_file)
            continue
        elif element.tag not in STRUCTURAL_TAGS:
            logger.warning('unknown tag "%s"', element.tag)

        if element.text and element.text.strip():
            logger.warning('not parsing text in tag "%s"', element.tag)

    validate(vtk_file)
    return vtk_file


def _read_file_header(root: ElementTree.Element, vtk_file: VtkFile) -> None:
    vtype = root.get("type")
    if vtype is not None:
        if vtype != UNSTRUCTURED_GRID:
            raise VtkFileError(
                f"{VTK_FILE} type {vtype} is not implemented. Only {UNSTRUCTURED_GRID} is implemented"
            )
        vtk_file.vtype = vtype

    version = root.get("version")
    if version is not None:
        vtk_file.version = version

    byte_order = root.get("byte_order")
    if byte_order is not None:
        vtk_file.endianness = Endianness.from_byte_order(byte_order)

    header_type = root.get("header_type")
    if header_type is not None and header_type != SUPPORTED_HEADER_TYPE:
        raise UnsupportedFormatError(
            f"header_type {header_type} is not implemented. Only {SUPPORTED_HEADER_TYPE} is implemented"
        )

    if root.get("compressor"):
        raise UnsupportedFormatError(f"compressed data ({root.get('compressor')}) is not implemented")


def _parse_count(element: ElementTree.Element, attribute: str, default: int) -> int:
    value = element.get(attribute)
    if value is None:
        return default

    try:
        count = int(value)
    except ValueError as e:
        raise VtkFileError(f"{element.tag} {attribute} is not an integer: {value!r}") from e

    if count < 0:
        raise VtkFileError(f"{element.tag} {attribute} must be non-negative, got {count}")
    return count


def _read_data_array(element: ElementTree.Element, vtk_file: VtkFile) -> None:
    header = DataArrayHeader(
        dtype=element.get("type", ""),
        name=element.get("Name", ""),
        format=element.get("format", "binary"),
    )

    if element.get("NumberOfComponents") is not None:
        count = _parse_count(element, "NumberOfComponents", vtk_file.ncomponents)
        if count < 1:
            raise VtkFileError(f"{DATA_ARRAY} {header.name}: NumberOfComponents must be at least 1")
        vtk_file.ncomponents = count

    text = (element.text or "").strip()
    if not text:
        return

    # Just use the Name attribute and ignore the enclosing tag
    expected = EXPECTED_TYPES.get(header.name)
    if expected is None:
        logger.warning('unknown %s name "%s"', DATA_ARRAY, header.name)
        return

    check_type(header, expected)
    values = parse_data_array(header, text, vtk_file.endianness)

    if header.name == "Points":
        vtk_file.points = values
    elif header.name == "connectivity":
        vtk_file.connectivity = values
    elif header.name == "offsets":
        vtk_file.offsets = values
    else:
        vtk_file.types = values


def validate(vtk_file: VtkFile) -> None:
    """Check that the loaded arrays cover the declared points and cells.

    Connectivity length is not checked; that would require walking every
    cell type.

    Raises:
        VtkFileError: If an array is shorter than the piece declares
    """
    expected_points = vtk_file.ncomponents * vtk_file.npoints
    if len(vtk_file.points) < expected_points:
        raise VtkFileError(f"Points are only of len {len(vtk_file.points)} < {expected_points}")

    if len(vtk_file.offsets) < vtk_file.ncells:
        raise VtkFileError(f"Offsets are only of len {len(vtk_file.offsets)} < {vtk_file.ncells}")

    if len(vtk_file.types) < vtk_file.ncells:
        raise VtkFileError(f"Types are only of len {len(vtk_file.types)} < {vtk_file.ncells}")
