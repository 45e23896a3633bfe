"""Pydantic models for VTK unstructured-grid files and converter settings."""

from __future__ import annotations

import enum

from pydantic import BaseModel, ConfigDict, Field

from ..codec.framing import Endianness

UNSTRUCTURED_GRID = "UnstructuredGrid"


class DataFormat(str, enum.Enum):
    """Text encoding of ``DataArray`` contents written on export."""

    ASCII = "ascii"
    BINARY = "binary"


class VtkFile(BaseModel):
    """In-memory VTK unstructured grid.

    Only the geometry and topology arrays are held; ``PointData`` and
    ``CellData`` sections are not carried.

    Attributes:
        vtype: ``VTKFile`` type attribute (only ``UnstructuredGrid`` is loaded)
        version: ``VTKFile`` version attribute, passed through unchanged
        endianness: Byte order of binary sections
        format: Encoding used for ``DataArray`` contents on export
        npoints: ``NumberOfPoints`` of the piece
        ncells: ``NumberOfCells`` of the piece
        ncomponents: Components per point (3 for xyz)
        points: Flattened point coordinates (Float32)
        connectivity: Point indices of every cell, back to back (Int64)
        offsets: End offset of each cell into ``connectivity`` (Int64)
        types: VTK cell type code of each cell (UInt8)
    """

    model_config = ConfigDict(
        validate_assignment=True,
        extra="forbid",
    )

    vtype: str = UNSTRUCTURED_GRID
    version: str = "1.0"
    endianness: Endianness = Endianness.LITTLE
    format: DataFormat = DataFormat.BINARY

    npoints: int = Field(default=0, ge=0)
    ncells: int = Field(default=0, ge=0)
    ncomponents: int = Field(default=3, ge=1)

    points: list[float] = Field(default_factory=list)
    connectivity: list[int] = Field(default_factory=list)
    offsets: list[int] = Field(default_factory=list)
    types: list[int] = Field(default_factory=list)


class DataArrayHeader(BaseModel):
    """Attributes of one ``DataArray`` element.

    ``format`` stays a plain string so that values this package cannot read
    (``appended``, typos) reach the dispatcher and are reported there.
    """

    dtype: str = ""
    name: str = ""
    format: str = DataFormat.BINARY.value


class Settings(BaseModel):
    """Converter settings, abstracted from the command line arguments.

    Attributes:
        input: VTK file to load
        output: VTK file to export
        le: Force little-endian output
        be: Force big-endian output
        ascii: Force ASCII output
        binary: Force binary (base64) output
    """

    model_config = ConfigDict(extra="forbid")

    input: str
    output: str
    le: bool = False
    be: bool = False
    ascii: bool = False
    binary: bool = False
