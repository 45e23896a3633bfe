"""Apply output settings to a loaded VTK file."""

from __future__ import annotations

from typing import Any

from ..codec.framing import Endianness
from .models import DataFormat, Settings, VtkFile


def convert(vtk_file: VtkFile, settings: Settings) -> VtkFile:
    """Return a copy of ``vtk_file`` with the requested byte order and format.

    Settings that are not set keep the value loaded from the input file.

    Args:
        vtk_file: Loaded grid
        settings: Converter settings

    Returns:
        Converted copy; ``vtk_file`` itself is not modified

    Example:
        >>> settings = Settings(input="in.vtu", output="out.vtu", be=True)
        >>> convert(VtkFile(), settings).endianness
        <Endianness.BIG: 'BigEndian'>
    """
    update: dict[str, Any] = {}

    if settings.le:
        update["endianness"] = Endianness.LITTLE
    elif settings.be:
        update["endianness"] = Endianness.BIG

    if settings.ascii:
        update["format"] = DataFormat.ASCII
    elif settings.binary:
        update["format"] = DataFormat.BINARY

    return vtk_file.model_copy(update=update, deep=True)
