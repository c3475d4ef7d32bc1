"""Output channel handling for :mod:`pdf_combiner`."""

from __future__ import annotations

import logging
from typing import Union

from .exceptions import OutputError
from .types import OutputMode

LOGGER = logging.getLogger("pdf_combiner.output")


def write_output(engine: object, path: str, mode: Union[OutputMode, str]) -> Union[bool, bytes]:
    """Send the engine's output document to the channel named by *mode*.

    Returns the raw PDF bytes for ``"string"`` mode, otherwise ``True`` once
    the engine reports success.

    Raises:
        OutputError: If the engine fails or reports anything but success.
    """

    channel = OutputMode.from_name(mode)
    LOGGER.debug("Writing output %s via channel %s (mode=%r)", path, channel.value, mode)

    try:
        result = engine.output(path, channel.value)
    except OutputError:
        raise
    except Exception as exc:
        LOGGER.error("Failed to output PDF to %s: %s", path, exc)
        raise OutputError(path, mode) from exc

    if channel is OutputMode.STRING:
        if isinstance(result, (bytes, bytearray)):
            return bytes(result)
        raise OutputError(path, mode, f"Engine returned no PDF data for '{path}'.")

    if result == "":
        return True

    raise OutputError(path, mode)


__all__ = ["OutputMode", "write_output"]
