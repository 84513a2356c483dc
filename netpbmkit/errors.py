from __future__ import annotations


class NetpbmError(Exception):
    """Base class for errors raised by netpbmkit."""


class FormatError(NetpbmError, ValueError):
    """Header or payload does not follow the Netpbm grammar."""


class TruncatedDataError(NetpbmError):
    """Payload ended before the declared number of samples was read."""


class ImageIOError(NetpbmError, OSError):
    """Reading or writing an image file failed."""
