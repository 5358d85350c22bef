"""
Encoded polyline codec
Decodes the provider's compact signed-delta path encoding into coordinates
"""

import math
from typing import Iterable, List, Tuple

from .models import Coordinate

PRECISION = 1e5

_CHUNK_OFFSET = 63
_CHUNK_BITS = 5
_CONTINUATION = 0x20
_DATA_MASK = 0x1F


class FormatError(ValueError):
    """Malformed encoded geometry"""
    pass


class PolylineCodec:
    """Encoder and decoder for encoded polyline strings"""

    @staticmethod
    def _read_value(encoded: str, index: int) -> Tuple[int, int]:
        """Read one variable-length signed value starting at index"""
        result = 0
        shift = 0

        while True:
            if index >= len(encoded):
                raise FormatError(f"Truncated value at offset {index} in encoded polyline")

            chunk = ord(encoded[index]) - _CHUNK_OFFSET
            if chunk < 0 or chunk > 63:
                raise FormatError(
                    f"Invalid character {encoded[index]!r} at offset {index} in encoded polyline"
                )
            index += 1

            result |= (chunk & _DATA_MASK) << shift
            shift += _CHUNK_BITS
            if chunk < _CONTINUATION:
                break

        delta = ~(result >> 1) if result & 1 else result >> 1
        return delta, index

    @staticmethod
    def decode(encoded: str) -> List[Coordinate]:
        """
        Decode an encoded polyline

        Args:
            encoded: Encoded polyline string

        Returns:
            Coordinates in path order

        Raises:
            FormatError: If the string is truncated, unpaired or out of range
        """
        if not isinstance(encoded, str):
            raise FormatError(f"Encoded polyline must be a string, got {type(encoded).__name__}")

        coordinates: List[Coordinate] = []
        index = 0
        lat = 0
        lng = 0

        while index < len(encoded):
            delta_lat, index = PolylineCodec._read_value(encoded, index)
            if index >= len(encoded):
                raise FormatError("Encoded polyline ends with an unpaired latitude")
            delta_lng, index = PolylineCodec._read_value(encoded, index)

            lat += delta_lat
            lng += delta_lng

            lat_deg = lat / PRECISION
            lng_deg = lng / PRECISION
            if not (-90.0 <= lat_deg <= 90.0) or not (-180.0 <= lng_deg <= 180.0):
                raise FormatError(
                    f"Decoded coordinate out of range: lat={lat_deg}, lng={lng_deg}"
                )

            coordinates.append(Coordinate(lng=lng_deg, lat=lat_deg))

        return coordinates

    @staticmethod
    def _write_value(delta: int) -> str:
        value = ~(delta << 1) if delta < 0 else delta << 1
        chunks = []

        while value >= _CONTINUATION:
            chunks.append(chr((_CONTINUATION | (value & _DATA_MASK)) + _CHUNK_OFFSET))
            value >>= _CHUNK_BITS
        chunks.append(chr(value + _CHUNK_OFFSET))

        return "".join(chunks)

    @staticmethod
    def _to_fixed(degrees: float) -> int:
        # Round half away from zero
        scaled = math.floor(abs(degrees) * PRECISION + 0.5)
        return int(-scaled if degrees < 0 else scaled)

    @staticmethod
    def encode(coordinates: Iterable[Coordinate]) -> str:
        """Encode coordinates into an encoded polyline string"""
        parts = []
        prev_lat = 0
        prev_lng = 0

        for point in coordinates:
            lat = PolylineCodec._to_fixed(point.lat)
            lng = PolylineCodec._to_fixed(point.lng)

            parts.append(PolylineCodec._write_value(lat - prev_lat))
            parts.append(PolylineCodec._write_value(lng - prev_lng))

            prev_lat = lat
            prev_lng = lng

        return "".join(parts)


decode = PolylineCodec.decode
encode = PolylineCodec.encode
