"""Sensors, including GNSS receivers that speak the UBX protocol."""

from __future__ import annotations

import struct
from abc import ABC, abstractmethod
from typing import Any, Optional, Protocol

import serial

from ashmow.context import Context, Updatable

UBX_SYNC = b"\xb5\x62"
UBX_NAV_STATUS = 0x0103
UBX_NAV_PVAT = 0x0117

BAUD_RATE = 115200
READ_SIZE = 1024
READ_TIMEOUT = 1.0

_HEADER_LENGTH = 6  # sync (2), message type (2), payload length (2)
_PVAT_LNG_OFFSET = 28
_PVAT_LAT_OFFSET = 32
_PVAT_MIN_PAYLOAD = _PVAT_LAT_OFFSET + 4
_STATUS_FIX_OFFSET = 4
_STATUS_MIN_PAYLOAD = _STATUS_FIX_OFFSET + 1


class UbxError(ValueError):
    """Raised when a UBX message is too short to parse."""


class _Port(Protocol):
    def read(self, size: int) -> bytes: ...


class Sensor(ABC):
    """A named sensor."""

    @property
    @abstractmethod
    def name(self) -> str:
        """The sensor's name."""


class GnssSensor(Sensor):
    """A sensor that reports a geographic position."""

    @property
    @abstractmethod
    def lng(self) -> float:
        """Longitude."""

    @property
    @abstractmethod
    def lat(self) -> float:
        """Latitude."""


class DummyGnss(GnssSensor):
    """A GNSS sensor that always reports the same fixed position."""

    SENSOR_NAME = "dummy_gnss"

    @property
    def name(self) -> str:
        return self.SENSOR_NAME

    @property
    def lng(self) -> float:
        return 60.0

    @property
    def lat(self) -> float:
        return 15.0


class UbloxZedF9r(GnssSensor, Updatable):
    """A u-blox ZED-F9R receiver read over a serial line.

    When the port is ready the receiver adds itself to ``context`` and starts
    it; each update reads one chunk from the port and parses it. A ready
    ``port`` object with a ``read(size)`` method may be passed instead of
    opening ``device_path``.
    """

    SENSOR_NAME = "ublox_zed_f9r"

    def __init__(
        self, device_path: str, context: Context, port: Optional[Any] = None
    ) -> None:
        self.device_path = device_path
        self._context = context
        self._lng = 0.0
        self._lat = 0.0
        self._gps_fix: Optional[int] = None
        self._owns_port = port is None
        self._port: Optional[_Port] = port if port is not None else self._open(device_path)
        self._registered = False
        if self._port is not None:
            context.add_updatable(self)
            context.start()
            self._registered = True

    @staticmethod
    def _open(device_path: str) -> Optional[_Port]:
        try:
            return serial.Serial(
                port=device_path,
                baudrate=BAUD_RATE,
                bytesize=serial.EIGHTBITS,
                parity=serial.PARITY_NONE,
                stopbits=serial.STOPBITS_ONE,
                timeout=READ_TIMEOUT,
                xonxoff=False,
                rtscts=False,
            )
        except (serial.SerialException, OSError, ValueError) as exc:
            print(f"Error configuring serial port {device_path}: {exc}")
            return None

    @property
    def name(self) -> str:
        return self.SENSOR_NAME

    @property
    def lng(self) -> float:
        return self._lng

    @property
    def lat(self) -> float:
        return self._lat

    @property
    def gps_fix(self) -> Optional[int]:
        """Fix type from the last navigation status message, if any."""
        return self._gps_fix

    @property
    def connected(self) -> bool:
        return self._registered

    def update(self) -> None:
        """Read one chunk from the port and parse it."""
        if self._port is None:
            return
        try:
            data = self._port.read(READ_SIZE)
        except (serial.SerialException, OSError) as exc:
            print(f"Error reading: {exc}")
            return
        try:
            self.parse(data)
        except UbxError as exc:
            print(f"Error parsing UBX message: {exc}")

    def parse(self, data: bytes) -> Optional[int]:
        """Parse one UBX message; return its type, or None if data is not UBX."""
        if len(data) < len(UBX_SYNC) or data[: len(UBX_SYNC)] != UBX_SYNC:
            return None
        if len(data) < 4:
            raise UbxError("UBX message ends before its message type")
        msg_type = int.from_bytes(data[2:4], "big")

        if msg_type == UBX_NAV_PVAT:
            payload = self._payload(data, _PVAT_MIN_PAYLOAD)
            lng, lat = (
                struct.unpack_from("<i", payload, _PVAT_LNG_OFFSET)[0],
                struct.unpack_from("<i", payload, _PVAT_LAT_OFFSET)[0],
            )
            self._lng = float(lng)
            self._lat = float(lat)
        elif msg_type == UBX_NAV_STATUS:
            payload = self._payload(data, _STATUS_MIN_PAYLOAD)
            self._gps_fix = payload[_STATUS_FIX_OFFSET]
        else:
            print("No UBX message parser for message:")
            print(f"{msg_type:04x}")
        return msg_type

    @staticmethod
    def _payload(data: bytes, needed: int) -> bytes:
        payload = data[_HEADER_LENGTH:]
        if len(data) < _HEADER_LENGTH or len(payload) < needed:
            raise UbxError(
                f"UBX payload needs {needed} bytes, got {max(len(payload), 0)}"
            )
        return payload

    def close(self) -> None:
        """Leave the context and close the port if this receiver opened it."""
        if self._registered:
            self._context.remove_updatable(self)
            self._registered = False
        if self._owns_port and self._port is not None:
            closer = getattr(self._port, "close", None)
            if closer is not None:
                closer()
        self._port = None

    def __enter__(self) -> UbloxZedF9r:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()