"""Delivery of serialized day records to a remote listener.

Wire format: each record is its compact JSON text, UTF-8 encoded and
prefixed with its byte length as a 2-byte little-endian integer.
"""

from __future__ import annotations

import json
import logging
import socket
import struct
import time
from collections.abc import Iterable
from typing import Any, Protocol, TextIO

from pydantic import BaseModel

from schedule_reader.errors import FrameTooLarge

_log = logging.getLogger(__name__)

_LENGTH_PREFIX = struct.Struct("<H")
MAX_FRAME_PAYLOAD = 0xFFFF


def encode_record(record: dict[str, Any]) -> str:
    return json.dumps(record, separators=(",", ":"))


def encode_frame(text: str) -> bytes:
    """Length-prefix ``text`` for the wire.

    Raises:
        FrameTooLarge: If the UTF-8 payload exceeds 65535 bytes.
    """
    payload = text.encode("utf-8")
    if len(payload) > MAX_FRAME_PAYLOAD:
        raise FrameTooLarge(
            f"Record of {len(payload)} bytes exceeds the {MAX_FRAME_PAYLOAD} byte frame limit"
        )
    return _LENGTH_PREFIX.pack(len(payload)) + payload


def decode_frames(data: bytes) -> list[str]:
    """Split a byte stream of complete frames back into texts."""
    texts: list[str] = []
    offset = 0
    while offset < len(data):
        if offset + _LENGTH_PREFIX.size > len(data):
            raise ValueError("Truncated frame header")
        (length,) = _LENGTH_PREFIX.unpack_from(data, offset)
        offset += _LENGTH_PREFIX.size
        if offset + length > len(data):
            raise ValueError("Truncated frame payload")
        texts.append(data[offset : offset + length].decode("utf-8"))
        offset += length
    return texts


class Sink(Protocol):
    """Accepts day records one at a time."""

    def send(self, record: dict[str, Any]) -> bool:
        """Deliver one record; return False if it could not be delivered."""

    def close(self) -> None: ...


class MemorySink:
    """Keeps delivered records in memory."""

    def __init__(self) -> None:
        self.records: list[dict[str, Any]] = []

    def send(self, record: dict[str, Any]) -> bool:
        self.records.append(record)
        return True

    def close(self) -> None:
        pass


class JsonLinesSink:
    """Writes each record as one JSON line to a text stream."""

    def __init__(self, stream: TextIO) -> None:
        self._stream = stream

    def send(self, record: dict[str, Any]) -> bool:
        self._stream.write(encode_record(record) + "\n")
        return True

    def close(self) -> None:
        self._stream.flush()


class TcpSink:
    """Sends framed records over one long-lived TCP connection.

    The connection is opened on the first send and reused. When a send
    fails the connection is dropped and reopened, up to ``retries`` more
    times per record. Connection errors are logged, never raised.
    """

    def __init__(
        self,
        host: str,
        port: int,
        timeout: float = 5.0,
        retries: int = 1,
        retry_delay: float = 0.5,
        logger: logging.Logger | None = None,
    ) -> None:
        self.host = host
        self.port = port
        self.timeout = timeout
        self.retries = retries
        self.retry_delay = retry_delay
        self._log = logger or _log
        self._sock: socket.socket | None = None

    @property
    def connected(self) -> bool:
        return self._sock is not None

    def send(self, record: dict[str, Any]) -> bool:
        frame = encode_frame(encode_record(record))
        attempts = self.retries + 1
        for attempt in range(1, attempts + 1):
            try:
                if self._sock is None:
                    self._connect()
                self._sock.sendall(frame)
                return True
            except OSError as exc:
                self._disconnect()
                self._log.warning(
                    "Send to %s:%d failed (attempt %d/%d): %s",
                    self.host,
                    self.port,
                    attempt,
                    attempts,
                    exc,
                )
                if attempt < attempts and self.retry_delay > 0:
                    time.sleep(self.retry_delay)
        return False

    def close(self) -> None:
        self._disconnect()

    def _connect(self) -> None:
        self._sock = socket.create_connection((self.host, self.port), timeout=self.timeout)
        self._log.info("Connected to %s:%d", self.host, self.port)

    def _disconnect(self) -> None:
        if self._sock is None:
            return
        try:
            self._sock.close()
        except OSError as exc:
            self._log.debug("Error closing connection: %s", exc)
        self._sock = None

    def __enter__(self) -> TcpSink:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()


class DeliveryReport(BaseModel):
    """Counts of records handed to a sink."""

    sent: int = 0
    failed: int = 0

    @property
    def total(self) -> int:
        return self.sent + self.failed


def deliver(
    records: Iterable[dict[str, Any]],
    sink: Sink,
    logger: logging.Logger | None = None,
) -> DeliveryReport:
    """Send every record; a failed record never stops the ones after it."""
    log = logger or _log
    report = DeliveryReport()
    for record in records:
        try:
            delivered = sink.send(record)
        except FrameTooLarge as exc:
            log.error("Dropping record for %s: %s", record.get("date"), exc)
            delivered = False
        if delivered:
            report.sent += 1
        else:
            report.failed += 1
            log.warning("Record for %s was not delivered", record.get("date"))
    return report
