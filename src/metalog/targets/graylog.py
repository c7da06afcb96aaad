"""
Graylog (GELF over UDP) target.

Chunking and datagram delivery are delegated to graypy's ``GELFUDPHandler``;
this module only builds GELF payloads and decides when to close the socket.
Delivery is fire-and-forget: a failed send is reported to the diagnostic
logger when ``debug_gelf_client`` is set and otherwise dropped.
"""

from __future__ import annotations

import threading
import time
import zlib
from typing import Any, Dict, Mapping, Optional, Sequence

from graypy import GELFUDPHandler
from graypy.handler import GELFWarningChunker

from ..diagnostics import get_debug_logger
from ..exceptions import ConfigurationError
from ..formatters import format_message, orjson_dumps
from ..levels import LogLevel
from .base import BaseTarget, Meta

GELF_LEVELS: Dict[LogLevel, int] = {
    LogLevel.DEBUG: 7,
    LogLevel.INFO: 6,
    LogLevel.NOTICE: 5,
    LogLevel.WARN: 4,
    LogLevel.ERROR: 3,
    LogLevel.CRITICAL: 2,
    LogLevel.ALERT: 1,
    LogLevel.EMERGENCY: 0,
}

DEFAULT_GELF_LEVEL = 3
DEFAULT_GRAYLOG_PORT = 12201
MAX_CHUNK_SIZE_WAN = 1420
MAX_CHUNK_SIZE_LAN = 8154
CLOSE_DELAY_SECONDS = 1.0

_log = get_debug_logger("metalog.graylog")


class GraylogTarget(BaseTarget):
    """Sends every accepted record to a Graylog server as one GELF message.

    Args:
        graylog_hostname: Graylog server hostname.
        graylog_port: Graylog GELF UDP port (default 12201).
        connection: ``"lan"`` or ``"wan"``; selects the chunk size.
        max_chunk_size_wan: Chunk size for WAN connections.
        max_chunk_size_lan: Chunk size for LAN connections.
        host: Value of the GELF ``host`` field.
        version: GELF protocol version.
        facility_prefix: Prepended to the facility name in ``_facility``.
        additional_fields: Static fields added to every payload (``_`` prefixed).
        debug_gelf_client: Report connection options, payloads and send errors
            to the diagnostic logger.
        compress: zlib-compress payloads before sending.
        close_delay: Seconds to wait before closing a socket that never sent.
    """

    def __init__(
        self,
        *,
        graylog_hostname: str,
        graylog_port: int = DEFAULT_GRAYLOG_PORT,
        connection: str = "lan",
        max_chunk_size_wan: int = MAX_CHUNK_SIZE_WAN,
        max_chunk_size_lan: int = MAX_CHUNK_SIZE_LAN,
        host: str = "_unspecified_",
        version: str = "1.0",
        facility_prefix: str = "",
        additional_fields: Optional[Mapping[str, Any]] = None,
        debug_gelf_client: bool = False,
        compress: bool = True,
        close_delay: float = CLOSE_DELAY_SECONDS,
        **options: Any,
    ) -> None:
        super().__init__(**options)

        if connection not in ("lan", "wan"):
            raise ConfigurationError(
                f"Unknown Graylog connection type '{connection}'", connection=connection
            )

        self.version = version
        self.host = host
        self.facility_prefix = facility_prefix
        self.additional_fields: Dict[str, Any] = dict(additional_fields or {})
        self.debug = debug_gelf_client
        self.compress = compress
        self.close_delay = close_delay
        self.log_level_map = dict(GELF_LEVELS)

        chunk_size = max_chunk_size_lan if connection == "lan" else max_chunk_size_wan
        connection_options = {
            "graylog_hostname": graylog_hostname,
            "graylog_port": graylog_port,
            "connection": connection,
            "chunk_size": chunk_size,
        }
        if self.debug:
            _log.debug("graylog_connection_options", **connection_options)

        self._transport = GELFUDPHandler(
            graylog_hostname,
            graylog_port,
            gelf_chunker=GELFWarningChunker(chunk_size=chunk_size),
        )
        self._close_timer: Optional[threading.Timer] = None

    @property
    def transport(self) -> GELFUDPHandler:
        return self._transport

    def log(self, level: LogLevel, facility: Optional[str], args: Sequence[Any], meta: Meta) -> None:
        if not self.accepts(level, facility):
            return
        self.send(self.build_payload(level, facility, args, meta))

    def build_payload(
        self,
        level: LogLevel,
        facility: Optional[str],
        args: Sequence[Any],
        meta: Meta,
    ) -> Dict[str, Any]:
        full_message = format_message(args)
        short_message = full_message.split("\n", 1)[0]

        payload: Dict[str, Any] = {
            "version": self.version,
            "host": self.host,
            "short_message": short_message,
            "full_message": full_message,
            "timestamp": time.time(),
            "level": self.log_level_map.get(level, DEFAULT_GELF_LEVEL),
        }

        for key, value in self.additional_fields.items():
            payload["_" + key] = value

        for key, value in meta.items():
            payload["_" + key] = str(value)

        if facility:
            payload["_facility"] = self.facility_prefix + facility

        if self.debug:
            _log.debug("graylog_message", payload=payload)

        return payload

    def send(self, payload: Mapping[str, Any]) -> None:
        data = orjson_dumps(payload).encode("utf-8")
        if self.compress:
            data = zlib.compress(data)

        try:
            self._transport.send(data)
        except OSError as err:
            if self.debug:
                _log.error("graylog_send_failed", error=str(err))

    def close(self) -> None:
        if self._transport.sock is not None:
            self._transport.close()
            return

        # Nothing was sent yet; give a pending socket setup time before closing.
        self._close_timer = threading.Timer(self.close_delay, self._transport.close)
        self._close_timer.daemon = True
        self._close_timer.start()
