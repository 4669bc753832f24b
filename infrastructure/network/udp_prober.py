"""UDP liveness prober using a Source-engine A2S_INFO query."""
from __future__ import annotations

import asyncio
import contextvars
import functools
import socket
import time
from concurrent.futures import ThreadPoolExecutor
from typing import Callable, Optional

from config.timeout_config import ProbeTimeoutConfig
from core.logging.logger import StructuredLogger, get_logger
from domain.entities import ProbeAttempt
from domain.interfaces import IUdpProber

# FF FF FF FF 'T' "Source Engine Query" 00
A2S_INFO_QUERY = b"\xff\xff\xff\xffTSource Engine Query\x00"

SocketFactory = Callable[..., socket.socket]


class A2SUdpProber(IUdpProber):
    """Sends one A2S_INFO datagram and waits for any reply.

    The reply is not parsed: arrival alone proves the host is alive. The
    receive runs on the prober's own thread pool with a socket deadline, and
    the socket is closed by its context manager on every path. Size
    ``workers`` to the probe concurrency so no query waits for a thread.
    """

    def __init__(
        self,
        timeout: ProbeTimeoutConfig,
        logger: Optional[StructuredLogger] = None,
        *,
        payload: bytes = A2S_INFO_QUERY,
        socket_factory: SocketFactory = socket.socket,
        clock: Callable[[], float] = time.perf_counter,
        workers: int = 8,
    ) -> None:
        self.timeout = timeout
        self.logger = logger or get_logger(__name__, service="udp")
        self.payload = payload
        self._socket_factory = socket_factory
        self._clock = clock
        self.workers = max(1, workers)
        self._executor = ThreadPoolExecutor(max_workers=self.workers, thread_name_prefix="a2s-udp")

    async def probe(self, address: str) -> ProbeAttempt:
        try:
            loop = asyncio.get_running_loop()
            # carry the bound log context into the worker thread
            call = functools.partial(contextvars.copy_context().run, self.probe_blocking, address)
            return await loop.run_in_executor(self._executor, call)
        except RuntimeError as e:
            # pool already closed
            self.logger.warning(lambda: "udp-dispatch-failed", extra={"error": str(e)})
            return ProbeAttempt.failed()

    def probe_blocking(self, address: str) -> ProbeAttempt:
        port = self.timeout.udp_port
        try:
            with self._socket_factory(socket.AF_INET, socket.SOCK_DGRAM) as sock:
                sock.settimeout(self.timeout.udp_timeout_ms / 1000.0)
                # connected socket only delivers datagrams from the destination
                sock.connect((address, port))
                sock.send(self.payload)
                start = self._clock()
                sock.recv(4096)
                elapsed_ms = int((self._clock() - start) * 1000.0 + 0.5)
        except socket.timeout:
            self.logger.debug(lambda: "udp-timeout", extra={"method": "udp"})
            return ProbeAttempt.failed()
        except OSError as e:
            self.logger.debug(lambda: "udp-error", extra={"method": "udp", "error": str(e)})
            return ProbeAttempt.failed()
        self.logger.debug(lambda: "udp-ok", extra={"method": "udp", "latency": elapsed_ms})
        return ProbeAttempt.ok(elapsed_ms)

    def close(self) -> None:
        """Release the worker threads; later probes report failure."""
        self._executor.shutdown(wait=False)
