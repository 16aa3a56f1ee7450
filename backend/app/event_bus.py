"""SSE event bus for generation status updates.

The orchestrator listener pushes one event per state transition; clients
subscribe to a channel and receive SSE-formatted strings until a terminal
state arrives.

Event Envelope:
  {
    "event": "status",
    "data": {
      "status": "<idle|loading|requesting|applying|success|error>",
      "text": "<human-readable message>",
      "timestamp": "<ISO 8601>"
    }
  }

Events pushed while nobody listens are buffered per channel (bounded by count
and age) and flushed to the next subscriber.
"""

from __future__ import annotations

import asyncio
import json
import time
from datetime import datetime, timezone
from typing import AsyncGenerator, Optional

from refigma.generation import StatusUpdate
from refigma.generation.orchestrator import TERMINAL_STATES
from refigma.logging_config import get_api_logger

logger = get_api_logger()

LANDING_CHANNEL = "landing"
STATUS_EVENT = "status"

# Buffer limits: prevent unbounded memory growth when no client listens
BUFFER_MAX_EVENTS = 200
BUFFER_MAX_AGE_SECS = 600  # 10 minutes

TERMINAL_STATUSES = frozenset(state.value for state in TERMINAL_STATES)


def is_terminal(event: dict) -> bool:
    return event.get("data", {}).get("status") in TERMINAL_STATUSES


class EventBus:
    """Per-channel SSE queues with pre-connection buffering."""

    def __init__(
        self,
        buffer_max_events: int = BUFFER_MAX_EVENTS,
        buffer_max_age_secs: int = BUFFER_MAX_AGE_SECS,
    ):
        self._streams: dict[str, asyncio.Queue] = {}
        self._buffers: dict[str, dict] = {}
        self._buffer_max_events = buffer_max_events
        self._buffer_max_age_secs = buffer_max_age_secs
        self._lock = asyncio.Lock()

    def push(self, channel: str, event_type: str, data: dict) -> None:
        """Deliver an event to the channel's subscriber or buffer it.

        Synchronous on purpose: the orchestrator listener is a plain callback.
        Dict access has no await points on a single loop, so no lock here.
        """
        if "timestamp" not in data:
            data["timestamp"] = datetime.now(timezone.utc).isoformat()

        event = {"event": event_type, "data": data}
        queue = self._streams.get(channel)
        if queue:
            queue.put_nowait(event)
            logger.info(f"Event sent: {event_type} ({data.get('status')}) on {channel}")
        else:
            self._buffer_event(channel, event, event_type)

    async def subscribe(
        self,
        channel: str,
        keepalive_interval: float = 30.0,
    ) -> AsyncGenerator[str, None]:
        """Yield SSE strings for a channel, buffered events first.

        Args:
            channel: Channel to listen on
            keepalive_interval: Seconds between keepalive comments.
        """
        logger.info(f"Client subscribed: {channel}")
        queue: asyncio.Queue = asyncio.Queue()

        async with self._lock:
            self._streams[channel] = queue
            buf = self._buffers.pop(channel, None)

        buffered = buf["events"] if buf else []
        if buffered:
            logger.info(f"Flushing {len(buffered)} buffered events for {channel}")
        for event in buffered:
            yield format_sse(event)
            if is_terminal(event):
                async with self._lock:
                    self._streams.pop(channel, None)
                return

        try:
            while True:
                try:
                    event = await asyncio.wait_for(queue.get(), timeout=keepalive_interval)
                    if event is None:  # Sentinel to stop
                        break
                    yield format_sse(event)
                    if is_terminal(event):
                        break
                except asyncio.TimeoutError:
                    yield ": keepalive\n\n"
        finally:
            async with self._lock:
                self._streams.pop(channel, None)

    def reset(self, channel: str) -> None:
        """Drop events buffered from an earlier run on this channel."""
        self._buffers.pop(channel, None)

    def close(self, channel: str) -> None:
        """Wake up and end the channel's subscriber, if any."""
        queue = self._streams.get(channel)
        if queue:
            queue.put_nowait(None)

    def _buffer_event(self, channel: str, event: dict, event_type: str) -> None:
        if channel not in self._buffers:
            self._cleanup_stale_buffers()
            self._buffers[channel] = {"events": [], "created_at": time.monotonic()}

        buf = self._buffers[channel]
        if len(buf["events"]) < self._buffer_max_events:
            buf["events"].append(event)
            logger.info(f"Event buffered ({len(buf['events'])}): {event_type} for {channel}")
        else:
            logger.warning(
                f"Buffer full ({self._buffer_max_events}), dropping: {event_type} for {channel}"
            )

    def _cleanup_stale_buffers(self) -> None:
        now = time.monotonic()
        stale = [
            name for name, buf in self._buffers.items()
            if now - buf["created_at"] > self._buffer_max_age_secs
        ]
        for name in stale:
            removed = self._buffers.pop(name, None)
            if removed:
                logger.info(f"Cleaned up stale buffer for {name} ({len(removed['events'])} events)")


def format_sse(event: dict) -> str:
    return f"event: {event['event']}\ndata: {json.dumps(event['data'])}\n\n"


# --- Singleton ---

_bus: Optional[EventBus] = None


def get_event_bus() -> EventBus:
    global _bus
    if _bus is None:
        _bus = EventBus()
    return _bus


def push_status(update: StatusUpdate, channel: str = LANDING_CHANNEL) -> None:
    """Orchestrator listener: forward a status update to SSE clients."""
    get_event_bus().push(channel, STATUS_EVENT, update.to_dict())
