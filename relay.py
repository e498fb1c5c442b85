from typing import Any, List, Optional

import redis.asyncio as redis

from frames import encode_frame
from logging_config import get_logger, log_success
from redis_keys import DEFAULT_PREFIX, ROOM_CHANNEL, ROOM_CLIENTS_KEY

logger = get_logger(__name__)


class RoomRelay:
    """Publishes framed events to room channels on Redis.

    Usage is either fluent, ``await relay.to("lobby").emit("chat", data)``, or explicit,
    ``await relay.emit_to("lobby", "chat", data)``.

    The target set by ``to`` is per-instance state. One instance handles at most one
    ``to``...``emit`` sequence at a time; concurrent senders should use ``emit_to``.
    """

    def __init__(self, redis_url: str, redis_token: Optional[str] = None, prefix: str = DEFAULT_PREFIX,
                 redis_client: Optional[redis.Redis] = None):
        self.prefix = prefix or DEFAULT_PREFIX
        self.target_room: Optional[str] = None
        self._owns_client = redis_client is None
        self._closed = False
        if redis_client is None:
            # Connections are opened lazily on the first command
            redis_client = redis.Redis.from_url(redis_url, password=redis_token, decode_responses=True)
        self.redis_client = redis_client
        logger.info(f"Initializing RoomRelay with prefix '{self.prefix}'")

    def room_channel(self, room: str) -> str:
        return ROOM_CHANNEL.format(prefix=self.prefix, room=room)

    def room_clients_key(self, room: str) -> str:
        return ROOM_CLIENTS_KEY.format(prefix=self.prefix, room=room)

    def to(self, room: str) -> "RoomRelay":
        """Target a room for the next emit. Returns the relay for chaining."""
        if not room:
            logger.warning("Empty room name provided to RoomRelay.to()")
        self.target_room = room
        return self

    async def emit(self, event: str, data: Any = None):
        """Send to every client in the targeted room, then reset the target.

        Without a target this logs a warning and publishes nothing. Publish and
        serialization errors are re-raised.
        """
        try:
            room = self.target_room
            if not room:
                logger.warning("RoomRelay.emit called without setting a target room first")
                return
            await self._publish(room, event, data)
        finally:
            self.target_room = None

    async def emit_to(self, room: str, event: str, data: Any = None):
        """Send to every client in ``room`` without touching the targeted room."""
        if not room:
            logger.warning("RoomRelay.emit_to called with an empty room name")
            return
        await self._publish(room, event, data)

    async def _publish(self, room: str, event: str, data: Any):
        try:
            channel = self.room_channel(room)
            payload = encode_frame(event, data)
            subscribers = await self.redis_client.publish(channel, payload)
            log_success(logger, f"Emitted to room '{room}' ({subscribers} subscribers): {payload}")
        except Exception as e:
            logger.error(f"Failed to emit event '{event}' to room '{room}': {e}", exc_info=True)
            raise

    async def get_clients_in_room(self, room: str) -> List[str]:
        """Get all client ids in a room. Returns an empty list if the lookup fails."""
        try:
            clients = await self.redis_client.smembers(self.room_clients_key(room))
            logger.debug(f"Room '{room}' has {len(clients)} clients")
            return list(clients)
        except Exception as e:
            logger.error(f"Failed to get clients in room '{room}': {e}", exc_info=True)
            return []

    async def close(self):
        """Release the Redis connection pool if this relay created it. Never raises."""
        if self._closed:
            return
        self._closed = True
        try:
            if self._owns_client:
                await self.redis_client.aclose()
            logger.info("RoomRelay closed")
        except Exception as e:
            logger.error(f"Error closing RoomRelay connections: {e}", exc_info=True)
