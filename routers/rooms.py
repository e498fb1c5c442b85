from fastapi import APIRouter, HTTPException, Request
from schemas.rooms import EmitRequest, EmitResponse, RoomClientsResponse
from relay import RoomRelay
from logging_config import get_logger

logger = get_logger(__name__)

rooms_router = APIRouter(prefix="/rooms", tags=["rooms"])


def get_relay(request: Request) -> RoomRelay:
    return request.app.state.relay


@rooms_router.post("/{room_id}/emit")
async def emit_to_room(room_id: str, emit_request: EmitRequest, request: Request):
    # POST /rooms/{room_id}/emit Body: { "event": "chat", "data": {"msg": "hi"} }
    # Response 200: { "room_id": "lobby", "channel": "io:lobby", "event": "chat" }
    client_host = request.client.host if request and request.client else 'unknown'
    logger.info(f"Emit request for room {room_id} from {client_host}, event: {emit_request.event}")
    relay = get_relay(request)

    # Requests run concurrently, so the room is passed explicitly instead of via relay.to()
    try:
        await relay.emit_to(room_id, emit_request.event, emit_request.data)
    except Exception as e:
        logger.error(f"Error emitting to room {room_id}: {e}", exc_info=True)
        raise HTTPException(status_code=502, detail="Failed to emit event")

    return EmitResponse(
        room_id=room_id,
        channel=relay.room_channel(room_id),
        event=emit_request.event,
    )


@rooms_router.get("/{room_id}/clients")
async def get_room_clients(room_id: str, request: Request):
    # GET /rooms/{room_id}/clients
    # Response 200: { "room_id": "lobby", "clients": ["c1", "c2"], "count": 2 }
    # Lookup failures come back as an empty room
    relay = get_relay(request)
    clients = await relay.get_clients_in_room(room_id)
    logger.debug(f"Room {room_id} has {len(clients)} clients")
    return RoomClientsResponse(room_id=room_id, clients=clients, count=len(clients))
