"""Handlers for sessions inside a room."""

from typing import List

from loguru import logger

from privateroom.bus.events import OutboundMessage
from privateroom.handlers import replies
from privateroom.router.dispatch import CommandRequest, RoomContext


def info_handler(ctx: RoomContext, request: CommandRequest) -> List[OutboundMessage]:
    """/info: name, id, occupancy and limit of the sender's room."""
    return [request.reply(replies.room_info(request.room))]


def quit_handler(ctx: RoomContext, request: CommandRequest) -> List[OutboundMessage]:
    """/quit: leave the room.

    The room itself stays until the next sweep, even if it is now empty.
    """
    room = request.room
    if not ctx.leave(request.sender_id, room):
        logger.warning(f"Session {request.sender_id} quit room {room.id} without being a member")
    logger.info(f"Deleted client {request.sender_id} from room {room.id} '{room.name}', members: {room.members}")
    return [request.reply(replies.left(room))]


def broadcast_handler(ctx: RoomContext, request: CommandRequest) -> List[OutboundMessage]:
    """Relay a chat line to every other member of the room."""
    room = request.room
    text = replies.relayed(request.message.sender_name, request.message.text)
    return [
        OutboundMessage(session_id=member, text=text)
        for member in room.other_members(request.sender_id)
    ]
