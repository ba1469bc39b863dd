"""Handlers for sessions in the lobby (not in any room)."""

from typing import List

from loguru import logger

from privateroom.bus.events import OutboundMessage
from privateroom.errors import UserInputError
from privateroom.handlers import replies
from privateroom.handlers.args import arg, parse_capacity, parse_room_id, parse_visibility
from privateroom.router.dispatch import CommandRequest, RoomContext


def start_handler(ctx: RoomContext, request: CommandRequest) -> List[OutboundMessage]:
    """/start: first message a user sees."""
    return [request.reply(replies.greeting(request.message.sender_name))]


def help_handler(ctx: RoomContext, request: CommandRequest) -> List[OutboundMessage]:
    """/help: static command summary."""
    return [request.reply(replies.HELP_TEXT)]


def create_handler(ctx: RoomContext, request: CommandRequest) -> List[OutboundMessage]:
    """/create [name] [limit] [private|public]

    An invalid limit or privacy token is reported, but the room is still
    created with the registry default for that setting.
    """
    outbound: List[OutboundMessage] = []
    name = arg(request.args, 0)

    capacity = None
    raw_capacity = arg(request.args, 1)
    if raw_capacity is not None:
        try:
            capacity = parse_capacity(raw_capacity, ctx.max_capacity)
        except UserInputError as e:
            outbound.append(request.reply(str(e)))

    private = None
    raw_private = arg(request.args, 2)
    if raw_private is not None:
        try:
            private = parse_visibility(raw_private)
        except UserInputError as e:
            outbound.append(request.reply(str(e)))

    room = ctx.registry.create_room(
        request.sender_id,
        name=name,
        capacity=capacity,
        private=private,
    )
    ctx.directory.assign(request.sender_id, room)
    outbound.append(request.reply(replies.created(room)))
    return outbound


def join_handler(ctx: RoomContext, request: CommandRequest) -> List[OutboundMessage]:
    """/join <room id>"""
    try:
        room_id = parse_room_id(arg(request.args, 0))
        room = ctx.registry.get(room_id)
        if room is None:
            raise UserInputError(replies.room_not_found(room_id))
        if not ctx.join(request.sender_id, room):
            raise UserInputError(replies.ROOM_FULL)
    except UserInputError as e:
        return [request.reply(str(e))]

    logger.info(f"Client {request.sender_id} entered the room {room.id} '{room.name}'")
    return [request.reply(replies.joined(room))]


def list_handler(ctx: RoomContext, request: CommandRequest) -> List[OutboundMessage]:
    """/list: public rooms with occupancy."""
    return [request.reply(replies.listing(ctx.registry.list_public()))]


def canned_reply_handler(ctx: RoomContext, request: CommandRequest) -> List[OutboundMessage]:
    """Lobby fallback for anything that is not a command."""
    return [request.reply(ctx.rng.choice(replies.CANNED_LINES))]
