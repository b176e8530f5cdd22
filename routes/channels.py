"""
Channel management routes
"""
import logging

from flask import Blueprint, jsonify, request

from error_handling import handle_errors
from schemas import ChannelCreateSchema, ChannelUpdateSchema, validate_request_data
from services.channel_service import ChannelService
from services.monitor_service import MonitorService

logger = logging.getLogger(__name__)

# Create blueprint
channels_bp = Blueprint("channels", __name__)


# ============================================================================
# API Routes - Channel CRUD
# ============================================================================


@channels_bp.route("/api/channels", methods=["GET"])
def get_channels():
    """Get all channels in guide order"""
    return jsonify([c.to_dict() for c in ChannelService.list_channels()])


@channels_bp.route("/api/channels", methods=["POST"])
@validate_request_data(ChannelCreateSchema)
@handle_errors(default_message="Error creating channel")
def create_channel():
    """Create a new channel"""
    data = request.validated_data
    channel = ChannelService.create_channel(data["name"], channel_id=data.get("id"))
    return jsonify(channel.to_dict()), 201


@channels_bp.route("/api/channels/<channel_id>", methods=["PUT"])
@validate_request_data(ChannelUpdateSchema)
@handle_errors(default_message="Error updating channel")
def update_channel(channel_id):
    """Rename a channel"""
    channel = ChannelService.update_channel(channel_id, request.validated_data["name"])
    return jsonify(channel.to_dict())


@channels_bp.route("/api/channels/<channel_id>", methods=["DELETE"])
@handle_errors(default_message="Error deleting channel")
def delete_channel(channel_id):
    """Delete a channel; its programs move to the first remaining channel"""
    ChannelService.delete_channel(channel_id)
    return "", 204


# ============================================================================
# API Routes - Channel Monitor
# ============================================================================


@channels_bp.route("/api/channels/<channel_id>/now", methods=["GET"])
@handle_errors(default_message="Error reading channel monitor")
def get_channel_now(channel_id):
    """What is on air on a channel right now and what follows it"""
    channel = ChannelService.get_channel(channel_id)
    current = MonitorService.now_playing(channel_id)
    upcoming = MonitorService.up_next(channel_id)

    return jsonify(
        {
            "channel": channel.to_dict(),
            "nowPlaying": current.to_dict() if current else None,
            "upNext": upcoming.to_dict() if upcoming else None,
        }
    )
