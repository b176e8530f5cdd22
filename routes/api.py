"""
Misc API routes - video info lookup, station statistics, import/export
"""
import logging

from flask import Blueprint, current_app, jsonify, request

from error_handling import ValidationError, handle_errors
from schemas import VideoInfoSchema, validate_request_data
from services.monitor_service import MonitorService
from services.seed_service import export_document, import_document
from services.video_info_service import VideoInfoService, duration_minutes

logger = logging.getLogger(__name__)

# Create blueprint
api_bp = Blueprint("api", __name__)


@api_bp.route("/api/video-info", methods=["POST"])
@validate_request_data(VideoInfoSchema)
def get_video_info():
    """Look up a video's running time; nulls when it cannot be determined"""
    url = request.validated_data.get("url")
    service = VideoInfoService(timeout=current_app.config.get("VIDEO_INFO_TIMEOUT", 10))
    length_seconds = service.get_length_seconds(url)

    return jsonify({"lengthSeconds": length_seconds, "durationMinutes": duration_minutes(length_seconds)})


@api_bp.route("/api/stats", methods=["GET"])
@handle_errors(default_message="Error computing statistics")
def get_stats():
    """Station totals: program count, air time, per-type and per-channel counts"""
    return jsonify(MonitorService.schedule_stats())


@api_bp.route("/api/export", methods=["GET"])
@handle_errors(default_message="Error exporting schedule")
def export_schedule():
    """Dump every channel and program as one document"""
    return jsonify(export_document())


@api_bp.route("/api/import", methods=["POST"])
@handle_errors(default_message="Error importing schedule")
def import_schedule():
    """Load a {channels, programs} document, or a legacy list of programs"""
    document = request.get_json(silent=True)
    if document is None:
        raise ValidationError("Request body must be a JSON document")

    stats = import_document(document)
    return jsonify({"success": True, **stats})
