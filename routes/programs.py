"""
Program guide routes - scheduling programs onto channels
"""
import logging

from flask import Blueprint, jsonify, request

from error_handling import handle_errors
from schemas import ProgramCreateSchema, ProgramUpdateSchema, validate_request_data
from services.program_service import ProgramService

logger = logging.getLogger(__name__)

# Create blueprint
programs_bp = Blueprint("programs", __name__)


# ============================================================================
# API Routes - Program CRUD
# ============================================================================


@programs_bp.route("/api/programs", methods=["GET"])
@handle_errors(default_message="Error listing programs")
def get_programs():
    """Get all programs sorted by start time, optionally for one channel"""
    channel_id = request.args.get("channelId")
    return jsonify([p.to_dict() for p in ProgramService.list_programs(channel_id)])


@programs_bp.route("/api/programs/<program_id>", methods=["GET"])
@handle_errors(default_message="Error fetching program")
def get_program(program_id):
    """Get a single program"""
    return jsonify(ProgramService.get_program(program_id).to_dict())


@programs_bp.route("/api/programs", methods=["POST"])
@validate_request_data(ProgramCreateSchema)
@handle_errors(default_message="Error creating program")
def create_program():
    """Schedule a new program; shiftSchedule pushes later programs back"""
    data = dict(request.validated_data)
    shift_schedule = data.pop("shift_schedule", False)

    program = ProgramService.create_program(data, shift_schedule=shift_schedule)
    return jsonify(program.to_dict()), 201


@programs_bp.route("/api/programs/<program_id>", methods=["PUT"])
@validate_request_data(ProgramUpdateSchema)
@handle_errors(default_message="Error updating program")
def update_program(program_id):
    """Edit a program; shiftSchedule re-cascades its channel from it"""
    data = dict(request.validated_data)
    shift_schedule = data.pop("shift_schedule", False)

    program = ProgramService.update_program(program_id, data, shift_schedule=shift_schedule)
    return jsonify(program.to_dict())


@programs_bp.route("/api/programs/<program_id>", methods=["DELETE"])
@handle_errors(default_message="Error deleting program")
def delete_program(program_id):
    """Delete a program; ?shiftSchedule=true closes the gap it leaves"""
    shift_schedule = request.args.get("shiftSchedule", "false").lower() == "true"
    ProgramService.delete_program(program_id, shift_schedule=shift_schedule)
    return "", 204
