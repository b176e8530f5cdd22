"""
Marshmallow schemas for input validation

Wire names are camelCase (channelId, startTime, shiftSchedule) to match the
station console client.
"""
from marshmallow import EXCLUDE, Schema, ValidationError, fields, validates, validates_schema

from models import PROGRAM_STATUSES, PROGRAM_TYPES
from services.clock import is_valid_clock

# ============================================================================
# Channel Schemas
# ============================================================================


class ChannelCreateSchema(Schema):
    """Schema for creating a new channel"""

    id = fields.Str(validate=lambda x: 1 <= len(x) <= 50)
    name = fields.Str(required=True, validate=lambda x: 1 <= len(x) <= 200)

    @validates("name")
    def validate_name(self, value, **kwargs):
        """Ensure name is not just whitespace"""
        if not value.strip():
            raise ValidationError("Channel name cannot be empty or whitespace")


class ChannelUpdateSchema(Schema):
    """Schema for renaming a channel"""

    name = fields.Str(required=True, validate=lambda x: 1 <= len(x) <= 200)

    @validates("name")
    def validate_name(self, value, **kwargs):
        """Ensure name is not just whitespace"""
        if not value.strip():
            raise ValidationError("Channel name cannot be empty or whitespace")

    class Meta:
        unknown = EXCLUDE  # Ignore id and order sent back by the client


# ============================================================================
# Program Schemas
# ============================================================================


class ProgramCreateSchema(Schema):
    """Schema for scheduling a new program"""

    id = fields.Str(validate=lambda x: 1 <= len(x) <= 50)
    channel_id = fields.Str(data_key="channelId", validate=lambda x: 1 <= len(x) <= 50)
    title = fields.Str(required=True, validate=lambda x: 1 <= len(x) <= 300)
    type = fields.Str(load_default="content", validate=lambda x: x in PROGRAM_TYPES)
    start_time = fields.Str(data_key="startTime", required=True)
    duration = fields.Int(required=True, strict=True, validate=lambda x: x >= 0)
    url = fields.Str(allow_none=True, validate=lambda x: len(x) <= 1000)
    status = fields.Str(load_default="scheduled", validate=lambda x: x in PROGRAM_STATUSES)
    shift_schedule = fields.Bool(data_key="shiftSchedule", load_default=False)

    @validates("start_time")
    def validate_start_time(self, value, **kwargs):
        """Start time must be zero-padded 24-hour HH:MM"""
        if not is_valid_clock(value):
            raise ValidationError("Start time must be HH:MM (00:00-23:59)")

    @validates("title")
    def validate_title(self, value, **kwargs):
        """Ensure title is not just whitespace"""
        if not value.strip():
            raise ValidationError("Title cannot be empty or whitespace")


class ProgramUpdateSchema(Schema):
    """Schema for editing a program; omitted fields keep their value"""

    channel_id = fields.Str(data_key="channelId", validate=lambda x: 1 <= len(x) <= 50)
    title = fields.Str(validate=lambda x: 1 <= len(x) <= 300)
    type = fields.Str(validate=lambda x: x in PROGRAM_TYPES)
    start_time = fields.Str(data_key="startTime")
    duration = fields.Int(strict=True, validate=lambda x: x >= 0)
    url = fields.Str(allow_none=True, validate=lambda x: len(x) <= 1000)
    status = fields.Str(validate=lambda x: x in PROGRAM_STATUSES)
    shift_schedule = fields.Bool(data_key="shiftSchedule", load_default=False)

    @validates("start_time")
    def validate_start_time(self, value, **kwargs):
        """Start time must be zero-padded 24-hour HH:MM"""
        if not is_valid_clock(value):
            raise ValidationError("Start time must be HH:MM (00:00-23:59)")

    @validates_schema
    def validate_title(self, data, **kwargs):
        """Ensure title, when given, is not just whitespace"""
        if "title" in data and not data["title"].strip():
            raise ValidationError("Title cannot be empty or whitespace", "title")

    class Meta:
        unknown = EXCLUDE  # Ignore id echoed back by the client


# ============================================================================
# Utility Schemas
# ============================================================================


class VideoInfoSchema(Schema):
    """Schema for looking up a media URL's running time"""

    url = fields.Str(load_default=None, allow_none=True)


# ============================================================================
# Validation Helpers
# ============================================================================


def validate_request_data(schema_class):
    """
    Decorator to validate request data using a Marshmallow schema

    Usage:
        @bp.route('/api/resource', methods=['POST'])
        @validate_request_data(ResourceCreateSchema)
        def create_resource():
            data = request.validated_data  # Access validated data
            # ... rest of handler

    Returns 400 Bad Request with validation errors if data is invalid.
    """
    from functools import wraps

    from flask import jsonify, request

    def decorator(f):
        @wraps(f)
        def wrapper(*args, **kwargs):
            try:
                schema = schema_class()
                validated_data = schema.load(request.get_json(silent=True) or {})
                request.validated_data = validated_data
            except ValidationError as err:
                return jsonify({"error": "Validation failed", "validation_errors": err.messages}), 400
            return f(*args, **kwargs)

        return wrapper

    return decorator
