"""
Seed data and whole-dataset import/export

The import accepts the flat JSON document the station has always been saved
as ({"channels": [...], "programs": [...]}) as well as the older form that
was a bare list of programs with no channels.
"""

import logging
from typing import Dict, List, Union

from error_handling import ValidationError
from models import PROGRAM_STATUSES, PROGRAM_TYPES, Channel, Program, ProgramStatus, ProgramType, db
from services.clock import is_valid_clock
from services.program_service import ProgramService, generate_program_id

logger = logging.getLogger(__name__)

DEFAULT_CHANNELS = [
    {"id": "CH1", "name": "WXYZ-TV (CH 7)"},
    {"id": "CH2", "name": "KROQ (CH 13)"},
    {"id": "CH3", "name": "RETRO-TV (CH 3)"},
]

# Programs without a channel in a legacy document land here
LEGACY_CHANNEL_ID = "CH1"

SAMPLE_PROGRAMS = [
    {"channelId": "CH1", "title": "MORNING NEWS BROADCAST", "type": "news", "startTime": "06:00", "duration": 60, "status": "completed"},
    {"channelId": "CH1", "title": "CARTOON BLOCK - TOM & JERRY", "type": "content", "startTime": "07:00", "duration": 30, "url": "https://youtube.com/watch?v=sample1", "status": "completed"},
    {"channelId": "CH1", "title": "COMMERCIAL BREAK - COCA COLA", "type": "ad", "startTime": "07:30", "duration": 2, "status": "completed"},
    {"channelId": "CH1", "title": "SITCOM - FRIENDS S01E01", "type": "content", "startTime": "07:32", "duration": 28, "url": "https://youtube.com/watch?v=sample2", "status": "playing"},
    {"channelId": "CH2", "title": "MUSIC VIDEOS 80s", "type": "content", "startTime": "06:00", "duration": 120, "url": "https://youtube.com/watch?v=music1", "status": "playing"},
    {"channelId": "CH3", "title": "INFOMERCIAL", "type": "ad", "startTime": "06:00", "duration": 180, "url": "https://youtube.com/watch?v=info1", "status": "playing"},
]


def _upsert_channel(record: Dict, position: int) -> bool:
    """Insert or rename a channel; True when it was new"""
    if not isinstance(record, dict):
        raise ValidationError("Channel records must be objects", details={"record": record})
    if not record.get("id") or not record.get("name"):
        raise ValidationError("Channel records need an id and a name", details={"record": record})

    channel = db.session.get(Channel, record["id"])
    if channel:
        channel.name = record["name"]
        return False

    db.session.add(Channel(id=record["id"], name=record["name"], position=position))
    return True


def _upsert_program(record: Dict, default_channel_id: str) -> bool:
    """Insert or overwrite a program from a document record; True when it was new"""
    start_time = record.get("startTime")
    if not is_valid_clock(start_time):
        raise ValidationError(f"Program {record.get('id')} has an invalid start time", details={"startTime": start_time})

    duration = record.get("duration", 0)
    if isinstance(duration, bool) or not isinstance(duration, int) or duration < 0:
        raise ValidationError(f"Program {record.get('id')} has an invalid duration", details={"duration": duration})

    program_type = record.get("type") or ProgramType.CONTENT.value
    status = record.get("status") or ProgramStatus.SCHEDULED.value
    if program_type not in PROGRAM_TYPES or status not in PROGRAM_STATUSES:
        raise ValidationError(f"Program {record.get('id')} has an unknown type or status")

    channel_id = record.get("channelId") or default_channel_id
    if not channel_id or not db.session.get(Channel, channel_id):
        raise ValidationError(f"Program {record.get('id')} references unknown channel {channel_id}")

    fields = {
        "channel_id": channel_id,
        "title": record.get("title") or "UNTITLED",
        "type": program_type,
        "start_time": start_time,
        "duration": duration,
        "status": status,
        "url": record.get("url") or None,
    }

    program = db.session.get(Program, record["id"]) if record.get("id") else None
    if program:
        for key, value in fields.items():
            setattr(program, key, value)
        return False

    db.session.add(Program(id=record.get("id") or generate_program_id(), **fields))
    return True


def import_document(document: Union[Dict, List]) -> Dict:
    """
    Load a station document into the database

    Existing channels and programs with the same id are overwritten.

    Returns:
        Dict with counts of created and updated records
    """
    if isinstance(document, list):
        logger.info("Migrating legacy program list to channel schema")
        channels = DEFAULT_CHANNELS
        programs = document
    elif isinstance(document, dict):
        channels = document.get("channels") or []
        programs = document.get("programs") or []
        if not isinstance(channels, list) or not isinstance(programs, list):
            raise ValidationError("Document channels and programs must be lists")
    else:
        raise ValidationError("Document must be an object or a list of programs")

    stats = {"channels_created": 0, "channels_updated": 0, "programs_created": 0, "programs_updated": 0}

    try:
        for position, record in enumerate(channels, start=1):
            key = "channels_created" if _upsert_channel(record, position) else "channels_updated"
            stats[key] += 1
        db.session.flush()

        default_channel = Channel.ordered().first()
        default_channel_id = LEGACY_CHANNEL_ID if isinstance(document, list) else getattr(default_channel, "id", None)

        for record in programs:
            if not isinstance(record, dict):
                raise ValidationError("Program records must be objects")
            key = "programs_created" if _upsert_program(record, default_channel_id) else "programs_updated"
            stats[key] += 1

        db.session.commit()
    except Exception:
        db.session.rollback()
        raise

    logger.info(f"Imported document: {stats}")
    return stats


def export_document() -> Dict:
    """The whole station as a {channels, programs} document"""
    return {
        "channels": [c.to_dict() for c in Channel.ordered().all()],
        "programs": [p.to_dict() for p in ProgramService.list_programs()],
    }


def seed_defaults() -> bool:
    """
    Create the default channels and sample programs on an empty database

    Returns:
        bool: True when seed data was written
    """
    if Channel.query.count() > 0:
        logger.info("Channels already present, skipping seed data")
        return False

    logger.info("Creating initial channels and sample programs")
    import_document({"channels": DEFAULT_CHANNELS, "programs": SAMPLE_PROGRAMS})
    return True
