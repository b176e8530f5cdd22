"""
Program scheduling - CRUD on the program guide with optional schedule shifts
"""

import logging
import secrets
import string
from typing import Dict, List, Optional

from sqlalchemy.exc import SQLAlchemyError

from error_handling import ResourceNotFoundError, ValidationError, handle_db_error
from models import Program, ProgramStatus, ProgramType, db
from services.channel_service import ChannelService
from services.schedule_shifter import shift_channel_schedule

logger = logging.getLogger(__name__)

PROGRAM_ID_ALPHABET = string.ascii_uppercase + string.digits
PROGRAM_ID_LENGTH = 9

# Fields a program edit may change
EDITABLE_FIELDS = ("channel_id", "title", "type", "start_time", "duration", "url", "status")


def generate_program_id() -> str:
    """Random 9-character upper-case base-36 id"""
    return "".join(secrets.choice(PROGRAM_ID_ALPHABET) for _ in range(PROGRAM_ID_LENGTH))


class ProgramService:
    """Service for scheduling programs onto channels"""

    @staticmethod
    def list_programs(channel_id: Optional[str] = None) -> List[Program]:
        """All programs (optionally one channel's) in start-time order"""
        query = Program.query
        if channel_id:
            query = query.filter_by(channel_id=channel_id)
        programs = query.order_by(*Program.collection_order()).all()
        programs.sort(key=lambda p: p.start_time)
        return programs

    @staticmethod
    def get_program(program_id: str) -> Program:
        program = db.session.get(Program, program_id)
        if not program:
            raise ResourceNotFoundError(f"Program {program_id} not found")
        return program

    @staticmethod
    def shift_from(program: Program) -> List[Program]:
        """Re-cascade the program's channel from this program onward"""
        channel_programs = (
            Program.query.filter_by(channel_id=program.channel_id).order_by(*Program.collection_order()).all()
        )
        return shift_channel_schedule(channel_programs, program.channel_id, program.id)

    @staticmethod
    def create_program(data: Dict, shift_schedule: bool = False) -> Program:
        """
        Schedule a new program

        Args:
            data: Validated program fields (snake_case)
            shift_schedule: Push later programs on the channel so they follow
                            the new one back to back

        Returns:
            Program: The created program
        """
        channel_id = data.get("channel_id") or ChannelService.default_channel_id()
        if not channel_id:
            raise ValidationError("No channel available to schedule the program on")
        ChannelService.get_channel(channel_id)

        program_id = data.get("id") or generate_program_id()
        if db.session.get(Program, program_id):
            raise ValidationError(f"Program {program_id} already exists")

        program = Program(
            id=program_id,
            channel_id=channel_id,
            title=data["title"].strip(),
            type=data.get("type", ProgramType.CONTENT.value),
            start_time=data["start_time"],
            duration=data["duration"],
            url=data.get("url") or None,
            status=data.get("status", ProgramStatus.SCHEDULED.value),
        )
        db.session.add(program)

        if shift_schedule:
            ProgramService.shift_from(program)

        try:
            db.session.commit()
        except SQLAlchemyError as e:
            db.session.rollback()
            handle_db_error(e, "creating program")

        logger.info(f"Scheduled program {program.id} '{program.title}' on {channel_id} at {program.start_time}")
        return program

    @staticmethod
    def update_program(program_id: str, data: Dict, shift_schedule: bool = False) -> Program:
        """
        Edit a program, then optionally re-cascade its (possibly new) channel

        Fields missing from data keep their current value.
        """
        program = ProgramService.get_program(program_id)

        if data.get("channel_id") and data["channel_id"] != program.channel_id:
            ChannelService.get_channel(data["channel_id"])

        for field in EDITABLE_FIELDS:
            if field not in data:
                continue
            value = data[field]
            if field == "url":
                value = value or None
            elif field == "title":
                value = value.strip()
            setattr(program, field, value)

        if shift_schedule:
            ProgramService.shift_from(program)

        try:
            db.session.commit()
        except SQLAlchemyError as e:
            db.session.rollback()
            handle_db_error(e, "updating program")

        logger.info(f"Updated program {program_id} (shift={shift_schedule})")
        return program

    @staticmethod
    def delete_program(program_id: str, shift_schedule: bool = False) -> None:
        """
        Remove a program; with shift_schedule the next program pulls back into the gap

        The gap closes by zeroing the program's duration and shifting from it
        before it is removed.
        """
        program = ProgramService.get_program(program_id)

        if shift_schedule:
            program.duration = 0
            ProgramService.shift_from(program)

        db.session.delete(program)

        try:
            db.session.commit()
        except SQLAlchemyError as e:
            db.session.rollback()
            handle_db_error(e, "deleting program")

        logger.info(f"Deleted program {program_id} (shift={shift_schedule})")
