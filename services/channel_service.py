"""
Channel management - creation, renaming and deletion with program reassignment
"""

import logging
import time
from typing import Dict, List, Optional

from sqlalchemy import func
from sqlalchemy.exc import SQLAlchemyError

from error_handling import ResourceNotFoundError, ValidationError, handle_db_error
from models import Channel, Program, db

logger = logging.getLogger(__name__)


def generate_channel_id() -> str:
    """CH followed by the current epoch milliseconds"""
    return f"CH{int(time.time() * 1000)}"


class ChannelService:
    """Service for the channel lanes of the program guide"""

    @staticmethod
    def list_channels() -> List[Channel]:
        return Channel.ordered().all()

    @staticmethod
    def get_channel(channel_id: str) -> Channel:
        channel = db.session.get(Channel, channel_id)
        if not channel:
            raise ResourceNotFoundError(f"Channel {channel_id} not found")
        return channel

    @staticmethod
    def default_channel_id() -> Optional[str]:
        """Id of the first channel in collection order, or None when there are none"""
        channel = Channel.ordered().first()
        return channel.id if channel else None

    @staticmethod
    def create_channel(name: str, channel_id: Optional[str] = None) -> Channel:
        """
        Create a channel at the end of the collection

        Args:
            name: Display label
            channel_id: Explicit id; generated when omitted

        Returns:
            Channel: The new channel
        """
        channel_id = channel_id or generate_channel_id()
        if db.session.get(Channel, channel_id):
            raise ValidationError(f"Channel {channel_id} already exists")

        last_position = db.session.query(func.max(Channel.position)).scalar()
        channel = Channel(id=channel_id, name=name.strip(), position=(last_position or 0) + 1)
        db.session.add(channel)

        try:
            db.session.commit()
        except SQLAlchemyError as e:
            db.session.rollback()
            handle_db_error(e, "creating channel")

        logger.info(f"Created channel {channel.id} ({channel.name})")
        return channel

    @staticmethod
    def update_channel(channel_id: str, name: str) -> Channel:
        channel = ChannelService.get_channel(channel_id)
        channel.name = name.strip()
        db.session.commit()
        logger.info(f"Renamed channel {channel_id} to {channel.name}")
        return channel

    @staticmethod
    def delete_channel(channel_id: str) -> Dict:
        """
        Delete a channel and move its programs to the first remaining channel

        Start times are left as they are; no schedule shift runs.

        Returns:
            Dict with the target channel id and the number of programs moved

        Raises:
            ResourceNotFoundError: Unknown channel
            ValidationError: It is the only channel left
        """
        channel = ChannelService.get_channel(channel_id)

        if Channel.query.count() <= 1:
            raise ValidationError("Cannot delete the last channel")

        target = Channel.ordered().filter(Channel.id != channel_id).first()

        reassigned = Program.query.filter_by(channel_id=channel_id).update(
            {"channel_id": target.id}, synchronize_session="fetch"
        )
        db.session.delete(channel)

        try:
            db.session.commit()
        except SQLAlchemyError as e:
            db.session.rollback()
            handle_db_error(e, "deleting channel")

        logger.info(f"Deleted channel {channel_id}, reassigned {reassigned} program(s) to {target.id}")
        return {"reassigned_to": target.id, "reassigned": reassigned}
