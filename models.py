"""
Database models for the TV station scheduler
"""

import enum
from datetime import datetime

from flask_sqlalchemy import SQLAlchemy

db = SQLAlchemy()


class ProgramType(str, enum.Enum):
    """Kind of programme; descriptive only, scheduling ignores it"""

    CONTENT = "content"
    AD = "ad"
    NEWS = "news"
    BUMPER = "bumper"


class ProgramStatus(str, enum.Enum):
    """Playout status, set by callers and never touched by the shifter"""

    SCHEDULED = "scheduled"
    PLAYING = "playing"
    COMPLETED = "completed"
    ERROR = "error"


PROGRAM_TYPES = [t.value for t in ProgramType]
PROGRAM_STATUSES = [s.value for s in ProgramStatus]


class Channel(db.Model):  # type: ignore[name-defined]
    """A named lane in the program guide"""

    __tablename__ = "channels"

    id = db.Column(db.String(50), primary_key=True)
    name = db.Column(db.String(200), nullable=False)
    position = db.Column(db.Integer, nullable=False, default=0, index=True)  # Collection order
    created_at = db.Column(db.DateTime, default=datetime.utcnow)
    updated_at = db.Column(db.DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)

    @staticmethod
    def ordered():
        """Query for all channels in collection order"""
        return Channel.query.order_by(Channel.position, Channel.id)

    def to_dict(self):
        return {"id": self.id, "name": self.name, "order": self.position}

    def __repr__(self):
        return f"<Channel {self.id} {self.name}>"


class Program(db.Model):  # type: ignore[name-defined]
    """A scheduled item on one channel's daily timeline"""

    __tablename__ = "programs"

    id = db.Column(db.String(50), primary_key=True)
    channel_id = db.Column(db.String(50), db.ForeignKey("channels.id"), nullable=False, index=True)
    title = db.Column(db.String(300), nullable=False)
    type = db.Column(db.String(20), nullable=False, default=ProgramType.CONTENT.value)
    start_time = db.Column(db.String(5), nullable=False, index=True)  # HH:MM, 24-hour, no date
    duration = db.Column(db.Integer, nullable=False, default=0)  # minutes
    status = db.Column(db.String(20), nullable=False, default=ProgramStatus.SCHEDULED.value)
    url = db.Column(db.String(1000))  # None means colour bars
    created_at = db.Column(db.DateTime, default=datetime.utcnow, index=True)
    updated_at = db.Column(db.DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)

    __table_args__ = (db.Index("idx_program_channel_start", "channel_id", "start_time"),)

    @staticmethod
    def collection_order():
        """Ordering used wherever programs are read as a collection"""
        return (Program.created_at, Program.id)

    def to_dict(self):
        data = {
            "id": self.id,
            "channelId": self.channel_id,
            "title": self.title,
            "type": self.type,
            "startTime": self.start_time,
            "duration": self.duration,
            "status": self.status,
        }
        if self.url:
            data["url"] = self.url
        return data

    def __repr__(self):
        return f"<Program {self.id} {self.start_time}+{self.duration} ch={self.channel_id}>"
