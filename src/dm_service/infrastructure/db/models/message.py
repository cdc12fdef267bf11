from __future__ import annotations

from datetime import datetime

from sqlalchemy import BigInteger, Boolean, ForeignKey, Identity, Index, Integer, String, func
from sqlalchemy.dialects.postgresql import TIMESTAMP
from sqlalchemy.orm import Mapped, mapped_column, relationship

from dm_service.infrastructure.db.base import Base
from dm_service.infrastructure.db.models.user import UserModel

SUBJECT_MAX_LENGTH = 255
CONTENT_MAX_LENGTH = 5000


class MessageModel(Base):
    __tablename__ = "messages"

    id: Mapped[int] = mapped_column(
        BigInteger().with_variant(Integer, "sqlite"), Identity(), primary_key=True,
    )
    sender_id: Mapped[int] = mapped_column(
        BigInteger,
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
    )
    receiver_id: Mapped[int] = mapped_column(
        BigInteger,
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
    )
    sent_at: Mapped[datetime] = mapped_column(
        TIMESTAMP(timezone=True),
        nullable=False,
        server_default=func.now(),
    )
    subject: Mapped[str] = mapped_column(String(SUBJECT_MAX_LENGTH), nullable=False, default="")
    content: Mapped[str] = mapped_column(String(CONTENT_MAX_LENGTH), nullable=False, default="")
    thread_id: Mapped[int] = mapped_column(BigInteger, nullable=False, default=0)
    is_read: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    archived_by_sender: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    archived_by_receiver: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)

    sender: Mapped[UserModel] = relationship(foreign_keys=[sender_id], lazy="joined")
    receiver: Mapped[UserModel] = relationship(foreign_keys=[receiver_id], lazy="joined")

    __table_args__ = (
        Index("ix_messages_thread_timeline", "thread_id", "sent_at", "id"),
        Index("ix_messages_inbox", "receiver_id", "archived_by_receiver", "sent_at"),
        Index("ix_messages_outbox", "sender_id", "archived_by_sender", "sent_at"),
    )
