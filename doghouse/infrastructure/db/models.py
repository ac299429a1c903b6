from datetime import datetime

from sqlalchemy import CheckConstraint, DateTime, Integer, String, func
from sqlalchemy.orm import Mapped, mapped_column

from doghouse.domain.dog import COLOR_MAX_LENGTH, NAME_MAX_LENGTH, Dog
from doghouse.infrastructure.db.session import Base


class DogRecord(Base):
    __tablename__ = "dogs"
    __table_args__ = (
        CheckConstraint("tail_length >= 0", name="ck_dogs_tail_length_non_negative"),
        CheckConstraint("weight >= 0", name="ck_dogs_weight_non_negative"),
    )

    name: Mapped[str] = mapped_column(String(NAME_MAX_LENGTH), primary_key=True)
    color: Mapped[str] = mapped_column(String(COLOR_MAX_LENGTH), nullable=False, default="")
    tail_length: Mapped[int] = mapped_column(Integer, nullable=False)
    weight: Mapped[int] = mapped_column(Integer, nullable=False)
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), server_default=func.now(), nullable=False)

    def to_domain(self) -> Dog:
        return Dog(name=self.name, color=self.color, tail_length=self.tail_length, weight=self.weight)
