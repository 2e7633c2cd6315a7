from __future__ import annotations

from sqlalchemy import BigInteger, CheckConstraint, String
from sqlalchemy.orm import Mapped, mapped_column

from car_market.infra.db.models.base import Base


class CounterRow(Base):
    """Named monotonic counter. Rows are created by the first allocation and never deleted."""

    __tablename__ = "counters"
    __table_args__ = (CheckConstraint("seq >= 0", name="chk_counters_seq_non_negative"),)

    name: Mapped[str] = mapped_column(String(50), primary_key=True)
    seq: Mapped[int] = mapped_column(BigInteger, nullable=False, default=0)
