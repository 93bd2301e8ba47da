"""SQLAlchemy models for contaflow database."""

from datetime import datetime, UTC
from decimal import Decimal, ROUND_HALF_UP
from sqlalchemy import (
    Column,
    Integer,
    String,
    ForeignKey,
    DateTime,
    Date,
    Index,
    TypeDecorator,
    create_engine,
)
from sqlalchemy.orm import declarative_base, relationship, sessionmaker, Session

Base = declarative_base()


class Money(TypeDecorator):
    """Two-place Decimal amount stored as integer cents.

    SQLite has no exact decimal type, so amounts are kept as INTEGER to round
    trip without float drift. Sums over the column stay exact as well.
    """

    impl = Integer
    cache_ok = True

    def process_bind_param(self, value, dialect):
        if value is None:
            return None
        cents = (Decimal(str(value)) * 100).quantize(Decimal(1), rounding=ROUND_HALF_UP)
        return int(cents)

    def process_result_value(self, value, dialect):
        if value is None:
            return None
        return Decimal(int(value)).scaleb(-2)


class Client(Base):
    """Client model."""

    __tablename__ = "clients"

    id = Column(Integer, primary_key=True)
    name = Column(String, nullable=False)
    tax_id = Column(String, unique=True, nullable=False)
    created_at = Column(DateTime, default=lambda: datetime.now(UTC), nullable=False)

    # Relationships
    trial_balance_entries = relationship(
        "TrialBalanceEntry", back_populates="client", cascade="all, delete-orphan"
    )
    cash_flow_entries = relationship(
        "CashFlowEntry", back_populates="client", cascade="all, delete-orphan"
    )


class TrialBalanceEntry(Base):
    """Trial balance (balancete) line model."""

    __tablename__ = "balancetes"

    id = Column(Integer, primary_key=True)
    client_id = Column(Integer, ForeignKey("clients.id"), nullable=False)
    period_start = Column(Date, nullable=False)
    period_end = Column(Date, nullable=False)
    account_code = Column(String, nullable=False)
    classification = Column(String, nullable=False, default="")
    account_description = Column(String, nullable=False, default="")
    opening_balance = Column(Money, nullable=False)
    debit = Column(Money, nullable=False)
    credit = Column(Money, nullable=False)
    closing_balance = Column(Money, nullable=False)
    imported_at = Column(DateTime, default=lambda: datetime.now(UTC), nullable=False)

    __table_args__ = (Index("ix_balancetes_period_key", "client_id", "period_start", "period_end"),)

    # Relationships
    client = relationship("Client", back_populates="trial_balance_entries")


class CashFlowEntry(Base):
    """Cash-flow statement (DFC) line model."""

    __tablename__ = "dfc"

    id = Column(Integer, primary_key=True)
    client_id = Column(Integer, ForeignKey("clients.id"), nullable=False)
    period_start = Column(Date, nullable=False)
    period_end = Column(Date, nullable=False)
    section_title = Column(String, nullable=False, default="")
    line_description = Column(String, nullable=False)
    amount = Column(Money, nullable=False)
    imported_at = Column(DateTime, default=lambda: datetime.now(UTC), nullable=False)

    __table_args__ = (Index("ix_dfc_period_key", "client_id", "period_start", "period_end"),)

    # Relationships
    client = relationship("Client", back_populates="cash_flow_entries")


def create_session_factory(database_url: str) -> sessionmaker[Session]:
    """Create a SQLAlchemy session factory."""
    engine = create_engine(database_url, echo=False)
    Base.metadata.create_all(engine)
    return sessionmaker(bind=engine)
