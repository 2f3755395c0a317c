"""SQLAlchemy models for finscore database."""

from datetime import datetime, UTC
from sqlalchemy import (
    Column,
    Integer,
    String,
    ForeignKey,
    DateTime,
    Numeric,
    Boolean,
    UniqueConstraint,
    create_engine,
)
from sqlalchemy.orm import declarative_base, relationship, sessionmaker, Session

Base = declarative_base()


class Transaction(Base):
    """Income or expense transaction model."""

    __tablename__ = "transactions"

    id = Column(Integer, primary_key=True)
    type = Column(String, nullable=False)
    amount = Column(Numeric(12, 2), nullable=False)
    category = Column(String, nullable=False)
    description = Column(String, nullable=True)
    date = Column(DateTime, nullable=False)
    linked_savings_id = Column(
        Integer, ForeignKey("savings_entries.id", ondelete="CASCADE"), nullable=True
    )
    created_at = Column(DateTime, default=lambda: datetime.now(UTC), nullable=False)

    # Relationships
    savings_entry = relationship("SavingsEntry", back_populates="transactions")


class SavingsEntry(Base):
    """Savings contribution or withdrawal model."""

    __tablename__ = "savings_entries"

    id = Column(Integer, primary_key=True)
    kind = Column(String, nullable=False)
    amount = Column(Numeric(12, 2), nullable=False)
    date = Column(DateTime, nullable=False)
    created_at = Column(DateTime, default=lambda: datetime.now(UTC), nullable=False)

    # Relationships
    transactions = relationship(
        "Transaction", back_populates="savings_entry", cascade="all, delete-orphan"
    )


class Category(Base):
    """Category model, unique by name within its type."""

    __tablename__ = "categories"

    id = Column(Integer, primary_key=True)
    name = Column(String, nullable=False)
    category_type = Column(String, nullable=False)
    icon = Column(String, nullable=False, default="")
    created_at = Column(DateTime, default=lambda: datetime.now(UTC), nullable=False)

    __table_args__ = (UniqueConstraint("category_type", "name", name="uq_category_type_name"),)


class Settings(Base):
    """Single-row user settings model."""

    __tablename__ = "settings"

    id = Column(Integer, primary_key=True)
    goal = Column(Numeric(12, 2), nullable=True)
    financial_method = Column(String, nullable=True)


class ScheduledAction(Base):
    """Recurring automated action model."""

    __tablename__ = "scheduled_actions"

    id = Column(Integer, primary_key=True)
    type = Column(String, nullable=False)
    name = Column(String, nullable=False)
    amount = Column(Numeric(12, 2), nullable=False)
    days = Column(String, nullable=False)  # comma separated days of month
    category = Column(String, nullable=False)
    active = Column(Boolean, default=True, nullable=False)
    created_at = Column(DateTime, default=lambda: datetime.now(UTC), nullable=False)

    # Relationships
    executions = relationship(
        "ScheduledExecution", back_populates="action", cascade="all, delete-orphan"
    )


class ScheduledExecution(Base):
    """Record of a scheduled action run for one day of one month."""

    __tablename__ = "scheduled_executions"

    id = Column(Integer, primary_key=True)
    action_id = Column(Integer, ForeignKey("scheduled_actions.id"), nullable=False)
    day = Column(Integer, nullable=False)
    month = Column(Integer, nullable=False)
    year = Column(Integer, nullable=False)
    executed_at = Column(DateTime, default=lambda: datetime.now(UTC), nullable=False)

    __table_args__ = (
        UniqueConstraint("action_id", "day", "month", "year", name="uq_execution_period"),
    )

    # Relationships
    action = relationship("ScheduledAction", back_populates="executions")


def create_session_factory(database_url: str) -> sessionmaker[Session]:
    """Create a SQLAlchemy session factory."""
    engine = create_engine(database_url, echo=False)
    Base.metadata.create_all(engine)
    return sessionmaker(bind=engine)
