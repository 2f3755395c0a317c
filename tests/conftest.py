"""Shared pytest fixtures for finscore tests."""

import tempfile
import os
from datetime import datetime
from decimal import Decimal
import pytest

from finscore.database.factories import create_sqlite_database
from finscore.domain.category import CategoryService
from finscore.domain.entities import Transaction, TransactionType
from finscore.domain.insights import InsightsService
from finscore.domain.savings import SavingsService
from finscore.domain.scheduled import ScheduledActionService
from finscore.domain.summary import SummaryService
from finscore.domain.transaction import TransactionService


@pytest.fixture
def temp_db():
    """Create a temporary database with the default categories."""
    fd, db_path = tempfile.mkstemp(suffix=".db")
    os.close(fd)

    db = create_sqlite_database(database_path=db_path)
    # Store the path for tests that need it
    db.database_path = db_path
    db.connect()
    db.initialize_schema()
    CategoryService(db).initialize_defaults()

    yield db

    # Cleanup
    db.disconnect()
    if os.path.exists(db_path):
        os.unlink(db_path)


@pytest.fixture
def category_service(temp_db):
    """Create a CategoryService with a temporary database."""
    return CategoryService(temp_db)


@pytest.fixture
def transaction_service(temp_db):
    """Create a TransactionService with a temporary database."""
    return TransactionService(temp_db)


@pytest.fixture
def savings_service(temp_db):
    """Create a SavingsService with a temporary database."""
    return SavingsService(temp_db)


@pytest.fixture
def scheduled_service(temp_db):
    """Create a ScheduledActionService with a temporary database."""
    return ScheduledActionService(temp_db)


@pytest.fixture
def insights_service(temp_db):
    """Create an InsightsService with a temporary database."""
    return InsightsService(temp_db)


@pytest.fixture
def summary_service(temp_db):
    """Create a SummaryService with a temporary database."""
    return SummaryService(temp_db)


@pytest.fixture
def make_transaction():
    """Build in-memory Transaction entities for engine tests."""
    counter = {"id": 0}

    def _make(transaction_type, amount, category, when=None):
        counter["id"] += 1
        return Transaction(
            id=counter["id"],
            type=TransactionType(transaction_type),
            amount=Decimal(str(amount)),
            category=category,
            date=when or datetime(2024, 3, 1),
        )

    return _make


@pytest.fixture
def cli_runner():
    """Create a Click CLI test runner."""
    from click.testing import CliRunner

    return CliRunner()
