"""Category domain service."""

import logging
from typing import Optional

from finscore.database.base import Database
from finscore.domain.entities import CategoryMeta, TransactionType
from finscore.domain.errors import (
    ConflictError,
    NotFoundError,
    ValidationError,
    category_not_found,
    duplicate_category,
)

logger = logging.getLogger(__name__)

DEFAULT_INCOME_CATEGORIES = (
    ("Salario", "💼"),
    ("Intereses", "💰"),
    ("Freelance", "🖥️"),
    ("Regalos", "🎁"),
    ("Ventas", "📦"),
    ("Otros", "🔧"),
)

DEFAULT_EXPENSE_CATEGORIES = (
    ("Comida", "🍽️"),
    ("Transporte", "🚗"),
    ("Entretenimiento", "🎬"),
    ("Hogar", "🏠"),
    ("Salud", "🩺"),
    ("Educación", "🎓"),
    ("Servicios", "💡"),
    ("Ropa", "👕"),
    ("Viajes", "✈️"),
    ("Ahorro", "💰"),
    ("Otros", "🔧"),
)


class CategoryService:
    """Service for managing income and expense categories."""

    def __init__(self, db: Database):
        """Initialize category service.

        Args:
            db: Database instance
        """
        self.db = db

    def initialize_defaults(self) -> int:
        """Create any missing default categories.

        Safe to call repeatedly; existing categories are left untouched.

        Returns:
            Number of categories created
        """
        created = 0
        defaults = (
            (TransactionType.INCOME, DEFAULT_INCOME_CATEGORIES),
            (TransactionType.EXPENSE, DEFAULT_EXPENSE_CATEGORIES),
        )
        for category_type, categories in defaults:
            for name, icon in categories:
                if self.db.get_category(name, category_type) is None:
                    self.db.create_category(name=name, category_type=category_type, icon=icon)
                    created += 1
        if created:
            logger.info("Created %d default categories", created)
        return created

    def create_category(
        self, name: str, category_type: TransactionType, icon: str = ""
    ) -> int:
        """Create a custom category.

        Args:
            name: Category name, unique within its type
            category_type: Income or expense
            icon: Optional icon (emoji)

        Returns:
            Category ID

        Raises:
            ValidationError: If the name is empty
            ConflictError: If the type already has a category with this name
        """
        category_type = TransactionType(category_type)
        name = (name or "").strip()
        if not name:
            raise ValidationError("Category name cannot be empty")
        if self.db.get_category(name, category_type) is not None:
            raise ConflictError(duplicate_category(name, category_type.value))

        category_id = self.db.create_category(
            name=name, category_type=category_type, icon=icon or ""
        )
        logger.info("Created %s category %r", category_type.value, name)
        return category_id

    def get_category(
        self, name: str, category_type: TransactionType
    ) -> Optional[CategoryMeta]:
        """Get category by name within a type.

        Returns:
            CategoryMeta or None if not found
        """
        return self.db.get_category(name, TransactionType(category_type))

    def require_category(self, name: str, category_type: TransactionType) -> CategoryMeta:
        """Get category by name within a type, raising if it is missing.

        Raises:
            NotFoundError: If the category does not exist
        """
        category_type = TransactionType(category_type)
        category = self.db.get_category(name, category_type)
        if category is None:
            raise NotFoundError(category_not_found(name, category_type.value))
        return category

    def list_categories(
        self, category_type: Optional[TransactionType] = None
    ) -> list[CategoryMeta]:
        """List categories.

        Args:
            category_type: Optional type to filter by

        Returns:
            List of CategoryMeta grouped by type, in creation order
        """
        if category_type is not None:
            category_type = TransactionType(category_type)
        return self.db.list_categories(category_type=category_type)
