"""Pytest configuration and fixtures."""

import os
from collections.abc import Generator
from datetime import datetime
from typing import Any

os.environ.setdefault("ENVIRONMENT", "test")
os.environ.setdefault("DATABASE_URL", "sqlite://")

import pytest  # noqa: E402
from fastapi.testclient import TestClient  # noqa: E402
from sqlalchemy.orm import Session, sessionmaker  # noqa: E402

from retailhub import models  # noqa: E402
from retailhub.database import Base, build_engine, get_db  # noqa: E402
from retailhub.main import app  # noqa: E402

# Test database URL (in-memory SQLite)
TEST_DATABASE_URL = "sqlite:///:memory:"

# Create test engine (one shared connection, foreign keys enforced)
test_engine = build_engine(TEST_DATABASE_URL)

# Create test session factory
TestSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=test_engine)


@pytest.fixture
def db_session() -> Generator[Session, None, None]:
    """Create a fresh database session for each test."""
    # Create all tables
    Base.metadata.create_all(bind=test_engine)

    session = TestSessionLocal()
    try:
        yield session
    finally:
        session.close()
        # Drop all tables after test
        Base.metadata.drop_all(bind=test_engine)


@pytest.fixture
def client(db_session: Session) -> Generator[TestClient, Any, None]:
    """Create a test client with database session."""

    def override_get_db() -> Generator[Session, None, None]:
        try:
            yield db_session
        finally:
            pass

    app.dependency_overrides[get_db] = override_get_db

    with TestClient(app) as test_client:
        yield test_client

    app.dependency_overrides.clear()


def create_test_category(
    db_session: Session, name: str = "Snacks", is_active: bool = True
) -> models.ProductCategory:
    """Create a product category."""
    category = models.ProductCategory(name=name, is_active=is_active)
    db_session.add(category)
    db_session.commit()
    db_session.refresh(category)
    return category


def create_test_master_product(
    db_session: Session, name: str = "Chips", category_id: int | None = None
) -> models.MasterProduct:
    """Create a master product, optionally in a category."""
    master = models.MasterProduct(name=name, category_id=category_id, is_active=True)
    db_session.add(master)
    db_session.commit()
    db_session.refresh(master)
    return master


def create_test_product(
    db_session: Session,
    name: str = "Chips",
    price: float = 5000,
    is_active: bool = True,
    category_id: int | None = None,
) -> models.Product:
    """Create a product together with its master product."""
    master = create_test_master_product(db_session, name=name, category_id=category_id)
    product = models.Product(master_product_id=master.id, price=price, is_active=is_active)
    db_session.add(product)
    db_session.commit()
    db_session.refresh(product)
    return product


def create_test_stock(
    db_session: Session,
    product_id: int,
    quantity: float,
    movement_type: str = "IN",
    created_at: datetime | None = None,
    unit_quantity: str = "pcs",
) -> models.ProductStock:
    """Record a stock movement directly in the database."""
    stock = models.ProductStock(
        product_id=product_id,
        quantity=quantity,
        unit_quantity=unit_quantity,
        movement_type=movement_type,
        source="PRODUCTION" if movement_type == "IN" else "ORDER",
    )
    if created_at is not None:
        stock.created_at = created_at
    db_session.add(stock)
    db_session.commit()
    db_session.refresh(stock)
    return stock


def create_test_account_category(
    db_session: Session, name: str = "Assets"
) -> models.AccountCategory:
    """Create an account category."""
    category = models.AccountCategory(name=name, is_active=True)
    db_session.add(category)
    db_session.commit()
    db_session.refresh(category)
    return category


def create_test_account_type(
    db_session: Session,
    account_category_id: int,
    name: str = "Current assets",
    is_active: bool = True,
) -> models.AccountType:
    """Create an account type in the given category."""
    account_type = models.AccountType(
        name=name, account_category_id=account_category_id, is_active=is_active
    )
    db_session.add(account_type)
    db_session.commit()
    db_session.refresh(account_type)
    return account_type


def create_test_account(
    db_session: Session,
    account_category_id: int,
    number: str = "1-100",
    name: str = "Cash",
    balance: float = 0,
    account_type_id: int | None = None,
) -> models.Account:
    """Create an account in the given category, with its own type unless one is given."""
    if account_type_id is None:
        account_type_id = create_test_account_type(
            db_session, account_category_id, name=f"{name} {number}"
        ).id
    account = models.Account(
        name=name,
        number=number,
        balance=balance,
        account_category_id=account_category_id,
        account_type_id=account_type_id,
        is_active=True,
    )
    db_session.add(account)
    db_session.commit()
    db_session.refresh(account)
    return account
