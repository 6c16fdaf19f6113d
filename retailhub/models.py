"""Database models."""

from datetime import datetime

from sqlalchemy import (
    Boolean,
    DateTime,
    Float,
    ForeignKey,
    Integer,
    String,
    Text,
    func,
    select,
)
from sqlalchemy.orm import Mapped, column_property, mapped_column, relationship

from retailhub.database import Base


class TimestampMixin:
    """created_at / updated_at columns shared by most tables."""

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now(), nullable=False
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        server_default=func.now(),
        onupdate=func.now(),
        nullable=False,
    )


class ProductCategory(TimestampMixin, Base):
    """Category grouping master products."""

    __tablename__ = "product_categories"

    id: Mapped[int] = mapped_column(primary_key=True, index=True)
    name: Mapped[str] = mapped_column(String(100), nullable=False)
    is_active: Mapped[bool] = mapped_column(Boolean, default=True, nullable=False)

    products: Mapped[list["MasterProduct"]] = relationship(back_populates="category")

    def __repr__(self) -> str:
        """String representation of ProductCategory."""
        return f"<ProductCategory(id={self.id}, name='{self.name}')>"


class MasterProduct(TimestampMixin, Base):
    """Product master data shared by sellable product variants."""

    __tablename__ = "master_products"

    id: Mapped[int] = mapped_column(primary_key=True, index=True)
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    category_id: Mapped[int | None] = mapped_column(
        ForeignKey("product_categories.id", ondelete="SET NULL"), nullable=True, index=True
    )
    is_active: Mapped[bool] = mapped_column(Boolean, default=True, nullable=False)

    category: Mapped[ProductCategory | None] = relationship(back_populates="products")
    products: Mapped[list["Product"]] = relationship(back_populates="product_master")

    def __repr__(self) -> str:
        """String representation of MasterProduct."""
        return f"<MasterProduct(id={self.id}, name='{self.name}')>"


class Product(TimestampMixin, Base):
    """Sellable product."""

    __tablename__ = "products"

    id: Mapped[int] = mapped_column(primary_key=True, index=True)
    master_product_id: Mapped[int] = mapped_column(
        ForeignKey("master_products.id", ondelete="CASCADE"), nullable=False, index=True
    )
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
    image_path: Mapped[str | None] = mapped_column(String(500), nullable=True)
    price: Mapped[float] = mapped_column(Float, nullable=False, default=0)
    hpp: Mapped[float | None] = mapped_column(Float, nullable=True)
    is_active: Mapped[bool] = mapped_column(Boolean, default=True, nullable=False)

    product_master: Mapped[MasterProduct] = relationship(back_populates="products")
    stocks: Mapped[list["ProductStock"]] = relationship(
        back_populates="product", cascade="all, delete-orphan"
    )

    def __repr__(self) -> str:
        """String representation of Product."""
        return f"<Product(id={self.id}, master_product_id={self.master_product_id})>"


class ProductStock(Base):
    """A single stock movement (IN or OUT) of a product."""

    __tablename__ = "product_stocks"

    id: Mapped[int] = mapped_column(primary_key=True, index=True)
    product_id: Mapped[int] = mapped_column(
        ForeignKey("products.id", ondelete="CASCADE"), nullable=False, index=True
    )
    quantity: Mapped[float] = mapped_column(Float, nullable=False)
    unit_quantity: Mapped[str] = mapped_column(String(50), nullable=False)
    movement_type: Mapped[str] = mapped_column(String(10), nullable=False)
    source: Mapped[str] = mapped_column(String(20), nullable=False)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now(), nullable=False, index=True
    )

    product: Mapped[Product] = relationship(back_populates="stocks")

    def __repr__(self) -> str:
        """String representation of ProductStock."""
        return (
            f"<ProductStock(id={self.id}, product_id={self.product_id}, "
            f"{self.movement_type} {self.quantity})>"
        )


class Role(TimestampMixin, Base):
    """User role."""

    __tablename__ = "roles"

    id: Mapped[int] = mapped_column(primary_key=True, index=True)
    name: Mapped[str] = mapped_column(String(50), unique=True, nullable=False)
    description: Mapped[str | None] = mapped_column(String(255), nullable=True)
    is_active: Mapped[bool] = mapped_column(Boolean, default=True, nullable=False)

    def __repr__(self) -> str:
        """String representation of Role."""
        return f"<Role(id={self.id}, name='{self.name}')>"


class AccountCategory(TimestampMixin, Base):
    """Chart-of-accounts category (assets, revenue, ...)."""

    __tablename__ = "account_categories"

    id: Mapped[int] = mapped_column(primary_key=True, index=True)
    name: Mapped[str] = mapped_column(String(100), nullable=False)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
    is_active: Mapped[bool] = mapped_column(Boolean, default=True, nullable=False)

    account_types: Mapped[list["AccountType"]] = relationship(back_populates="account_category")
    accounts: Mapped[list["Account"]] = relationship(back_populates="account_category")

    def __repr__(self) -> str:
        """String representation of AccountCategory."""
        return f"<AccountCategory(id={self.id}, name='{self.name}')>"


class AccountType(TimestampMixin, Base):
    """Account classification within a category (current assets, equity, ...)."""

    __tablename__ = "account_types"

    id: Mapped[int] = mapped_column(primary_key=True, index=True)
    name: Mapped[str] = mapped_column(String(100), unique=True, nullable=False)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
    account_category_id: Mapped[int] = mapped_column(
        ForeignKey("account_categories.id", ondelete="RESTRICT"), nullable=False, index=True
    )
    is_active: Mapped[bool] = mapped_column(Boolean, default=True, nullable=False)

    account_category: Mapped[AccountCategory] = relationship(back_populates="account_types")
    accounts: Mapped[list["Account"]] = relationship(back_populates="account_type")

    def __repr__(self) -> str:
        """String representation of AccountType."""
        return f"<AccountType(id={self.id}, name='{self.name}')>"


class Account(TimestampMixin, Base):
    """Ledger account holding a running balance."""

    __tablename__ = "accounts"

    id: Mapped[int] = mapped_column(primary_key=True, index=True)
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    number: Mapped[str] = mapped_column(String(50), unique=True, nullable=False, index=True)
    balance: Mapped[float] = mapped_column(Float, nullable=False, default=0)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
    account_category_id: Mapped[int] = mapped_column(
        ForeignKey("account_categories.id", ondelete="RESTRICT"), nullable=False, index=True
    )
    account_type_id: Mapped[int] = mapped_column(
        ForeignKey("account_types.id", ondelete="RESTRICT"), nullable=False, index=True
    )
    is_active: Mapped[bool] = mapped_column(Boolean, default=True, nullable=False)

    account_category: Mapped[AccountCategory] = relationship(back_populates="accounts")
    account_type: Mapped[AccountType] = relationship(back_populates="accounts")
    transactions: Mapped[list["Transaction"]] = relationship(back_populates="account")

    def __repr__(self) -> str:
        """String representation of Account."""
        return f"<Account(id={self.id}, number='{self.number}')>"


class Transaction(TimestampMixin, Base):
    """Income or expense booked against an account."""

    __tablename__ = "transactions"

    id: Mapped[int] = mapped_column(primary_key=True, index=True)
    account_id: Mapped[int] = mapped_column(
        ForeignKey("accounts.id", ondelete="RESTRICT"), nullable=False, index=True
    )
    amount: Mapped[float] = mapped_column(Float, nullable=False)
    transaction_type: Mapped[str] = mapped_column(String(10), nullable=False)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
    transaction_date: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False, index=True
    )
    reference_number: Mapped[str | None] = mapped_column(String(100), nullable=True)

    account: Mapped[Account] = relationship(back_populates="transactions")

    def __repr__(self) -> str:
        """String representation of Transaction."""
        return f"<Transaction(id={self.id}, {self.transaction_type} {self.amount})>"


# Defined after Transaction so the correlated subquery can reference it
Account.transaction_count = column_property(
    select(func.count(Transaction.id))
    .where(Transaction.account_id == Account.id)
    .correlate_except(Transaction)
    .scalar_subquery()
)


class Order(TimestampMixin, Base):
    """Sales order."""

    __tablename__ = "orders"

    id: Mapped[int] = mapped_column(primary_key=True, index=True)
    invoice_number: Mapped[str] = mapped_column(String(50), unique=True, nullable=False)
    payment_method: Mapped[str] = mapped_column(String(30), nullable=False)
    total_amount: Mapped[float] = mapped_column(Float, nullable=False, default=0)
    status: Mapped[str] = mapped_column(String(20), nullable=False)
    is_active: Mapped[bool | None] = mapped_column(Boolean, default=True, nullable=True)

    items: Mapped[list["OrderItem"]] = relationship(
        back_populates="order", cascade="all, delete-orphan", order_by="OrderItem.id"
    )

    def __repr__(self) -> str:
        """String representation of Order."""
        return f"<Order(id={self.id}, invoice_number='{self.invoice_number}')>"


class OrderItem(Base):
    """Line item of an order; price is the unit price at order time."""

    __tablename__ = "order_items"

    id: Mapped[int] = mapped_column(primary_key=True, index=True)
    order_id: Mapped[int] = mapped_column(
        ForeignKey("orders.id", ondelete="CASCADE"), nullable=False, index=True
    )
    product_id: Mapped[int] = mapped_column(
        ForeignKey("products.id", ondelete="RESTRICT"), nullable=False
    )
    quantity: Mapped[int] = mapped_column(Integer, nullable=False)
    price: Mapped[float] = mapped_column(Float, nullable=False)

    order: Mapped[Order] = relationship(back_populates="items")
    product: Mapped[Product] = relationship()

    def __repr__(self) -> str:
        """String representation of OrderItem."""
        return f"<OrderItem(id={self.id}, product_id={self.product_id} x{self.quantity})>"
