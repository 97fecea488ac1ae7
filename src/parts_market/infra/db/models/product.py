from __future__ import annotations

import uuid
from datetime import datetime

from sqlalchemy import (
    JSON,
    Boolean,
    DateTime,
    Enum,
    Float,
    ForeignKey,
    Integer,
    String,
    Text,
    UniqueConstraint,
    Uuid,
    func,
)
from sqlalchemy.orm import Mapped, mapped_column, relationship

from parts_market.domain.product import ProductCondition
from parts_market.infra.db.models.base import Base
from parts_market.infra.db.models.catalog import CarModelRow, PartCategoryRow


class DealerRow(Base):
    __tablename__ = "dealers"

    id: Mapped[uuid.UUID] = mapped_column(Uuid, primary_key=True, default=uuid.uuid4)
    name: Mapped[str] = mapped_column(String(120), nullable=False)
    store_name: Mapped[str | None] = mapped_column(String(200), nullable=True)
    phone_number: Mapped[str | None] = mapped_column(String(30), nullable=True)

    # Used only for location ranking; free text, no normalization
    province: Mapped[str | None] = mapped_column(String(50), nullable=True)
    city: Mapped[str | None] = mapped_column(String(80), nullable=True)

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        server_default=func.now(),
    )


class ProductRow(Base):
    __tablename__ = "products"

    id: Mapped[uuid.UUID] = mapped_column(Uuid, primary_key=True, default=uuid.uuid4)
    name: Mapped[str] = mapped_column(String(200), nullable=False)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
    part_number: Mapped[str | None] = mapped_column(String(100), nullable=True)
    oem_number: Mapped[str | None] = mapped_column(String(100), nullable=True)

    price: Mapped[int] = mapped_column(Integer, nullable=False)  # IQD, no fractional unit
    rating: Mapped[float | None] = mapped_column(Float, nullable=True)
    stock_quantity: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    condition: Mapped[ProductCondition] = mapped_column(
        Enum(ProductCondition, name="product_condition"),
        nullable=False,
        default=ProductCondition.NEW,
    )
    warranty: Mapped[str | None] = mapped_column(String(100), nullable=True)
    manufacturer: Mapped[str | None] = mapped_column(String(100), nullable=True)
    images: Mapped[list[str] | None] = mapped_column(JSON, nullable=True)

    is_approved: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False, index=True)

    dealer_id: Mapped[uuid.UUID] = mapped_column(
        Uuid, ForeignKey("dealers.id"), nullable=False, index=True
    )
    category_id: Mapped[uuid.UUID] = mapped_column(
        Uuid, ForeignKey("part_categories.id"), nullable=False, index=True
    )

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        server_default=func.now(),
        index=True,
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        server_default=func.now(),
        onupdate=func.now(),
    )

    dealer: Mapped[DealerRow] = relationship()
    category: Mapped[PartCategoryRow] = relationship()
    compatibility: Mapped[list[ProductCompatibilityRow]] = relationship(
        back_populates="product",
        cascade="all, delete-orphan",
    )


class ProductCompatibilityRow(Base):
    __tablename__ = "product_compatibility"
    __table_args__ = (UniqueConstraint("product_id", "model_id"),)

    id: Mapped[uuid.UUID] = mapped_column(Uuid, primary_key=True, default=uuid.uuid4)
    product_id: Mapped[uuid.UUID] = mapped_column(
        Uuid, ForeignKey("products.id", ondelete="CASCADE"), nullable=False, index=True
    )
    model_id: Mapped[uuid.UUID] = mapped_column(
        Uuid, ForeignKey("car_models.id"), nullable=False, index=True
    )

    product: Mapped[ProductRow] = relationship(back_populates="compatibility")
    car_model: Mapped[CarModelRow] = relationship()
