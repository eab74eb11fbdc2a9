"""Product transaction model module."""
from datetime import date
from decimal import Decimal

from sqlalchemy import Boolean, Date, Integer, Numeric, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from sales_api.database.database import Base


class Product(Base):
    """Product transaction record loaded from the seed feed."""

    __tablename__ = "products"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=False)
    title: Mapped[str] = mapped_column(String(256), nullable=False)
    price: Mapped[Decimal] = mapped_column(Numeric(12, 2), nullable=False)
    description: Mapped[str] = mapped_column(Text, nullable=True)
    category: Mapped[str] = mapped_column(String(128), nullable=False, index=True)
    image: Mapped[str] = mapped_column(String(512), nullable=True)
    sold: Mapped[bool] = mapped_column(Boolean, nullable=False)
    date_of_sale: Mapped[date] = mapped_column("dateOfSale", Date, nullable=False)
    # Two-digit month key ("01".."12") derived from date_of_sale
    sale_month: Mapped[str] = mapped_column(String(2), nullable=False, index=True)
