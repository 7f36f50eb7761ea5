# ezelectronics/db/models.py
import enum
from sqlalchemy import Column, Integer, String, Float, Boolean, Date, ForeignKey, Enum
from sqlalchemy.orm import relationship
from ezelectronics.db.database import Base


class RoleEnum(str, enum.Enum):
    customer = "Customer"
    manager = "Manager"
    admin = "Admin"


class CategoryEnum(str, enum.Enum):
    smartphone = "Smartphone"
    laptop = "Laptop"
    appliance = "Appliance"


class User(Base):
    __tablename__ = "users"

    username = Column(String, primary_key=True, index=True)
    name = Column(String, nullable=False)
    surname = Column(String, nullable=False)
    hashed_password = Column(String, nullable=False)
    salt = Column(String, nullable=False)
    role = Column(Enum(RoleEnum, values_callable=lambda e: [m.value for m in e]), nullable=False)
    address = Column(String, nullable=True)
    birthdate = Column(Date, nullable=True)


class Product(Base):
    __tablename__ = "products"

    model = Column(String, primary_key=True, index=True)
    category = Column(Enum(CategoryEnum, values_callable=lambda e: [m.value for m in e]), nullable=False)
    quantity = Column(Integer, nullable=False, default=0)
    details = Column(String, nullable=True)
    selling_price = Column(Float, nullable=False)
    arrival_date = Column(Date, nullable=False)


class Cart(Base):
    __tablename__ = "carts"

    id = Column(Integer, primary_key=True, index=True)
    # At most one row per customer has paid == False; enforced by queries
    customer = Column(String, index=True, nullable=False)
    paid = Column(Boolean, nullable=False, default=False)
    payment_date = Column(Date, nullable=True)
    total = Column(Float, nullable=False, default=0.0)

    items = relationship(
        "CartItem",
        back_populates="cart",
        cascade="all, delete-orphan",
        order_by="CartItem.id",
    )


class CartItem(Base):
    __tablename__ = "cart_items"

    id = Column(Integer, primary_key=True, index=True)
    cart_id = Column(Integer, ForeignKey("carts.id", ondelete="CASCADE"), nullable=False)
    # Snapshot of the product at add time, no foreign key to products
    model = Column(String, nullable=False)
    quantity = Column(Integer, nullable=False, default=1)
    category = Column(Enum(CategoryEnum, values_callable=lambda e: [m.value for m in e]), nullable=False)
    price = Column(Float, nullable=False)

    cart = relationship("Cart", back_populates="items")


class Review(Base):
    __tablename__ = "reviews"

    model = Column(String, primary_key=True)
    username = Column(String, primary_key=True)
    score = Column(Integer, nullable=False)
    date = Column(Date, nullable=False)
    comment = Column(String, nullable=False)
