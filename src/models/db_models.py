"""SQLAlchemy ORM models for the event ledger tables"""

from sqlalchemy import Column, String, Integer, DateTime, ForeignKey, Index, UniqueConstraint
from sqlalchemy.orm import relationship
from datetime import datetime

from .database import Base
from .db_types import ExactDecimal


class SaleEvent(Base):
    """Sales event table - one row per invoice"""
    __tablename__ = "sales_events"
    
    # Autoincrement id doubles as the persisted ingestion sequence
    id = Column(Integer, primary_key=True, autoincrement=True)
    invoice_id = Column(String(100), nullable=False, unique=True)
    date = Column(DateTime, nullable=False)
    
    created_at = Column(DateTime, nullable=False, default=datetime.utcnow)
    
    items = relationship(
        "SaleItem",
        back_populates="sale",
        cascade="all, delete-orphan",
        order_by="SaleItem.line_number",
        lazy="selectin",
    )
    
    __table_args__ = (
        Index('ix_sales_events_date', 'date'),
    )


class SaleItem(Base):
    """Sales item table - foreign key to SaleEvent"""
    __tablename__ = "sales_items"
    
    id = Column(Integer, primary_key=True, autoincrement=True)
    sale_id = Column(Integer, ForeignKey("sales_events.id", ondelete="CASCADE"), nullable=False)
    
    item_id = Column(String(100), nullable=False)
    line_number = Column(Integer, nullable=False)
    cost = Column(ExactDecimal(18, 4), nullable=True)
    tax_rate = Column(ExactDecimal(12, 6), nullable=True)
    
    sale = relationship("SaleEvent", back_populates="items")
    
    __table_args__ = (
        UniqueConstraint('sale_id', 'item_id', name='uq_sales_items_sale_item'),
        Index('ix_sales_items_sale_id', 'sale_id', 'line_number'),
    )


class Amendment(Base):
    """Amendment table - standalone line item overrides"""
    __tablename__ = "amendments"
    
    # Autoincrement id doubles as the persisted ingestion sequence
    id = Column(Integer, primary_key=True, autoincrement=True)
    invoice_id = Column(String(100), nullable=False)
    item_id = Column(String(100), nullable=False)
    date = Column(DateTime, nullable=False)
    cost = Column(ExactDecimal(18, 4), nullable=True)
    tax_rate = Column(ExactDecimal(12, 6), nullable=True)
    
    created_at = Column(DateTime, nullable=False, default=datetime.utcnow)
    
    __table_args__ = (
        Index('ix_amendments_identity', 'invoice_id', 'item_id'),
    )


class TaxPayment(Base):
    """Tax payment table"""
    __tablename__ = "tax_payments"
    
    id = Column(Integer, primary_key=True, autoincrement=True)
    date = Column(DateTime, nullable=False)
    amount = Column(ExactDecimal(18, 4), nullable=True)
    
    created_at = Column(DateTime, nullable=False, default=datetime.utcnow)
    
    __table_args__ = (
        Index('ix_tax_payments_date', 'date'),
    )
