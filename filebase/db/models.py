"""SQLAlchemy models mirroring the JSON document tree."""
from __future__ import annotations

from sqlalchemy import Column, DateTime, ForeignKey, JSON, String, func
from sqlalchemy.orm import relationship

from .session import Base


class CollectionRow(Base):
    __tablename__ = "collections"

    name = Column(String(255), primary_key=True)
    created_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)

    documents = relationship("DocumentRow", back_populates="owner", cascade="all,delete-orphan")


class DocumentRow(Base):
    __tablename__ = "documents"

    collection = Column(String(255), ForeignKey("collections.name", ondelete="CASCADE"), primary_key=True)
    doc_id = Column(String(255), primary_key=True)
    data = Column(JSON, nullable=True)
    updated_at = Column(DateTime(timezone=True), server_default=func.now(), onupdate=func.now(), nullable=False)

    owner = relationship("CollectionRow", back_populates="documents")
