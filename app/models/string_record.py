from sqlalchemy import Column, String, Integer, Boolean, DateTime, JSON, Text
from app.database import Base

class StringRecordRow(Base):
    __tablename__ = "string_records"

    # Autoincrementing key preserves insertion order for scans
    seq = Column(Integer, primary_key=True, autoincrement=True)
    id = Column(String(64), unique=True, nullable=False, index=True)  # SHA-256 hash
    value = Column(Text, unique=True, nullable=False, index=True)
    length = Column(Integer, nullable=False)
    is_palindrome = Column(Boolean, nullable=False)
    unique_characters = Column(Integer, nullable=False)
    word_count = Column(Integer, nullable=False)
    sha256_hash = Column(String(64), nullable=False)
    character_frequency_map = Column(JSON, nullable=False)
    created_at = Column(DateTime, nullable=False)  # naive UTC
