from sqlalchemy import JSON, Column, Integer, String, Text

from accessaudit.platform.db.base import BaseModel


class ScanResultRecord(BaseModel):
    """
    A single mock accessibility scan of a URL.

    Rows are written once and never updated or deleted.
    """
    __tablename__ = "public_scans"

    url = Column(Text, nullable=False)
    ip_address = Column(String(64), nullable=False)
    scan_type = Column(String(100), nullable=False)
    score = Column(Integer, nullable=False)

    # Stored with camelCase keys, exactly as served
    issues = Column(JSON, nullable=False)
    recommendations = Column(JSON, nullable=False)

    wcag_level = Column(String(50), nullable=False)

    def __repr__(self) -> str:
        return f"<ScanResultRecord(id={self.id}, url='{self.url}', score={self.score})>"
