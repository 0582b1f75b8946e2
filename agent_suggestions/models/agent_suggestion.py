from sqlalchemy import Column, Integer, String, Text, JSON, DateTime

from db import Base


class RecAgentSuggestion(Base):
    __tablename__ = "rec_agent_suggestions"

    id = Column(Integer, primary_key=True)
    pointer_no = Column(Integer, nullable=False, index=True)
    title = Column(String, nullable=False)
    description = Column(Text, default="")
    tags = Column(JSON)
    source = Column(String, default="EXCEL")  # EXCEL/SUPERADMIN
    document_url = Column(String)
    document_name = Column(String)
    created_at = Column(DateTime)
