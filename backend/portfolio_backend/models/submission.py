from sqlalchemy import Column, Integer, Text, DateTime, func
from sqlalchemy.orm import declarative_base

Base = declarative_base()


class Submission(Base):
    __tablename__ = "submissions"

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(Text, nullable=False)
    email = Column(Text, nullable=False)
    about = Column(Text, nullable=True)
    prompt = Column(Text, nullable=False)
    submission_date = Column(DateTime(timezone=False), server_default=func.now())

    def __repr__(self):
        return f"<Submission(id={self.id}, email={self.email})>"
