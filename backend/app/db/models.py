from sqlalchemy import Column, Date, Integer, String
from app.db.database import Base


class MovieORM(Base):
    __tablename__ = "movies"

    id = Column(Integer, primary_key=True, index=True, autoincrement=True)
    title = Column(String, nullable=False)
    description = Column(String)
    release_date = Column(Date)
