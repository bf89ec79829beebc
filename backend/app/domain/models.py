from datetime import date
from typing import Optional

class Movie:
    def __init__(
        self,
        title: str,
        description: str,
        release_date: date,
        id: Optional[int] = None
    ):
        self.title = title
        self.description = description
        self.release_date = release_date
        self.id = id

    def __repr__(self) -> str:
        return f"Movie(id={self.id!r}, title={self.title!r}, release_date={self.release_date!r})"
