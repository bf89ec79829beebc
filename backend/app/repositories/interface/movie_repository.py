from abc import ABC, abstractmethod
from typing import List, Optional

from app.domain.models import Movie


class MovieRepository(ABC):
    @abstractmethod
    async def get_all_movies(self) -> List["Movie"]:
        pass

    @abstractmethod
    async def get_by_id(self, movie_id: int) -> Optional["Movie"]:
        pass

    @abstractmethod
    async def add(self, movie: "Movie") -> None:
        """Persist a new movie and set its generated id on the instance."""
        pass
