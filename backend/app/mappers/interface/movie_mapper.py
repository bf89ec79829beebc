from abc import ABC, abstractmethod
from typing import List

from app.domain.dto import MovieDto
from app.domain.models import Movie


class MovieMapper(ABC):
    @abstractmethod
    def to_transport(self, movie: Movie) -> MovieDto:
        pass

    @abstractmethod
    def to_transport_list(self, movies: List[Movie]) -> List[MovieDto]:
        pass

    @abstractmethod
    def from_transport(self, movie_dto: MovieDto) -> Movie:
        pass
