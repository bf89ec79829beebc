from typing import List

from app.domain.dto import MovieDto
from app.domain.models import Movie
from app.mappers.interface.movie_mapper import MovieMapper


class DtoMovieMapper(MovieMapper):
    def to_transport(self, movie: Movie) -> MovieDto:
        return MovieDto(
            id=movie.id,
            title=movie.title,
            description=movie.description,
            release_date=movie.release_date
        )

    def to_transport_list(self, movies: List[Movie]) -> List[MovieDto]:
        return [self.to_transport(movie) for movie in movies]

    def from_transport(self, movie_dto: MovieDto) -> Movie:
        return Movie(
            id=movie_dto.id,
            title=movie_dto.title,
            description=movie_dto.description,
            release_date=movie_dto.release_date
        )
