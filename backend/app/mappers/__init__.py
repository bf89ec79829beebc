from app.mappers.interface.movie_mapper import MovieMapper
from app.mappers.implementation.dto_movie_mapper import DtoMovieMapper

__all__ = ["MovieMapper", "DtoMovieMapper"]
