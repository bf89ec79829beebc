from typing import List, Optional
from fastapi import APIRouter, Body, Depends, Header, HTTPException, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.responses import JSONResponse

from app.domain.dto import MovieDto
from app.domain.outcomes import BadRequest, Created, NotFound, Ok, Outcome, Unauthorized
from app.handlers.movie_handler import MovieHandler
from app.mappers import MovieMapper
from app.service.dependencies import get_movie_handler, get_movie_mapper


router = APIRouter(
    prefix="/movies",
    tags=["Movies"],
    responses={404: {"description": "Not found"}}
)


def to_response(outcome: Outcome, request: Request):
    if isinstance(outcome, Ok):
        return outcome.payload

    if isinstance(outcome, Created):
        location = request.url_for(outcome.action, **outcome.route_values)
        return JSONResponse(
            status_code=status.HTTP_201_CREATED,
            content=jsonable_encoder(outcome.payload),
            headers={"Location": str(location)}
        )

    if isinstance(outcome, NotFound):
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=outcome.message)

    if isinstance(outcome, BadRequest):
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=outcome.message)

    if isinstance(outcome, Unauthorized):
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail=outcome.message,
            headers={"WWW-Authenticate": "ApiKey"}
        )

    raise TypeError(f"Unsupported outcome type: {type(outcome).__name__}")


@router.get("", response_model=List[MovieDto])
async def get_movies(
    request: Request,
    movie_handler: MovieHandler = Depends(get_movie_handler)
):
    outcome = await movie_handler.list_movies()
    return to_response(outcome, request)


@router.get("/{id}", response_model=MovieDto)
async def get_movie(
    id: int,
    request: Request,
    movie_handler: MovieHandler = Depends(get_movie_handler)
):
    outcome = await movie_handler.get_movie(id)
    return to_response(outcome, request)


@router.post("", status_code=status.HTTP_201_CREATED, response_model=MovieDto)
async def create_movie(
    request: Request,
    movie: Optional[MovieDto] = Body(None),
    api_key: Optional[str] = Header(None, alias="X-API-Key"),
    movie_handler: MovieHandler = Depends(get_movie_handler),
    movie_mapper: MovieMapper = Depends(get_movie_mapper)
):
    candidate = movie_mapper.from_transport(movie) if movie is not None else None
    outcome = await movie_handler.create_movie(candidate, api_key)
    return to_response(outcome, request)
