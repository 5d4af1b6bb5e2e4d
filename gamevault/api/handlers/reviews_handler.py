"""
Reviews Handler

Endpoints:
==========
    GET    /api/reviews/game/{gameId}?limit=&offset=   public
    GET    /api/reviews/me                             caller's reviews
    POST   /api/reviews                                create or replace
    PATCH  /api/reviews/{reviewId}                     author only
    DELETE /api/reviews/{reviewId}                     author only

POST answers 201 when a review was created and 200 when an existing review
of the same game was replaced.
"""

from uuid import UUID

from fastapi import APIRouter, Depends, Response, status

from gamevault.api.dependencies.auth import CurrentUser
from gamevault.api.dependencies.pagination import Pagination
from gamevault.api.dependencies.services import get_review_service
from gamevault.shared.schemas.common import PaginationMeta, SuccessResponse
from gamevault.shared.schemas.review import (
    MyReviewsResponse,
    ReviewCreate,
    ReviewListResponse,
    ReviewResponse,
    ReviewUpdate,
)
from gamevault.shared.services.review_service import ReviewService


router = APIRouter()


@router.get("/game/{game_id}", response_model=ReviewListResponse)
async def list_game_reviews(
    game_id: UUID,
    pagination: Pagination,
    service: ReviewService = Depends(get_review_service),
):
    """Reviews of a game, newest first."""
    reviews, total = await service.list_for_game(
        game_id,
        limit=pagination.limit,
        offset=pagination.offset,
    )
    return ReviewListResponse(
        reviews=[ReviewResponse.model_validate(review) for review in reviews],
        pagination=PaginationMeta.create(
            total=total,
            limit=pagination.limit,
            offset=pagination.offset,
        ),
    )


@router.get("/me", response_model=MyReviewsResponse)
async def list_my_reviews(
    current_user: CurrentUser,
    service: ReviewService = Depends(get_review_service),
):
    """All reviews written by the caller."""
    reviews = await service.list_for_user(current_user.user_id)
    return MyReviewsResponse(
        reviews=[ReviewResponse.model_validate(review) for review in reviews],
    )


@router.post(
    "",
    response_model=ReviewResponse,
    status_code=status.HTTP_201_CREATED,
)
async def submit_review(
    data: ReviewCreate,
    response: Response,
    current_user: CurrentUser,
    service: ReviewService = Depends(get_review_service),
):
    """
    Review a game from the caller's collection.

    Raises:
        400: If the game is not in the caller's collection
        404: If the game does not exist
    """
    review, created = await service.submit_review(
        current_user.user_id,
        data.game_id,
        rating=data.rating,
        content=data.content,
    )
    if not created:
        response.status_code = status.HTTP_200_OK
    return ReviewResponse.model_validate(review)


@router.patch("/{review_id}", response_model=ReviewResponse)
async def update_review(
    review_id: UUID,
    data: ReviewUpdate,
    current_user: CurrentUser,
    service: ReviewService = Depends(get_review_service),
):
    """
    Update rating and/or content of the caller's review.

    Raises:
        403: If the caller is not the author
        404: If the review does not exist
    """
    review = await service.update_review(
        current_user.user_id,
        review_id,
        data.model_dump(exclude_unset=True),
    )
    return ReviewResponse.model_validate(review)


@router.delete("/{review_id}", response_model=SuccessResponse)
async def delete_review(
    review_id: UUID,
    current_user: CurrentUser,
    service: ReviewService = Depends(get_review_service),
):
    """
    Delete the caller's review.

    Raises:
        403: If the caller is not the author
        404: If the review does not exist
    """
    await service.delete_review(current_user.user_id, review_id)
    return SuccessResponse()
