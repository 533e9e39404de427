import logging
from typing import List, Optional

from fastapi import APIRouter, Depends, Query, Response, status

from app.api.dependencies import (
    GatewayHeaders,
    get_gateway_headers,
    get_user_service,
    set_list_headers,
)
from app.exceptions import NotFoundError
from app.schemas.common import ApiResponse
from app.schemas.user import ExistsResponse, UserCreate, UserUpdate, UserResponse
from app.services.filters import UserCriteria
from app.services.user_service import UserService

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/users", tags=["Users"])


def _users(users) -> List[UserResponse]:
    return [UserResponse.model_validate(u) for u in users]


@router.get(
    "",
    response_model=ApiResponse[List[UserResponse]],
    summary="List users",
    description="Get all users with optional filters: country, city, status, search."
)
def list_users(
    response: Response,
    country: Optional[str] = Query(None, description="Filter by country"),
    city: Optional[str] = Query(None, description="Filter by city"),
    user_status: Optional[str] = Query(None, alias="status", description="Filter by status (ACTIVE, INACTIVE)"),
    search: Optional[str] = Query(None, description="Search in full name"),
    gateway: GatewayHeaders = Depends(get_gateway_headers),
    service: UserService = Depends(get_user_service),
):
    if gateway.client_id:
        logger.info(f"User listing requested by client {gateway.client_id}")

    users = service.list(UserCriteria(country=country, city=city, status=user_status, search=search))
    set_list_headers(response, len(users), gateway)
    return ApiResponse(message="Users retrieved successfully", data=_users(users))


@router.get("/search", response_model=ApiResponse[List[UserResponse]], summary="Search users by name")
def search_users(
    response: Response,
    name: str = Query(..., description="Name to search for"),
    service: UserService = Depends(get_user_service),
):
    users = service.search_by_name(name)
    set_list_headers(response, len(users))
    return ApiResponse(message="Search completed", data=_users(users))


@router.get("/countries", response_model=ApiResponse[List[str]], summary="List countries")
def list_countries(service: UserService = Depends(get_user_service)):
    return ApiResponse(message="Countries retrieved successfully", data=service.all_countries())


@router.get("/cities", response_model=ApiResponse[List[str]], summary="List cities")
def list_cities(service: UserService = Depends(get_user_service)):
    return ApiResponse(message="Cities retrieved successfully", data=service.all_cities())


@router.get(
    "/exists/username/{username}",
    response_model=ApiResponse[ExistsResponse],
    summary="Check whether a username is taken"
)
def username_exists(username: str, service: UserService = Depends(get_user_service)):
    exists = service.exists_by_username(username)
    return ApiResponse(message="Username checked", data=ExistsResponse(exists=exists))


@router.get(
    "/exists/email/{email}",
    response_model=ApiResponse[ExistsResponse],
    summary="Check whether an email is taken"
)
def email_exists(email: str, service: UserService = Depends(get_user_service)):
    exists = service.exists_by_email(email)
    return ApiResponse(message="Email checked", data=ExistsResponse(exists=exists))


@router.get("/username/{username}", response_model=ApiResponse[UserResponse], summary="Get user by username")
def get_user_by_username(username: str, service: UserService = Depends(get_user_service)):
    user = service.get_by_username(username)
    return ApiResponse(message="User found", data=UserResponse.model_validate(user))


@router.get("/email/{email}", response_model=ApiResponse[UserResponse], summary="Get user by email")
def get_user_by_email(email: str, service: UserService = Depends(get_user_service)):
    user = service.get_by_email(email)
    return ApiResponse(message="User found", data=UserResponse.model_validate(user))


@router.get(
    "/country/{country}",
    response_model=ApiResponse[List[UserResponse]],
    summary="List users by country",
    description="Country is matched case-insensitively."
)
def list_users_by_country(
    country: str,
    response: Response,
    service: UserService = Depends(get_user_service),
):
    users = service.get_by_country(country)
    set_list_headers(response, len(users))
    return ApiResponse(message=f"Users retrieved for country: {country}", data=_users(users))


@router.get(
    "/city/{city}",
    response_model=ApiResponse[List[UserResponse]],
    summary="List users by city",
    description="City is matched case-insensitively."
)
def list_users_by_city(
    city: str,
    response: Response,
    service: UserService = Depends(get_user_service),
):
    users = service.get_by_city(city)
    set_list_headers(response, len(users))
    return ApiResponse(message=f"Users retrieved for city: {city}", data=_users(users))


@router.get(
    "/status/{user_status}",
    response_model=ApiResponse[List[UserResponse]],
    summary="List users by status",
    description="Status is matched case-insensitively (ACTIVE, INACTIVE)."
)
def list_users_by_status(
    user_status: str,
    response: Response,
    service: UserService = Depends(get_user_service),
):
    users = service.get_by_status(user_status)
    set_list_headers(response, len(users))
    return ApiResponse(message=f"Users retrieved for status: {user_status}", data=_users(users))


@router.get("/{user_id}", response_model=ApiResponse[UserResponse], summary="Get user by ID")
def get_user(user_id: int, service: UserService = Depends(get_user_service)):
    user = service.get_by_id(user_id)
    return ApiResponse(message="User found", data=UserResponse.model_validate(user))


@router.post(
    "",
    response_model=ApiResponse[UserResponse],
    status_code=status.HTTP_201_CREATED,
    summary="Register a new user",
    description="Username and email must be unique; a duplicate returns 409."
)
def create_user(
    user_data: UserCreate,
    response: Response,
    service: UserService = Depends(get_user_service),
):
    user = service.create(user_data)
    response.headers["Location"] = f"/api/v1/users/{user.id}"
    return ApiResponse(message="User created successfully", data=UserResponse.model_validate(user))


@router.put(
    "/{user_id}",
    response_model=ApiResponse[UserResponse],
    summary="Update a user",
    description="Replace every field of a user. Omitted optional fields are cleared."
)
def update_user(
    user_id: int,
    user_data: UserUpdate,
    service: UserService = Depends(get_user_service),
):
    user = service.update(user_id, user_data)
    return ApiResponse(message="User updated successfully", data=UserResponse.model_validate(user))


@router.delete("/{user_id}", response_model=ApiResponse, summary="Delete a user")
def delete_user(user_id: int, service: UserService = Depends(get_user_service)):
    if not service.delete(user_id):
        raise NotFoundError("User", "id", user_id)
    return ApiResponse(message="User deleted successfully")
