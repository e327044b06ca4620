from fastapi import APIRouter, Depends, status
from fastapi.responses import JSONResponse

from talent_api.dependencies import get_profile_store
from talent_api.schemas import ErrorResponse, ProfileCreate, ProfileListResponse, ProfileResponse
from talent_api.serializers import profile_to_response
from talent_api.services import ProfileConflictError, ProfileStore

router = APIRouter(prefix="/profiles", tags=["profiles"])


@router.get("", response_model=ProfileListResponse)
async def list_profiles(store: ProfileStore = Depends(get_profile_store)):
    profiles = await store.select_all()
    return ProfileListResponse(profiles=[profile_to_response(p) for p in profiles])


@router.get("/{profile_id}", response_model=ProfileResponse, responses={404: {"model": ErrorResponse}})
async def get_profile(profile_id: str, store: ProfileStore = Depends(get_profile_store)):
    found = await store.select_by_ids([profile_id])
    if not found:
        return JSONResponse(status_code=status.HTTP_404_NOT_FOUND, content={"error": "Profile not found"})
    return profile_to_response(found[0])


@router.post(
    "",
    response_model=ProfileResponse,
    status_code=status.HTTP_201_CREATED,
    responses={400: {"model": ErrorResponse}, 409: {"model": ErrorResponse}},
)
async def create_profile(body: ProfileCreate, store: ProfileStore = Depends(get_profile_store)):
    try:
        profile = await store.create(body)
    except ProfileConflictError as e:
        return JSONResponse(status_code=status.HTTP_409_CONFLICT, content={"error": str(e)})
    return profile_to_response(profile)
