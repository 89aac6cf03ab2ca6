import logging

from fastapi import APIRouter, Depends, Request, status
from fastapi.responses import JSONResponse

from itemapi.schemas import ErrorResponse, Item, ItemCreate
from itemapi.storage import ItemStore
from itemapi.validation import validate_item_payload

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/items", tags=["items"])

NOT_FOUND_BODY = {"error": "Item not found"}


def get_store(request: Request) -> ItemStore:
    return request.app.state.store


def validation_error_response(fields: dict[str, str]) -> JSONResponse:
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"error": "Validation failed", "fields": fields},
    )


@router.post(
    "",
    response_model=Item,
    status_code=status.HTTP_201_CREATED,
    responses={400: {"model": ErrorResponse}},
)
async def create_item(payload: ItemCreate, store: ItemStore = Depends(get_store)):
    errors = validate_item_payload(payload)
    if errors:
        logger.info("rejected item create: %s", ", ".join(sorted(errors)))
        return validation_error_response(errors)
    return store.add_item(payload)


@router.get(
    "/{item_id}",
    response_model=Item,
    responses={404: {"model": ErrorResponse}},
)
async def get_item(item_id: int, store: ItemStore = Depends(get_store)):
    item = store.get_item_by_id(item_id)
    if item is None:
        logger.debug("item %s not found", item_id)
        return JSONResponse(status_code=status.HTTP_404_NOT_FOUND, content=NOT_FOUND_BODY)
    return item
