import logging

from fastapi import APIRouter, Depends, Form, Path, Response, status
from fastapi.responses import PlainTextResponse

from shortlink_app.dependencies import get_shortener_service
from shortlink_app.services.exceptions import InvalidUrlError, StoreError
from shortlink_app.services.shortener_service import ShortenerService
from shortlink_app.services.url_validation import to_header_url

logger = logging.getLogger(__name__)

router = APIRouter(tags=["shortener"])


@router.post(
    "/",
    response_class=PlainTextResponse,
    responses={
        200: {"description": "The 6 character alphanumeric id of the shortened url, e.g. `3n4j5d`."},
        400: {"description": "The url was invalid."},
        500: {"description": "Unexpected database error, details in the body."},
    },
)
def shorten(
    url: str = Form("", description="The url to shorten."),
    shortener_service: ShortenerService = Depends(get_shortener_service),
):
    """
    Shorten a url.
    
    Send a form with a single field, `url`, e.g. `url=https://google.com/`.
    Shortening the same url again returns the same id.
    
    Endpoint is sync on purpose: FastAPI runs it in the threadpool, so the
    blocking store round-trips never hold up the event loop.
    """
    try:
        short_id = shortener_service.shorten(url)
    except InvalidUrlError:
        return Response(status_code=status.HTTP_400_BAD_REQUEST)
    except StoreError as e:
        logger.error("Store error while shortening %r: %s", url, e)
        return PlainTextResponse(str(e), status_code=status.HTTP_500_INTERNAL_SERVER_ERROR)
    
    return PlainTextResponse(short_id)


@router.get(
    "/{short_id}",
    responses={
        302: {"description": "Found, `Location` holds the original url."},
        404: {"description": "No url for this id."},
        500: {"description": "Database error, details in the body."},
    },
)
def redirect(
    short_id: str = Path(..., description="The id of the url to redirect to."),
    shortener_service: ShortenerService = Depends(get_shortener_service),
):
    """
    Redirect to the original url for `short_id`.
    """
    try:
        url = shortener_service.resolve(short_id)
    except StoreError as e:
        logger.error("Store error while resolving %r: %s", short_id, e)
        return PlainTextResponse(
            f"Database error: {e}",
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        )
    
    if url is None:
        return Response(status_code=status.HTTP_404_NOT_FOUND)
    
    # Not RedirectResponse: it would re-quote the stored url
    return Response(
        status_code=status.HTTP_302_FOUND,
        headers={"location": to_header_url(url)},
    )
