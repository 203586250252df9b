from pydantic import AnyUrl, TypeAdapter, ValidationError

from shortlink_app.services.exceptions import InvalidUrlError

_url_adapter = TypeAdapter(AnyUrl)


def validate_url(raw_url: str) -> AnyUrl:
    """
    Check that ``raw_url`` is an absolute url with a scheme and a host.
    
    The parsed value is only used for validation. Callers keep storing
    ``raw_url`` as submitted so lookups match on the exact text.
    
    Raises:
        InvalidUrlError: if the url does not parse or has no host
    """
    if not isinstance(raw_url, str) or not raw_url:
        raise InvalidUrlError()
    
    try:
        parsed = _url_adapter.validate_python(raw_url)
    except ValidationError as e:
        raise InvalidUrlError() from e
    
    if not parsed.host:
        raise InvalidUrlError()
    
    return parsed


def to_header_url(url: str) -> str:
    """
    Form of a stored url that can go into an HTTP header.
    
    Printable ASCII urls are returned untouched. Anything else gets the
    parser's ASCII serialisation: IDNA host, percent-encoded path and
    query, tabs and newlines stripped.
    """
    if url.isascii() and url.isprintable():
        return url
    return str(_url_adapter.validate_python(url))
