"""Request credential extraction."""

BEARER_PREFIX = "bearer "


def extract_token(authorization: str | None, auth_token: str | None) -> str | None:
    """Pick the JWT from the Authorization header, falling back to the cookie.

    Args:
        authorization: Raw ``Authorization`` header value
        auth_token: ``auth_token`` cookie value

    Returns:
        The token, or None if the request carries no credentials
    """
    if authorization and authorization.lower().startswith(BEARER_PREFIX):
        token = authorization[len(BEARER_PREFIX) :].strip()
        if token:
            return token
    return auth_token or None
