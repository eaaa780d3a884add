from rest_framework.authentication import TokenAuthentication


class BearerTokenAuthentication(TokenAuthentication):
    """
    Token authentication using the `Authorization: Bearer <token>` header.

    DRF's `TokenAuthentication` expects the `Token` keyword. Clients of this API send the
    token as a bearer token instead; everything else (the token model, the lookup and the
    401 challenge) stays as DRF implements it.
    """
    keyword = 'Bearer'
