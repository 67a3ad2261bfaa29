"""Project-wide constants shared by the server and its tests."""

AUTH_TOKEN_HEADER: str = "auth-token"
BEARER_PREFIX: str = "Bearer "

PUBLIC_PATHS: frozenset = frozenset({
    "/login",
    "/logout",
    "/health",
    "/docs",
    "/docs/oauth2-redirect",
    "/redoc",
    "/openapi.json",
})

JWT_ALGORITHM: str = "HS256"
