"""Shared constants for client ↔ server communication."""

DEFAULT_SOCKET = "mysock.sock"

# The host part is never resolved; every connection dials the socket path.
BASE_URL = "http://localhost"

# REST endpoints
EP_USERS = "/api/v1/users"
EP_USER = "/api/v1/user"

CONTENT_TYPE_JSON = "application/json"
