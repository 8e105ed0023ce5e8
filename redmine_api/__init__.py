from .async_client import AsyncRedmine
from .auth import ApiKeyAuth, AuthProvider, BasicAuth
from .client import Redmine
from .endpoint import (
    Endpoint,
    EndpointBuilder,
    NoResponseBody,
    Pageable,
    QueryParams,
    RenderedRequest,
    ReturnsJsonResponse,
)
from .envelope import ENTITY_KEYS, EnvelopeKeys, unwrap, unwrap_page, wrap
from .env import auth_from_env, redmine_url_from_env
from .errors import (
    ConstructionError,
    DecodeError,
    EndpointCapabilityError,
    EnvelopeMismatch,
    PaginationKeyError,
    RedmineError,
    StatusError,
    TransportError,
    UploadFileError,
)
from .models import Attachment, IdName, Issue, Project, TimeEntry, UploadToken, User, WikiPage
from .pages import ResponsePage

__all__ = [
    "Redmine",
    "AsyncRedmine",
    "AuthProvider",
    "ApiKeyAuth",
    "BasicAuth",
    "auth_from_env",
    "redmine_url_from_env",
    "Endpoint",
    "EndpointBuilder",
    "NoResponseBody",
    "ReturnsJsonResponse",
    "Pageable",
    "QueryParams",
    "RenderedRequest",
    "ResponsePage",
    "ENTITY_KEYS",
    "EnvelopeKeys",
    "wrap",
    "unwrap",
    "unwrap_page",
    "RedmineError",
    "ConstructionError",
    "EndpointCapabilityError",
    "TransportError",
    "StatusError",
    "DecodeError",
    "EnvelopeMismatch",
    "PaginationKeyError",
    "UploadFileError",
    "IdName",
    "Issue",
    "Project",
    "User",
    "TimeEntry",
    "Attachment",
    "UploadToken",
    "WikiPage",
]
