"""Dependency injection container for the solrhttp transport."""
from dependency_injector import containers, providers
import requests

from solrhttp.services.http_primitive import RequestsPrimitive
from solrhttp.services.stream_transport import StreamContextTransport
from solrhttp.services.transport import HttpTransport
from solrhttp import config as env


# Environment variables used by the container (read via `solrhttp.config` helpers).
#
# SOLR_DEFAULT_SOCKET_TIMEOUT (float seconds, default: socket default, then 60)
#   Fallback timeout for requests issued without a positive timeout. Read via
#   `config.default_socket_timeout()`, so zero and negative values become 60.
#
# SOLR_USERNAME / SOLR_PASSWORD (str | optional)
#   Basic auth credentials. Applied by `build_transport()` only when both are set.
ENV = {
    "SOLR_DEFAULT_SOCKET_TIMEOUT": env.default_socket_timeout(),
    "SOLR_USERNAME": env.get_optional_str_env("SOLR_USERNAME"),
    "SOLR_PASSWORD": env.get_optional_str_env("SOLR_PASSWORD"),
}


class Container(containers.DeclarativeContainer):
    """Dependency injection container for the solrhttp transport."""

    config = providers.Configuration(default=ENV)

    http_primitive = providers.Singleton(
        RequestsPrimitive,
        http_client=providers.Object(requests.request),
    )

    # One transport per process; its per-verb configs are reused across calls.
    transport = providers.Singleton(
        StreamContextTransport,
        primitive=http_primitive,
        default_timeout=config.SOLR_DEFAULT_SOCKET_TIMEOUT,
    )


def build_transport(container: Container) -> HttpTransport:
    transport = container.transport()
    username = container.config.SOLR_USERNAME()
    password = container.config.SOLR_PASSWORD()
    if username is not None and password is not None:
        transport.set_authentication_credentials(username, password)
    return transport
