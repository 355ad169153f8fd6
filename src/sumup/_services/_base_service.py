from ._api_client import ApiClient


class BaseService:
    """Shared plumbing for resource services.

    Services do not talk to httpx directly: they describe requests with path
    templates and bindings and hand them to the shared :class:`ApiClient`.
    """

    def __init__(self, api_client: ApiClient) -> None:
        self._api = api_client
