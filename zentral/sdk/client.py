"""Thin async client for the Zentral REST API."""

from __future__ import annotations

import asyncio
import json
import logging
from dataclasses import dataclass
from functools import lru_cache
from typing import Any, Mapping

import httpx
from pydantic import BaseModel, TypeAdapter, ValidationError

from ._version import __version__
from ._http import HTTPClient, TimeoutConfig
from .config import ZentralConfig
from .exceptions import (
    ArgumentError,
    ConnectionError,
    DecodeError,
    HTTPError,
    URLError,
)
from .services import (
    ACMEIssuersService,
    ArtifactsService,
    BlueprintArtifactsService,
    BlueprintsService,
    CertAssetsService,
    DataAssetsService,
    DeclarationsService,
    EnterpriseAppsService,
    FileVaultConfigsService,
    GWSConnectionsService,
    GWSGroupTagMappingsService,
    JMESPathChecksService,
    LocationAssetsService,
    LocationsService,
    MetaBusinessUnitsService,
    MonolithCatalogsService,
    MonolithConditionsService,
    MonolithEnrollmentsService,
    MonolithManifestCatalogsService,
    MonolithManifestEnrollmentPackagesService,
    MonolithManifestsService,
    MonolithManifestSubManifestsService,
    MonolithRepositoriesService,
    MonolithSubManifestPkgInfosService,
    MonolithSubManifestsService,
    MunkiConfigurationsService,
    MunkiEnrollmentsService,
    MunkiScriptChecksService,
    OsqueryATCsService,
    OsqueryConfigurationPacksService,
    OsqueryConfigurationsService,
    OsqueryEnrollmentsService,
    OsqueryFileCategoriesService,
    OsqueryPackQueriesService,
    OsqueryPacksService,
    OsqueryQueriesService,
    OTAEnrollmentsService,
    ProbeActionsService,
    ProbesService,
    ProfilesService,
    PushCertificatesService,
    RealmsService,
    RecoveryPasswordConfigsService,
    SantaConfigurationsService,
    SantaEnrollmentsService,
    SantaRulesService,
    SCEPConfigsService,
    SCEPIssuersService,
    SoftwareUpdateEnforcementsService,
    StoreAppsService,
    StoresService,
    TagsService,
    TaxonomiesService,
)

logger = logging.getLogger(__name__)

DEFAULT_USER_AGENT = f"zentral-sdk-python/{__version__}"
MEDIA_TYPE = "application/json"

# Methods that never carry a request body
_BODYLESS_METHODS = frozenset({"GET", "HEAD", "OPTIONS"})


@dataclass
class Response:
    """A Zentral API response.

    Attributes
    ----------
    http_response : httpx.Response
        The HTTP response. Its body has already been consumed.
    data : Any
        The decoded payload, the raw sink that received the body, or None
    """

    http_response: httpx.Response
    data: Any = None

    @property
    def status_code(self) -> int:
        return self.http_response.status_code

    @property
    def headers(self) -> httpx.Headers:
        return self.http_response.headers


@lru_cache(maxsize=None)
def _type_adapter(into: Any) -> TypeAdapter:
    return TypeAdapter(into)


def _is_raw_sink(into: Any) -> bool:
    return not isinstance(into, type) and callable(getattr(into, "write", None))


def _clean_token(token: str) -> str:
    return token.strip().strip("'\"")


def _parse_base_url(base_url: str) -> httpx.URL:
    try:
        url = httpx.URL(base_url)
    except (httpx.InvalidURL, TypeError) as exc:
        raise URLError(str(base_url), str(exc)) from exc
    if not url.is_absolute_url or not url.host:
        raise URLError(base_url, "base URL must be absolute")
    if not url.path.endswith("/"):
        url = url.copy_with(path=url.path + "/")
    return url


class ZentralClient:
    """Async client for the Zentral REST API.

    The resources of the API are available as service attributes, e.g.
    ``client.tags`` or ``client.mdm_blueprints``. Each service call makes
    exactly one HTTP request, and is never retried.

    Parameters
    ----------
    base_url : str
        Absolute base URL of the API, e.g. "https://zentral.example.com/api/"
    token : str
        API token. Surrounding whitespace and quotes are removed.
    user_agent : str, optional
        Product identifier prepended to the default user agent
    headers : Mapping[str, str], optional
        Extra headers sent with every request. They cannot override the
        Authorization, Accept and User-Agent headers.
    timeout_config : TimeoutConfig, optional
        Timeouts of the underlying HTTP client
    transport : httpx.AsyncBaseTransport, optional
        Transport of the underlying HTTP client
    http_client : httpx.AsyncClient, optional
        Existing HTTP client to use. It is not closed with this client.

    Raises
    ------
    URLError
        If the base URL is not a valid absolute URL
    ArgumentError
        If the token is blank
    """

    def __init__(
        self,
        base_url: str,
        token: str,
        *,
        user_agent: str | None = None,
        headers: Mapping[str, str] | None = None,
        timeout_config: TimeoutConfig | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
        http_client: httpx.AsyncClient | None = None,
    ):
        self.base_url = _parse_base_url(base_url)
        self.token = _clean_token(token or "")
        if not self.token:
            raise ArgumentError("token", "cannot be blank")
        self.user_agent = f"{user_agent} {DEFAULT_USER_AGENT}" if user_agent else DEFAULT_USER_AGENT
        self.headers = dict(headers or {})
        self._http = HTTPClient(timeout_config, transport=transport, client=http_client)

        # Inventory
        self.meta_business_units = MetaBusinessUnitsService(self)
        self.tags = TagsService(self)
        self.taxonomies = TaxonomiesService(self)
        self.jmespath_checks = JMESPathChecksService(self)
        # Google Workspace
        self.gws_connections = GWSConnectionsService(self)
        self.gws_group_tag_mappings = GWSGroupTagMappingsService(self)
        # MDM
        self.mdm_acme_issuers = ACMEIssuersService(self)
        self.mdm_artifacts = ArtifactsService(self)
        self.mdm_blueprints = BlueprintsService(self)
        self.mdm_blueprint_artifacts = BlueprintArtifactsService(self)
        self.mdm_cert_assets = CertAssetsService(self)
        self.mdm_data_assets = DataAssetsService(self)
        self.mdm_declarations = DeclarationsService(self)
        self.mdm_enterprise_apps = EnterpriseAppsService(self)
        self.mdm_filevault_configs = FileVaultConfigsService(self)
        self.mdm_locations = LocationsService(self)
        self.mdm_location_assets = LocationAssetsService(self)
        self.mdm_ota_enrollments = OTAEnrollmentsService(self)
        self.mdm_profiles = ProfilesService(self)
        self.mdm_push_certificates = PushCertificatesService(self)
        self.mdm_recovery_password_configs = RecoveryPasswordConfigsService(self)
        self.mdm_scep_configs = SCEPConfigsService(self)
        self.mdm_scep_issuers = SCEPIssuersService(self)
        self.mdm_software_update_enforcements = SoftwareUpdateEnforcementsService(self)
        self.mdm_store_apps = StoreAppsService(self)
        # Monolith
        self.monolith_catalogs = MonolithCatalogsService(self)
        self.monolith_conditions = MonolithConditionsService(self)
        self.monolith_enrollments = MonolithEnrollmentsService(self)
        self.monolith_manifests = MonolithManifestsService(self)
        self.monolith_manifest_catalogs = MonolithManifestCatalogsService(self)
        self.monolith_manifest_enrollment_packages = MonolithManifestEnrollmentPackagesService(self)
        self.monolith_manifest_sub_manifests = MonolithManifestSubManifestsService(self)
        self.monolith_repositories = MonolithRepositoriesService(self)
        self.monolith_sub_manifests = MonolithSubManifestsService(self)
        self.monolith_sub_manifest_pkg_infos = MonolithSubManifestPkgInfosService(self)
        # Munki
        self.munki_configurations = MunkiConfigurationsService(self)
        self.munki_enrollments = MunkiEnrollmentsService(self)
        self.munki_script_checks = MunkiScriptChecksService(self)
        # Osquery
        self.osquery_atcs = OsqueryATCsService(self)
        self.osquery_configurations = OsqueryConfigurationsService(self)
        self.osquery_configuration_packs = OsqueryConfigurationPacksService(self)
        self.osquery_enrollments = OsqueryEnrollmentsService(self)
        self.osquery_file_categories = OsqueryFileCategoriesService(self)
        self.osquery_packs = OsqueryPacksService(self)
        self.osquery_pack_queries = OsqueryPackQueriesService(self)
        self.osquery_queries = OsqueryQueriesService(self)
        # Probes
        self.probes = ProbesService(self)
        self.probe_actions = ProbeActionsService(self)
        # Realms
        self.realms = RealmsService(self)
        # Santa
        self.santa_configurations = SantaConfigurationsService(self)
        self.santa_enrollments = SantaEnrollmentsService(self)
        self.santa_rules = SantaRulesService(self)
        # Stores
        self.stores = StoresService(self)

    @classmethod
    def from_config(cls, config: ZentralConfig, **kwargs: Any) -> "ZentralClient":
        """Create a client from a :class:`ZentralConfig`.

        Keyword arguments are passed to the constructor.
        """
        if config.timeout is not None and "timeout_config" not in kwargs:
            kwargs["timeout_config"] = TimeoutConfig(
                read=config.timeout,
                connect=config.timeout,
                write=config.timeout,
                pool=config.timeout,
            )
        return cls(
            config.base_url,
            config.token,
            user_agent=config.user_agent,
            headers=config.headers,
            **kwargs,
        )

    @classmethod
    def from_environment(cls, **kwargs: Any) -> "ZentralClient":
        """Create a client from the ``ZTL_*`` environment variables."""
        return cls.from_config(ZentralConfig.from_environment(), **kwargs)

    # ---------------- requests -----------------

    def new_request(self, method: str, path: str, body: Any = None) -> httpx.Request:
        """Build a request for a path relative to the base URL.

        Parameters
        ----------
        method : str
            HTTP method
        path : str
            Path relative to the base URL, without a leading slash. It can
            include a query string.
        body : Any, optional
            Payload, encoded as JSON. Ignored for GET, HEAD and OPTIONS.

        Returns
        -------
        httpx.Request
            The request, with the Authorization, Accept and User-Agent headers

        Raises
        ------
        URLError
            If the path cannot be resolved against the base URL
        ArgumentError
            If the body cannot be encoded as JSON
        """
        if path.startswith("/"):
            raise URLError(path, "path must be relative to the base URL")
        try:
            url = self.base_url.join(path)
        except (httpx.InvalidURL, ValueError) as exc:
            raise URLError(path, str(exc)) from exc

        method = method.upper()
        headers = httpx.Headers(self.headers)
        content = None
        if body is not None and method not in _BODYLESS_METHODS:
            content = self._encode(body)
            headers["Content-Type"] = MEDIA_TYPE
        else:
            headers.pop("Content-Type", None)
        headers["Authorization"] = f"Token {self.token}"
        headers["Accept"] = MEDIA_TYPE
        headers["User-Agent"] = self.user_agent
        return httpx.Request(method, url, headers=headers, content=content)

    @staticmethod
    def _encode(body: Any) -> bytes:
        try:
            if isinstance(body, BaseModel):
                return body.model_dump_json().encode("utf-8")
            return json.dumps(body, separators=(",", ":")).encode("utf-8")
        except (TypeError, ValueError) as exc:
            raise ArgumentError("body", f"cannot be encoded as JSON: {exc}") from exc

    async def do(
        self,
        request: httpx.Request,
        into: Any = None,
        *,
        timeout: float | None = None,
    ) -> Response:
        """Send a request and decode its response.

        Parameters
        ----------
        request : httpx.Request
            Request built with :meth:`new_request`
        into : type or writable object, optional
            Type of the expected payload, e.g. ``Tag`` or ``list[Tag]``, or
            an object with a ``write`` method that receives the raw body
        timeout : float, optional
            Deadline for the whole exchange, in seconds

        Returns
        -------
        Response
            The response, with the decoded payload in ``data``

        Raises
        ------
        ConnectionError
            If no response was received, or the deadline expired
        HTTPError
            If the status code is not in the 200-299 range
        DecodeError
            If the body of a successful response cannot be decoded
        """
        if timeout is not None:
            request.extensions["timeout"] = httpx.Timeout(timeout).as_dict()
        logger.debug("%s %s", request.method, request.url)
        try:
            async with asyncio.timeout(timeout):
                response = await self._http.send(request)
                try:
                    return await self._handle(response, into)
                finally:
                    await self._http.drain_and_close(response)
        except TimeoutError as exc:
            raise ConnectionError(str(request.url), exc) from exc

    async def _handle(self, response: httpx.Response, into: Any) -> Response:
        request = response.request
        logger.debug("%s %s -> %s", request.method, request.url, response.status_code)

        if not 200 <= response.status_code <= 299:
            message = ""
            try:
                await self._http.read(response)
                message = response.text
            except ConnectionError:
                logger.debug("Could not read error response body", exc_info=True)
            raise HTTPError(response, message)

        data = None
        if into is not None:
            if _is_raw_sink(into):
                await self._http.stream_to(response, into)
                data = into
            else:
                body = await self._http.read(response)
                try:
                    data = _type_adapter(into).validate_json(body)
                except ValidationError as exc:
                    raise DecodeError(response, exc) from exc
        return Response(response, data)

    # ---------------- lifecycle -----------------

    async def aclose(self) -> None:
        """Close the underlying HTTP client.

        Should be called when done with the client to properly clean up
        connections. Can also be used as an async context manager to
        handle this automatically.
        """
        await self._http.aclose()

    async def __aenter__(self) -> "ZentralClient":
        return self

    async def __aexit__(self, *exc_info: Any) -> None:
        await self.aclose()
