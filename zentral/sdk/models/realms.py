"""Identity realm payloads."""

from __future__ import annotations

from typing import ClassVar, Optional

from pydantic import Field

from .base import BackendKwargsModel, ZentralModel
from .common import TimestampedModel


class LDAPConfig(ZentralModel):
    host: str = ""
    bind_dn: str = ""
    bind_password: str = ""
    users_base_dn: str = ""


class OpenIDCConfig(ZentralModel):
    discovery_url: str = ""
    client_id: str = ""
    client_secret: Optional[str] = None
    extra_scopes: list[str] = Field(default_factory=list)


class SAMLConfig(ZentralModel):
    default_relay_state: str = ""
    idp_metadata: str = ""


class Realm(BackendKwargsModel, TimestampedModel):
    """Identity realm. The backend configuration is selected by ``backend``."""

    backend_kwargs: ClassVar[dict[str, str]] = {
        "ldap": "ldap_config",
        "openidc": "openidc_config",
        "saml": "saml_config",
    }

    uuid: str = ""
    name: str = ""
    backend: str = ""
    ldap_config: Optional[LDAPConfig] = None
    openidc_config: Optional[OpenIDCConfig] = None
    saml_config: Optional[SAMLConfig] = None
    enabled_for_login: bool = False
    login_session_expiry: int = 0
    username_claim: str = ""
    email_claim: str = ""
    first_name_claim: str = ""
    last_name_claim: str = ""
    full_name_claim: str = ""
    custom_attr_1_claim: str = ""
    custom_attr_2_claim: str = ""
    scim_enabled: bool = False
