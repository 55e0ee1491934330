"""Test the identity realms service."""

from datetime import datetime

import pytest

from zentral.sdk.models import LDAPConfig, OpenIDCConfig, Realm

REALM_UUID = "af751e50-9eae-4fdb-b197-dd5041072a69"
NOW = "2022-07-22T01:02:03.444444"


def realm(backend, **configs):
    data = {
        "uuid": REALM_UUID,
        "name": "Default",
        "backend": backend,
        "ldap_config": None,
        "openidc_config": None,
        "saml_config": None,
        "enabled_for_login": True,
        "login_session_expiry": 120,
        "username_claim": "username",
        "email_claim": "email",
        "first_name_claim": "first_name",
        "last_name_claim": "last_name",
        "full_name_claim": "full_name",
        "custom_attr_1_claim": "",
        "custom_attr_2_claim": "",
        "scim_enabled": True,
        "created_at": NOW,
        "updated_at": NOW,
    }
    data.update(configs)
    return data


class TestRealms:
    """Test the realms service."""

    @pytest.mark.asyncio
    async def test_list(self, client, server):
        """Test listing realms."""
        server.add(
            "GET",
            "realms/realms/",
            [
                realm(
                    "ldap",
                    ldap_config={
                        "host": "ldap.example.com",
                        "bind_dn": "uid=zentral,ou=Users,o=yolo,dc=example,dc=com",
                        "bind_password": "yolo",
                        "users_base_dn": "ou=Users,o=yolo,dc=example,dc=com",
                    },
                    custom_attr_1_claim="department",
                )
            ],
        )
        realms = await client.realms.list()
        assert realms[0].ldap_config == LDAPConfig(
            host="ldap.example.com",
            bind_dn="uid=zentral,ou=Users,o=yolo,dc=example,dc=com",
            bind_password="yolo",
            users_base_dn="ou=Users,o=yolo,dc=example,dc=com",
        )
        assert realms[0].custom_attr_1_claim == "department"
        assert realms[0].openidc_config is None

    @pytest.mark.asyncio
    async def test_get_by_uuid(self, client, server):
        """Test getting a realm by UUID."""
        server.add(
            "GET",
            f"realms/realms/{REALM_UUID}/",
            realm(
                "openidc",
                openidc_config={
                    "client_id": "yolo",
                    "client_secret": "fomo",
                    "discovery_url": "https://zentral.example.com/.well-known/openid-configuration",
                    "extra_scopes": ["profile"],
                },
            ),
        )
        result = await client.realms.get_by_uuid(REALM_UUID)
        assert isinstance(result, Realm)
        assert result.selected_kwargs() == OpenIDCConfig(
            client_id="yolo",
            client_secret="fomo",
            discovery_url="https://zentral.example.com/.well-known/openid-configuration",
            extra_scopes=["profile"],
        )
        assert result.login_session_expiry == 120
        assert result.created_at == datetime(2022, 7, 22, 1, 2, 3, 444444)

    @pytest.mark.asyncio
    async def test_get_by_name(self, client, server):
        """Test getting a realm by name."""
        server.add(
            "GET",
            "realms/realms/",
            [realm("saml", saml_config={"default_relay_state": "29eb0205", "idp_metadata": "<md></md>"})],
        )
        result = await client.realms.get_by_name("Default")
        assert result.saml_config.idp_metadata == "<md></md>"
        assert server.last_request.url.params["name"] == "Default"

    def test_read_only(self, client):
        """Test that realms cannot be written."""
        for name in ("create", "update", "delete", "get_by_id"):
            assert not hasattr(client.realms, name)
