"""MDM services."""

from __future__ import annotations

from typing import Optional

from pydantic import Field

from ..models.mdm import (
    ACMEIssuer,
    Artifact,
    Blueprint,
    BlueprintArtifact,
    CertAsset,
    DataAsset,
    Declaration,
    EnterpriseApp,
    FileVaultConfig,
    Location,
    LocationAsset,
    OTAEnrollment,
    Profile,
    PushCertificate,
    RecoveryPasswordConfig,
    SCEPConfig,
    SCEPIssuer,
    SoftwareUpdateEnforcement,
    StoreApp,
)
from ..query import QueryOptions
from .base import (
    CRUDService,
    ListMixin,
    NamedCRUDService,
    NamedReadOnlyService,
    ResourceService,
    check_int_argument,
    check_str_argument,
)


class LocationFilter(QueryOptions):
    name: Optional[str] = Field(default=None)
    mdm_info_id: Optional[str] = Field(default=None)


class LocationAssetFilter(QueryOptions):
    location_id: Optional[int] = Field(default=None)
    adam_id: Optional[str] = Field(default=None)
    pricing_param: Optional[str] = Field(default=None)


# Certificate issuers


class ACMEIssuersService(NamedCRUDService):
    base_path = "mdm/acme_issuers/"
    model = ACMEIssuer
    id_argument = "acme_issuer_id"
    id_type = str


class SCEPIssuersService(NamedCRUDService):
    base_path = "mdm/scep_issuers/"
    model = SCEPIssuer
    id_argument = "scep_issuer_id"
    id_type = str


class SCEPConfigsService(NamedReadOnlyService):
    base_path = "mdm/scep_configs/"
    model = SCEPConfig
    id_argument = "scep_config_id"


# Artifacts and artifact versions


class ArtifactsService(NamedCRUDService):
    base_path = "mdm/artifacts/"
    model = Artifact
    id_argument = "artifact_id"
    id_type = str


class BlueprintArtifactsService(CRUDService):
    base_path = "mdm/blueprint_artifacts/"
    model = BlueprintArtifact
    id_argument = "blueprint_artifact_id"


class CertAssetsService(CRUDService):
    base_path = "mdm/cert_assets/"
    model = CertAsset
    id_argument = "cert_asset_id"
    id_type = str


class DataAssetsService(CRUDService):
    base_path = "mdm/data_assets/"
    model = DataAsset
    id_argument = "data_asset_id"
    id_type = str


class DeclarationsService(CRUDService):
    base_path = "mdm/declarations/"
    model = Declaration
    id_argument = "declaration_id"
    id_type = str


class EnterpriseAppsService(CRUDService):
    base_path = "mdm/enterprise_apps/"
    model = EnterpriseApp
    id_argument = "enterprise_app_id"
    id_type = str


class ProfilesService(CRUDService):
    base_path = "mdm/profiles/"
    model = Profile
    id_argument = "profile_id"
    id_type = str


class StoreAppsService(CRUDService):
    base_path = "mdm/store_apps/"
    model = StoreApp
    id_argument = "store_app_id"
    id_type = str


# Blueprints and their configurations


class BlueprintsService(NamedCRUDService):
    base_path = "mdm/blueprints/"
    model = Blueprint
    id_argument = "blueprint_id"


class FileVaultConfigsService(NamedCRUDService):
    base_path = "mdm/filevault_configs/"
    model = FileVaultConfig
    id_argument = "filevault_config_id"


class RecoveryPasswordConfigsService(NamedCRUDService):
    base_path = "mdm/recovery_password_configs/"
    model = RecoveryPasswordConfig
    id_argument = "recovery_password_config_id"


class SoftwareUpdateEnforcementsService(NamedCRUDService):
    base_path = "mdm/software_update_enforcements/"
    model = SoftwareUpdateEnforcement
    id_argument = "software_update_enforcement_id"


class OTAEnrollmentsService(NamedCRUDService):
    base_path = "mdm/ota_enrollments/"
    model = OTAEnrollment
    id_argument = "ota_enrollment_id"


# Apps and Books


class LocationsService(NamedReadOnlyService):
    base_path = "mdm/locations/"
    model = Location
    id_argument = "location_id"
    name_filter = LocationFilter

    async def get_by_mdm_info_id(self, mdm_info_id: str) -> Optional[Location]:
        """Retrieve a location by MDM info ID, or None if there is none."""
        check_str_argument("mdm_info_id", mdm_info_id)
        return await self._first(LocationFilter(mdm_info_id=mdm_info_id))


class LocationAssetsService(ListMixin, ResourceService):
    base_path = "mdm/location_assets/"
    model = LocationAsset
    id_argument = "location_asset_id"

    async def get(
        self, location_id: int, adam_id: str, pricing_param: str
    ) -> Optional[LocationAsset]:
        """Retrieve the asset of a location.

        Parameters
        ----------
        location_id : int
            ID of the location
        adam_id : str
            Apple ID of the asset
        pricing_param : str
            Quality of the asset, e.g. ``STDQ``

        Returns
        -------
        LocationAsset or None
            The location asset, or None if there is none
        """
        check_int_argument("location_id", location_id)
        check_str_argument("adam_id", adam_id)
        check_str_argument("pricing_param", pricing_param)
        return await self._first(
            LocationAssetFilter(
                location_id=location_id, adam_id=adam_id, pricing_param=pricing_param
            )
        )


class PushCertificatesService(NamedReadOnlyService):
    base_path = "mdm/push_certificates/"
    model = PushCertificate
    id_argument = "push_certificate_id"
