"""Resource services of the Zentral API."""

from .base import (
    CRUDService,
    NamedCRUDService,
    NamedReadOnlyService,
    ReadOnlyService,
    ResourceService,
)
from .google_workspace import GWSConnectionsService, GWSGroupTagMappingsService
from .inventory import (
    JMESPathChecksService,
    MetaBusinessUnitsService,
    TagsService,
    TaxonomiesService,
)
from .mdm import (
    ACMEIssuersService,
    ArtifactsService,
    BlueprintArtifactsService,
    BlueprintsService,
    CertAssetsService,
    DataAssetsService,
    DeclarationsService,
    EnterpriseAppsService,
    FileVaultConfigsService,
    LocationAssetsService,
    LocationsService,
    OTAEnrollmentsService,
    ProfilesService,
    PushCertificatesService,
    RecoveryPasswordConfigsService,
    SCEPConfigsService,
    SCEPIssuersService,
    SoftwareUpdateEnforcementsService,
    StoreAppsService,
)
from .monolith import (
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
)
from .munki import MunkiConfigurationsService, MunkiEnrollmentsService, MunkiScriptChecksService
from .osquery import (
    OsqueryATCsService,
    OsqueryConfigurationPacksService,
    OsqueryConfigurationsService,
    OsqueryEnrollmentsService,
    OsqueryFileCategoriesService,
    OsqueryPackQueriesService,
    OsqueryPacksService,
    OsqueryQueriesService,
)
from .probes import ProbeActionsService, ProbesService
from .realms import RealmsService
from .santa import SantaConfigurationsService, SantaEnrollmentsService, SantaRulesService
from .stores import StoresService
