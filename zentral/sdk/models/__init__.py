"""Payload models of the Zentral API."""

from .base import OMIT_EMPTY, BackendKwargsModel, ZentralModel, check_backend_kwargs
from .common import (
    EnrollmentSecret,
    EnrollmentSecretRequest,
    EventFilter,
    EventFilterSet,
    HTTPHeader,
    TagShard,
    TimestampedModel,
)
from .inventory import (
    JMESPathCheck,
    JMESPathCheckRequest,
    MetaBusinessUnit,
    MetaBusinessUnitRequest,
    Tag,
    TagRequest,
    Taxonomy,
    TaxonomyRequest,
)
from .google_workspace import (
    GWSConnection,
    GWSGroupTagMapping,
    GWSGroupTagMappingRequest,
)
from .mdm import (
    ACMEIssuer,
    ACMEIssuerRequest,
    Artifact,
    ArtifactRequest,
    ArtifactScope,
    ArtifactVersion,
    ArtifactVersionRequest,
    Blueprint,
    BlueprintArtifact,
    BlueprintArtifactRequest,
    BlueprintRequest,
    CertAsset,
    CertAssetRDN,
    CertAssetRequest,
    CertAssetSubjectAltName,
    CertIssuerBackendMixin,
    DataAsset,
    DataAssetRequest,
    Declaration,
    DeclarationRequest,
    DeclarationSource,
    Digicert,
    EnterpriseApp,
    EnterpriseAppRequest,
    FileVaultConfig,
    FileVaultConfigRequest,
    IDent,
    Location,
    LocationAsset,
    MicrosoftCA,
    OTAEnrollment,
    OTAEnrollmentRequest,
    Profile,
    ProfileRequest,
    PushCertificate,
    RecoveryPasswordConfig,
    RecoveryPasswordConfigRequest,
    SCEPConfig,
    SCEPIssuer,
    SCEPIssuerRequest,
    SoftwareUpdateEnforcement,
    SoftwareUpdateEnforcementRequest,
    StaticChallenge,
    StoreApp,
    StoreAppRequest,
)
from .monolith import (
    MonolithAzureBackend,
    MonolithCatalog,
    MonolithCatalogRequest,
    MonolithCondition,
    MonolithConditionRequest,
    MonolithEnrollment,
    MonolithEnrollmentRequest,
    MonolithManifest,
    MonolithManifestCatalog,
    MonolithManifestCatalogRequest,
    MonolithManifestEnrollmentPackage,
    MonolithManifestEnrollmentPackageRequest,
    MonolithManifestRequest,
    MonolithManifestSubManifest,
    MonolithManifestSubManifestRequest,
    MonolithRepository,
    MonolithRepositoryBackendMixin,
    MonolithRepositoryRequest,
    MonolithS3Backend,
    MonolithSubManifest,
    MonolithSubManifestPkgInfo,
    MonolithSubManifestPkgInfoRequest,
    MonolithSubManifestRequest,
)
from .munki import (
    MunkiConfiguration,
    MunkiConfigurationRequest,
    MunkiEnrollment,
    MunkiEnrollmentRequest,
    MunkiScriptCheck,
    MunkiScriptCheckRequest,
)
from .osquery import (
    OsqueryATC,
    OsqueryATCRequest,
    OsqueryConfiguration,
    OsqueryConfigurationPack,
    OsqueryConfigurationPackRequest,
    OsqueryConfigurationRequest,
    OsqueryEnrollment,
    OsqueryEnrollmentRequest,
    OsqueryFileCategory,
    OsqueryFileCategoryRequest,
    OsqueryPack,
    OsqueryPackQuery,
    OsqueryPackQueryRequest,
    OsqueryPackRequest,
    OsqueryQuery,
    OsqueryQueryRequest,
    OsqueryQueryScheduling,
)
from .probes import (
    InventoryFilter,
    MetadataFilter,
    PayloadFilterItem,
    Probe,
    ProbeAction,
    ProbeActionBackendMixin,
    ProbeActionHTTPPost,
    ProbeActionRequest,
    ProbeActionSlackIncomingWebhook,
    ProbeRequest,
)
from .realms import (
    LDAPConfig,
    OpenIDCConfig,
    Realm,
    SAMLConfig,
)
from .santa import (
    SantaConfiguration,
    SantaConfigurationRequest,
    SantaEnrollment,
    SantaEnrollmentRequest,
    SantaRule,
    SantaRuleRequest,
)
from .stores import (
    Store,
    StoreBackendMixin,
    StoreHTTP,
    StoreKinesis,
    StorePanther,
    StoreRequest,
    StoreSplunk,
)
