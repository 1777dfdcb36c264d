from .step_10_classify_tasks import ClassifyTasksStep
from .step_20_check_credentials import CheckCredentialsStep
from .step_30_enforce_policy import EnforcePolicyStep
from .step_40_resolve_keystore import ResolveKeystoreStep
from .step_50_apply_signing import ApplySigningStep

__all__ = [
    "ClassifyTasksStep",
    "CheckCredentialsStep",
    "EnforcePolicyStep",
    "ResolveKeystoreStep",
    "ApplySigningStep",
]
