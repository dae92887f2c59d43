# Model imports - organized by domain
from .result import Ok, Err, Result
from .identity import SendableId, IdentityProvider, UuidIdentityProvider, default_identity_provider
from .printer_settings_model import PaperKind, PrinterSettings
