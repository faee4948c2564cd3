from afromessage.afromessage import SmsClient
from afromessage.errors import (
    AfroMessageError,
    ApiError,
    ConfigurationError,
    ValidationError,
)
from afromessage.models import (
    BulkSmsRequest,
    BulkSmsResponse,
    ClientConfig,
    CodeType,
    PersonalizedMessage,
    SecurityCodeRequest,
    SecurityCodeResponse,
    SendSmsRequest,
    SendSmsResponse,
    VerifyCodeRequest,
    VerifyCodeResponse,
)
from afromessage.settings import AfroMessageSettings

__all__ = [
    "AfroMessageError",
    "AfroMessageSettings",
    "ApiError",
    "BulkSmsRequest",
    "BulkSmsResponse",
    "ClientConfig",
    "CodeType",
    "ConfigurationError",
    "PersonalizedMessage",
    "SecurityCodeRequest",
    "SecurityCodeResponse",
    "SendSmsRequest",
    "SendSmsResponse",
    "SmsClient",
    "ValidationError",
    "VerifyCodeRequest",
    "VerifyCodeResponse",
]

__version__ = "0.1.0"
