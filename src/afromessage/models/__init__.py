from afromessage.models.config import DEFAULT_BASE_URL, ClientConfig
from afromessage.models.query import to_query_string
from afromessage.models.security_code import (
    CodeType,
    SecurityCodeRequest,
    SecurityCodeResponse,
    SecurityCodeResult,
    VerifyCodeRequest,
    VerifyCodeResponse,
    VerifyCodeResult,
)
from afromessage.models.sms_model import (
    BulkSmsRequest,
    BulkSmsResponse,
    BulkSmsResult,
    PersonalizedMessage,
    SendSmsRequest,
    SendSmsResponse,
)

__all__ = [
    "DEFAULT_BASE_URL",
    "BulkSmsRequest",
    "BulkSmsResponse",
    "BulkSmsResult",
    "ClientConfig",
    "CodeType",
    "PersonalizedMessage",
    "SecurityCodeRequest",
    "SecurityCodeResponse",
    "SecurityCodeResult",
    "SendSmsRequest",
    "SendSmsResponse",
    "VerifyCodeRequest",
    "VerifyCodeResponse",
    "VerifyCodeResult",
    "to_query_string",
]
