import logging
from typing import Any, TypeVar

import requests
from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from afromessage.errors import ApiError, ConfigurationError, ValidationError
from afromessage.models.config import ClientConfig
from afromessage.models.query import to_query_string
from afromessage.models.security_code import (
    SecurityCodeRequest,
    SecurityCodeResponse,
    VerifyCodeRequest,
    VerifyCodeResponse,
)
from afromessage.models.sms_model import (
    BulkSmsRequest,
    BulkSmsResponse,
    SendSmsRequest,
    SendSmsResponse,
)
from afromessage.settings import AfroMessageSettings

SERVER_RESPONSE_VALIDATION_ERROR = "Invalid response from server"


logger = logging.getLogger("afromessage")


M = TypeVar("M", bound=BaseModel)


def _coerce(model: type[M], request: M | dict[str, Any], operation: str) -> M:
    if isinstance(request, model):
        return request
    try:
        return model.model_validate(request)
    except PydanticValidationError as e:
        errors = e.errors(include_url=False, include_input=False)
        logger.error(f"Validation error: {errors}")
        raise ValidationError(
            f"Invalid {operation} request", operation=operation, errors=errors
        ) from e


class SmsClient:
    """Client for the AfroMessage SMS and verification API.

    The client holds an already resolved ``ClientConfig``; use
    ``AfroMessageSettings`` or ``SmsClient.from_env`` to build one from the
    environment.
    """

    def __init__(
        self, config: ClientConfig, session: requests.Session | None = None
    ) -> None:
        if not config.api_key.strip() or not config.base_url.strip():
            raise ConfigurationError("API key and base URL are required.")
        self._config = config
        self._base_url = config.base_url.rstrip("/")
        self._headers = {
            "Accept": "application/json",
            "Content-Type": "application/json;charset=UTF-8",
            "Authorization": f"Bearer {config.api_key}",
        }
        self._owns_session = session is None
        self._session = session if session is not None else requests.Session()

    @classmethod
    def from_env(
        cls, session: requests.Session | None = None, **overrides: Any
    ) -> "SmsClient":
        config = AfroMessageSettings().to_client_config(**overrides)
        return cls(config, session=session)

    @property
    def config(self) -> ClientConfig:
        return self._config

    @property
    def headers(self) -> dict[str, str]:
        return dict(self._headers)

    def close(self) -> None:
        if self._owns_session:
            self._session.close()

    def __enter__(self) -> "SmsClient":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def __repr__(self) -> str:
        return f"<SmsClient base_url={self._base_url}>"

    def _apply_defaults(self, request: M) -> M:
        # configured defaults replace whatever the caller passed
        update: dict[str, Any] = {}
        if self._config.sender_name:
            update["sender"] = self._config.sender_name
        if self._config.identifier_id:
            update["from_"] = self._config.identifier_id
        if not update:
            return request
        return request.model_copy(update=update)

    def post_request(
        self, operation: str, endpoint: str, data: dict[str, Any]
    ) -> Any:
        url = f"{self._base_url}{endpoint}"
        logger.debug(f"POST {url}")
        try:
            res = self._session.post(url=url, headers=self._headers, json=data)
        except requests.exceptions.RequestException as e:
            logger.error(f"Network error: {e}")
            raise ApiError(str(e), operation=operation) from e
        return self._handle_response(operation, res)

    def get_request(self, operation: str, endpoint: str, query: str) -> Any:
        url = f"{self._base_url}{endpoint}"
        if query:
            url = f"{url}?{query}"
        logger.debug(f"GET {url}")
        try:
            res = self._session.get(url=url, headers=self._headers)
        except requests.exceptions.RequestException as e:
            logger.error(f"Network error: {e}")
            raise ApiError(str(e), operation=operation) from e
        return self._handle_response(operation, res)

    def _handle_response(self, operation: str, res: requests.Response) -> Any:
        if not res.ok:
            logger.error(f"Error from server: {res.text}")
            raise ApiError(
                f"Request failed with status code {res.status_code}",
                operation=operation,
                status_code=res.status_code,
                body=res.text,
            )
        try:
            return res.json()
        except ValueError as e:
            logger.error(f"Undecodable response from server: {res.text}")
            raise ApiError(
                SERVER_RESPONSE_VALIDATION_ERROR,
                operation=operation,
                status_code=res.status_code,
                body=res.text,
            ) from e

    def _parse(self, operation: str, model: type[M], data: Any) -> M:
        try:
            return model.model_validate(data)
        except PydanticValidationError as e:
            logger.error(
                f"Validation error: {e.errors(include_url=False, include_input=False)}"
            )
            raise ApiError(
                SERVER_RESPONSE_VALIDATION_ERROR, operation=operation
            ) from e

    def send_sms(self, request: SendSmsRequest | dict[str, Any]) -> SendSmsResponse:
        """POST ``/send``.

        The decoded body is wrapped as-is; its own ``acknowledge`` field is not
        inspected. Raises ``ApiError`` when the request fails.
        """
        operation = "send_sms"
        payload = _coerce(SendSmsRequest, request, operation)
        if not payload.to or not payload.message:
            logger.error("Both 'to' and 'message' are required.")
            raise ValidationError(
                "Both 'to' and 'message' are required.", operation=operation
            )
        payload = self._apply_defaults(payload)
        data = self.post_request(
            operation, "/send", payload.model_dump(by_alias=True, exclude_none=True)
        )
        return SendSmsResponse(acknowledge="success", response=data)

    def send_bulk_sms(
        self, request: BulkSmsRequest | dict[str, Any]
    ) -> BulkSmsResponse:
        operation = "send_bulk_sms"
        params = _coerce(BulkSmsRequest, request, operation)
        if params.to is not None:
            recipients: Any = params.to
        elif params.personalized_to is not None:
            recipients = [item.model_dump() for item in params.personalized_to]
        else:
            recipients = None
        payload = {
            "to": recipients,
            "from": params.from_,
            "sender": params.sender,
            "message": params.message,
            "campaign": params.campaign,
            "createCallback": params.create_callback,
            "statusCallback": params.status_callback,
        }
        payload = {key: value for key, value in payload.items() if value is not None}
        data = self.post_request(operation, "/bulk_send", payload)
        return self._parse(operation, BulkSmsResponse, data)

    def send_security_code(
        self, request: SecurityCodeRequest | dict[str, Any]
    ) -> SecurityCodeResponse:
        operation = "send_security_code"
        params = self._apply_defaults(_coerce(SecurityCodeRequest, request, operation))
        data = self.get_request(operation, "/challenge", to_query_string(params))
        return self._parse(operation, SecurityCodeResponse, data)

    def verify_code(
        self, request: VerifyCodeRequest | dict[str, Any]
    ) -> VerifyCodeResponse:
        """GET ``/verify``.

        Unlike the other operations a failed request is not raised: it comes
        back as ``VerifyCodeResponse(acknowledge="failure", error=...)``.
        Invalid input still raises ``ValidationError``.
        """
        operation = "verify_code"
        params = _coerce(VerifyCodeRequest, request, operation)
        try:
            data = self.get_request(operation, "/verify", to_query_string(params))
            return self._parse(operation, VerifyCodeResponse, data)
        except ApiError as e:
            logger.warning(f"Code verification failed: {e.message}")
            return VerifyCodeResponse(acknowledge="failure", error=e.message)
