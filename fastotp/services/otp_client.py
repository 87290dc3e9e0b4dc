"""
FastOTP API client.

Thin wrapper around the FastOTP HTTP API: generate an OTP, validate a token
and fetch an OTP by id. All OTP logic and storage lives in the service.
"""

import time
from typing import Any, Dict, Optional, Type, TypeVar, Union

import httpx
from pydantic import BaseModel, SecretStr, ValidationError

from fastotp.core.config import settings
from fastotp.core.exceptions import ResponseDecodeError
from fastotp.core.logging import get_logger
from fastotp.schemas.otp import (
    GenerateOTPRequest,
    GenerateOTPResponse,
    ValidateOTPRequest,
    ValidateOTPResponse,
)
from fastotp.services.errors import parse_error_response

logger = get_logger(__name__)

ResponseT = TypeVar("ResponseT", bound=BaseModel)
ModelT = TypeVar("ModelT", bound=BaseModel)

API_KEY_HEADER = "x-api-key"


class _BaseFastOTPClient:
    """Request building and response decoding shared by both clients."""

    def __init__(
        self,
        api_key: Optional[Union[str, SecretStr]] = None,
        base_url: Optional[str] = None,
        timeout: Optional[float] = None,
    ) -> None:
        if api_key is None:
            api_key = settings.API_KEY
        if api_key is None:
            raise ValueError("FASTOTP_API_KEY is not configured")
        if isinstance(api_key, str):
            api_key = SecretStr(api_key)

        self._api_key = api_key
        self._base_url = (base_url or settings.base_url).rstrip("/")
        self._timeout = settings.TIMEOUT if timeout is None else timeout

    @property
    def base_url(self) -> str:
        return self._base_url

    @property
    def timeout(self) -> float:
        return self._timeout

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(base_url={self._base_url!r}, api_key='**********')"

    def _request_args(self, method: str, path: str, payload: Optional[BaseModel] = None) -> Dict[str, Any]:
        headers = {API_KEY_HEADER: self._api_key.get_secret_value()}
        args: Dict[str, Any] = {"method": method, "url": f"{self._base_url}{path}", "headers": headers}
        if payload is not None:
            headers["Content-Type"] = "application/json"
            args["content"] = payload.model_dump_json().encode("utf-8")

        logger.debug("FastOTP request", method=method, path=path)
        return args

    def _check_deadline(self, started: float, request: httpx.Request) -> None:
        # httpx timeouts apply per phase; this bounds the whole exchange
        if time.monotonic() - started > self._timeout:
            raise httpx.ReadTimeout(f"FastOTP request exceeded {self._timeout}s", request=request)

    def _handle_response(self, response: httpx.Response, body: bytes, response_model: Type[ResponseT]) -> ResponseT:
        # Anything but 200 is a failure, 201 and 204 included
        if response.status_code != httpx.codes.OK:
            raise parse_error_response(response, body)

        try:
            return response_model.model_validate_json(body)
        except ValidationError as e:
            logger.error(
                "FastOTP response could not be decoded",
                path=response.request.url.path,
                error=str(e),
            )
            raise ResponseDecodeError(f"error decoding response: {e}") from e


def _as_model(request: Union[BaseModel, Dict[str, Any]], model: Type[ModelT]) -> ModelT:
    if isinstance(request, model):
        return request
    return model.model_validate(request)


class FastOTPClient(_BaseFastOTPClient):
    """Blocking FastOTP client. One instance can be shared across threads."""

    def __init__(
        self,
        api_key: Optional[Union[str, SecretStr]] = None,
        *,
        base_url: Optional[str] = None,
        timeout: Optional[float] = None,
        transport: Optional[httpx.BaseTransport] = None,
    ) -> None:
        super().__init__(api_key, base_url, timeout)
        self._http = httpx.Client(timeout=self._timeout, transport=transport)

    def generate_otp(self, request: Union[GenerateOTPRequest, Dict[str, Any]]) -> GenerateOTPResponse:
        """
        Ask the service to issue an OTP and deliver it.

        Args:
            request: Type, identifier, delivery channels, validity and token length

        Returns:
            GenerateOTPResponse wrapping the new OTP record
        """
        payload = _as_model(request, GenerateOTPRequest)
        return self._send("POST", "/generate", GenerateOTPResponse, payload)

    def validate_otp(self, request: Union[ValidateOTPRequest, Dict[str, Any]]) -> ValidateOTPResponse:
        """
        Check a token submitted for an identifier.

        A 200 answer is returned as is; otp.status carries the outcome.
        """
        payload = _as_model(request, ValidateOTPRequest)
        return self._send("POST", "/validate", ValidateOTPResponse, payload)

    def get_otp(self, otp_id: str) -> GenerateOTPResponse:
        """Fetch an OTP by id. The id is used in the path as given."""
        return self._send("GET", f"/{otp_id}", GenerateOTPResponse)

    def _send(
        self,
        method: str,
        path: str,
        response_model: Type[ResponseT],
        payload: Optional[BaseModel] = None,
    ) -> ResponseT:
        started = time.monotonic()
        with self._http.stream(**self._request_args(method, path, payload)) as response:
            self._check_deadline(started, response.request)
            chunks = []
            for chunk in response.iter_bytes():
                chunks.append(chunk)
                self._check_deadline(started, response.request)
        return self._handle_response(response, b"".join(chunks), response_model)

    def close(self) -> None:
        self._http.close()

    def __enter__(self) -> "FastOTPClient":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()


class AsyncFastOTPClient(_BaseFastOTPClient):
    """asyncio FastOTP client. One instance can be shared across tasks."""

    def __init__(
        self,
        api_key: Optional[Union[str, SecretStr]] = None,
        *,
        base_url: Optional[str] = None,
        timeout: Optional[float] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        super().__init__(api_key, base_url, timeout)
        self._http = httpx.AsyncClient(timeout=self._timeout, transport=transport)

    async def generate_otp(self, request: Union[GenerateOTPRequest, Dict[str, Any]]) -> GenerateOTPResponse:
        """Ask the service to issue an OTP and deliver it."""
        payload = _as_model(request, GenerateOTPRequest)
        return await self._send("POST", "/generate", GenerateOTPResponse, payload)

    async def validate_otp(self, request: Union[ValidateOTPRequest, Dict[str, Any]]) -> ValidateOTPResponse:
        """Check a token submitted for an identifier."""
        payload = _as_model(request, ValidateOTPRequest)
        return await self._send("POST", "/validate", ValidateOTPResponse, payload)

    async def get_otp(self, otp_id: str) -> GenerateOTPResponse:
        """Fetch an OTP by id."""
        return await self._send("GET", f"/{otp_id}", GenerateOTPResponse)

    async def _send(
        self,
        method: str,
        path: str,
        response_model: Type[ResponseT],
        payload: Optional[BaseModel] = None,
    ) -> ResponseT:
        started = time.monotonic()
        async with self._http.stream(**self._request_args(method, path, payload)) as response:
            self._check_deadline(started, response.request)
            chunks = []
            async for chunk in response.aiter_bytes():
                chunks.append(chunk)
                self._check_deadline(started, response.request)
        return self._handle_response(response, b"".join(chunks), response_model)

    async def aclose(self) -> None:
        await self._http.aclose()

    async def __aenter__(self) -> "AsyncFastOTPClient":
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.aclose()


def init(api_key: Optional[str] = None) -> FastOTPClient:
    """Create a client for the FastOTP API with the default base URL and timeout."""
    return FastOTPClient(api_key)


def init_async(api_key: Optional[str] = None) -> AsyncFastOTPClient:
    """Create an asyncio client for the FastOTP API."""
    return AsyncFastOTPClient(api_key)
