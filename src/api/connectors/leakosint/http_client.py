"""Cliente HTTP para a API LeakOSINT.

Uma única chamada POST por busca, sem retries: qualquer falha sobe
imediatamente como TransportError/RemoteError para o use case.

Logging estruturado sem token nem conteúdo de vazamentos.
"""

from __future__ import annotations

import json
import logging
from typing import TYPE_CHECKING, Any

import httpx

from utils.errors import ConfigurationError, RemoteError, TransportError, ValidationError

if TYPE_CHECKING:
    from config.settings import LeakOsintSettings

logger: logging.Logger = logging.getLogger(__name__)

# Nome de fonte que a API usa para sinalizar busca vazia
NO_RESULTS_SOURCE = "No results found"
ERROR_CODE_FIELD = "Error code"
LIST_FIELD = "List"


class LeakOsintClient:
    """Cliente da API LeakOSINT.

    Args:
        settings: LeakOsintSettings já carregadas (token obrigatório)
        http_client: AsyncClient opcional (injeção em testes); quando None,
            um cliente efêmero é criado por chamada

    Raises:
        ConfigurationError: Se o token não estiver configurado
    """

    def __init__(
        self,
        settings: LeakOsintSettings,
        http_client: httpx.AsyncClient | None = None,
    ) -> None:
        if not settings.api_token:
            raise ConfigurationError("LeakOSINT API token not configured")
        self._settings = settings
        self._http_client = http_client

    def _build_payload(self, query_text: str, limit: int) -> dict[str, Any]:
        return {
            "token": self._settings.api_token,
            "request": query_text,
            "limit": limit,
            "lang": self._settings.lang,
            "type": "json",
        }

    async def query(self, query_text: str, limit: int = 100) -> dict[str, Any]:
        """Executa a busca e retorna o mapeamento bruto fonte -> descritor.

        Args:
            query_text: Termo buscado (não vazio)
            limit: Limite de resultados repassado à API (> 0)

        Returns:
            Conteúdo do campo "List" da resposta (vazio se ausente)

        Raises:
            ValidationError: Query vazia ou limite não positivo
            TransportError: Status não-2xx, timeout, falha de conexão ou corpo não-JSON
            RemoteError: Payload com "Error code"
        """
        if not query_text or not query_text.strip():
            raise ValidationError("Search query is required")
        if limit <= 0:
            raise ValidationError("Limit must be a positive integer")

        response = await self._post(self._build_payload(query_text, limit))
        data = self._parse_response(response)

        error_code = data.get(ERROR_CODE_FIELD)
        if error_code:
            logger.warning("leakosint_remote_error", extra={"error_code": str(error_code)})
            raise RemoteError(str(error_code))

        sources = data.get(LIST_FIELD) or {}
        logger.info(
            "leakosint_query_ok",
            extra={
                "status_code": response.status_code,
                "source_count": len(sources) if isinstance(sources, dict) else 0,
            },
        )
        return sources

    async def _post(self, payload: dict[str, Any]) -> httpx.Response:
        url = self._settings.api_url
        timeout = self._settings.request_timeout_seconds
        try:
            if self._http_client is not None:
                response = await self._http_client.post(url, json=payload, timeout=timeout)
            else:
                async with httpx.AsyncClient() as client:
                    response = await client.post(url, json=payload, timeout=timeout)
        except httpx.TimeoutException as exc:
            logger.warning("leakosint_timeout", extra={"timeout_seconds": timeout})
            raise TransportError("API request timed out") from exc
        except httpx.HTTPError as exc:
            logger.warning("leakosint_connection_error", extra={"error_type": type(exc).__name__})
            raise TransportError("API request failed: connection error") from exc

        if not response.is_success:
            logger.warning("leakosint_http_error", extra={"status_code": response.status_code})
            raise TransportError(
                f"API request failed: {response.status_code}",
                status_code=response.status_code,
            )
        return response

    def _parse_response(self, response: httpx.Response) -> dict[str, Any]:
        try:
            data = response.json()
        except (json.JSONDecodeError, UnicodeDecodeError) as exc:
            logger.error("leakosint_invalid_json", extra={"status_code": response.status_code})
            raise TransportError(
                "API returned invalid JSON", status_code=response.status_code
            ) from exc

        if not isinstance(data, dict):
            logger.error("leakosint_payload_not_object", extra={"status_code": response.status_code})
            raise TransportError(
                "API returned unexpected payload", status_code=response.status_code
            )
        return data


def create_leakosint_client(
    settings: LeakOsintSettings | None = None,
    http_client: httpx.AsyncClient | None = None,
) -> LeakOsintClient:
    """Factory para criar cliente LeakOSINT com config do ambiente.

    Raises:
        ConfigurationError: Se LEAKOSINT_API_TOKEN não estiver configurado
    """
    # Import local para evitar dependência circular
    from config.settings import get_leakosint_settings

    return LeakOsintClient(settings or get_leakosint_settings(), http_client=http_client)
