"""HTTP transport for SOAP calls."""

import logging

import httpx

from account_client.exceptions import ConnectivityError, ProtocolError

logger = logging.getLogger(__name__)

# SOAP 1.1 servers report faults with HTTP 500 and a Fault body.
_SOAP_STATUSES = (200, 500)


class HttpTransport:
    """Send SOAP envelopes to one fixed endpoint with HTTP POST.

    Without an injected client every call opens its own connection and closes
    it afterwards. An injected ``httpx.Client`` is reused across calls and is
    owned by the caller.
    """

    def __init__(self, url: str, client: httpx.Client | None = None) -> None:
        """Initialize the transport.

        Parameters
        ----------
        url : str
            Service endpoint.
        client : httpx.Client | None
            Optional client to reuse for every call.
        """
        self.url = url
        self._client = client

    def call(self, soap_action: str, envelope: str) -> bytes:
        """POST an envelope and return the reply body.

        Raises
        ------
        ConnectivityError
            If the endpoint cannot be reached.
        ProtocolError
            If the reply body cannot be decoded, or the server answers with a
            status that cannot carry a SOAP reply.
        """
        headers = {
            "Content-Type": "text/xml; charset=utf-8",
            "SOAPAction": f'"{soap_action}"',
        }
        content = envelope.encode("utf-8")

        logger.debug("POST %s (SOAPAction=%r, %d bytes)", self.url, soap_action, len(content))
        try:
            if self._client is not None:
                response = self._client.post(self.url, content=content, headers=headers)
            else:
                with httpx.Client(timeout=None) as client:
                    response = client.post(self.url, content=content, headers=headers)
        except httpx.DecodingError as e:
            raise ProtocolError(f"Reply from {self.url} could not be decoded: {e}") from e
        except httpx.RequestError as e:
            raise ConnectivityError(f"Cannot reach {self.url}: {e}") from e

        if response.status_code not in _SOAP_STATUSES:
            raise ProtocolError(
                f"Unexpected HTTP status {response.status_code} from {self.url}"
            )
        return response.content
