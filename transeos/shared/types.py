"""Configuration types shared by the program and API modules."""

from dataclasses import dataclass
from typing import Optional
from urllib.parse import urlsplit

from ..errors import InvalidArgumentError


@dataclass(frozen=True)
class Network:
    """Chain node endpoint."""

    host: str
    protocol: str = "https"
    port: Optional[int] = None
    chain_id: str = ""

    @property
    def base_url(self) -> str:
        """Render "{protocol}://{host}[:{port}]"."""
        if self.port:
            return f"{self.protocol}://{self.host}:{self.port}"
        return f"{self.protocol}://{self.host}"

    @classmethod
    def from_url(cls, url: str, chain_id: str = "") -> "Network":
        """Create from a URL such as "http://127.0.0.1:8888"."""
        parts = urlsplit(url)
        if not parts.scheme or not parts.hostname:
            raise InvalidArgumentError("network", f"Not a valid node URL: {url!r}")
        return cls(
            host=parts.hostname,
            protocol=parts.scheme,
            port=parts.port,
            chain_id=chain_id,
        )

    @classmethod
    def from_dict(cls, data: dict) -> "Network":
        """Create from a dictionary (camelCase chainId is accepted)."""
        try:
            host = data["host"]
        except KeyError:
            raise InvalidArgumentError("network", "Network host is not provided")
        port = data.get("port")
        return cls(
            host=host,
            protocol=data.get("protocol") or "https",
            port=int(port) if port else None,
            chain_id=data.get("chainId", data.get("chain_id", "")),
        )


@dataclass(frozen=True)
class ClientConfig:
    """Contract accounts and node endpoint used by a client."""

    contract_address: str
    network: Network
    exchange_address: Optional[str] = None

    @classmethod
    def from_dict(cls, data: dict) -> "ClientConfig":
        """Create from a dictionary using either camelCase or snake_case keys."""
        contract = data.get("contractAddress", data.get("contract_address"))
        if not contract or not isinstance(contract, str):
            raise InvalidArgumentError("contractAddress", "Contract address is not provided")
        network = data.get("network")
        if network is None:
            raise InvalidArgumentError("network", "Network is not provided")
        if not isinstance(network, Network):
            network = Network.from_dict(network)
        return cls(
            contract_address=contract,
            network=network,
            exchange_address=data.get("exchangeAddress", data.get("exchange_address")),
        )
