"""EVM fact provider over Alchemy JSON-RPC.

Reads ERC-20 getters with raw eth_call selectors (no ABI loading):
decimals(), totalSupply(), name(), symbol(), owner(). Plain RPC exposes no
holder index or deployment time, so those categories come back as records
with nothing known in them.
"""

from __future__ import annotations

from loguru import logger

from launch_verifier.models.facts import (
    AuthorityInfo,
    CreationInfo,
    HolderInfo,
    Metadata,
    SupplyInfo,
    TokenStandard,
)
from launch_verifier.providers.exceptions import (
    InvalidResponseError,
    NotFoundError,
    UnsupportedChainError,
)
from launch_verifier.providers.rpc import JsonRpcClient

# Chain id -> Alchemy network subdomain. "evm" is the Base default.
NETWORKS: dict[str, str] = {
    "base": "base-mainnet",
    "evm": "base-mainnet",
    "ethereum": "eth-mainnet",
    "polygon": "polygon-mainnet",
    "arbitrum": "arb-mainnet",
    "optimism": "opt-mainnet",
}

SELECTOR_DECIMALS = "0x313ce567"
SELECTOR_TOTAL_SUPPLY = "0x18160ddd"
SELECTOR_NAME = "0x06fdde03"
SELECTOR_SYMBOL = "0x95d89b41"
SELECTOR_OWNER = "0x8da5cb5b"

DEFAULT_DECIMALS = 18

RENOUNCED_OWNERS = {
    "0x0000000000000000000000000000000000000000",
    "0x000000000000000000000000000000000000dead",
}


class AlchemyProvider:
    """TokenProvider for ERC-20 contracts on Alchemy-supported networks."""

    def __init__(
        self,
        api_key: str,
        chain: str,
        *,
        timeout: float = 10.0,
        max_rps: float = 10.0,
        max_retries: int = 2,
    ) -> None:
        network = NETWORKS.get(chain)
        if network is None:
            raise UnsupportedChainError(f"Alchemy does not serve chain {chain!r}")
        self._chain = chain
        self._rpc = JsonRpcClient(
            f"https://{network}.g.alchemy.com/v2/{api_key}",
            tag="ALCHEMY",
            timeout=timeout,
            max_rps=max_rps,
            max_retries=max_retries,
        )

    @property
    def provider_name(self) -> str:
        return "alchemy"

    async def close(self) -> None:
        await self._rpc.close()

    async def _eth_call(self, address: str, selector: str) -> str:
        result = await self._rpc.call("eth_call", [{"to": address, "data": selector}, "latest"])
        if not isinstance(result, str) or not result.startswith("0x"):
            raise InvalidResponseError("eth_call returned non-hex data")
        return result

    async def _require_contract(self, address: str) -> None:
        code = await self._rpc.call("eth_getCode", [address, "latest"])
        if not isinstance(code, str):
            raise InvalidResponseError("eth_getCode returned non-hex data")
        if code in ("0x", "0x0", ""):
            raise NotFoundError(f"no contract code at {address}")

    async def _decimals(self, address: str) -> int | None:
        try:
            raw = await self._eth_call(address, SELECTOR_DECIMALS)
        except InvalidResponseError as e:
            logger.debug(f"[ALCHEMY] decimals() reverted on {address[:12]}: {e}")
            return None
        value = _decode_uint(raw)
        if value is None or value > 255:
            return None
        return value

    async def fetch_metadata(self, address: str) -> Metadata:
        await self._require_contract(address)
        decimals = await self._decimals(address)
        name = await self._optional_string(address, SELECTOR_NAME)
        symbol = await self._optional_string(address, SELECTOR_SYMBOL)
        return Metadata(
            name=name,
            symbol=symbol,
            decimals=decimals,
            standard=TokenStandard.ERC20,
        )

    async def _optional_string(self, address: str, selector: str) -> str | None:
        """name()/symbol() are optional in ERC-20; a revert just means absent."""
        try:
            raw = await self._eth_call(address, selector)
        except InvalidResponseError as e:
            logger.debug(f"[ALCHEMY] {selector} reverted on {address[:12]}: {e}")
            return None
        return _decode_abi_string(raw)

    async def fetch_supply(self, address: str) -> SupplyInfo:
        await self._require_contract(address)
        raw = _decode_uint(await self._eth_call(address, SELECTOR_TOTAL_SUPPLY))
        if raw is None:
            raise InvalidResponseError("totalSupply() returned no data")
        decimals = await self._decimals(address)
        if decimals is None:
            decimals = DEFAULT_DECIMALS
        return SupplyInfo(total_supply_raw=str(raw), total_supply=raw / (10 ** decimals))

    async def fetch_authorities(self, address: str) -> AuthorityInfo:
        # eth_call on a wallet (no code) returns "0x", the same as a renounced owner
        await self._require_contract(address)
        try:
            raw = await self._eth_call(address, SELECTOR_OWNER)
        except InvalidResponseError as e:
            # No owner() getter: contract is not Ownable
            logger.debug(f"[ALCHEMY] owner() unavailable on {address[:12]}: {e}")
            raw = "0x"

        owner: str | None = None
        if len(raw) >= 42:
            candidate = "0x" + raw[-40:].lower()
            if candidate not in RENOUNCED_OWNERS:
                owner = candidate

        return AuthorityInfo(
            mint_authority=None,
            freeze_authority=None,
            owner=owner,
            mint_mutable=owner is not None,
        )

    async def fetch_holders(self, address: str, limit: int) -> HolderInfo:
        return HolderInfo()

    async def fetch_creation_time(self, address: str) -> CreationInfo:
        return CreationInfo()


def _decode_uint(raw: str) -> int | None:
    body = raw[2:]
    if not body:
        return None
    try:
        return int(body[:64], 16)
    except ValueError:
        return None


def _decode_abi_string(raw: str) -> str | None:
    """Decode an ABI-encoded ``string`` return, or a legacy ``bytes32``."""
    body = raw[2:]
    try:
        data = bytes.fromhex(body)
    except ValueError:
        return None

    if len(data) == 32:
        text = data.rstrip(b"\x00").decode("utf-8", errors="replace")
        return text or None
    if len(data) < 64:
        return None

    offset = int.from_bytes(data[:32], "big")
    if offset + 32 > len(data):
        return None
    length = int.from_bytes(data[offset:offset + 32], "big")
    chunk = data[offset + 32:offset + 32 + length]
    text = chunk.decode("utf-8", errors="replace").strip("\x00")
    return text or None
