"""Solana fact provider over Helius JSON-RPC.

- Mint account (getAccountInfo, jsonParsed): decimals, supply, mint/freeze
  authorities, owning token program (SPL Token vs Token-2022).
- Name/symbol: Token-2022 tokenMetadata extension, else Helius DAS getAsset.
- Holder concentration: getTokenLargestAccounts against getTokenSupply.
  Largest accounts are token accounts, so pools and exchange vaults count
  as single holders.
- Creation time: walk getSignaturesForAddress back to the oldest signature,
  bounded by ``max_signature_pages``.
"""

from __future__ import annotations

from collections.abc import Callable
from datetime import UTC, datetime
from typing import Any

from loguru import logger
from pydantic import ValidationError

from launch_verifier.models.facts import (
    AgeBand,
    AuthorityInfo,
    CreationInfo,
    HolderBalance,
    HolderInfo,
    Metadata,
    SupplyInfo,
    TokenStandard,
    classify_age,
)
from launch_verifier.providers.exceptions import (
    InvalidResponseError,
    NotFoundError,
    ProviderError,
)
from launch_verifier.providers.rpc import JsonRpcClient
from launch_verifier.utils.ids import format_timestamp, utc_now

TOKEN_PROGRAM_ID = "TokenkegQfeZyiNwAJbNbGKPFXCWuBvf9Ss623VQ5DA"
TOKEN_2022_PROGRAM_ID = "TokenzQdBNbLqP5VEhdkAS6EPFLC1PR4ZZP5m6k3kzhT"

SIGNATURE_PAGE_SIZE = 1000


class HeliusProvider:
    """TokenProvider for Solana mints."""

    def __init__(
        self,
        api_key: str,
        rpc_url: str = "",
        *,
        timeout: float = 10.0,
        max_rps: float = 10.0,
        max_retries: int = 2,
        max_signature_pages: int = 5,
        now: Callable[[], datetime] = utc_now,
    ) -> None:
        url = rpc_url or f"https://mainnet.helius-rpc.com/?api-key={api_key}"
        self._rpc = JsonRpcClient(
            url, tag="HELIUS", timeout=timeout, max_rps=max_rps, max_retries=max_retries
        )
        self._max_signature_pages = max(1, max_signature_pages)
        self._now = now

    @property
    def provider_name(self) -> str:
        return "helius"

    async def close(self) -> None:
        await self._rpc.close()

    async def _get_mint_account(self, address: str) -> tuple[dict[str, Any], str]:
        """Return (parsed mint info, owning program id)."""
        result = await self._rpc.call(
            "getAccountInfo",
            [address, {"encoding": "jsonParsed", "commitment": "confirmed"}],
        )
        if not isinstance(result, dict):
            raise InvalidResponseError("getAccountInfo: malformed result")
        account = result.get("value")
        if account is None:
            raise NotFoundError(f"no account at {address}")
        if not isinstance(account, dict):
            raise InvalidResponseError("getAccountInfo: account is not an object")

        data = account.get("data")
        parsed = data.get("parsed") if isinstance(data, dict) else None
        if not isinstance(parsed, dict):
            raise InvalidResponseError("account data is not parsed token data")
        if parsed.get("type") != "mint":
            raise InvalidResponseError(f"account type is {parsed.get('type')!r}, not a mint")
        info = parsed.get("info")
        if not isinstance(info, dict):
            raise InvalidResponseError("mint account has no info object")
        return info, account.get("owner") or ""

    async def fetch_metadata(self, address: str) -> Metadata:
        info, program = await self._get_mint_account(address)

        if program == TOKEN_PROGRAM_ID:
            standard = TokenStandard.SPL_TOKEN
        elif program == TOKEN_2022_PROGRAM_ID:
            standard = TokenStandard.SPL_TOKEN_2022
        else:
            standard = TokenStandard.UNKNOWN

        name, symbol = _token_metadata_extension(info)
        if name is None and symbol is None:
            name, symbol = await self._das_name_symbol(address)

        try:
            return Metadata(
                name=name,
                symbol=symbol,
                decimals=info.get("decimals"),
                standard=standard,
            )
        except ValidationError as e:
            raise InvalidResponseError("malformed mint metadata") from e

    async def _das_name_symbol(self, address: str) -> tuple[str | None, str | None]:
        """Best-effort name/symbol from the DAS getAsset API."""
        try:
            asset = await self._rpc.call("getAsset", {"id": address})
        except ProviderError as e:
            logger.debug(f"[HELIUS] getAsset unavailable for {address[:12]}: {e.describe()}")
            return None, None
        content = asset.get("content") if isinstance(asset, dict) else None
        meta = content.get("metadata") if isinstance(content, dict) else None
        if not isinstance(meta, dict):
            return None, None
        return _text(meta.get("name")), _text(meta.get("symbol"))

    async def fetch_supply(self, address: str) -> SupplyInfo:
        info, _ = await self._get_mint_account(address)
        raw = info.get("supply")
        decimals = info.get("decimals")
        if raw is None:
            raise InvalidResponseError("mint has no supply field")

        total: float | None = None
        try:
            total = int(raw) / (10 ** decimals) if decimals is not None else None
        except (TypeError, ValueError):
            logger.debug(f"[HELIUS] Unparseable supply {raw!r} for {address[:12]}")

        return SupplyInfo(total_supply_raw=str(raw), total_supply=total)

    async def fetch_authorities(self, address: str) -> AuthorityInfo:
        info, _ = await self._get_mint_account(address)
        mint_authority = info.get("mintAuthority") or None
        try:
            return AuthorityInfo(
                mint_authority=mint_authority,
                freeze_authority=info.get("freezeAuthority") or None,
                owner=None,
                mint_mutable=mint_authority is not None,
            )
        except ValidationError as e:
            raise InvalidResponseError("malformed mint authorities") from e

    async def fetch_holders(self, address: str, limit: int) -> HolderInfo:
        largest = await self._rpc.call("getTokenLargestAccounts", [address])
        supply = await self._rpc.call("getTokenSupply", [address])
        try:
            accounts = largest["value"]
            supply_raw = int(supply["value"]["amount"])
            amounts = [(acc, int(acc.get("amount", 0))) for acc in accounts]
            if supply_raw <= 0 or not amounts:
                return HolderInfo()

            amounts.sort(key=lambda pair: pair[1], reverse=True)
            # ValidationError is a ValueError
            balances = [
                HolderBalance(
                    address=acc.get("address", ""),
                    balance_raw=str(amount),
                    balance=acc.get("uiAmount"),
                    pct_of_supply=amount / supply_raw * 100.0,
                )
                for acc, amount in amounts
            ]
        except (KeyError, TypeError, ValueError, AttributeError) as e:
            raise InvalidResponseError("malformed holder data") from e

        pcts = [b.pct_of_supply or 0.0 for b in balances]
        return HolderInfo(
            top1_pct=pcts[0],
            top5_pct=sum(pcts[:5]),
            top_holders=balances[:limit],
        )

    async def fetch_creation_time(self, address: str) -> CreationInfo:
        before: str | None = None
        oldest_time: int | None = None
        reached_start = False

        for _ in range(self._max_signature_pages):
            opts: dict[str, Any] = {"limit": SIGNATURE_PAGE_SIZE}
            if before:
                opts["before"] = before
            page = await self._rpc.call("getSignaturesForAddress", [address, opts])
            if not isinstance(page, list):
                raise InvalidResponseError("getSignaturesForAddress: malformed result")

            for sig in page:
                if not isinstance(sig, dict):
                    raise InvalidResponseError("getSignaturesForAddress: malformed signature entry")
                block_time = sig.get("blockTime")
                if block_time is None:
                    continue
                if not isinstance(block_time, int):
                    raise InvalidResponseError(f"getSignaturesForAddress: bad blockTime {block_time!r}")
                if oldest_time is None or block_time < oldest_time:
                    oldest_time = block_time

            if len(page) < SIGNATURE_PAGE_SIZE:
                reached_start = True
                break
            before = page[-1].get("signature")

        if oldest_time is None:
            return CreationInfo()

        age = max(0, int(self._now().timestamp()) - oldest_time)
        if reached_start:
            return CreationInfo(
                created_at=format_timestamp(datetime.fromtimestamp(oldest_time, UTC)),
                age_seconds=age,
                age_band=classify_age(age),
            )

        # Only a lower bound on age: usable when it already clears a week
        logger.debug(f"[HELIUS] Signature walk truncated for {address[:12]}, age >= {age}s")
        if classify_age(age) == AgeBand.GREATER_THAN_7D:
            return CreationInfo(age_band=AgeBand.GREATER_THAN_7D)
        return CreationInfo()


def _token_metadata_extension(info: dict[str, Any]) -> tuple[str | None, str | None]:
    """Name/symbol from a Token-2022 tokenMetadata extension, if present."""
    extensions = info.get("extensions")
    if not isinstance(extensions, list):
        return None, None
    for ext in extensions:
        if not isinstance(ext, dict) or ext.get("extension") != "tokenMetadata":
            continue
        state = ext.get("state")
        if not isinstance(state, dict):
            return None, None
        return _text(state.get("name")), _text(state.get("symbol"))
    return None, None


def _text(value: Any) -> str | None:
    return value if isinstance(value, str) and value else None
