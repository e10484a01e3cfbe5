"""In-memory ledgers used by the HTTP service and the tests."""

from __future__ import annotations

from collections import defaultdict

import structlog

from cpamm.errors import InsufficientShares, InvalidAmount
from cpamm.models.types import normalize_address
from cpamm.safe_int import S

logger = structlog.get_logger()


class InMemoryLedger:
    """Asset balances and approve-then-transfer allowances kept in dicts.

    Addresses are normalized to lowercase so lookups are case-insensitive.
    """

    def __init__(self) -> None:
        self._balances: defaultdict[tuple[str, str], int] = defaultdict(int)
        # (asset, owner, spender) -> remaining allowance
        self._allowances: defaultdict[tuple[str, str, str], int] = defaultdict(int)

    def balance_of(self, asset: str, account: str) -> int:
        return self._balances[(normalize_address(asset), normalize_address(account))]

    def credit(self, asset: str, account: str, amount: int) -> None:
        """Create `amount` of asset out of thin air for `account`.

        Raises:
            InvalidAmount: If amount is negative
        """
        if amount < 0:
            raise InvalidAmount(f"Cannot credit a negative amount: {amount}")
        key = (normalize_address(asset), normalize_address(account))
        self._balances[key] = (S(self._balances[key]) + S(amount)).value

    def approve(self, asset: str, owner: str, spender: str, amount: int) -> None:
        """Set the amount spender may pull from owner (overwrites)."""
        if amount < 0:
            raise InvalidAmount(f"Cannot approve a negative amount: {amount}")
        key = (normalize_address(asset), normalize_address(owner), normalize_address(spender))
        self._allowances[key] = amount

    def allowance(self, asset: str, owner: str, spender: str) -> int:
        key = (normalize_address(asset), normalize_address(owner), normalize_address(spender))
        return self._allowances[key]

    def transfer(self, asset: str, sender: str, recipient: str, amount: int) -> bool:
        if amount < 0:
            return False
        asset = normalize_address(asset)
        src = (asset, normalize_address(sender))
        dst = (asset, normalize_address(recipient))
        if self._balances[src] < amount:
            logger.debug(
                "transfer_rejected",
                asset=asset,
                sender=src[1],
                balance=self._balances[src],
                amount=amount,
            )
            return False
        self._balances[src] -= amount
        self._balances[dst] = (S(self._balances[dst]) + S(amount)).value
        return True

    def transfer_from(
        self,
        asset: str,
        spender: str,
        owner: str,
        recipient: str,
        amount: int,
    ) -> bool:
        if amount < 0:
            return False
        key = (normalize_address(asset), normalize_address(owner), normalize_address(spender))
        if self._allowances[key] < amount:
            logger.debug(
                "transfer_from_rejected",
                asset=key[0],
                owner=key[1],
                spender=key[2],
                allowance=self._allowances[key],
                amount=amount,
            )
            return False
        if not self.transfer(asset, owner, recipient, amount):
            return False
        self._allowances[key] -= amount
        return True


class InMemoryShareLedger:
    """Share balances and total supply for a single pool."""

    def __init__(self) -> None:
        self._balances: defaultdict[str, int] = defaultdict(int)
        self._total_supply = 0

    def mint(self, account: str, amount: int) -> None:
        if amount < 0:
            raise InvalidAmount(f"Cannot mint a negative amount: {amount}")
        account = normalize_address(account)
        self._total_supply = (S(self._total_supply) + S(amount)).value
        self._balances[account] += amount

    def burn(self, account: str, amount: int) -> None:
        """Destroy shares held by account.

        Raises:
            InvalidAmount: If amount is negative
            InsufficientShares: If account holds fewer than amount
        """
        if amount < 0:
            raise InvalidAmount(f"Cannot burn a negative amount: {amount}")
        account = normalize_address(account)
        held = self._balances[account]
        if held < amount:
            raise InsufficientShares(f"{account} holds {held} shares, cannot burn {amount}")
        self._balances[account] = held - amount
        self._total_supply -= amount

    def total_supply(self) -> int:
        return self._total_supply

    def balance_of(self, account: str) -> int:
        return self._balances[normalize_address(account)]
