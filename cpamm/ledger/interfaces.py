"""Capabilities the pool consumes from its host.

The pool never stores balances itself. Asset balances live in a Ledger and
ownership shares live in a ShareLedger; durability and atomicity of both
are the host's concern.
"""

from typing import Protocol, runtime_checkable


@runtime_checkable
class Ledger(Protocol):
    """Asset ledger holding balances per (asset, account)."""

    def balance_of(self, asset: str, account: str) -> int:
        """Current balance of `asset` held by `account`."""
        ...

    def transfer(self, asset: str, sender: str, recipient: str, amount: int) -> bool:
        """Move `amount` from sender to recipient.

        Returns:
            True on success, False if the ledger refused the transfer
        """
        ...

    def transfer_from(
        self,
        asset: str,
        spender: str,
        owner: str,
        recipient: str,
        amount: int,
    ) -> bool:
        """Move `amount` from owner to recipient on behalf of spender.

        Requires that owner previously approved spender for at least
        `amount`; the allowance is consumed.

        Returns:
            True on success, False if allowance or balance is insufficient
        """
        ...


@runtime_checkable
class ShareLedger(Protocol):
    """Fungible ownership units of one pool."""

    def mint(self, account: str, amount: int) -> None: ...

    def burn(self, account: str, amount: int) -> None: ...

    def total_supply(self) -> int: ...

    def balance_of(self, account: str) -> int: ...
