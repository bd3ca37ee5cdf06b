# services/ledger.py

"""Credit arithmetic. Balances are plain ints; nothing here keeps state."""

from dataclasses import dataclass


@dataclass(frozen=True)
class RedeemResult:
    accepted: bool
    balance: int
    cost: int


def earn(balance, amount=1):
    """Adds a reward. No upper bound and no idempotence key."""
    if amount < 0:
        raise ValueError("Earned credits cannot be negative.")
    return balance + amount


def can_redeem(balance, cost):
    return balance >= cost


def redeem(balance, cost):
    """
    Charges `cost` if the balance covers it. A rejected redemption leaves the
    balance exactly as it was.
    """
    if not can_redeem(balance, cost):
        return RedeemResult(accepted=False, balance=balance, cost=cost)
    return RedeemResult(accepted=True, balance=balance - cost, cost=cost)
