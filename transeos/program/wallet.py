"""Submission of action intents through an external signing wallet."""

import logging
from typing import Any, Optional, Protocol, Sequence

from ..errors import MissingAuthError, MissingWalletError
from .constants import BLOCKS_BEHIND, BROADCAST, EXPIRE_SECONDS
from .types import ActionIntent, WalletAuth

logger = logging.getLogger(__name__)


class Wallet(Protocol):
    """A wallet able to sign and broadcast transactions.

    ``transact`` receives ``{"actions": [...]}`` and the options
    ``{"broadcast", "blocksBehind", "expireSeconds"}``, and returns the
    chain receipt.
    """

    auth: Optional[WalletAuth]

    async def transact(self, transaction: dict, options: dict) -> Any:
        ...


def require_wallet(wallet: Optional[Wallet]) -> WalletAuth:
    """Return the wallet's auth, or raise if it cannot sign.

    Raises:
        MissingWalletError: If wallet is None
        MissingAuthError: If the wallet has no auth information
    """
    if not wallet:
        raise MissingWalletError()
    auth = getattr(wallet, "auth", None)
    if not auth:
        raise MissingAuthError()
    return auth


def transaction_options() -> dict:
    """Broadcast immediately, reference a block 3 behind head, expire after 60s."""
    return {
        "broadcast": BROADCAST,
        "blocksBehind": BLOCKS_BEHIND,
        "expireSeconds": EXPIRE_SECONDS,
    }


async def send_actions(wallet: Wallet, actions: Sequence[ActionIntent]) -> Any:
    """Sign and broadcast actions with wallet.

    Errors raised by the wallet are logged and propagated unchanged.

    Returns:
        The receipt returned by the wallet
    """
    transaction = {"actions": [action.to_dict() for action in actions]}
    names = ", ".join(action.name for action in actions)
    try:
        result = await wallet.transact(transaction, transaction_options())
    except Exception as e:
        logger.error(f"Transaction error ({names}): {e}")
        raise
    logger.info(f"Transaction success ({names})")
    logger.debug(f"Transaction receipt: {result}")
    return result
