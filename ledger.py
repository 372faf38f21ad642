# ledger.py: in-memory transaction store owned by one Streamlit session

from __future__ import annotations

from datetime import datetime
from typing import Callable, Iterator, List, Optional, Tuple, Union

from config import Settings, load_settings
from logging_setup import get_logger
from models import (
    ExpensoError,
    Transaction,
    TransactionType,
    parse_amount,
    parse_type,
)

logger = get_logger("expenso.ledger")


class TransactionStore:
    """
    Ordered list of transactions. Mutated only through add() and remove();
    transactions themselves are never updated in place.
    """

    def __init__(
        self,
        clock: Callable[[], datetime] = datetime.now,
        date_format: Optional[str] = None,
    ):
        self._clock = clock
        self._date_format = date_format or load_settings().date_format
        self._items: List[Transaction] = []
        self._last_id = 0

    @classmethod
    def from_settings(cls, settings: Settings, clock: Callable[[], datetime] = datetime.now) -> "TransactionStore":
        return cls(clock=clock, date_format=settings.date_format)

    @property
    def transactions(self) -> Tuple[Transaction, ...]:
        return tuple(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Transaction]:
        return iter(tuple(self._items))

    def get(self, txn_id: int) -> Optional[Transaction]:
        return next((t for t in self._items if t.id == txn_id), None)

    def _next_id(self, created: datetime) -> int:
        # Timestamp ids collide when two entries land in the same millisecond
        txn_id = max(int(created.timestamp() * 1000), self._last_id + 1)
        self._last_id = txn_id
        return txn_id

    def add(
        self,
        description: Optional[str],
        amount: Union[str, int, float, None],
        type: Union[str, TransactionType] = TransactionType.EXPENSE,
    ) -> Optional[Transaction]:
        """
        Append a new transaction dated now.

        Returns None and leaves the list untouched when the description or
        amount is missing, or the amount/type does not validate.
        """
        description = str(description or "").strip()
        if not description or amount is None or (isinstance(amount, str) and not amount.strip()):
            logger.warning("Ignoring transaction with empty description or amount")
            return None

        try:
            value = parse_amount(amount)
            txn_type = parse_type(type)
        except ExpensoError as exc:
            logger.warning("Rejected transaction %r: %s", description, exc)
            return None

        created = self._clock()
        txn = Transaction(
            id=self._next_id(created),
            description=description,
            amount=value,
            type=txn_type,
            date=created.strftime(self._date_format),
            created_at=created,
        )
        self._items.append(txn)
        logger.info("Added %s %s (%s) id=%d", txn.type.value, txn.amount, txn.description, txn.id)
        return txn

    def remove(self, txn_id: int) -> bool:
        """Delete the transaction with this id. Unknown ids are a no-op."""
        for idx, txn in enumerate(self._items):
            if txn.id == txn_id:
                del self._items[idx]
                logger.info("Removed transaction id=%d", txn_id)
                return True
        logger.debug("No transaction with id=%s to remove", txn_id)
        return False
