"""Transaction form engine: draft state, item list, totals and submission."""

from __future__ import annotations

import re
from collections.abc import Mapping
from decimal import Decimal
from typing import Any

from ...constants import FAILURE_MESSAGE, SUCCESS_MESSAGE, FormDisplay, TransactionKind
from ...exceptions import FieldPathError
from ...logging_config import get_logger
from ...models.item import ITEM_FIELDS, ItemDraft
from ...models.transaction import HEADER_FIELDS, SubmissionPayload, TransactionDraft, grand_total
from ...services.notifications import Notifier, ResultSink
from ...services.schema import build_schema, item_path

logger = get_logger(__name__)

_ITEM_PATH = re.compile(r"^items\[(\d+)\]\.(\w+)$")


def parse_item_path(path: str) -> tuple[int, str] | None:
    """Split ``items[<index>].<field>`` into its index and field name."""

    match = _ITEM_PATH.match(path)
    if match is None:
        return None
    return int(match.group(1)), match.group(2)


class TransactionFormEngine:
    """Holds one mounted form's draft and per-field errors.

    Nothing is validated while the user edits; ``submit`` runs the schema for
    the form's kind and either hands a payload to the result sink or stores
    the field errors for inline display.
    """

    def __init__(
        self,
        kind: TransactionKind | str,
        display: FormDisplay,
        *,
        result_sink: ResultSink,
        notifier: Notifier,
    ) -> None:
        self.kind = TransactionKind(kind)
        self.display = display
        self.result_sink = result_sink
        self.notifier = notifier
        self.draft = TransactionDraft(items=[ItemDraft.default()])
        self.errors: dict[str, list[str]] = {}

    @classmethod
    def from_mapping(
        cls,
        kind: TransactionKind | str,
        display: FormDisplay,
        data: Mapping[str, Any],
        *,
        result_sink: ResultSink,
        notifier: Notifier,
    ) -> TransactionFormEngine:
        """Create an engine whose draft is rebuilt from posted form data."""

        engine = cls(kind, display, result_sink=result_sink, notifier=notifier)
        engine.load(data)
        return engine

    def load(self, data: Mapping[str, Any]) -> None:
        """Replace the draft with values from ``data``; rows keep index order."""

        indices = sorted(
            {parsed[0] for parsed in map(parse_item_path, data.keys()) if parsed is not None}
        )
        items = []
        for index in indices:
            item = ItemDraft()
            for field in ITEM_FIELDS:
                item.set(field, data.get(item_path(index, field)))
            items.append(item)

        self.draft = TransactionDraft(
            vendor=str(data.get("vendor") or ""),
            date=str(data.get("date") or ""),
            reference=str(data.get("reference") or ""),
            items=items,
        )
        self.errors = {}

    @property
    def title(self) -> str:
        return self.display.title

    @property
    def party_label(self) -> str:
        return self.kind.party_label

    @property
    def party_placeholder(self) -> str:
        return f"Enter {self.kind.party_label.lower()} name"

    @property
    def items(self) -> list[ItemDraft]:
        return self.draft.items

    def set_field(self, path: str, value: Any) -> None:
        """Overwrite one header field or one item attribute."""

        if path in HEADER_FIELDS:
            setattr(self.draft, path, "" if value is None else str(value))
            return

        parsed = parse_item_path(path)
        if parsed is None:
            raise FieldPathError(path)
        index, field = parsed
        if index >= len(self.draft.items) or field not in ITEM_FIELDS:
            raise FieldPathError(path)
        self.draft.items[index].set(field, value)

    def add_item(self) -> None:
        self.draft.items.append(ItemDraft.blank())

    def remove_item(self, index: int) -> None:
        """Drop the row at ``index``; stale indices are ignored."""

        if not 0 <= index < len(self.draft.items):
            logger.warning(
                "Ignoring remove for missing item row",
                extra={"index": index, "item_count": len(self.draft.items)},
            )
            return
        del self.draft.items[index]

    def line_total(self, index: int) -> Decimal:
        return self.draft.items[index].line_total

    def grand_total(self) -> Decimal:
        return grand_total(self.draft.items)

    def has_error(self, path: str) -> bool:
        return bool(self.errors.get(path))

    def errors_for(self, path: str) -> list[str]:
        return self.errors.get(path, [])

    def submit(self) -> SubmissionPayload | None:
        """Validate the draft and deliver it when valid.

        Returns the payload on success and None when validation failed; the
        draft is never modified either way.
        """

        result = build_schema(self.kind).validate(self.draft)
        if not result.ok:
            self.errors = result.messages
            logger.info(
                "Transaction form failed validation",
                extra={"kind": self.kind.value, "fields": sorted(self.errors)},
            )
            self.notifier.error(FAILURE_MESSAGE)
            return None

        payload = SubmissionPayload.from_transaction(self.title, result.unwrap())
        self.result_sink.deliver(payload)
        self.errors = {}
        self.notifier.success(SUCCESS_MESSAGE)
        return payload
