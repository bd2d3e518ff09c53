"""Client-side store for the dispatch board."""

import dataclasses
from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from typing import Any

from dispatch_board.application.state.store import Store
from dispatch_board.domain.entities import ALL_TAB, DispatchRecord, DispatchStatus, DispatchTab


@dataclass(frozen=True)
class DispatchState:
    records: tuple[DispatchRecord, ...] = ()
    selected_record: DispatchRecord | None = None
    active_tab: DispatchTab = ALL_TAB


class DispatchStore(Store[DispatchState]):
    """Dispatch records (newest first), the selected record and the active tab."""

    def __init__(self) -> None:
        super().__init__(DispatchState())

    @property
    def records(self) -> tuple[DispatchRecord, ...]:
        return self.state.records

    @property
    def selected_record(self) -> DispatchRecord | None:
        return self.state.selected_record

    @property
    def active_tab(self) -> DispatchTab:
        return self.state.active_tab

    def set_records(self, records: Iterable[DispatchRecord]) -> None:
        self._set(records=tuple(records))

    def set_selected_record(self, record: DispatchRecord | None) -> None:
        self._set(selected_record=record)

    def set_active_tab(self, tab: DispatchTab | str) -> None:
        """Switch the board tab to a status, or to ``"all"``.

        Raises:
            ValueError: If ``tab`` is neither ``"all"`` nor a dispatch status.
        """
        self._set(active_tab=tab if tab == ALL_TAB else DispatchStatus(tab))

    def update_record(self, record_id: str, updates: Mapping[str, Any]) -> None:
        """Shallow-merge ``updates`` into the record whose id matches.

        Other records keep their identity and position. An unknown id leaves
        the list unchanged.
        """
        self._set(
            records=tuple(
                dataclasses.replace(record, **updates) if record.id == record_id else record
                for record in self.state.records
            )
        )

    def add_record(self, record: DispatchRecord) -> None:
        """Prepend ``record`` so the newest entry shows first."""
        self._set(records=(record, *self.state.records))
