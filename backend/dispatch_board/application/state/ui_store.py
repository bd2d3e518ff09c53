"""Client-side store for page chrome: heading and the dispatcher's shift."""

from dataclasses import dataclass

from dispatch_board.application.state.store import Store

# Shown (and stored) while the dispatcher has not picked a shift.
NO_SHIFT = "<Trống>"


@dataclass(frozen=True)
class UiState:
    title: str = ""
    current_shift: str = NO_SHIFT


class UiStore(Store[UiState]):
    def __init__(self) -> None:
        super().__init__(UiState())

    @property
    def title(self) -> str:
        return self.state.title

    @property
    def current_shift(self) -> str:
        return self.state.current_shift

    def set_title(self, title: str) -> None:
        self._set(title=title)

    def set_current_shift(self, shift: str) -> None:
        self._set(current_shift=shift)
