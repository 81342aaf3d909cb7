from typing import Optional

PREV_KEYS = ("ArrowLeft",)
NEXT_KEYS = ("ArrowRight",)
CLOSE_KEYS = ("Escape",)


class Lightbox:
    """Full-screen image viewer over a list of ``length`` images."""

    def __init__(self, length: int = 0):
        self.length = length
        self.selected_index: Optional[int] = None

    @property
    def is_open(self) -> bool:
        return self.selected_index is not None

    def open(self, index: int) -> bool:
        if self.length <= 0 or not 0 <= index < self.length:
            return False
        self.selected_index = index
        return True

    def close(self):
        self.selected_index = None

    def next(self):
        if self.is_open and self.length > 0:
            self.selected_index = (self.selected_index + 1) % self.length

    def prev(self):
        if self.is_open and self.length > 0:
            self.selected_index = (self.selected_index - 1 + self.length) % self.length

    def handle_key(self, key: str) -> bool:
        """Keyboard navigation; ignored while closed. Returns True when the key was used."""
        if not self.is_open:
            return False
        if key in PREV_KEYS:
            self.prev()
        elif key in NEXT_KEYS:
            self.next()
        elif key in CLOSE_KEYS:
            self.close()
        else:
            return False
        return True

    def resize(self, length: int):
        """Follow the underlying list after a refetch"""
        self.length = length
        if length <= 0:
            self.close()
        elif self.is_open and self.selected_index >= length:
            self.selected_index = length - 1
