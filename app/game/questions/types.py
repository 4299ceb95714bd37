from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class QuestionRecord:
    prompt: str
    # (key, text) pairs in display order.
    options: tuple[tuple[str, str], ...]
    correct_key: str
    correct_text: str = ""
    category: str = ""

    @property
    def option_keys(self) -> tuple[str, ...]:
        return tuple(key for key, _ in self.options)

    def has_option(self, key: str) -> bool:
        return any(option_key == key for option_key, _ in self.options)

    def option_text(self, key: str) -> str | None:
        for option_key, text in self.options:
            if option_key == key:
                return text
        return None
