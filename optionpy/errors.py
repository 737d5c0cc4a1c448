from __future__ import annotations


class UnwrapOnNoneError(Exception):
    """Raised by ``Option.unwrap()`` and ``Option.expect()`` on an empty Option.

    ``is_user_message`` is False when the message is the library's own
    diagnostic and True when the caller supplied it through ``expect()``.
    """

    def __init__(self, message: str = "", *, is_user_message: bool = True):
        super().__init__(message)
        self._is_user_message = is_user_message

    @property
    def is_user_message(self) -> bool:
        return self._is_user_message
