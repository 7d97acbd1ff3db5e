import itertools


class RequestGate:
    """@brief Generation counter that lets only the latest request update the view.

    @details Each issued token is strictly greater than the previous one. A
    result is applied only when its token is still the latest issued, so a slow
    earlier response cannot overwrite a faster later one.
    """

    def __init__(self) -> None:
        self._counter = itertools.count(1)
        self._latest = 0

    def issue(self) -> int:
        """@brief Start a new request and return its token."""
        self._latest = next(self._counter)
        return self._latest

    def is_current(self, token: int) -> bool:
        return token == self._latest
