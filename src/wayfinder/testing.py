"""Test utilities for wayfinder navigation.

Provides a navigator that records navigation calls instead of driving
a browser::

    from wayfinder.testing import RecordingNavigator

    navigator = RecordingNavigator("https://localhost/fu/bar/")
    NavigationManager(table, navigator).navigate_to(CounterViewModel)
    assert navigator.last_call.uri == "counter"
"""

from dataclasses import dataclass
from wayfinder.navigation.hosting import HostingContext
from wayfinder.navigation.manager import NavigationOptions


@dataclass(frozen=True, slots=True)
class NavigationCall:
    """One navigation request received by a :class:`RecordingNavigator`."""

    uri: str
    force_load: bool = False
    replace: bool = False
    options: NavigationOptions | None = None


class RecordingNavigator:
    """In-memory navigator that records every call.

    Pass ``base_uri=None`` to simulate a navigator that is not
    initialized yet: reading ``base_uri`` then raises ``RuntimeError``.
    """

    __slots__ = ("_base_uri", "_calls")

    def __init__(self, base_uri: str | None = "http://localhost/") -> None:
        self._base_uri = base_uri
        self._calls: list[NavigationCall] = []

    @property
    def base_uri(self) -> str:
        if self._base_uri is None:
            msg = "RecordingNavigator has not been initialized with a base URI."
            raise RuntimeError(msg)
        return self._base_uri

    def set_base_uri(self, base_uri: str) -> None:
        self._base_uri = base_uri

    def navigate_to(self, uri: str, *, force_load: bool = False, replace: bool = False) -> None:
        self._calls.append(NavigationCall(uri=uri, force_load=force_load, replace=replace))

    def navigate_to_with_options(self, uri: str, options: NavigationOptions) -> None:
        self._calls.append(
            NavigationCall(
                uri=uri,
                force_load=options.force_load,
                replace=options.replace_history_entry,
                options=options,
            )
        )

    @property
    def calls(self) -> tuple[NavigationCall, ...]:
        return tuple(self._calls)

    @property
    def last_call(self) -> NavigationCall | None:
        return self._calls[-1] if self._calls else None

    @property
    def uri(self) -> str:
        """Absolute URI of the last navigation, as a browser would show it."""
        if not self._calls:
            return self.base_uri
        return HostingContext(base_uri=self.base_uri).to_absolute(self._calls[-1].uri)

    def clear(self) -> None:
        self._calls.clear()
