"""Explicit handle on environment variable bindings."""

import os
from typing import Iterator, MutableMapping


class EnvSnapshot(MutableMapping[str, str]):
    """Mutable view over a set of environment variable bindings.

    By default this wraps the live process environment (``os.environ``), so
    reads and writes go straight through to it. Passing a plain dict keeps
    everything in memory, which is how tests exercise loading and validation
    without touching the real process state.

    The snapshot is shared and unsynchronized: callers that mutate the process
    environment from other threads must serialize that themselves.

    Example:
        ```python
        env = EnvSnapshot({"PORT": "8080"})
        env["DEBUG"] = "true"
        env.get("MISSING")  # None
        ```
    """

    def __init__(self, backing: MutableMapping[str, str] | None = None) -> None:
        """Initialize the snapshot.

        Args:
            backing: Mapping to read and write (default: os.environ)
        """
        self._backing = os.environ if backing is None else backing

    @classmethod
    def from_process(cls) -> "EnvSnapshot":
        """Create a snapshot bound to the process environment."""
        return cls(os.environ)

    @property
    def is_process(self) -> bool:
        """Whether this snapshot writes through to the process environment."""
        return self._backing is os.environ

    def __getitem__(self, key: str) -> str:
        return self._backing[key]

    def __setitem__(self, key: str, value: str) -> None:
        if not isinstance(value, str):
            raise TypeError(f"Environment values must be strings, got {type(value).__name__}")
        self._backing[key] = value

    def __delitem__(self, key: str) -> None:
        del self._backing[key]

    def __iter__(self) -> Iterator[str]:
        return iter(self._backing)

    def __len__(self) -> int:
        return len(self._backing)

    def __repr__(self) -> str:
        source = "os.environ" if self.is_process else f"{len(self)} bindings"
        return f"EnvSnapshot({source})"

    def to_dict(self) -> dict[str, str]:
        """Copy the current bindings into a plain dict."""
        return dict(self._backing)


def as_snapshot(env: MutableMapping[str, str] | None) -> EnvSnapshot:
    """Wrap a mapping as an EnvSnapshot, defaulting to the process environment."""
    if isinstance(env, EnvSnapshot):
        return env
    return EnvSnapshot(env)
