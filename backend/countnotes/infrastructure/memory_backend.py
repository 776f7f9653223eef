"""In-Memory Backend — dictionary KeyValueBackend for tests and ephemeral hosts.

Invariants:
    - Values are stored as given; read_int parses the stored string
    - Contents vanish with the process
"""


class InMemoryBackend:
    """KeyValueBackend held in a plain dict."""

    def __init__(self, initial: dict[str, str] | None = None):
        self.data: dict[str, str] = dict(initial or {})

    async def read_string(self, key: str) -> str | None:
        return self.data.get(key)

    async def write_string(self, key: str, value: str) -> None:
        self.data[key] = value

    async def remove(self, key: str) -> None:
        self.data.pop(key, None)

    async def read_int(self, key: str) -> int | None:
        raw = self.data.get(key)
        return None if raw is None else int(raw)

    async def write_int(self, key: str, value: int) -> None:
        self.data[key] = str(value)
