from __future__ import annotations

import io


class OutputBuffer:
    """
    Growable text buffer with positional rewind, so speculative output (a heading
    whose text may turn out empty) can be discarded by truncating back to a
    previously recorded position.
    """

    def __init__(self, initial: str = "") -> None:
        self._io = io.StringIO()
        self._io.write(initial)

    def __len__(self) -> int:
        return self._io.tell()

    def write(self, text: str) -> None:
        self._io.write(text)

    def tell(self) -> int:
        return self._io.tell()

    def truncate(self, position: int) -> None:
        self._io.seek(position)
        self._io.truncate()

    def since(self, position: int) -> str:
        return self._io.getvalue()[position:]

    def reset(self, text: str = "") -> None:
        self.truncate(0)
        self._io.write(text)

    def getvalue(self) -> str:
        return self._io.getvalue()
