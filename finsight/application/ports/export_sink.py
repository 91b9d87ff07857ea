"""Port for delivering serialized exports to the user."""

from typing import Protocol


class ExportSinkPort(Protocol):
    """Port turning a text payload into a downloadable file."""

    def deliver(self, content: str, mime_type: str, filename: str) -> None:
        """Deliver the payload under the given filename."""


__all__ = ["ExportSinkPort"]
