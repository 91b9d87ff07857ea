"""Export sink writing payloads to the local file system."""

from pathlib import Path

from finsight.application.ports.export_sink import ExportSinkPort
from finsight.infrastructure.logging.logger import get_usage_logger


class FileExportSink(ExportSinkPort):
    """Sink saving exports under a target directory."""

    def __init__(self, export_dir: Path | str, logger=None) -> None:
        """Initialize the sink.

        Args:
            export_dir: Directory receiving exported files.
            logger: Optional logger compatible with logging.Logger-like API.
        """
        self._export_dir = Path(export_dir)
        self._logger = logger or get_usage_logger()
        self.last_path: Path | None = None

    def deliver(self, content: str, mime_type: str, filename: str) -> None:
        """Write the payload as UTF-8 to ``<export_dir>/<filename>``.

        Raises:
            OSError: If the directory or file cannot be written.
        """
        self._export_dir.mkdir(parents=True, exist_ok=True)
        path = self._export_dir / Path(filename).name
        path.write_text(content, encoding="utf-8", newline="")
        self.last_path = path
        self._logger.info(f"Wrote {mime_type} export to {path}")


__all__ = ["FileExportSink"]
