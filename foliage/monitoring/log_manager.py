import json
import logging
from datetime import datetime
from pathlib import Path
from typing import Any, Dict, Optional

PACKAGE_LOGGER = 'foliage'
QUERY_LOGGER = 'foliage.queries'


class LogManager:
    """Logging setup for foliage with structured query events"""

    def __init__(self, log_dir: Optional[str] = None, log_level: str = "INFO"):
        self.log_dir = Path(log_dir) if log_dir else None
        if self.log_dir:
            self.log_dir.mkdir(parents=True, exist_ok=True)

        self.setup_logging(log_level)

    def setup_logging(self, log_level: str):
        """Attach console and optional file handlers to the foliage logger"""
        detailed_formatter = logging.Formatter(
            '%(asctime)s - %(name)s - %(levelname)s - %(funcName)s:%(lineno)d - %(message)s'
        )
        simple_formatter = logging.Formatter(
            '%(asctime)s - %(levelname)s - %(message)s'
        )

        package_logger = logging.getLogger(PACKAGE_LOGGER)
        package_logger.setLevel(getattr(logging, log_level.upper()))
        self._detach(package_logger, keep_null=True)
        self._installed = []

        console_handler = logging.StreamHandler()
        console_handler.setLevel(logging.INFO)
        console_handler.setFormatter(simple_formatter)
        self._install(package_logger, console_handler)

        self.query_logger = logging.getLogger(QUERY_LOGGER)
        self.query_logger.setLevel(logging.INFO)
        self._detach(self.query_logger)
        self.query_logger.propagate = False

        if self.log_dir is None:
            self._install(self.query_logger, logging.NullHandler())
            return

        all_logs_file = self.log_dir / f"foliage_{datetime.now().strftime('%Y%m%d')}.log"
        file_handler = logging.FileHandler(all_logs_file)
        file_handler.setLevel(logging.DEBUG)
        file_handler.setFormatter(detailed_formatter)
        self._install(package_logger, file_handler)

        query_file = self.log_dir / f"queries_{datetime.now().strftime('%Y%m%d')}.log"
        self._install(self.query_logger, logging.FileHandler(query_file))

    def _install(self, target: logging.Logger, handler: logging.Handler):
        target.addHandler(handler)
        self._installed.append((target, handler))

    @staticmethod
    def _detach(target: logging.Logger, keep_null: bool = False):
        # Handlers left by an earlier manager still hold open files
        for handler in list(target.handlers):
            if keep_null and isinstance(handler, logging.NullHandler):
                continue
            handler.close()
            target.removeHandler(handler)

    def log_query_event(self, event_type: str, **kwargs):
        """Log one query as a JSON line"""
        event_data = {
            'timestamp': datetime.now().isoformat(),
            'event_type': event_type,
            **kwargs
        }
        self.query_logger.info(json.dumps(event_data, default=str))

    def export_stats_json(self, stats_data: Dict[str, Any], filename: str = None) -> Path:
        """Write a stats dictionary (e.g. DocumentStats.to_dict()) to JSON"""
        if filename is None:
            filename = f"stats_export_{datetime.now().strftime('%Y%m%d_%H%M%S')}.json"

        export_path = (self.log_dir or Path.cwd()) / filename
        with open(export_path, 'w') as f:
            json.dump(stats_data, f, indent=2, default=str)

        logging.getLogger(PACKAGE_LOGGER).info(f"Stats exported to {export_path}")
        return export_path

    def close(self):
        """Close and detach the handlers this manager installed"""
        for target, handler in self._installed:
            handler.close()
            target.removeHandler(handler)
        self._installed = []
