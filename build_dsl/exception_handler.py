import logging
import traceback
from typing import Dict, Any, List

from .constants import LOGGER_NAME


class ErrorHandler:
    """Logging setup and fatal-error bookkeeping for build configuration runs."""

    def __init__(self, log_level: str = "INFO"):
        self.logger = self._setup_logging(log_level)
        self.errors: List[Dict[str, Any]] = []

    def _setup_logging(self, level: str) -> logging.Logger:
        """Configure structured logging."""
        logger = logging.getLogger(LOGGER_NAME)
        logger.setLevel(getattr(logging, level.upper()))

        if not logger.handlers:
            handler = logging.StreamHandler()
            formatter = logging.Formatter(
                '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
            )
            handler.setFormatter(formatter)
            logger.addHandler(handler)

        return logger

    def handle_error(self, error: Exception, context: Dict[str, Any]) -> Dict[str, Any]:
        """Process and log error with context information."""
        error_info = {
            "type": type(error).__name__,
            "message": str(error),
            "context": context,
            "traceback": traceback.format_exc() if self.logger.level <= logging.DEBUG else None
        }

        self.logger.error(
            "%s: %s | Context: %s", error_info["type"], error_info["message"], context
        )

        self.errors.append(error_info)

        return error_info

    def collect_project_error(self, error: Exception, project_path: str, operation: str) -> Dict[str, Any]:
        """Collect an error raised while querying a project."""
        context = {
            "project": project_path,
            "operation": operation,
        }
        return self.handle_error(error, context)

    def collect_file_error(self, error: Exception, file_path: str, operation: str) -> Dict[str, Any]:
        """Collect file operation error with context."""
        context = {
            "file_path": file_path,
            "operation": operation,
        }
        return self.handle_error(error, context)

    def get_error_summary(self) -> Dict[str, Any]:
        """Generate summary of all collected errors."""
        if not self.errors:
            return {"total_errors": 0, "error_types": {}, "failures": []}

        error_types: Dict[str, int] = {}
        failures = []

        for error in self.errors:
            error_type = error["type"]
            error_types[error_type] = error_types.get(error_type, 0) + 1

            context = error.get("context", {})
            target = context.get("project") or context.get("file_path")
            if target:
                failures.append({
                    "target": target,
                    "error": error["message"],
                    "operation": context.get("operation", "unknown")
                })

        return {
            "total_errors": len(self.errors),
            "error_types": error_types,
            "failures": failures
        }

    def format_error_report(self) -> str:
        """Format user-friendly error report."""
        summary = self.get_error_summary()

        if summary["total_errors"] == 0:
            return ""

        lines = [
            f"\n⚠️  Error Summary: {summary['total_errors']} errors occurred",
            ""
        ]

        if summary["error_types"]:
            lines.append("Error Types:")
            for error_type, count in summary["error_types"].items():
                lines.append(f"  • {error_type}: {count}")
            lines.append("")

        if summary["failures"]:
            lines.append("Failures:")
            for failure in summary["failures"][:5]:  # Show first 5
                lines.append(f"  • {failure['target']} ({failure['operation']}): {failure['error']}")

            if len(summary["failures"]) > 5:
                lines.append(f"  ... and {len(summary['failures']) - 5} more")

        return "\n".join(lines)
