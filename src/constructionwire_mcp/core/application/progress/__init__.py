from constructionwire_mcp.core.application.progress.progress_reporter import (
    ProgressCallback,
    ProgressReporter,
    ProgressSender,
)

__all__ = ["ProgressCallback", "ProgressReporter", "ProgressSender"]
