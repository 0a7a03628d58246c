from constructionwire_mcp.infrastructure.common.retry.retry_policy import RetryPolicy, RetryState

__all__ = ["RetryPolicy", "RetryState"]
