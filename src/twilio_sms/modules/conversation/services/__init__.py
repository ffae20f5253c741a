from .thread_aggregator import build_threads, counterparty

__all__ = ["build_threads", "counterparty"]
