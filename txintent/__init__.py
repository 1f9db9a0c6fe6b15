"""Token/market resolution and transaction-intent assembly for swap and mint toolkits."""

__version__ = "0.1.0"
