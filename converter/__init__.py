"""Browser-based currency converter backed by ExchangeRate-API."""
