from freightquote.services.quote_service import QuoteService


def get_quote_service() -> QuoteService:
    """Dependency for the quote service; overridden in tests to swap carriers."""
    return QuoteService()
