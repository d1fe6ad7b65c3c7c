"""pydantic models for payment rows, ABA records and conversion results."""
