"""Testing – fakes and property-based strategies."""
