"""Static permission catalogs."""
