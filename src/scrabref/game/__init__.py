"""Board, tile, and dictionary model."""
