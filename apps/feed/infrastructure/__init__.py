"""Feed Infrastructure Layer."""
