"""Feed Application Layer."""
