"""Feed Presentation Layer."""
