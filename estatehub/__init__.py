"""EstateHub real-estate marketplace."""
