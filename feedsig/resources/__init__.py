"""Data files bundled with FeedSig."""
