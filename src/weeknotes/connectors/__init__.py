"""Front ends that drive the notes store."""
