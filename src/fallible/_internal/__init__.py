"""Internal helpers shared by the operator modules."""
