"""Helpers shared by the pkgsweep modules."""
